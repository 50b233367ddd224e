"""
腾讯云COS配置模块
从全局配置构建COS配置对象，并提供地址拼接工具
"""

from typing import Optional
from pydantic import BaseModel, Field

from postcard.core.config import Settings


class COSConfig(BaseModel):
    """COS配置数据类"""

    secret_id: str = Field(default="", description="腾讯云COS SecretId")
    secret_key: str = Field(default="", description="腾讯云COS SecretKey")
    region: str = Field(default="ap-guangzhou", description="COS地域")
    bucket: str = Field(default="", description="COS存储桶名称")
    scheme: str = Field(default="https", description="连接协议")
    timeout: int = Field(default=30, description="连接超时时间（秒）")
    public_base_url: Optional[str] = Field(default=None, description="自定义公开访问域名")

    model_config = {"frozen": True}


def get_cos_config(settings: Settings) -> COSConfig:
    """从全局配置获取COS配置"""
    return COSConfig(
        secret_id=settings.cos_secret_id,
        secret_key=settings.cos_secret_key,
        region=settings.cos_region,
        bucket=settings.cos_bucket,
        scheme=settings.cos_scheme,
        timeout=settings.cos_timeout,
        public_base_url=settings.cos_public_base_url or None,
    )


def validate_cos_config(config: Optional[COSConfig]) -> bool:
    """验证COS配置完整性"""
    if config is None:
        return False

    required_fields = ["secret_id", "secret_key", "bucket"]
    for field in required_fields:
        if not getattr(config, field):
            return False

    return True


def get_cos_endpoint(config: COSConfig) -> str:
    """构建COS端点域名"""
    return f"{config.bucket}.cos.{config.region}.myqcloud.com"


def get_cos_base_url(config: COSConfig) -> str:
    """构建基础访问URL，优先使用自定义域名"""
    if config.public_base_url:
        return config.public_base_url.rstrip("/")
    return f"{config.scheme}://{get_cos_endpoint(config)}"
