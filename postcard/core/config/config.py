"""
应用配置管理模块
统一管理所有配置信息，进程启动时从环境变量读取一次
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator, ConfigDict

from postcard.utils.config_utils import get_workspace_path, get_config_path, parse_json_config


class Settings(BaseSettings):
    """应用配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_name: str = "Checkin Postcard"
    app_version: str = "1.0.0"
    app_debug: bool = False
    app_env: str = "development"

    # ==================== API配置 ====================
    api_v1_str: str = "/api/v1"
    project_name: str = "Checkin Postcard API"

    # ==================== Gemini配置 ====================
    gemini_api_key: str = ""
    gemini_base_url: Optional[str] = None
    gemini_image_model: str = "gemini-2.0-flash-exp"

    # ==================== COS存储配置 ====================
    cos_secret_id: str = ""
    cos_secret_key: str = ""
    cos_region: str = "ap-guangzhou"
    cos_bucket: str = ""
    cos_scheme: str = "https"
    cos_timeout: int = 30
    # 自定义域名（CDN），为空时使用默认的COS访问域名
    cos_public_base_url: Optional[str] = None

    # ==================== 明信片配置 ====================
    postcard_location_label: str = "惠州"
    postcard_default_owner: str = "public"
    postcard_suffix_length: int = 13

    # ==================== 日志配置 ====================
    log_level: str = "INFO"
    log_dir: str = "log"
    log_file: str = "postcard.log"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==================== 应用服务配置 ====================
    app_port: int = 8080
    app_host: str = "0.0.0.0"

    # ==================== CORS配置 ====================
    cors_origins: str = '["*"]'

    # ==================== 验证器 ====================
    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, value: str) -> List[str]:
        """解析CORS origins配置"""
        return parse_json_config(value)

    @field_validator("postcard_suffix_length")
    @classmethod
    def check_suffix_length(cls, value: int) -> int:
        """随机后缀过短时无法保证路径唯一"""
        if value < 8:
            raise ValueError("postcard_suffix_length 不能小于8")
        return value

    # ==================== 计算属性 ====================
    @property
    def absolute_log_dir(self) -> str:
        """获取绝对日志目录路径"""
        return str(get_workspace_path(self.log_dir))

    @property
    def cos_enabled(self) -> bool:
        """检查COS是否启用"""
        return bool(self.cos_secret_id and self.cos_secret_key and self.cos_bucket)

    model_config = ConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取应用配置实例"""
    return Settings()


# 全局配置实例
settings = get_settings()
