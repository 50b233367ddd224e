"""
腾讯云COS存储适配器
实现BaseStorage接口，提供明信片图片的上传和公开URL拼接
"""

import asyncio
from datetime import datetime
from functools import partial
from typing import Any, Callable, Dict, Optional, TypeVar

from postcard.core.cos import COSConfig, get_cos_base_url, validate_cos_config
from postcard.core.log_utils import get_logger
from postcard.core.storage.base_storage import BaseStorage
from postcard.core.storage.exceptions import ClientError, ConfigurationError, StorageError, UploadError
from postcard.core.storage.models import UploadResult

logger = get_logger(__name__)

T = TypeVar('T')

# 同名对象已存在时COS返回409 FileAlreadyExists
FORBID_OVERWRITE_HEADER = 'x-cos-forbid-overwrite'


class TencentCosAdapter(BaseStorage):
    """
    腾讯云COS存储适配器

    上传不重试；overwrite=False 时通过 x-cos-forbid-overwrite 头
    让COS在同名对象已存在时拒绝写入
    """

    # 适配器名称，用于工厂模式注册
    ADAPTER_NAME: str = "tencent_cos"

    def __init__(self, config: COSConfig, client: Optional[Any] = None) -> None:
        """
        初始化COS存储客户端

        Args:
            config: COS配置
            client: 预先构建的 CosS3Client，主要用于测试注入

        Raises:
            ConfigurationError: 配置不完整时抛出
        """
        if not validate_cos_config(config):
            raise ConfigurationError("腾讯云COS配置不完整，请检查环境变量")

        self.config = config
        self._client = client if client is not None else self._create_client()

    def _create_client(self):
        """
        创建COS客户端

        Raises:
            StorageError: SDK未安装时抛出
            ClientError: 客户端构建失败时抛出
        """
        try:
            from qcloud_cos import CosConfig, CosS3Client
        except ImportError as e:
            logger.warning("腾讯云COS SDK未安装")
            raise StorageError(
                "腾讯云COS SDK未安装，请运行: pip install cos-python-sdk-v5",
                code="SDK_NOT_INSTALLED"
            ) from e

        try:
            cos_config = CosConfig(
                Region=self.config.region,
                SecretId=self.config.secret_id,
                SecretKey=self.config.secret_key,
                Scheme=self.config.scheme,
                Timeout=self.config.timeout
            )
            return CosS3Client(cos_config)
        except Exception as e:
            logger.error("创建COS客户端失败", exception=e, region=self.config.region)
            raise ClientError(f"创建COS客户端失败: {str(e)}") from e

    async def _run_in_executor(self, func: Callable[..., T], **kwargs) -> T:
        """在线程池中运行同步的SDK调用"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, **kwargs))

    async def upload(
        self,
        data: bytes,
        key: str,
        mime_type: str,
        overwrite: bool = False,
        metadata: Optional[Dict[str, Any]] = None
    ) -> UploadResult:
        """
        上传文件到COS

        Args:
            metadata: 额外请求头，自定义元数据需带 x-cos-meta- 前缀

        Raises:
            UploadError: 上传失败时抛出，message 为底层错误信息
        """
        upload_params = {
            'Bucket': self.config.bucket,
            'Key': key,
            'Body': data,
            'ContentType': mime_type
        }
        # SDK 将 Metadata 中的键值原样作为请求头发送
        headers = dict(metadata or {})
        if not overwrite:
            headers[FORBID_OVERWRITE_HEADER] = 'true'
        if headers:
            upload_params['Metadata'] = headers

        try:
            response = await self._run_in_executor(self._client.put_object, **upload_params)
        except Exception as e:
            logger.error(
                "COS上传失败",
                exception=e,
                key=key,
                forbid_overwrite=not overwrite
            )
            raise UploadError(self._error_message(e), details={'key': key}) from e

        response = response or {}
        return UploadResult(
            key=key,
            size=len(data),
            mime_type=mime_type,
            bucket=self.config.bucket,
            etag=response.get('ETag', '').strip('"'),
            uploaded_at=datetime.now()
        )

    def get_public_url(self, key: str) -> str:
        """拼接对象的公开访问URL"""
        return "{base}/{key}".format(base=get_cos_base_url(self.config), key=key.lstrip("/"))

    @staticmethod
    def _error_message(error: Exception) -> str:
        """提取SDK异常中的可读信息（CosServiceError 带有 get_error_msg）"""
        get_error_msg = getattr(error, "get_error_msg", None)
        if callable(get_error_msg) and get_error_msg():
            return str(get_error_msg())
        return str(error)


__all__ = ['TencentCosAdapter']
