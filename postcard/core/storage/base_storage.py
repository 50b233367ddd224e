"""
存储抽象基类
定义统一的存储接口，支持多种存储后端
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from postcard.core.storage.models import UploadResult


class BaseStorage(ABC):
    """存储抽象基类"""

    @abstractmethod
    async def upload(
        self,
        data: bytes,
        key: str,
        mime_type: str,
        overwrite: bool = False,
        metadata: Optional[Dict[str, Any]] = None
    ) -> UploadResult:
        """
        上传文件

        Args:
            data: 文件数据
            key: 存储键
            mime_type: MIME类型
            overwrite: 是否允许覆盖同名对象；为False时同名对象存在则上传失败
            metadata: 可选的元数据

        Returns:
            UploadResult: 上传结果

        Raises:
            UploadError: 上传失败时抛出
        """
        pass

    @abstractmethod
    def get_public_url(self, key: str) -> str:
        """
        获取对象的公开访问URL

        只做地址拼接，不发起网络请求

        Args:
            key: 存储键

        Returns:
            str: 公开访问URL
        """
        pass
