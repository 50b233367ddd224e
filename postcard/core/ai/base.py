"""
文生图Provider抽象基类
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseImageGenProvider(ABC):
    """文生图Provider基类"""

    @abstractmethod
    def get_provider_name(self) -> str:
        """获取Provider名称（如 "genai"）"""
        pass

    @abstractmethod
    async def generate_image(
        self,
        prompt: str,
        reference_image: Optional[bytes] = None,
        reference_mime_type: str = "image/jpeg"
    ) -> Optional[bytes]:
        """
        生成图片

        Args:
            prompt: 图片描述提示词
            reference_image: 参考图片原始字节（可选）
            reference_mime_type: 参考图片MIME类型

        Returns:
            Optional[bytes]: 生成的图片字节，未生成图片时返回None。
            实现不得向调用方抛出异常。
        """
        pass
