"""
AI模型交互的数据模型
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TextPart:
    """响应中的文本部分"""
    text: str


@dataclass(frozen=True)
class ImagePart:
    """响应中的内联图片部分（已解码为原始字节）"""
    data: bytes
    mime_type: str = "image/png"


@dataclass(frozen=True)
class OtherPart:
    """无法识别或不关心的部分（函数调用、空部分等）"""
    kind: str = "unknown"


ResponsePart = Union[TextPart, ImagePart, OtherPart]
