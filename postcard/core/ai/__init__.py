"""
AI图片生成模块
"""

from postcard.core.ai.base import BaseImageGenProvider
from postcard.core.ai.config import GenAIConfig, get_genai_config
from postcard.core.ai.models import ImagePart, OtherPart, ResponsePart, TextPart

__all__ = [
    "BaseImageGenProvider",
    "GenAIConfig",
    "get_genai_config",
    "ImagePart",
    "OtherPart",
    "ResponsePart",
    "TextPart",
]
