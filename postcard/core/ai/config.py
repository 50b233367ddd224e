"""
AI模型配置管理
"""

from typing import Optional
from pydantic import BaseModel, Field

from postcard.core.config import Settings


class GenAIConfig(BaseModel):
    """Google GenAI 图片生成配置"""

    api_key: str = Field(default="", description="Gemini API密钥")
    base_url: Optional[str] = Field(default=None, description="API基础URL（代理时使用）")
    ai_model_name: str = Field(default="gemini-2.0-flash-exp", description="图片生成模型")

    model_config = {"frozen": True, "protected_namespaces": ()}


def get_genai_config(settings: Settings) -> GenAIConfig:
    """从全局配置构建GenAI配置"""
    return GenAIConfig(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url or None,
        ai_model_name=settings.gemini_image_model,
    )
