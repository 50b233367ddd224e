"""
Google GenAI (Gemini) 图片生成提供商
基于 Google GenAI SDK 实现，支持参考图片（头像）的多模态生成
"""

import asyncio
from functools import partial
from typing import Any, Optional

from google import genai
from google.genai import types

from postcard.core.ai.base import BaseImageGenProvider
from postcard.core.ai.config import GenAIConfig
from postcard.core.ai.response_parser import extract_image_bytes
from postcard.core.log_utils import get_logger

logger = get_logger(__name__)

# 有参考图片时追加在提示词末尾，防止模型直接把真人照片贴进插画背景
REFERENCE_IMAGE_REQUIREMENT = (
    "\n\n🚨🚨🚨 ABSOLUTE REQUIREMENT 🚨🚨🚨\n"
    "The output image MUST be a 2D CARTOON/ANIME STYLE ILLUSTRATION.\n"
    "DO NOT generate a realistic photograph.\n"
    "DO NOT keep the person looking like a real photo.\n"
    "CONVERT the person into an ANIME CHARACTER with the same art style as the background.\n"
    "The final image should look like it was HAND-DRAWN by an animator, not photographed by a camera.\n"
    "Style reference: Studio Ghibli, Makoto Shinkai anime films, Disney concept art."
)


class GenAIImageProvider(BaseImageGenProvider):
    """Google GenAI 图片生成提供商"""

    RESPONSE_MODALITIES = ["TEXT", "IMAGE"]

    def __init__(self, config: GenAIConfig, client: Optional[Any] = None):
        """
        初始化GenAI提供商

        Args:
            config: GenAI配置（API密钥、模型名、可选代理地址）
            client: 预先构建的客户端，主要用于测试注入
        """
        self.config = config
        self.model = config.ai_model_name

        if client is None:
            http_options = {"base_url": config.base_url} if config.base_url else None
            client = genai.Client(api_key=config.api_key, http_options=http_options)
        self.client = client

        logger.info(
            "GenAIImageProvider初始化成功",
            operation="genai_init_success",
            model=self.model,
            has_api_base=bool(config.base_url)
        )

    def get_provider_name(self) -> str:
        """获取Provider名称"""
        return "genai"

    def build_contents(
        self,
        prompt: str,
        reference_image: Optional[bytes] = None,
        reference_mime_type: str = "image/jpeg"
    ) -> Any:
        """
        构建请求内容

        没有参考图片时直接发送提示词字符串；有参考图片时发送
        [文本, 内联图片] 两个part，文本在前。
        """
        if not reference_image:
            return prompt

        return [
            types.Part.from_text(text=prompt + REFERENCE_IMAGE_REQUIREMENT),
            types.Part.from_bytes(data=reference_image, mime_type=reference_mime_type),
        ]

    async def generate_image(
        self,
        prompt: str,
        reference_image: Optional[bytes] = None,
        reference_mime_type: str = "image/jpeg"
    ) -> Optional[bytes]:
        """
        调用Gemini生成图片

        Returns:
            Optional[bytes]: PNG图片字节；任何失败都返回None
        """
        try:
            contents = self.build_contents(prompt, reference_image, reference_mime_type)
            config = types.GenerateContentConfig(
                response_modalities=self.RESPONSE_MODALITIES,
            )

            logger.info(
                "调用GenAI API生成图片",
                operation="genai_generate_start",
                model=self.model,
                prompt_length=len(prompt),
                content_type="文字+图片" if reference_image else "纯文字"
            )

            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(
                None,
                partial(
                    self.client.models.generate_content,
                    model=self.model,
                    contents=contents,
                    config=config
                )
            )

            return extract_image_bytes(response)

        except Exception as e:
            logger.error(
                f"GenAI 图片生成错误: {str(e)}",
                operation="genai_generation_failed",
                exception=e
            )
            return None
