"""
GenAI 图片生成提供商单元测试
通过注入 mock 客户端测试，不访问真实的 Gemini API
"""

import pytest
from unittest.mock import MagicMock

from postcard.core.ai.config import GenAIConfig
from postcard.core.ai.providers.genai.image import GenAIImageProvider, REFERENCE_IMAGE_REQUIREMENT
from tests.utils.mock_utils import image_part, make_response, text_part


@pytest.mark.unit
@pytest.mark.generation
class TestGenAIImageProvider:
    """GenAIImageProvider 单元测试类"""

    def setup_method(self):
        self.client = MagicMock()
        self.config = GenAIConfig(api_key="test-key", ai_model_name="test-image-model")
        self.provider = GenAIImageProvider(self.config, client=self.client)

    def test_provider_name(self):
        assert self.provider.get_provider_name() == "genai"
        assert self.provider.model == "test-image-model"

    def test_build_contents_text_only(self):
        """没有参考图片时只发送提示词字符串"""
        assert self.provider.build_contents("draw a postcard") == "draw a postcard"

    def test_build_contents_with_reference(self):
        """有参考图片时文本在前、图片在后"""
        contents = self.provider.build_contents("draw a postcard", b"JPEGDATA", "image/jpeg")

        assert len(contents) == 2
        assert contents[0].text == "draw a postcard" + REFERENCE_IMAGE_REQUIREMENT
        assert contents[1].inline_data.data == b"JPEGDATA"
        assert contents[1].inline_data.mime_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_generate_image_success(self):
        """测试从响应中提取图片"""
        self.client.models.generate_content.return_value = make_response(
            [text_part("here it is"), image_part(b"PNGDATA")]
        )

        result = await self.provider.generate_image("draw a postcard")

        assert result == b"PNGDATA"
        call_kwargs = self.client.models.generate_content.call_args.kwargs
        assert call_kwargs["model"] == "test-image-model"
        assert call_kwargs["contents"] == "draw a postcard"
        assert call_kwargs["config"].response_modalities == ["TEXT", "IMAGE"]

    @pytest.mark.asyncio
    async def test_generate_image_with_reference(self):
        """测试带参考图片的多模态请求"""
        self.client.models.generate_content.return_value = make_response([image_part(b"PNGDATA")])

        result = await self.provider.generate_image(
            "draw a postcard", reference_image=b"AVATAR", reference_mime_type="image/png"
        )

        assert result == b"PNGDATA"
        contents = self.client.models.generate_content.call_args.kwargs["contents"]
        assert contents[1].inline_data.mime_type == "image/png"

    @pytest.mark.asyncio
    async def test_generate_image_no_image(self):
        """只有文本的响应返回None"""
        self.client.models.generate_content.return_value = make_response([text_part("sorry")])

        assert await self.provider.generate_image("draw") is None

    @pytest.mark.asyncio
    async def test_generate_image_client_error(self):
        """客户端异常被吞掉并返回None"""
        self.client.models.generate_content.side_effect = RuntimeError("quota exceeded")

        assert await self.provider.generate_image("draw") is None
