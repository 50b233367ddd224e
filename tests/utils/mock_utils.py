"""
测试专用的 mock 工具和辅助函数
"""

from types import SimpleNamespace
from typing import Any, List, Optional
from unittest.mock import AsyncMock, MagicMock

from postcard.core.cos import COSConfig
from postcard.services.checkin.checkin_image_service import CheckinImageService
from postcard.services.checkin.prompt_service import PostcardPromptService
from postcard.services.checkin.storage_service import PostcardStorageService

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-postcard"
PUBLIC_URL = "https://test-bucket.cos.ap-guangzhou.myqcloud.com/public/postcard.png"


class MockBuilder:
    """Mock对象构建器"""

    @staticmethod
    def create_cos_config(**overrides: Any) -> COSConfig:
        """创建完整的测试COS配置"""
        values = {
            "secret_id": "test-secret-id",
            "secret_key": "test-secret-key",
            "region": "ap-guangzhou",
            "bucket": "test-bucket",
            "scheme": "https",
        }
        values.update(overrides)
        return COSConfig(**values)

    @staticmethod
    def create_mock_generator(image_data: Optional[bytes] = PNG_BYTES) -> MagicMock:
        """创建图片生成Provider的mock对象"""
        mock = MagicMock()
        mock.generate_image = AsyncMock(return_value=image_data)
        mock.get_provider_name.return_value = "stub"
        return mock

    @staticmethod
    def create_mock_storage(public_url: str = PUBLIC_URL, upload_error: Optional[Exception] = None) -> MagicMock:
        """创建底层存储（BaseStorage）的mock对象"""
        mock = MagicMock()
        mock.upload = AsyncMock(side_effect=upload_error)
        mock.get_public_url.return_value = public_url
        return mock

    @staticmethod
    def create_service(generator: MagicMock, storage: MagicMock) -> CheckinImageService:
        """用mock的生成器和存储组装真实的打卡图片服务"""
        return CheckinImageService(
            prompt_service=PostcardPromptService(location_label="惠州"),
            generator=generator,
            storage_service=PostcardStorageService(storage),
        )


def make_response(*candidate_parts: List[Any]) -> SimpleNamespace:
    """构造与 GenerateContentResponse 结构一致的响应对象"""
    candidates = [
        SimpleNamespace(content=SimpleNamespace(parts=list(parts)))
        for parts in candidate_parts
    ]
    return SimpleNamespace(candidates=candidates)


def text_part(text: str) -> SimpleNamespace:
    """文本part"""
    return SimpleNamespace(text=text, inline_data=None)


def image_part(data: Any, mime_type: str = "image/png") -> SimpleNamespace:
    """内联图片part"""
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))
