"""
明信片存储服务
生成唯一存储路径，上传图片并解析公开访问URL
"""

from typing import Optional

from postcard.core.log_utils import get_logger
from postcard.core.storage.base_storage import BaseStorage
from postcard.core.storage.models import StoredArtifact
from postcard.utils.id_utils import generate_random_suffix, get_current_timestamp_ms

logger = get_logger(__name__)

POSTCARD_MIME_TYPE = "image/png"


def build_postcard_path(
    owner_id: Optional[str] = None,
    timestamp_ms: Optional[int] = None,
    suffix: Optional[str] = None,
    default_owner: str = "public",
    suffix_length: int = 13
) -> str:
    """
    生成明信片存储路径

    格式: {owner_id 或 public}/postcard_{毫秒时间戳}_{随机后缀}.png
    时间戳加随机后缀保证并发请求之间无需协调即可避免冲突

    Args:
        owner_id: 用户ID，为空时使用 default_owner
        timestamp_ms: 毫秒时间戳，默认取当前时间
        suffix: 随机后缀，默认随机生成
    """
    if timestamp_ms is None:
        timestamp_ms = get_current_timestamp_ms()
    if suffix is None:
        suffix = generate_random_suffix(suffix_length)

    owner = owner_id or default_owner
    return f"{owner}/postcard_{timestamp_ms}_{suffix}.png"


class PostcardStorageService:
    """明信片存储服务"""

    def __init__(self, storage: BaseStorage, default_owner: str = "public", suffix_length: int = 13):
        self.storage = storage
        self.default_owner = default_owner
        self.suffix_length = suffix_length

    def build_path(self, owner_id: Optional[str] = None) -> str:
        """为一次请求生成新的存储路径"""
        return build_postcard_path(
            owner_id,
            default_owner=self.default_owner,
            suffix_length=self.suffix_length
        )

    async def store(self, data: bytes, owner_id: Optional[str] = None) -> StoredArtifact:
        """
        上传明信片图片

        以禁止覆盖模式上传，不重试

        Raises:
            UploadError: 上传失败时抛出
        """
        path = self.build_path(owner_id)
        logger.info("上传明信片图片", operation="postcard_upload_start", key=path, size=len(data))

        await self.storage.upload(data, path, POSTCARD_MIME_TYPE, overwrite=False)

        return StoredArtifact(path=path, public_url=self.storage.get_public_url(path))
