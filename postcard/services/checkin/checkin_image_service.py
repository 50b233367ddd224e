"""
打卡图片生成服务
串联提示词构建、Gemini生成和COS存储的核心流水线
"""

from typing import Optional

from postcard.core.ai.base import BaseImageGenProvider
from postcard.core.log_messages import log_messages
from postcard.core.log_utils import UnifiedLogger, get_logger
from postcard.core.storage.exceptions import UploadError
from postcard.core.storage.models import StoredArtifact
from postcard.schemas.checkin_image import CheckinImageRequest
from postcard.services.checkin.prompt_service import PostcardPromptService
from postcard.services.checkin.storage_service import PostcardStorageService
from postcard.utils.image_utils import decode_reference_image


class PostcardGenerationError(Exception):
    """生成模型没有返回可用的图片"""


class CheckinImageService:
    """打卡图片生成服务"""

    def __init__(
        self,
        prompt_service: PostcardPromptService,
        generator: BaseImageGenProvider,
        storage_service: PostcardStorageService,
        logger: Optional[UnifiedLogger] = None
    ):
        self.prompt_service = prompt_service
        self.generator = generator
        self.storage_service = storage_service
        self.logger = logger or get_logger(__name__)

    async def generate_postcard(self, request: CheckinImageRequest) -> StoredArtifact:
        """
        生成明信片并存储

        顺序执行：构建提示词 → 生成图片 → 上传 → 解析公开URL，任何一步失败都不重试

        Args:
            request: 已通过坐标校验的请求

        Returns:
            StoredArtifact: 存储路径和公开URL

        Raises:
            PostcardGenerationError: 生成模型未返回图片
            UploadError: 上传失败
        """
        self.logger.info(
            log_messages.POSTCARD_START,
            latitude=request.latitude,
            longitude=request.longitude,
            owner_id=request.owner_id
        )

        reference_image: Optional[bytes] = None
        reference_mime_type = "image/jpeg"
        if request.reference_image:
            reference_image, reference_mime_type = decode_reference_image(request.reference_image)
        # 解码后为空（如只有 data URL 前缀）按无参考图片处理
        if not reference_image:
            reference_image = None
        has_reference_image = reference_image is not None

        prompt = self.prompt_service.build_prompt(
            request.latitude, request.longitude, has_reference_image
        )
        self.logger.info(
            log_messages.POSTCARD_PROMPT_BUILT,
            prompt_length=len(prompt),
            has_reference_image=has_reference_image
        )

        image_data = await self.generator.generate_image(
            prompt,
            reference_image=reference_image,
            reference_mime_type=reference_mime_type
        )
        if not image_data:
            self.logger.error(log_messages.POSTCARD_GENERATION_FAILED, provider=self.generator.get_provider_name())
            raise PostcardGenerationError("Gemini API生成图片失败")
        self.logger.info(log_messages.POSTCARD_GENERATION_SUCCESS, size=len(image_data))

        try:
            artifact = await self.storage_service.store(image_data, request.owner_id)
        except UploadError as e:
            self.logger.error(log_messages.POSTCARD_UPLOAD_FAILED, exception=e)
            raise
        self.logger.info(log_messages.POSTCARD_UPLOAD_SUCCESS, path=artifact.path)

        self.logger.info(log_messages.POSTCARD_COMPLETED, url=artifact.public_url)
        return artifact
