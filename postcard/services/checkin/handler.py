"""
打卡图片生成业务处理器
负责请求解析、坐标校验，并把每一种失败映射为带状态码的JSON响应
"""

import json
from typing import Any, Callable, Tuple

from fastapi import status

from postcard.core.log_messages import log_messages
from postcard.core.log_utils import get_logger
from postcard.core.storage.exceptions import UploadError
from postcard.schemas.checkin_image import CheckinImageRequest, CheckinImageResponse
from postcard.services.checkin.checkin_image_service import (
    CheckinImageService,
    PostcardGenerationError,
)
from postcard.services.checkin.dependencies import get_checkin_image_service

logger = get_logger(__name__)

MISSING_COORDINATES_MESSAGE = "缺少经纬度参数"
GENERATION_FAILED_MESSAGE = "Gemini API生成图片失败"
UPLOAD_FAILED_MESSAGE = "上传图片失败: {message}"


def has_coordinates(payload: Any) -> bool:
    """latitude 和 longitude 都必须出现且不为 null；0 是合法坐标"""
    return payload.get("latitude") is not None and payload.get("longitude") is not None


class CheckinImageHandler:
    """打卡图片生成业务处理器"""

    def __init__(self, service_provider: Callable[[], CheckinImageService] = get_checkin_image_service):
        """
        Args:
            service_provider: 返回生成服务的可调用对象，在请求的异常边界内调用，
                因此服务构建失败同样会被转换为500响应
        """
        self.service_provider = service_provider

    async def handle_generate(self, body: bytes) -> Tuple[int, CheckinImageResponse]:
        """
        处理打卡图片生成请求

        Args:
            body: 原始请求体

        Returns:
            Tuple[int, CheckinImageResponse]: (HTTP状态码, 响应)；不会抛出异常
        """
        try:
            payload = json.loads(body)
            if not isinstance(payload, dict):
                raise ValueError("请求体必须是JSON对象")

            if not has_coordinates(payload):
                logger.warning(log_messages.VALIDATION_FAILED, reason="missing_coordinates")
                return status.HTTP_400_BAD_REQUEST, CheckinImageResponse.fail(MISSING_COORDINATES_MESSAGE)

            request = CheckinImageRequest.model_validate(payload)
            service = self.service_provider()
            artifact = await service.generate_postcard(request)

            return status.HTTP_200_OK, CheckinImageResponse.ok(artifact.public_url)

        except PostcardGenerationError:
            return status.HTTP_500_INTERNAL_SERVER_ERROR, CheckinImageResponse.fail(GENERATION_FAILED_MESSAGE)
        except UploadError as e:
            return (
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                CheckinImageResponse.fail(UPLOAD_FAILED_MESSAGE.format(message=e.message)),
            )
        except Exception as e:
            logger.error(log_messages.REQUEST_FAILED, exception=e)
            return status.HTTP_500_INTERNAL_SERVER_ERROR, CheckinImageResponse.fail(str(e))
