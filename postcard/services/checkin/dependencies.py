"""
打卡图片服务的组装
配置在进程启动时读取一次，组件实例在进程内复用
"""

from functools import lru_cache

from postcard.core.ai.config import get_genai_config
from postcard.core.ai.providers.genai.image import GenAIImageProvider
from postcard.core.config import settings
from postcard.core.cos import get_cos_config
from postcard.core.storage import get_storage_service
from postcard.services.checkin.checkin_image_service import CheckinImageService
from postcard.services.checkin.prompt_service import PostcardPromptService
from postcard.services.checkin.storage_service import PostcardStorageService


@lru_cache()
def get_checkin_image_service() -> CheckinImageService:
    """
    构建打卡图片生成服务

    构建失败（例如COS未配置）时抛出异常且不缓存，下次请求会重新尝试
    """
    storage = get_storage_service(get_cos_config(settings))
    return CheckinImageService(
        prompt_service=PostcardPromptService(location_label=settings.postcard_location_label),
        generator=GenAIImageProvider(get_genai_config(settings)),
        storage_service=PostcardStorageService(
            storage,
            default_owner=settings.postcard_default_owner,
            suffix_length=settings.postcard_suffix_length
        ),
    )
