"""
API数据模型
"""

from postcard.schemas.checkin_image import CheckinImageRequest, CheckinImageResponse

__all__ = ["CheckinImageRequest", "CheckinImageResponse"]
