"""
打卡图片生成相关的Pydantic模型
"""

from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CheckinImageRequest(BaseModel):
    """打卡图片生成请求"""

    latitude: float = Field(..., description="纬度（不做范围校验）")
    longitude: float = Field(..., description="经度（不做范围校验）")
    reference_image: Optional[str] = Field(
        default=None,
        description="参考图片（头像）base64，可带 data:image/...;base64, 前缀",
        validation_alias=AliasChoices("referenceImage", "avatarBase64", "reference_image"),
    )
    owner_id: Optional[str] = Field(
        default=None,
        description="用户ID，作为存储路径的第一级目录",
        validation_alias=AliasChoices("ownerId", "userId", "owner_id"),
    )


class CheckinImageResponse(BaseModel):
    """打卡图片生成响应，image_url 与 error 只会出现一个"""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    image_url: Optional[str] = Field(default=None, serialization_alias="imageUrl")
    error: Optional[str] = None

    @classmethod
    def ok(cls, image_url: str) -> "CheckinImageResponse":
        return cls(success=True, image_url=image_url)

    @classmethod
    def fail(cls, error: str) -> "CheckinImageResponse":
        return cls(success=False, error=error)

    def to_body(self) -> Dict[str, Any]:
        """序列化为响应体"""
        return self.model_dump(by_alias=True, exclude_none=True)
