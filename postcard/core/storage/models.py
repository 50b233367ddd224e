"""
存储服务数据模型
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class UploadResult:
    """
    上传结果

    Attributes:
        key: 存储键
        size: 文件大小（字节）
        mime_type: MIME类型
        bucket: 存储桶名称
        etag: 文件ETag
        uploaded_at: 上传时间
    """
    key: str
    size: int
    mime_type: str
    bucket: Optional[str] = None
    etag: Optional[str] = None
    uploaded_at: Optional[datetime] = None


@dataclass(frozen=True)
class StoredArtifact:
    """已持久化的明信片：存储路径及其公开访问URL"""
    path: str
    public_url: str


__all__ = [
    'UploadResult',
    'StoredArtifact',
]
