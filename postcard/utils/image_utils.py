"""
图片数据工具
处理客户端上传的base64图片（可带 data URL 前缀）
"""

import base64
import re
from typing import Tuple

DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"

_DATA_URL_RE = re.compile(r"^data:(image/[\w.+-]+);base64,", re.IGNORECASE)


def strip_data_url_prefix(encoded: str) -> Tuple[str, str]:
    """
    去掉 data:image/...;base64, 前缀

    Returns:
        Tuple[str, str]: (纯base64文本, MIME类型)；没有前缀时MIME类型为默认的image/jpeg
    """
    encoded = encoded.strip()
    match = _DATA_URL_RE.match(encoded)
    if not match:
        return encoded, DEFAULT_IMAGE_MIME_TYPE
    return encoded[match.end():], match.group(1).lower()


def decode_reference_image(encoded: str) -> Tuple[bytes, str]:
    """
    将客户端传来的参考图片解码为原始字节

    Args:
        encoded: base64文本，可带 data URL 前缀

    Returns:
        Tuple[bytes, str]: (图片字节, MIME类型)

    Raises:
        binascii.Error: base64内容非法时抛出
    """
    payload, mime_type = strip_data_url_prefix(encoded)
    return base64.b64decode(payload), mime_type
