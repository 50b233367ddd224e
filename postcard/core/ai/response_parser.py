"""
生成模型响应解析
把SDK对象或REST JSON中的 part 归类为 TextPart / ImagePart / OtherPart，
并按顺序提取第一张图片
"""

import base64
import binascii
from typing import Any, List, Optional

from postcard.core.ai.models import ImagePart, OtherPart, ResponsePart, TextPart
from postcard.core.log_utils import get_logger

logger = get_logger(__name__)


def _field(obj: Any, *names: str) -> Any:
    """按候选名称读取字段，兼容SDK对象（snake_case）和REST JSON（camelCase）"""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, dict):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def decode_inline_data(data: Any) -> Optional[bytes]:
    """
    将内联数据转为原始字节

    SDK已解码的bytes直接返回；REST响应中的base64文本需要解码。
    无法解码时返回None。
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("内联数据不是合法的base64", operation="inline_data_decode_failed")
            return None
    return None


def classify_part(part: Any) -> ResponsePart:
    """将单个响应part归类为带标签的变体"""
    inline_data = _field(part, "inline_data", "inlineData")
    raw_data = _field(inline_data, "data")
    if raw_data:
        data = decode_inline_data(raw_data)
        if data:
            mime_type = _field(inline_data, "mime_type", "mimeType") or "image/png"
            return ImagePart(data=data, mime_type=mime_type)
        return OtherPart(kind="undecodable_inline_data")

    text = _field(part, "text")
    if text:
        return TextPart(text=text)

    return OtherPart()


def iter_response_parts(response: Any) -> List[ResponsePart]:
    """
    按候选顺序、part顺序展开响应中的所有part

    不只看第一个候选：第一个候选只有文字时，后续候选中的图片仍会被使用
    """
    parts: List[ResponsePart] = []
    for candidate in _field(response, "candidates") or []:
        content = _field(candidate, "content")
        for raw_part in _field(content, "parts") or []:
            parts.append(classify_part(raw_part))
    return parts


def extract_image_bytes(response: Any) -> Optional[bytes]:
    """
    从生成模型响应中提取第一张图片

    Args:
        response: GenerateContentResponse 或等价的JSON字典

    Returns:
        Optional[bytes]: 第一个ImagePart的字节；没有候选、没有part或没有图片时返回None
    """
    candidates = _field(response, "candidates") or []
    if not candidates:
        logger.warning("Gemini没有返回候选结果", operation="genai_no_candidates")
        return None

    parts = iter_response_parts(response)
    if not parts:
        logger.warning("Gemini没有返回内容部分", operation="genai_no_parts")
        return None

    for part in parts:
        if isinstance(part, ImagePart):
            logger.info(
                "找到图片数据",
                operation="genai_image_found",
                mime_type=part.mime_type,
                size=len(part.data)
            )
            return part.data

    text_preview = " ".join(p.text for p in parts if isinstance(p, TextPart))[:200]
    logger.warning(
        "Gemini响应中未找到图片数据",
        operation="genai_no_image_part",
        part_count=len(parts),
        text_preview=text_preview
    )
    return None
