"""
测试工具包
提供统一的测试工具和辅助函数
"""

from .mock_utils import MockBuilder, make_response, text_part, image_part, PNG_BYTES, PUBLIC_URL

__all__ = [
    'MockBuilder',
    'make_response',
    'text_part',
    'image_part',
    'PNG_BYTES',
    'PUBLIC_URL',
]
