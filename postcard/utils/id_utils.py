"""
ID生成工具模块
"""

import random
import string
import time


def get_current_timestamp_ms() -> int:
    """获取当前毫秒级时间戳"""
    return int(time.time() * 1000)


def generate_random_suffix(length: int = 13) -> str:
    """
    生成小写字母加数字的随机后缀

    Args:
        length: 后缀长度，默认13位

    Returns:
        str: 随机后缀
    """
    if length < 1:
        raise ValueError("后缀长度必须大于0")
    return ''.join(random.choices(string.ascii_lowercase + string.digits, k=length))
