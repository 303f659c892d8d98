"""
ID生成工具模块
提供统一的ID生成方法，支持多种ID格式
"""

import random
import string

from .datetime_utils import get_current_timestamp_ms


def generate_random_base36(length: int = 9) -> str:
    """
    生成随机36进制字符串

    Args:
        length: 字符串长度，默认9位

    Returns:
        str: 随机字符串
    """
    if length < 1:
        raise ValueError("随机串长度不能小于1位")
    return ''.join(random.choices(string.digits + string.ascii_lowercase, k=length))


def generate_id_with_prefix(prefix: str, random_length: int = 9) -> str:
    """
    生成带前缀的时间戳ID，格式为 ``<prefix>_<毫秒时间戳>_<随机串>``

    Args:
        prefix: ID前缀（如"openai"）
        random_length: 随机部分长度

    Returns:
        str: 带前缀的ID
    """
    return f"{prefix}_{get_current_timestamp_ms()}_{generate_random_base36(random_length)}"
