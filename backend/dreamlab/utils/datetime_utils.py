"""
日期时间工具模块
提供统一的日期时间处理函数
"""

import time
from datetime import datetime, timezone


def get_current_timestamp_ms() -> int:
    """获取当前时间戳（毫秒级）"""
    return int(time.time() * 1000)


def get_current_iso_string() -> str:
    """
    获取当前时间的ISO字符串（UTC）

    Returns:
        str: 当前时间的ISO格式字符串
    """
    return datetime.now(timezone.utc).isoformat()


def format_duration(seconds: float) -> str:
    """
    格式化持续时间，用于超时等提示信息

    Args:
        seconds: 秒数

    Returns:
        str: 如 "5 minutes"、"90 seconds"
    """
    if seconds <= 0:
        return "0 seconds"
    if seconds % 60 == 0:
        minutes = int(seconds // 60)
        return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"
    return f"{seconds:g} seconds"
