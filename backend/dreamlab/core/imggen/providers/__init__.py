"""
图片生成提供商实现
"""

from .openai_images import OpenAIImageProvider
from .luma import LumaImageProvider

__all__ = [
    "OpenAIImageProvider",
    "LumaImageProvider",
]
