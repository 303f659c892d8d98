"""
图片服务模块
包含图片生成相关的业务处理器
"""

from .image_generation_handler import ImageGenerationHandler, to_http_exception

__all__ = [
    'ImageGenerationHandler',
    'to_http_exception'
]
