"""
API路由聚合模块
将所有v1版本的路由统一注册

路由管理规范：
1. 所有路由文件内部使用相对路径（不以/开头）
2. 所有前缀统一在router.py中管理
3. Tags统一使用中文，与端点文件定义保持一致
"""

from fastapi import APIRouter

from dreamlab.api.v1.endpoints import (
    image_generation,
    media_analysis,
)

api_router = APIRouter()

# ==================== 图片生成路由 ====================
api_router.include_router(image_generation.router, prefix="/generate-image", tags=["图片生成"])

# ==================== 媒体分析路由 ====================
api_router.include_router(media_analysis.router, prefix="/analyze-media", tags=["媒体分析"])
