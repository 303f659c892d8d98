"""
API依赖注入
提供共享HTTP客户端、图片生成编排器和媒体分析服务
"""

import httpx
from fastapi import Depends, Request

from dreamlab.core.config import settings
from dreamlab.core.imggen.config import ImageGenerationConfig
from dreamlab.core.imggen.orchestrator import ImageGenerationOrchestrator
from dreamlab.services.analysis.media_analysis_service import MediaAnalysisService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """获取应用生命周期内共享的HTTP客户端"""
    return request.app.state.http_client


def get_generation_config() -> ImageGenerationConfig:
    """获取图片生成配置"""
    return ImageGenerationConfig.from_settings(settings)


def get_orchestrator(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    config: ImageGenerationConfig = Depends(get_generation_config)
) -> ImageGenerationOrchestrator:
    """获取图片生成编排器"""
    return ImageGenerationOrchestrator(config, http_client)


def get_media_analysis_service(
    http_client: httpx.AsyncClient = Depends(get_http_client)
) -> MediaAnalysisService:
    """获取媒体分析服务"""
    return MediaAnalysisService(http_client)
