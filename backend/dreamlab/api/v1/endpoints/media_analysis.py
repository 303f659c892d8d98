"""
媒体分析API端点
"""

from fastapi import APIRouter, Depends

from dreamlab.api.deps import get_media_analysis_service
from dreamlab.schemas.common import StandardResponse
from dreamlab.schemas.media_analysis import MediaAnalysisRequest
from dreamlab.services.analysis.media_analysis_handler import MediaAnalysisHandler
from dreamlab.services.analysis.media_analysis_service import MediaAnalysisService

router = APIRouter(tags=["媒体分析"])


@router.post(
    "",
    response_model=StandardResponse,
    summary="分析媒体",
    description="分析图片、视频或音频（或纯文字创意），返回标题、风格、关键词和多类创意提示词"
)
async def analyze_media(
    request: MediaAnalysisRequest,
    service: MediaAnalysisService = Depends(get_media_analysis_service)
) -> StandardResponse:
    """分析媒体"""
    handler = MediaAnalysisHandler(service)
    data = await handler.handle_analyze_media(request)

    return StandardResponse(
        status="success",
        message="媒体分析完成",
        data=data
    )
