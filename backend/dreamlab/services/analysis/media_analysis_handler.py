"""
媒体分析业务处理器
处理媒体分析请求的参数校验和异常转换
"""

from typing import Dict, Any

from fastapi import HTTPException, status

from dreamlab.core.analysis.exceptions import AnalysisError
from dreamlab.core.imggen.exceptions import ConfigurationError
from dreamlab.core.log_utils import get_logger
from dreamlab.schemas.media_analysis import MediaAnalysisData, MediaAnalysisRequest
from dreamlab.services.analysis.media_analysis_service import MediaAnalysisService

logger = get_logger(__name__)


class MediaAnalysisHandler:
    """媒体分析业务处理器"""

    def __init__(self, service: MediaAnalysisService):
        self.service = service

    async def handle_analyze_media(self, request: MediaAnalysisRequest) -> Dict[str, Any]:
        """
        处理媒体分析请求

        Args:
            request: 分析请求

        Returns:
            Dict[str, Any]: camelCase键名的分析结果

        Raises:
            HTTPException: 参数无效或分析失败时抛出HTTP异常
        """
        try:
            analysis_request = request.to_domain()
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        try:
            result = await self.service.analyze(analysis_request)
        except ConfigurationError as e:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
        except AnalysisError as e:
            logger.error(
                "媒体分析请求处理失败",
                operation="handle_analyze_media",
                error_code=e.code,
                upstream_status=e.status_code
            )
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

        return MediaAnalysisData(**result.to_dict()).model_dump(by_alias=True)
