"""
媒体分析服务模块
"""

from .media_analysis_service import MediaAnalysisService
from .media_analysis_handler import MediaAnalysisHandler
from .mock_analysis import MockAnalysisService, mock_analysis_service

__all__ = [
    'MediaAnalysisService',
    'MediaAnalysisHandler',
    'MockAnalysisService',
    'mock_analysis_service'
]
