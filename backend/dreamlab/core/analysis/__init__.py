"""
媒体分析模块
调用多模态模型分析图片、视频或音频，生成结构化的创意提示词
"""

from .models import MediaType, AnalysisRequest, AnalysisResult
from .exceptions import AnalysisError, AnalysisParseError
from .gemini import GeminiMediaAnalyzer

__all__ = [
    "MediaType",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisError",
    "AnalysisParseError",
    "GeminiMediaAnalyzer",
]
