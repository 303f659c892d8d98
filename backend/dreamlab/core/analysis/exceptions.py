"""
媒体分析异常定义
"""

from typing import Any, Dict, Optional


class AnalysisError(Exception):
    """
    媒体分析基础异常

    Attributes:
        message: 错误消息
        status_code: 上游HTTP状态码（可选）
        details: 错误详情
    """

    code = "ANALYSIS_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class AnalysisParseError(AnalysisError):
    """模型返回的文本无法解析为分析结果"""

    code = "ANALYSIS_PARSE_ERROR"
