"""
Gemini 多模态分析提供商
基于 generateContent REST API 实现，媒体以 inline_data 方式随提示词一起发送
"""

from typing import Any, Dict, Optional

import httpx

from dreamlab.core.log_utils import get_logger
from dreamlab.utils.json_utils import ResponseParser
from .exceptions import AnalysisError, AnalysisParseError
from .models import AnalysisRequest, AnalysisResult

logger = get_logger(__name__)


class GeminiMediaAnalyzer:
    """Gemini 多模态分析提供商"""

    PROVIDER_NAME = "gemini"
    ERROR_FIELD_PATHS = ("error.message", "message")

    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient,
        model: str = "gemini-2.0-flash-exp",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 120.0
    ):
        """
        初始化分析提供商

        Args:
            api_key: Gemini API密钥
            http_client: 共享的HTTP客户端
            model: 模型名称
            base_url: API地址
            timeout: 请求超时（秒）
        """
        if not api_key:
            raise ValueError("Gemini API密钥未配置")

        self._api_key = api_key
        self.http_client = http_client
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(
        self,
        prompt: str,
        request: AnalysisRequest,
        temperature: float,
        max_output_tokens: int
    ) -> Dict[str, Any]:
        """构建请求体，纯文字分析时只发送提示词"""
        parts: list = [{"text": prompt}]
        if not request.is_text_only:
            parts.append({
                "inline_data": {
                    "mime_type": request.mime_type,
                    "data": request.media_data,
                }
            })

        return {
            "contents": [{"parts": parts}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
            },
        }

    async def analyze(
        self,
        prompt: str,
        request: AnalysisRequest,
        temperature: float = 0.8,
        max_output_tokens: int = 8192
    ) -> AnalysisResult:
        """
        调用模型进行分析

        Args:
            prompt: 渲染后的提示词
            request: 分析请求
            temperature: 采样温度
            max_output_tokens: 最大输出token数

        Returns:
            AnalysisResult: 分析结果

        Raises:
            AnalysisError: 请求失败或响应结构异常
            AnalysisParseError: 模型输出无法解析为分析结果
        """
        payload = self.build_payload(prompt, request, temperature, max_output_tokens)

        logger.info(
            "调用Gemini分析API",
            operation="gemini_analyze",
            model=self.model,
            media_type=request.media_type.value,
            text_only=request.is_text_only,
            media_length=len(request.media_data)
        )

        try:
            response = await self.http_client.post(
                self.endpoint,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self._api_key,
                },
                timeout=self.timeout
            )
        except httpx.HTTPError as e:
            raise AnalysisError(f"Gemini API request failed: {type(e).__name__}") from e

        if not response.is_success:
            detail = ResponseParser.extract_error_message(response.text, self.ERROR_FIELD_PATHS)
            logger.error(
                "Gemini API请求失败: {status_code}",
                operation="gemini_analyze",
                status_code=response.status_code
            )
            raise AnalysisError(
                f"Gemini API error: {response.status_code} - {detail or 'Unknown error'}",
                status_code=response.status_code
            )

        text = self._extract_text(response)
        try:
            data = ResponseParser.parse_json_response(text)
            return AnalysisResult.from_dict(data)
        except ValueError as e:
            raise AnalysisParseError(str(e), details={"response_preview": text[:200]}) from e

    def _extract_text(self, response: httpx.Response) -> str:
        """提取第一个候选结果的文本"""
        try:
            data = response.json()
            text: Optional[str] = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AnalysisError(
                "Gemini API returned an unexpected payload",
                status_code=response.status_code
            ) from e

        if not text:
            raise AnalysisParseError("Gemini API returned empty text")
        return text
