"""
媒体分析服务
负责渲染分析提示词、调用多模态模型，并按配置决定失败时是否降级为示例结果
"""

from typing import Optional

import httpx

from dreamlab.core.analysis.exceptions import AnalysisError
from dreamlab.core.analysis.gemini import GeminiMediaAnalyzer
from dreamlab.core.analysis.models import AnalysisRequest, AnalysisResult, MediaType
from dreamlab.core.config import Settings, settings
from dreamlab.core.imggen.exceptions import ConfigurationError
from dreamlab.core.log_messages import log_messages
from dreamlab.core.log_utils import get_logger
from dreamlab.prompts import PromptManager, get_prompt_manager
from dreamlab.services.analysis.mock_analysis import MockAnalysisService, mock_analysis_service

logger = get_logger(__name__)


class MediaAnalysisService:
    """媒体分析服务"""

    PROMPT_CATEGORY = "media_analysis"
    MEDIA_TEMPLATE = "media"
    CONCEPT_TEMPLATE = "concept"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        app_settings: Optional[Settings] = None,
        prompt_manager: Optional[PromptManager] = None,
        mock_service: Optional[MockAnalysisService] = None
    ):
        """
        初始化媒体分析服务

        Args:
            http_client: 共享的HTTP客户端
            app_settings: 应用配置，默认使用全局配置
            prompt_manager: 提示词管理器
            mock_service: Mock服务
        """
        self.http_client = http_client
        self.settings = app_settings or settings
        self.prompt_manager = prompt_manager or get_prompt_manager()
        self.mock_service = mock_service or mock_analysis_service

    def build_prompt(self, request: AnalysisRequest) -> str:
        """
        渲染分析提示词

        没有媒体内容时使用文字创意模板，并按图片的分析要求生成。
        """
        if request.is_text_only:
            return self.prompt_manager.render_user_prompt(
                self.PROMPT_CATEGORY,
                self.CONCEPT_TEMPLATE,
                media_type=MediaType.IMAGE.value,
                vision_text=request.vision_text,
                concept=True
            )

        return self.prompt_manager.render_user_prompt(
            self.PROMPT_CATEGORY,
            self.MEDIA_TEMPLATE,
            media_type=request.media_type.value,
            vision_text=request.vision_text,
            concept=False
        )

    def _fallback(self, request: AnalysisRequest, reason: str) -> AnalysisResult:
        logger.warning(
            log_messages.ANALYSIS_MOCK_FALLBACK,
            operation="analyze_media",
            reason=reason,
            media_type=request.media_type.value
        )
        return self.mock_service.get_mock_analysis(request.media_type, request.vision_text)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """
        分析媒体或文字创意

        Args:
            request: 分析请求

        Returns:
            AnalysisResult: 分析结果，降级时 ``is_mock`` 为True

        Raises:
            ConfigurationError: 未配置分析模型密钥且未开启降级
            AnalysisError: 模型调用或结果解析失败且未开启降级
        """
        logger.info(
            log_messages.ANALYSIS_START,
            operation="analyze_media",
            media_type=request.media_type.value,
            text_only=request.is_text_only,
            has_vision_text=bool(request.vision_text)
        )

        if not self.settings.gemini_api_key:
            if self.settings.analysis_mock_fallback:
                return self._fallback(request, "missing_api_key")
            raise ConfigurationError("gemini API key is not configured", provider="gemini")

        prompt = self.build_prompt(request)
        template_name = self.CONCEPT_TEMPLATE if request.is_text_only else self.MEDIA_TEMPLATE
        template_config = self.prompt_manager.get_template_config(self.PROMPT_CATEGORY, template_name)

        analyzer = GeminiMediaAnalyzer(
            api_key=self.settings.gemini_api_key,
            http_client=self.http_client,
            model=self.settings.gemini_model,
            base_url=self.settings.gemini_base_url,
            timeout=self.settings.provider_request_timeout
        )

        try:
            result = await analyzer.analyze(
                prompt,
                request,
                temperature=template_config["temperature"],
                max_output_tokens=template_config["max_tokens"]
            )
        except AnalysisError as e:
            if self.settings.analysis_mock_fallback:
                return self._fallback(request, type(e).__name__)
            logger.error(
                log_messages.OPERATION_FAILED,
                exception=e,
                operation_name="媒体分析",
                media_type=request.media_type.value
            )
            raise

        logger.info(
            log_messages.ANALYSIS_SUCCESS,
            operation="analyze_media",
            media_type=request.media_type.value,
            title=result.title
        )
        return result
