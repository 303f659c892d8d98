"""
Luma图片生成提供商
异步生成：提交任务得到生成ID，再通过状态查询获取结果
"""

from typing import Any, Dict, Optional, Type, Union

from dreamlab.core.log_utils import get_logger
from dreamlab.core.log_messages import log_messages
from dreamlab.core.imggen.base import AsyncImageProvider
from dreamlab.core.imggen.exceptions import ProviderError, ProviderPollError, ProviderRequestError
from dreamlab.core.imggen.models import (
    GenerationRequest,
    GenerationResult,
    GenerationState,
    ImageModel,
    ImageQuality,
)
from dreamlab.utils.datetime_utils import get_current_iso_string

logger = get_logger(__name__)


class LumaImageProvider(AsyncImageProvider):
    """Luma图片生成提供商"""

    PROVIDER_NAME = "luma"
    SUPPORTED_MODELS = (ImageModel.RAY_1_6, ImageModel.RAY_2, ImageModel.RAY_FLASH_2)
    ERROR_FIELD_PATHS = ("detail", "error.message", "message")

    DEFAULT_QUALITY = "standard"
    QUALITY_MAPPING = {
        ImageQuality.LOW.value: "draft",
        ImageQuality.MEDIUM.value: "standard",
        ImageQuality.HIGH.value: "enhanced",
    }

    # 提供商状态到归一化状态的映射，未知状态视为仍在生成中
    STATE_MAPPING = {
        "pending": GenerationState.PENDING,
        "queued": GenerationState.PENDING,
        "dreaming": GenerationState.DREAMING,
        "completed": GenerationState.COMPLETED,
        "failed": GenerationState.FAILED,
    }

    @property
    def api_key(self) -> Optional[str]:
        return self.config.luma_api_key

    @property
    def endpoint(self) -> str:
        return f"{self.config.luma_base_url.rstrip('/')}/generations"

    @classmethod
    def map_quality(cls, quality: Optional[Union[ImageQuality, str]]) -> str:
        """将归一化质量映射为Luma的质量档位"""
        value = quality.value if isinstance(quality, ImageQuality) else quality
        return cls.QUALITY_MAPPING.get(value, cls.DEFAULT_QUALITY)

    def build_payload(self, request: GenerationRequest) -> Dict[str, Any]:
        """构建请求体，宽高比原样透传"""
        return {
            "prompt": request.prompt,
            "aspect_ratio": request.aspect_ratio.value,
            "model": request.model.value,
            "quality": self.map_quality(request.quality),
        }

    async def submit(self, request: GenerationRequest) -> GenerationResult:
        """
        提交生成任务

        Raises:
            ConfigurationError: 密钥未配置
            ProviderRequestError: 提供商返回错误或响应格式异常
        """
        if not self.supports_model(request.model):
            raise ValueError(f"{self.PROVIDER_NAME} 不支持模型: {request.model.value}")

        payload = self.build_payload(request)
        logger.info(
            log_messages.GENERATION_DISPATCH,
            operation="submit_generation",
            provider=self.PROVIDER_NAME,
            model=request.model.value,
            quality=payload["quality"]
        )

        data = await self._request("POST", self.endpoint, ProviderRequestError, payload)
        return self.normalize_response(data, ProviderRequestError)

    async def get_status(self, generation_id: str) -> GenerationResult:
        """
        查询生成状态

        Raises:
            ConfigurationError: 密钥未配置
            ProviderPollError: 查询失败或响应格式异常
        """
        data = await self._request(
            "GET",
            f"{self.endpoint}/{generation_id}",
            ProviderPollError
        )
        return self.normalize_response(data, ProviderPollError)

    def normalize_response(
        self,
        data: Dict[str, Any],
        error_class: Type[ProviderError] = ProviderPollError
    ) -> GenerationResult:
        """
        将提供商响应转换为归一化结果

        Args:
            data: 提供商响应
            error_class: 响应格式异常时抛出的异常类型

        Returns:
            GenerationResult: 归一化结果
        """
        generation_id = data.get("id")
        if not generation_id:
            raise error_class(
                f"{self.PROVIDER_NAME} API response is missing generation id",
                provider=self.PROVIDER_NAME,
                raw_body=str(data)
            )

        state = self.STATE_MAPPING.get(str(data.get("state", "")).lower(), GenerationState.DREAMING)
        assets = data.get("assets") if isinstance(data.get("assets"), dict) else None
        url = (assets or {}).get("image") or data.get("url")

        if state == GenerationState.COMPLETED and not url:
            raise error_class(
                f"{self.PROVIDER_NAME} generation {generation_id} completed without an image",
                provider=self.PROVIDER_NAME,
                raw_body=str(data)
            )

        result = GenerationResult(
            id=str(generation_id),
            state=state,
            created_at=data.get("created_at") or get_current_iso_string(),
            url=url,
            thumbnail_url=data.get("thumbnail_url"),
            failure_reason=data.get("failure_reason"),
            assets=assets,
        )
        logger.debug(
            "生成状态: {generation_id} -> {state}",
            generation_id=result.id,
            state=result.state.value
        )
        if result.state == GenerationState.FAILED:
            logger.warning(
                log_messages.GENERATION_FAILED,
                operation="normalize_response",
                generation_id=result.id
            )
        return result
