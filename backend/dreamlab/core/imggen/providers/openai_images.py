"""
OpenAI图片生成提供商
支持 dall-e-3 与 gpt-image-1，两者均为同步生成：一次请求即返回最终图片
"""

from typing import Any, Dict, Optional, Union

from dreamlab.core.log_utils import get_logger
from dreamlab.core.log_messages import log_messages
from dreamlab.core.imggen.base import SyncImageProvider
from dreamlab.core.imggen.exceptions import ProviderRequestError
from dreamlab.core.imggen.models import (
    AspectRatio,
    GenerationRequest,
    GenerationResult,
    GenerationState,
    ImageModel,
    ImageQuality,
)
from dreamlab.utils.id_utils import generate_id_with_prefix

logger = get_logger(__name__)


class OpenAIImageProvider(SyncImageProvider):
    """OpenAI图片生成提供商"""

    PROVIDER_NAME = "openai"
    ID_PREFIX = "openai_"
    SUPPORTED_MODELS = (ImageModel.DALL_E_3, ImageModel.GPT_IMAGE_1)
    ERROR_FIELD_PATHS = ("error.message", "message")

    DEFAULT_SIZE = "1024x1024"
    OUTPUT_FORMAT = "png"

    # 宽高比到尺寸的映射，两个模型只在16:9和9:16上不同
    SIZE_MAPPING: Dict[ImageModel, Dict[str, str]] = {
        ImageModel.GPT_IMAGE_1: {
            "1:1": "1024x1024",
            "16:9": "1536x1024",
            "9:16": "1024x1536",
            "4:3": "1024x768",
            "3:4": "768x1024",
            "21:9": "1792x768",
            "9:21": "768x1792",
        },
        ImageModel.DALL_E_3: {
            "1:1": "1024x1024",
            "16:9": "1792x1024",
            "9:16": "1024x1792",
            "4:3": "1024x768",
            "3:4": "768x1024",
            "21:9": "1792x768",
            "9:21": "768x1792",
        },
    }

    GPT_IMAGE_QUALITIES = ("low", "medium", "high", "auto")

    @property
    def api_key(self) -> Optional[str]:
        return self.config.openai_api_key

    @property
    def endpoint(self) -> str:
        return f"{self.config.openai_base_url.rstrip('/')}/images/generations"

    @classmethod
    def aspect_ratio_to_size(
        cls,
        aspect_ratio: Union[AspectRatio, str],
        model: ImageModel
    ) -> str:
        """
        将宽高比转换为模型支持的尺寸

        Args:
            aspect_ratio: 宽高比，如 "16:9"
            model: 模型标识

        Returns:
            str: 尺寸，未映射的宽高比返回默认尺寸
        """
        ratio = aspect_ratio.value if isinstance(aspect_ratio, AspectRatio) else str(aspect_ratio)
        return cls.SIZE_MAPPING.get(ImageModel(model), {}).get(ratio, cls.DEFAULT_SIZE)

    @classmethod
    def map_quality(cls, model: ImageModel, quality: Optional[Union[ImageQuality, str]]) -> str:
        """
        将归一化质量转换为模型支持的取值，无效取值替换为模型默认值

        Args:
            model: 模型标识
            quality: 归一化质量

        Returns:
            str: 提供商原生质量取值
        """
        value = quality.value if isinstance(quality, ImageQuality) else quality

        if ImageModel(model) == ImageModel.GPT_IMAGE_1:
            return value if value in cls.GPT_IMAGE_QUALITIES else "auto"
        return "hd" if value == ImageQuality.HD.value else "standard"

    def build_payload(self, request: GenerationRequest) -> Dict[str, Any]:
        """构建请求体，gpt-image-1 只返回base64，不能携带 response_format"""
        payload: Dict[str, Any] = {
            "model": request.model.value,
            "prompt": request.prompt,
            "n": 1,
            "size": self.aspect_ratio_to_size(request.aspect_ratio, request.model),
            "quality": self.map_quality(request.model, request.quality),
        }

        if request.model == ImageModel.GPT_IMAGE_1:
            payload["output_format"] = self.OUTPUT_FORMAT
            payload["background"] = "auto"
        else:
            payload["response_format"] = "url"

        return payload

    async def generate_image(self, request: GenerationRequest) -> GenerationResult:
        """
        生成图片

        Args:
            request: 生成请求

        Returns:
            GenerationResult: completed状态的结果，id由本适配器分配

        Raises:
            ConfigurationError: 密钥未配置
            ProviderRequestError: 提供商返回错误或响应格式异常
        """
        if not self.supports_model(request.model):
            raise ValueError(f"{self.PROVIDER_NAME} 不支持模型: {request.model.value}")

        payload = self.build_payload(request)
        logger.info(
            log_messages.GENERATION_DISPATCH,
            operation="generate_image",
            provider=self.PROVIDER_NAME,
            model=request.model.value,
            size=payload["size"],
            quality=payload["quality"]
        )

        data = await self._request("POST", self.endpoint, ProviderRequestError, payload)
        image_url = self._extract_image_url(data)
        if not image_url:
            raise ProviderRequestError(
                f"{self.PROVIDER_NAME} API response contains no image",
                provider=self.PROVIDER_NAME,
                status_code=200,
                raw_body=str(data)
            )

        result = GenerationResult(
            id=generate_id_with_prefix(self.ID_PREFIX.rstrip("_")),
            state=GenerationState.COMPLETED,
            url=image_url,
            assets={"image": image_url},
        )
        logger.info(
            log_messages.GENERATION_COMPLETED,
            operation="generate_image",
            generation_id=result.id,
            model=request.model.value
        )
        return result

    def _extract_image_url(self, data: Dict[str, Any]) -> Optional[str]:
        """从响应中提取图片地址，base64数据包装为data URL"""
        items = data.get("data")
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            return None

        first = items[0]
        if first.get("b64_json"):
            return f"data:image/{self.OUTPUT_FORMAT};base64,{first['b64_json']}"
        return first.get("url") or None
