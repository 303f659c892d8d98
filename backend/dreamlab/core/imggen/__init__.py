"""
图片生成模块
提供统一的图片生成接口、同步/异步两类提供商实现以及状态轮询
"""

# 核心类
from .base import AsyncImageProvider, BaseImageProvider, SyncImageProvider
from .config import ImageGenerationConfig
from .models import (
    AspectRatio,
    GenerationRequest,
    GenerationResult,
    GenerationState,
    ImageModel,
    ImageQuality,
)
from .exceptions import (
    ConfigurationError,
    GenerationFailedError,
    GenerationTimeoutError,
    ImageGenerationError,
    ProviderError,
    ProviderPollError,
    ProviderRequestError,
    SyncGenerationStatusError,
)

# 注册表
from .registry import (
    ProviderFamily,
    create_provider,
    get_provider_family,
    is_sync_generation_id,
    is_sync_model,
)

# 编排与轮询
from .poller import GenerationPoller
from .orchestrator import ImageGenerationOrchestrator
from .client import RemoteGenerationClient

# 提供商类（用于类型提示和直接导入）
from .providers.openai_images import OpenAIImageProvider
from .providers.luma import LumaImageProvider

__all__ = [
    # 核心类
    "BaseImageProvider",
    "SyncImageProvider",
    "AsyncImageProvider",
    "ImageGenerationConfig",
    "AspectRatio",
    "GenerationRequest",
    "GenerationResult",
    "GenerationState",
    "ImageModel",
    "ImageQuality",
    # 异常
    "ImageGenerationError",
    "ConfigurationError",
    "ProviderError",
    "ProviderRequestError",
    "ProviderPollError",
    "GenerationFailedError",
    "GenerationTimeoutError",
    "SyncGenerationStatusError",
    # 注册表
    "ProviderFamily",
    "create_provider",
    "get_provider_family",
    "is_sync_model",
    "is_sync_generation_id",
    # 编排与轮询
    "GenerationPoller",
    "ImageGenerationOrchestrator",
    "RemoteGenerationClient",
    # 提供商类
    "OpenAIImageProvider",
    "LumaImageProvider",
]
