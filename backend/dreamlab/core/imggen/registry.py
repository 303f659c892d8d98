"""
图片生成提供商注册表
模型到提供商家族、提供商实现的封闭映射，导入时校验每个模型都已注册
"""

from enum import Enum
from typing import Dict, Type

import httpx

from dreamlab.core.log_utils import get_logger
from .base import AsyncImageProvider, BaseImageProvider, SyncImageProvider
from .config import ImageGenerationConfig
from .models import ImageModel
from .providers.luma import LumaImageProvider
from .providers.openai_images import OpenAIImageProvider

logger = get_logger(__name__)


class ProviderFamily(str, Enum):
    """提供商家族"""
    SYNC = "sync"
    ASYNC = "async"


MODEL_PROVIDERS: Dict[ImageModel, Type[BaseImageProvider]] = {
    ImageModel.RAY_1_6: LumaImageProvider,
    ImageModel.RAY_2: LumaImageProvider,
    ImageModel.RAY_FLASH_2: LumaImageProvider,
    ImageModel.DALL_E_3: OpenAIImageProvider,
    ImageModel.GPT_IMAGE_1: OpenAIImageProvider,
}

# 状态查询只发生在异步家族，且只有一个异步提供商
STATUS_PROVIDER: Type[AsyncImageProvider] = LumaImageProvider


def verify_registry() -> None:
    """
    校验注册表完整性

    Raises:
        RuntimeError: 存在未注册的模型或提供商不支持其注册的模型
    """
    missing = [model.value for model in ImageModel if model not in MODEL_PROVIDERS]
    if missing:
        raise RuntimeError(f"未注册提供商的图片模型: {', '.join(missing)}")

    for model, provider_class in MODEL_PROVIDERS.items():
        if model not in provider_class.SUPPORTED_MODELS:
            raise RuntimeError(f"{provider_class.__name__} 不支持已注册的模型: {model.value}")
        if not issubclass(provider_class, (SyncImageProvider, AsyncImageProvider)):
            raise RuntimeError(f"{provider_class.__name__} 不属于任何提供商家族")


verify_registry()


def get_provider_class(model: ImageModel) -> Type[BaseImageProvider]:
    """获取模型对应的提供商类"""
    return MODEL_PROVIDERS[ImageModel(model)]


def get_provider_family(model: ImageModel) -> ProviderFamily:
    """获取模型所属的提供商家族"""
    if issubclass(get_provider_class(model), SyncImageProvider):
        return ProviderFamily.SYNC
    return ProviderFamily.ASYNC


def is_sync_model(model: ImageModel) -> bool:
    """模型是否属于同步家族"""
    return get_provider_family(model) == ProviderFamily.SYNC


def is_sync_generation_id(generation_id: str) -> bool:
    """
    生成ID是否由同步提供商分配

    同步提供商的结果在创建时即已完成，这类ID不能用于状态查询。
    """
    return any(
        issubclass(provider_class, SyncImageProvider)
        and generation_id.startswith(provider_class.ID_PREFIX)
        for provider_class in set(MODEL_PROVIDERS.values())
    )


def create_provider(
    model: ImageModel,
    config: ImageGenerationConfig,
    http_client: httpx.AsyncClient
) -> BaseImageProvider:
    """
    创建模型对应的提供商实例

    Args:
        model: 模型标识
        config: 图片生成配置
        http_client: 共享的HTTP客户端

    Returns:
        BaseImageProvider: 提供商实例
    """
    provider_class = get_provider_class(model)
    logger.debug(
        "创建图片生成提供商: {provider}",
        operation="create_provider",
        provider=provider_class.PROVIDER_NAME,
        model=ImageModel(model).value
    )
    return provider_class(config, http_client)
