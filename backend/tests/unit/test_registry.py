"""
提供商注册表单元测试
"""

import pytest

from dreamlab.core.imggen.base import AsyncImageProvider, SyncImageProvider
from dreamlab.core.imggen.models import ImageModel
from dreamlab.core.imggen.providers.luma import LumaImageProvider
from dreamlab.core.imggen.providers.openai_images import OpenAIImageProvider
from dreamlab.core.imggen.registry import (
    MODEL_PROVIDERS,
    STATUS_PROVIDER,
    ProviderFamily,
    create_provider,
    get_provider_family,
    is_sync_generation_id,
    is_sync_model,
    verify_registry,
)


@pytest.mark.unit
@pytest.mark.imggen
class TestProviderRegistry:
    """提供商注册表测试类"""

    def test_every_model_is_registered(self):
        """测试每个模型都有对应的提供商"""
        assert set(MODEL_PROVIDERS) == set(ImageModel)
        verify_registry()

    @pytest.mark.parametrize("model, family", [
        (ImageModel.RAY_1_6, ProviderFamily.ASYNC),
        (ImageModel.RAY_2, ProviderFamily.ASYNC),
        (ImageModel.RAY_FLASH_2, ProviderFamily.ASYNC),
        (ImageModel.DALL_E_3, ProviderFamily.SYNC),
        (ImageModel.GPT_IMAGE_1, ProviderFamily.SYNC),
    ])
    def test_model_family(self, model, family):
        """测试模型所属家族"""
        assert get_provider_family(model) == family
        assert is_sync_model(model) == (family == ProviderFamily.SYNC)

    def test_status_provider_is_async(self):
        """测试状态查询提供商属于异步家族"""
        assert STATUS_PROVIDER is LumaImageProvider
        assert issubclass(STATUS_PROVIDER, AsyncImageProvider)

    def test_sync_generation_id_detection(self):
        """测试按ID前缀识别同步提供商的生成ID"""
        assert is_sync_generation_id("openai_1719216000000_abc123xyz")
        assert not is_sync_generation_id("7f3c2a10-5b1e-4c5e-9a7e-2d1f0b9c8e77")

    def test_create_provider(self, generation_config, mock_transport):
        """测试按模型创建提供商实例"""
        http_client = mock_transport.client()

        provider = create_provider("gpt-image-1", generation_config, http_client)

        assert isinstance(provider, OpenAIImageProvider)
        assert isinstance(provider, SyncImageProvider)
        assert provider.config is generation_config
        assert provider.http_client is http_client

    def test_unknown_model_is_rejected(self, generation_config, mock_transport):
        """测试未知模型无法创建提供商"""
        with pytest.raises(ValueError):
            create_provider("midjourney-v6", generation_config, mock_transport.client())

    @pytest.mark.parametrize("provider_class", [OpenAIImageProvider, LumaImageProvider])
    def test_provider_classes_are_concrete(self, provider_class):
        """测试提供商只需实现生成与状态查询契约"""
        assert not provider_class.__abstractmethods__
        assert not hasattr(provider_class, "get_supported_qualities")
