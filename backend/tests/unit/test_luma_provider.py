"""
Luma图片生成提供商单元测试
测试提交、状态查询、响应归一化和错误处理
"""

import json

import httpx
import pytest

from dreamlab.core.imggen.exceptions import ConfigurationError, ProviderPollError, ProviderRequestError
from dreamlab.core.imggen.models import GenerationRequest, GenerationState
from dreamlab.core.imggen.providers.luma import LumaImageProvider
from utils.mock_utils import LUMA_GENERATIONS_PATH


@pytest.mark.unit
@pytest.mark.imggen
class TestLumaImageProvider:
    """Luma提供商测试类"""

    @pytest.mark.parametrize("quality, expected", [
        ("low", "draft"),
        ("medium", "standard"),
        ("high", "enhanced"),
        ("hd", "standard"),
        (None, "standard"),
    ])
    def test_quality_mapping(self, quality, expected):
        """测试质量档位映射"""
        assert LumaImageProvider.map_quality(quality) == expected

    @pytest.mark.asyncio
    async def test_submit_sends_payload(self, generation_config, mock_transport, mock_builder):
        """测试提交请求体和归一化结果"""
        mock_transport.add("POST", LUMA_GENERATIONS_PATH, httpx.Response(
            201, json=mock_builder.luma_generation("gen-42", "pending")
        ))
        provider = LumaImageProvider(generation_config, mock_transport.client())

        result = await provider.submit(GenerationRequest(
            prompt="  neon city  ",
            aspect_ratio="21:9",
            model="ray-2",
            quality="high"
        ))

        assert result.id == "gen-42"
        assert result.state == GenerationState.PENDING
        assert result.url is None

        request = mock_transport.requests[0]
        assert request.headers["Authorization"] == "Bearer luma-test-key"
        assert json.loads(request.content) == {
            "prompt": "neon city",
            "aspect_ratio": "21:9",
            "model": "ray-2",
            "quality": "enhanced",
        }

    @pytest.mark.asyncio
    async def test_submit_error_prefers_detail(self, generation_config, mock_transport):
        """测试提交失败时优先使用detail字段"""
        mock_transport.add("POST", LUMA_GENERATIONS_PATH, httpx.Response(
            400, json={"detail": "prompt too long", "message": "bad request"}
        ))
        provider = LumaImageProvider(generation_config, mock_transport.client())

        with pytest.raises(ProviderRequestError) as exc_info:
            await provider.submit(GenerationRequest(prompt="x"))

        assert exc_info.value.status_code == 400
        assert "prompt too long" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_get_status_completed_uses_asset_image(self, generation_config, mock_transport, mock_builder):
        """测试completed状态使用assets.image作为图片地址"""
        mock_transport.add("GET", f"{LUMA_GENERATIONS_PATH}/gen-1", httpx.Response(
            200, json=mock_builder.luma_generation("gen-1", "completed", image_url="https://cdn.luma/1.jpg")
        ))
        provider = LumaImageProvider(generation_config, mock_transport.client())

        result = await provider.get_status("gen-1")

        assert result.state == GenerationState.COMPLETED
        assert result.url == "https://cdn.luma/1.jpg"
        assert result.assets == {"image": "https://cdn.luma/1.jpg"}

    @pytest.mark.asyncio
    async def test_get_status_failed_keeps_reason(self, generation_config, mock_transport, mock_builder):
        """测试failed状态保留提供商的失败原因"""
        mock_transport.add("GET", f"{LUMA_GENERATIONS_PATH}/gen-1", httpx.Response(
            200, json=mock_builder.luma_generation("gen-1", "failed", failure_reason="nsfw content")
        ))
        provider = LumaImageProvider(generation_config, mock_transport.client())

        result = await provider.get_status("gen-1")

        assert result.state == GenerationState.FAILED
        assert result.failure_reason == "nsfw content"

    @pytest.mark.asyncio
    async def test_unknown_state_is_not_terminal(self, generation_config, mock_transport, mock_builder):
        """测试未知状态视为仍在生成中"""
        mock_transport.add("GET", f"{LUMA_GENERATIONS_PATH}/gen-1", httpx.Response(
            200, json=mock_builder.luma_generation("gen-1", "upscaling")
        ))
        provider = LumaImageProvider(generation_config, mock_transport.client())

        result = await provider.get_status("gen-1")

        assert result.state == GenerationState.DREAMING
        assert not result.is_terminal

    @pytest.mark.asyncio
    async def test_get_status_http_error_is_poll_error(self, generation_config, mock_transport):
        """测试状态查询失败时抛出轮询错误"""
        mock_transport.add("GET", f"{LUMA_GENERATIONS_PATH}/gen-1", httpx.Response(404, text="not found"))
        provider = LumaImageProvider(generation_config, mock_transport.client())

        with pytest.raises(ProviderPollError) as exc_info:
            await provider.get_status("gen-1")

        assert exc_info.value.status_code == 404
        assert exc_info.value.raw_body == "not found"

    @pytest.mark.asyncio
    async def test_completed_without_image_is_poll_error(self, generation_config, mock_transport, mock_builder):
        """测试completed状态缺少图片时抛出轮询错误"""
        mock_transport.add("GET", f"{LUMA_GENERATIONS_PATH}/gen-1", httpx.Response(
            200, json=mock_builder.luma_generation("gen-1", "completed")
        ))
        provider = LumaImageProvider(generation_config, mock_transport.client())

        with pytest.raises(ProviderPollError):
            await provider.get_status("gen-1")

    @pytest.mark.asyncio
    async def test_missing_key_raises_before_network(self, unconfigured_generation_config, mock_transport):
        """测试未配置密钥时不发起网络请求"""
        provider = LumaImageProvider(unconfigured_generation_config, mock_transport.client())

        with pytest.raises(ConfigurationError):
            await provider.get_status("gen-1")

        assert mock_transport.requests == []
