"""
测试配置和fixtures
为所有测试提供共享的配置和fixtures

单元测试不依赖任何外部服务：提供商HTTP调用通过假传输层模拟，轮询等待通过可记录的sleep替身跳过
"""

import os

import pytest

# 单元测试不写日志文件，需要在导入应用模块之前设置
os.environ.setdefault("LOG_TO_FILE", "false")

from dreamlab.core.config import Settings
from dreamlab.core.imggen.config import ImageGenerationConfig
from utils.mock_utils import (
    GEMINI_BASE_URL,
    LUMA_BASE_URL,
    OPENAI_BASE_URL,
    MockBuilder,
    ProviderMockTransport,
    RecordingSleep,
)


@pytest.fixture(scope="function")
def generation_config():
    """配置了两个提供商密钥的图片生成配置"""
    return ImageGenerationConfig(
        openai_api_key="sk-test-openai",
        luma_api_key="luma-test-key",
        openai_base_url=OPENAI_BASE_URL,
        luma_base_url=LUMA_BASE_URL,
        request_timeout=5.0,
        poll_interval=5.0,
        max_poll_attempts=60
    )


@pytest.fixture(scope="function")
def unconfigured_generation_config():
    """未配置任何密钥的图片生成配置"""
    return ImageGenerationConfig(
        openai_base_url=OPENAI_BASE_URL,
        luma_base_url=LUMA_BASE_URL
    )


@pytest.fixture(scope="function")
def analysis_settings():
    """配置了Gemini密钥且关闭降级的应用配置"""
    return Settings(
        gemini_api_key="gemini-test-key",
        gemini_base_url=GEMINI_BASE_URL,
        analysis_mock_fallback=False,
        log_to_file=False
    )


@pytest.fixture(scope="function")
def mock_transport():
    """假HTTP传输层"""
    return ProviderMockTransport()


@pytest.fixture(scope="function")
def recording_sleep():
    """可记录等待时长的sleep替身"""
    return RecordingSleep()


@pytest.fixture(scope="function")
def mock_builder():
    """提供商响应构建器"""
    return MockBuilder()


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "imggen: 图片生成相关测试")
    config.addinivalue_line("markers", "polling: 状态轮询相关测试")
    config.addinivalue_line("markers", "analysis: 媒体分析相关测试")
    config.addinivalue_line("markers", "api: API端点测试")
    config.addinivalue_line("markers", "logging: 日志系统测试")
    config.addinivalue_line("markers", "utils: 工具函数测试")
    config.addinivalue_line("markers", "imports: 模块导入测试")
