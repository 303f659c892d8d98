"""
图片生成配置
显式注入到编排器和提供商中的配置对象（密钥、服务地址、轮询策略）
"""

from dataclasses import dataclass, field
from typing import Optional

from dreamlab.core.config import Settings


@dataclass(frozen=True)
class ImageGenerationConfig:
    """图片生成配置

    Attributes:
        openai_api_key: 同步提供商密钥
        luma_api_key: 异步提供商密钥
        openai_base_url: 同步提供商API地址
        luma_base_url: 异步提供商API地址
        request_timeout: 单次HTTP请求超时（秒）
        poll_interval: 两次状态查询之间的间隔（秒）
        max_poll_attempts: 最大状态查询次数
    """
    openai_api_key: Optional[str] = field(default=None, repr=False)
    luma_api_key: Optional[str] = field(default=None, repr=False)
    openai_base_url: str = "https://api.openai.com/v1"
    luma_base_url: str = "https://api.lumalabs.ai/dream-machine/v1"
    request_timeout: float = 120.0
    poll_interval: float = 5.0
    max_poll_attempts: int = 60

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "ImageGenerationConfig":
        """从应用配置构建"""
        return cls(
            openai_api_key=app_settings.openai_api_key,
            luma_api_key=app_settings.luma_api_key,
            openai_base_url=app_settings.openai_base_url,
            luma_base_url=app_settings.luma_base_url,
            request_timeout=app_settings.provider_request_timeout,
            poll_interval=app_settings.image_poll_interval,
            max_poll_attempts=app_settings.image_poll_max_attempts,
        )
