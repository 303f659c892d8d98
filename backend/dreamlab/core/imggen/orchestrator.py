"""
图片生成编排器
按模型所属家族分发请求：同步家族一次调用直接返回，异步家族提交后轮询直到结束
"""

import asyncio
from typing import Dict, Optional

import httpx

from dreamlab.core.log_utils import get_logger
from dreamlab.core.log_messages import log_messages
from .base import AsyncImageProvider, BaseImageProvider, SyncImageProvider
from .config import ImageGenerationConfig
from .exceptions import GenerationFailedError, SyncGenerationStatusError
from .models import GenerationRequest, GenerationResult, GenerationState, ImageModel
from .poller import GenerationPoller, SleepFunc
from .registry import STATUS_PROVIDER, create_provider, is_sync_generation_id

logger = get_logger(__name__)


class ImageGenerationOrchestrator:
    """图片生成编排器"""

    def __init__(
        self,
        config: ImageGenerationConfig,
        http_client: httpx.AsyncClient,
        sleep: SleepFunc = asyncio.sleep
    ):
        """
        初始化编排器

        Args:
            config: 图片生成配置（密钥、服务地址、轮询策略）
            http_client: 共享的HTTP客户端
            sleep: 轮询等待函数
        """
        self.config = config
        self.http_client = http_client
        self.sleep = sleep
        self._providers: Dict[ImageModel, BaseImageProvider] = {}
        self._status_provider: Optional[AsyncImageProvider] = None

    def _get_provider(self, model: ImageModel) -> BaseImageProvider:
        """获取（并缓存）模型对应的提供商实例"""
        if model not in self._providers:
            self._providers[model] = create_provider(model, self.config, self.http_client)
        return self._providers[model]

    def _get_status_provider(self) -> AsyncImageProvider:
        if self._status_provider is None:
            self._status_provider = STATUS_PROVIDER(self.config, self.http_client)
        return self._status_provider

    def create_poller(self) -> GenerationPoller:
        """创建使用当前配置的轮询器"""
        return GenerationPoller(
            self.get_status,
            interval=self.config.poll_interval,
            max_attempts=self.config.max_poll_attempts,
            sleep=self.sleep
        )

    async def submit(self, request: GenerationRequest) -> GenerationResult:
        """
        提交生成请求，不进行轮询

        同步家族返回completed结果，异步家族返回提供商的初始记录。

        Args:
            request: 生成请求

        Returns:
            GenerationResult: 提交结果
        """
        provider = self._get_provider(request.model)

        if isinstance(provider, SyncImageProvider):
            return await provider.generate_image(request)
        return await provider.submit(request)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        生成图片并等待最终结果

        Args:
            request: 生成请求

        Returns:
            GenerationResult: completed状态的结果

        Raises:
            ConfigurationError: 密钥未配置
            ProviderRequestError: 提交失败
            ProviderPollError: 最后一次状态查询失败
            GenerationFailedError: 提供商报告生成失败
            GenerationTimeoutError: 轮询超时
        """
        logger.info(
            log_messages.START_OPERATION,
            operation_name="图片生成",
            model=request.model.value,
            aspect_ratio=request.aspect_ratio.value
        )

        result = await self.submit(request)
        if result.state == GenerationState.COMPLETED:
            return result
        if result.state == GenerationState.FAILED:
            raise GenerationFailedError(result.failure_reason, generation_id=result.id)

        return await self.create_poller().poll(result.id)

    async def get_status(self, generation_id: str) -> GenerationResult:
        """
        查询生成状态（单次读取）

        Args:
            generation_id: 生成ID

        Returns:
            GenerationResult: 当前状态

        Raises:
            SyncGenerationStatusError: 同步提供商分配的ID，不发起任何网络请求
            ProviderPollError: 查询失败
        """
        if is_sync_generation_id(generation_id):
            raise SyncGenerationStatusError(
                f"Generation {generation_id} was completed immediately and does not support status checking"
            )
        return await self._get_status_provider().get_status(generation_id)
