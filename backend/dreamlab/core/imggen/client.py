"""
远程图片生成客户端
通过本服务的HTTP接口提交生成请求，并对异步模型在客户端侧轮询状态
"""

import asyncio
from typing import Any, Dict, Optional, Type

import httpx

from dreamlab.core.log_utils import get_logger
from dreamlab.utils.json_utils import ResponseParser
from .exceptions import (
    ConfigurationError,
    ProviderError,
    ProviderPollError,
    ProviderRequestError,
    SyncGenerationStatusError,
)
from .models import GenerationRequest, GenerationResult, GenerationState
from .poller import DEFAULT_MAX_ATTEMPTS, DEFAULT_POLL_INTERVAL, GenerationPoller, SleepFunc
from .registry import is_sync_generation_id, is_sync_model

logger = get_logger(__name__)


class RemoteGenerationClient:
    """远程图片生成客户端"""

    PROVIDER_NAME = "dreamlab"
    ERROR_FIELD_PATHS = ("detail", "message", "error.message")
    GENERATE_PATH = "/generate-image"

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        sleep: SleepFunc = asyncio.sleep,
        timeout: float = 120.0
    ):
        """
        初始化客户端

        Args:
            base_url: 服务API地址，如 "http://localhost:8080/api/v1"
            http_client: HTTP客户端
            api_key: 访问服务的凭证（可选）
            poll_interval: 轮询间隔（秒）
            max_attempts: 最大轮询次数
            sleep: 等待函数
            timeout: 单次请求超时（秒）
        """
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.api_key = api_key
        self.timeout = timeout
        self.poller = GenerationPoller(
            self.get_status,
            interval=poll_interval,
            max_attempts=max_attempts,
            sleep=sleep
        )

    def _build_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _request(
        self,
        method: str,
        url: str,
        error_class: Type[ProviderError],
        payload: Optional[Dict[str, Any]] = None
    ) -> GenerationResult:
        """发送请求并把响应解包为生成结果"""
        try:
            response = await self.http_client.request(
                method,
                url,
                json=payload,
                headers=self._build_headers(),
                timeout=self.timeout
            )
        except httpx.HTTPError as e:
            raise error_class(
                f"Image generation service request failed: {type(e).__name__}",
                provider=self.PROVIDER_NAME
            ) from e

        if not response.is_success:
            detail = ResponseParser.extract_error_message(response.text, self.ERROR_FIELD_PATHS)
            # 服务端把配置错误映射为500，客户端同样视为不可重试
            if response.status_code == httpx.codes.INTERNAL_SERVER_ERROR:
                raise ConfigurationError(
                    detail or "Image generation service is not configured",
                    provider=self.PROVIDER_NAME
                )
            raise error_class(
                detail or f"Image generation service error: {response.status_code}",
                provider=self.PROVIDER_NAME,
                status_code=response.status_code,
                raw_body=response.text
            )

        try:
            body = response.json()
            # 服务端使用 {status, message, data} 标准响应包装
            data = body.get("data", body) if isinstance(body, dict) else None
            return GenerationResult.from_dict(data)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise error_class(
                "Image generation service returned an unexpected payload",
                provider=self.PROVIDER_NAME,
                status_code=response.status_code,
                raw_body=response.text
            ) from e

    async def submit(self, request: GenerationRequest) -> GenerationResult:
        """提交生成请求，不轮询"""
        payload = {
            "prompt": request.prompt,
            "aspect_ratio": request.aspect_ratio.value,
            "model": request.model.value,
        }
        if request.quality is not None:
            payload["quality"] = request.quality.value

        return await self._request(
            "POST",
            f"{self.base_url}{self.GENERATE_PATH}",
            ProviderRequestError,
            payload
        )

    async def get_status(self, generation_id: str) -> GenerationResult:
        """
        查询生成状态（单次读取）

        Raises:
            SyncGenerationStatusError: 同步模型的生成ID，不发起任何网络请求
            ConfigurationError: 服务端未配置提供商密钥
            ProviderPollError: 查询失败
        """
        if is_sync_generation_id(generation_id):
            raise SyncGenerationStatusError(
                f"Generation {generation_id} was completed immediately and does not support status checking"
            )
        return await self._request(
            "GET",
            f"{self.base_url}{self.GENERATE_PATH}/{generation_id}",
            ProviderPollError
        )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        生成图片并等待最终结果

        同步模型的结果必须已完成；异步模型通过状态接口轮询。

        Raises:
            ConfigurationError: 服务端未配置提供商密钥
            ProviderRequestError: 提交失败或同步模型未立即完成
            GenerationFailedError: 生成失败
            GenerationTimeoutError: 轮询超时
        """
        result = await self.submit(request)

        if is_sync_model(request.model):
            if result.state != GenerationState.COMPLETED:
                raise ProviderRequestError(
                    f"Synchronous model {request.model.value} did not complete immediately",
                    provider=self.PROVIDER_NAME
                )
            return result

        if result.state == GenerationState.COMPLETED:
            return result

        logger.info(
            "开始客户端轮询: {generation_id}",
            operation="remote_generate",
            generation_id=result.id,
            model=request.model.value
        )
        return await self.poller.poll(result.id)
