"""
图片生成提供商基类
定义同步与异步两类提供商的统一接口以及共用的HTTP调用逻辑
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Tuple, Type

import httpx

from dreamlab.core.log_utils import get_logger
from dreamlab.core.log_messages import log_messages
from dreamlab.utils.json_utils import ResponseParser
from .config import ImageGenerationConfig
from .exceptions import ConfigurationError, ProviderError, ProviderRequestError
from .models import GenerationRequest, GenerationResult, ImageModel

logger = get_logger(__name__)


class BaseImageProvider(ABC):
    """图片生成提供商基类"""

    PROVIDER_NAME: ClassVar[str] = ""
    SUPPORTED_MODELS: ClassVar[Tuple[ImageModel, ...]] = ()
    # 从提供商错误响应中提取错误信息的字段路径，按优先级排列
    ERROR_FIELD_PATHS: ClassVar[Tuple[str, ...]] = ("error.message", "message")

    def __init__(self, config: ImageGenerationConfig, http_client: httpx.AsyncClient):
        """初始化图片生成提供商

        Args:
            config: 图片生成配置
            http_client: 共享的HTTP客户端
        """
        self.config = config
        self.http_client = http_client

    @property
    @abstractmethod
    def api_key(self) -> Optional[str]:
        """提供商密钥"""
        ...

    def _require_api_key(self) -> str:
        """获取密钥，未配置时在任何网络调用之前抛出配置错误"""
        api_key = self.api_key
        if not api_key:
            logger.error(
                log_messages.PROVIDER_CREDENTIAL_MISSING,
                operation="require_api_key",
                provider=self.PROVIDER_NAME
            )
            raise ConfigurationError(
                f"{self.PROVIDER_NAME} API key is not configured",
                provider=self.PROVIDER_NAME
            )
        return api_key

    def _build_headers(self) -> Dict[str, str]:
        """构建请求头"""
        return {
            "Authorization": f"Bearer {self._require_api_key()}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        url: str,
        error_class: Type[ProviderError] = ProviderRequestError,
        payload: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        发送HTTP请求并解析JSON响应

        Args:
            method: HTTP方法
            url: 请求地址
            error_class: 失败时抛出的异常类型
            payload: 请求体

        Returns:
            Dict[str, Any]: 响应JSON

        Raises:
            ConfigurationError: 密钥未配置
            ProviderError: 网络错误、非2xx响应或响应无法解析
        """
        headers = self._build_headers()

        try:
            response = await self.http_client.request(
                method,
                url,
                json=payload,
                headers=headers,
                timeout=self.config.request_timeout
            )
        except httpx.HTTPError as e:
            logger.error(
                "{provider} API网络请求失败",
                exception=e,
                operation="provider_request",
                provider=self.PROVIDER_NAME
            )
            raise error_class(
                f"{self.PROVIDER_NAME} API request failed: {type(e).__name__}",
                provider=self.PROVIDER_NAME
            ) from e

        if not response.is_success:
            raise self._build_http_error(response, error_class)

        try:
            data = response.json()
        except ValueError as e:
            raise error_class(
                f"{self.PROVIDER_NAME} API returned invalid JSON",
                provider=self.PROVIDER_NAME,
                status_code=response.status_code,
                raw_body=response.text
            ) from e

        if not isinstance(data, dict):
            raise error_class(
                f"{self.PROVIDER_NAME} API returned unexpected payload",
                provider=self.PROVIDER_NAME,
                status_code=response.status_code,
                raw_body=response.text
            )
        return data

    def _build_http_error(
        self,
        response: httpx.Response,
        error_class: Type[ProviderError]
    ) -> ProviderError:
        """根据非2xx响应构建异常，优先使用提供商响应中的错误信息"""
        raw_body = response.text
        detail = ResponseParser.extract_error_message(raw_body, self.ERROR_FIELD_PATHS)
        message = f"{self.PROVIDER_NAME} API error: {response.status_code}"
        if detail:
            message = f"{message} - {detail}"

        logger.error(
            log_messages.PROVIDER_HTTP_ERROR,
            operation="provider_request",
            provider=self.PROVIDER_NAME,
            status_code=response.status_code
        )
        return error_class(
            message,
            provider=self.PROVIDER_NAME,
            status_code=response.status_code,
            raw_body=raw_body
        )

    def supports_model(self, model: ImageModel) -> bool:
        """
        检查是否支持指定模型

        Args:
            model: 模型标识

        Returns:
            bool: 是否支持该模型
        """
        return model in self.SUPPORTED_MODELS


class SyncImageProvider(BaseImageProvider):
    """同步提供商：一次请求即返回最终图片"""

    # 同步提供商分配的生成ID前缀，用于识别无法查询状态的ID
    ID_PREFIX: ClassVar[str] = ""

    @abstractmethod
    async def generate_image(self, request: GenerationRequest) -> GenerationResult:
        """
        生成图片

        Args:
            request: 生成请求

        Returns:
            GenerationResult: completed状态且包含url的结果
        """
        ...


class AsyncImageProvider(BaseImageProvider):
    """异步提供商：提交任务后需要通过状态查询获取结果"""

    @abstractmethod
    async def submit(self, request: GenerationRequest) -> GenerationResult:
        """
        提交生成任务

        Args:
            request: 生成请求

        Returns:
            GenerationResult: 通常为pending或dreaming状态的结果
        """
        ...

    @abstractmethod
    async def get_status(self, generation_id: str) -> GenerationResult:
        """
        查询生成状态（单次读取，不轮询）

        Args:
            generation_id: 提供商分配的生成ID

        Returns:
            GenerationResult: 当前状态
        """
        ...
