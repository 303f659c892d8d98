"""
图片生成异常定义
定义图片生成模块中使用的所有异常类型，调用方按类型而不是消息文本区分错误
"""

from typing import Any, Dict, Optional


class ImageGenerationError(Exception):
    """
    图片生成基础异常

    所有图片生成相关异常的基类。

    Attributes:
        message: 错误消息
        code: 错误码
        details: 错误详情
    """

    code = "IMAGE_GENERATION_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        # 未指定时使用子类声明的默认错误码
        self.code = code or type(self).code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ImageGenerationError):
    """配置错误（如缺少提供商密钥），在任何网络调用之前抛出，不应重试"""

    code = "CONFIG_ERROR"

    def __init__(self, message: str, provider: Optional[str] = None) -> None:
        super().__init__(message, details={"provider": provider} if provider else None)
        self.provider = provider


class ProviderError(ImageGenerationError):
    """
    提供商HTTP错误基类

    Attributes:
        provider: 提供商名称
        status_code: HTTP状态码（网络错误时为None）
        raw_body: 原始响应体
    """

    code = "PROVIDER_ERROR"

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        raw_body: Optional[str] = None
    ) -> None:
        super().__init__(message, details={
            "provider": provider,
            "status_code": status_code,
        })
        self.provider = provider
        self.status_code = status_code
        self.raw_body = raw_body


class ProviderRequestError(ProviderError):
    """提交生成请求时提供商返回非2xx响应或无法解析的响应"""

    code = "PROVIDER_REQUEST_ERROR"


class ProviderPollError(ProviderError):
    """查询生成状态时提供商返回非2xx响应、网络错误或无法解析的响应"""

    code = "PROVIDER_POLL_ERROR"


class GenerationFailedError(ImageGenerationError):
    """提供商明确报告生成失败，消息为提供商给出的失败原因原文"""

    code = "GENERATION_FAILED"

    def __init__(self, failure_reason: str, generation_id: Optional[str] = None) -> None:
        super().__init__(failure_reason, details={"generation_id": generation_id})
        self.failure_reason = failure_reason
        self.generation_id = generation_id


class GenerationTimeoutError(ImageGenerationError, TimeoutError):
    """轮询次数耗尽仍未到达终止状态"""

    code = "GENERATION_TIMEOUT"

    def __init__(
        self,
        message: str,
        generation_id: Optional[str] = None,
        attempts: int = 0
    ) -> None:
        super().__init__(message, details={
            "generation_id": generation_id,
            "attempts": attempts,
        })
        self.generation_id = generation_id
        self.attempts = attempts


class SyncGenerationStatusError(ImageGenerationError, ValueError):
    """同步提供商的生成结果在创建时即已完成，不支持状态查询"""

    code = "SYNC_GENERATION_STATUS"


__all__ = [
    'ImageGenerationError',
    'ConfigurationError',
    'ProviderError',
    'ProviderRequestError',
    'ProviderPollError',
    'GenerationFailedError',
    'GenerationTimeoutError',
    'SyncGenerationStatusError',
]
