"""
图片生成业务处理器
调用编排器处理图片生成请求，并把生成异常转换为HTTP异常
"""

from typing import Dict, Any

from fastapi import HTTPException, status

from dreamlab.core.imggen.exceptions import (
    ConfigurationError,
    GenerationFailedError,
    GenerationTimeoutError,
    ImageGenerationError,
    ProviderError,
    SyncGenerationStatusError,
)
from dreamlab.core.imggen.models import GenerationResult
from dreamlab.core.imggen.orchestrator import ImageGenerationOrchestrator
from dreamlab.core.log_utils import get_logger
from dreamlab.schemas.image_generation import GenerationResultData, ImageGenerationRequest

logger = get_logger(__name__)


def to_http_exception(error: ImageGenerationError) -> HTTPException:
    """
    将图片生成异常映射为HTTP异常

    Args:
        error: 图片生成异常

    Returns:
        HTTPException: 对应状态码的HTTP异常
    """
    if isinstance(error, ConfigurationError):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    elif isinstance(error, ProviderError):
        status_code = error.status_code if error.status_code and error.status_code >= 400 \
            else status.HTTP_502_BAD_GATEWAY
    elif isinstance(error, GenerationFailedError):
        status_code = 422
    elif isinstance(error, GenerationTimeoutError):
        status_code = status.HTTP_504_GATEWAY_TIMEOUT
    elif isinstance(error, SyncGenerationStatusError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return HTTPException(status_code=status_code, detail=str(error))


class ImageGenerationHandler:
    """图片生成业务处理器"""

    def __init__(self, orchestrator: ImageGenerationOrchestrator):
        self.orchestrator = orchestrator

    @staticmethod
    def _serialize(result: GenerationResult) -> Dict[str, Any]:
        return GenerationResultData(**result.to_dict()).model_dump(mode="json", exclude_none=True)

    async def handle_generate_image(
        self,
        request: ImageGenerationRequest,
        wait: bool = False
    ) -> Dict[str, Any]:
        """
        处理图片生成请求

        Args:
            request: 生成请求
            wait: 是否在服务端轮询直到生成结束

        Returns:
            Dict[str, Any]: 生成结果

        Raises:
            HTTPException: 请求处理失败时抛出HTTP异常
        """
        try:
            generation_request = request.to_domain()
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        logger.info(
            "处理图片生成请求",
            operation="handle_generate_image",
            model=generation_request.model.value,
            aspect_ratio=generation_request.aspect_ratio.value,
            prompt_length=len(generation_request.prompt),
            wait=wait
        )

        try:
            if wait:
                result = await self.orchestrator.generate(generation_request)
            else:
                result = await self.orchestrator.submit(generation_request)
        except ImageGenerationError as e:
            logger.error(
                "图片生成请求处理失败",
                operation="handle_generate_image",
                error_code=e.code,
                error=str(e)
            )
            raise to_http_exception(e)

        return self._serialize(result)

    async def handle_get_status(self, generation_id: str) -> Dict[str, Any]:
        """
        处理生成状态查询

        Args:
            generation_id: 生成ID

        Returns:
            Dict[str, Any]: 当前生成状态

        Raises:
            HTTPException: 查询失败时抛出HTTP异常
        """
        try:
            result = await self.orchestrator.get_status(generation_id)
        except ImageGenerationError as e:
            logger.warning(
                "生成状态查询失败",
                operation="handle_get_status",
                generation_id=generation_id,
                error_code=e.code
            )
            raise to_http_exception(e)

        return self._serialize(result)
