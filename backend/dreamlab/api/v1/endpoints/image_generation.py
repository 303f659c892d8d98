"""
图片生成API端点
提供图片生成和生成状态查询的API接口
"""

from fastapi import APIRouter, Depends, Query

from dreamlab.api.deps import get_orchestrator
from dreamlab.core.imggen.orchestrator import ImageGenerationOrchestrator
from dreamlab.schemas.common import StandardResponse
from dreamlab.schemas.image_generation import ImageGenerationRequest
from dreamlab.services.image.image_generation_handler import ImageGenerationHandler

router = APIRouter(tags=["图片生成"])


@router.post(
    "",
    response_model=StandardResponse,
    summary="生成图片",
    description="提交图片生成请求。同步模型直接返回图片，异步模型返回生成ID，需要轮询状态接口"
)
async def generate_image(
    request: ImageGenerationRequest,
    wait: bool = Query(False, description="是否在服务端轮询直到生成结束"),
    orchestrator: ImageGenerationOrchestrator = Depends(get_orchestrator)
) -> StandardResponse:
    """
    生成图片

    Args:
        request: 生成请求
        wait: 为True时对异步模型在服务端轮询，直接返回最终结果
        orchestrator: 图片生成编排器

    Returns:
        StandardResponse: 包含生成结果的响应
    """
    handler = ImageGenerationHandler(orchestrator)
    data = await handler.handle_generate_image(request, wait=wait)

    return StandardResponse(
        status="success",
        message="图片生成请求已提交" if data["state"] != "completed" else "图片生成完成",
        data=data
    )


@router.get(
    "/{generation_id}",
    response_model=StandardResponse,
    summary="查询生成状态",
    description="查询异步模型的生成状态，同步模型的生成ID不支持查询"
)
async def get_generation_status(
    generation_id: str,
    orchestrator: ImageGenerationOrchestrator = Depends(get_orchestrator)
) -> StandardResponse:
    """
    查询生成状态

    Args:
        generation_id: 生成ID
        orchestrator: 图片生成编排器

    Returns:
        StandardResponse: 包含当前状态的响应
    """
    handler = ImageGenerationHandler(orchestrator)
    data = await handler.handle_get_status(generation_id)

    return StandardResponse(
        status="success",
        message="查询成功",
        data=data
    )
