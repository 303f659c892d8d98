"""
图片生成相关的Pydantic数据模型
用于API请求和响应的数据验证和序列化
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from dreamlab.core.imggen.models import (
    AspectRatio,
    GenerationRequest,
    GenerationState,
    ImageModel,
)


# ============================================================================
# 请求模型
# ============================================================================

class ImageGenerationRequest(BaseModel):
    """图片生成请求"""
    prompt: str = Field(..., min_length=1, description="提示词")
    aspect_ratio: AspectRatio = Field(default=AspectRatio.SQUARE, description="宽高比")
    model: ImageModel = Field(default=ImageModel.RAY_FLASH_2, description="模型标识")
    quality: Optional[str] = Field(
        None,
        description="图片质量，对所选模型无效的取值会被替换为该模型的默认值"
    )

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        """提示词去除首尾空白后不能为空"""
        v = v.strip()
        if not v:
            raise ValueError("提示词不能为空")
        return v

    def to_domain(self) -> GenerationRequest:
        """转换为编排器使用的生成请求"""
        return GenerationRequest(
            prompt=self.prompt,
            aspect_ratio=self.aspect_ratio,
            model=self.model,
            quality=self.quality,
        )


# ============================================================================
# 响应模型
# ============================================================================

class GenerationResultData(BaseModel):
    """生成结果"""
    id: str = Field(..., description="生成ID")
    state: GenerationState = Field(..., description="生成状态")
    created_at: str = Field(..., description="创建时间（ISO 8601）")
    url: Optional[str] = Field(None, description="图片地址，仅在completed状态下存在")
    thumbnail_url: Optional[str] = Field(None, description="缩略图地址")
    failure_reason: Optional[str] = Field(None, description="失败原因，仅在failed状态下存在")
    assets: Optional[Dict[str, Any]] = Field(None, description="提供商原生资源结构")
