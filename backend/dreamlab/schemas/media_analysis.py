"""
媒体分析相关的Pydantic数据模型
字段使用与前端一致的camelCase别名，同时接受snake_case
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dreamlab.core.analysis.models import AnalysisRequest, MediaType
from dreamlab.core.config import settings


class MediaAnalysisRequest(BaseModel):
    """媒体分析请求"""
    model_config = ConfigDict(populate_by_name=True)

    media_base64: Optional[str] = Field(
        None,
        alias="mediaBase64",
        max_length=settings.max_media_base64_length,
        description="媒体内容（data URL或base64），纯文字分析时为空"
    )
    media_type: MediaType = Field(default=MediaType.IMAGE, alias="mediaType", description="媒体类型")
    vision_text: Optional[str] = Field(None, alias="visionText", description="用户关注点或文字创意")

    def to_domain(self) -> AnalysisRequest:
        """
        转换为分析请求

        Raises:
            ValueError: 媒体内容和文字描述同时为空
        """
        return AnalysisRequest(
            media_type=self.media_type,
            media_base64=self.media_base64,
            vision_text=self.vision_text,
        )


class MediaAnalysisData(BaseModel):
    """媒体分析结果"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    style: str
    prompt: str
    key_tokens: List[str] = Field(default_factory=list, alias="keyTokens")
    creative_remixes: List[str] = Field(default_factory=list, alias="creativeRemixes")
    outpainting_prompts: List[str] = Field(default_factory=list, alias="outpaintingPrompts")
    animation_prompts: List[str] = Field(default_factory=list, alias="animationPrompts")
    music_prompts: List[str] = Field(default_factory=list, alias="musicPrompts")
    dialogue_prompts: List[str] = Field(default_factory=list, alias="dialoguePrompts")
    story_prompts: List[str] = Field(default_factory=list, alias="storyPrompts")
    is_mock: bool = Field(default=False, alias="isMock", description="是否为降级的示例结果")
