"""
媒体分析数据模型
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# data URL前缀，如 "data:image/png;base64,"
DATA_URL_PATTERN = re.compile(r"^data:([^;]+);base64,")


class MediaType(str, Enum):
    """媒体类型"""
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"

    @property
    def default_mime_type(self) -> str:
        """无法从data URL获取时使用的MIME类型"""
        return {
            MediaType.IMAGE: "image/jpeg",
            MediaType.VIDEO: "video/mp4",
            MediaType.AUDIO: "audio/mpeg",
        }[self]


@dataclass
class AnalysisRequest:
    """
    媒体分析请求

    Attributes:
        media_type: 媒体类型
        media_base64: 媒体内容，data URL或裸base64字符串（纯文字分析时为空）
        vision_text: 用户关注点；没有媒体时作为文字创意进行分析
    """
    media_type: MediaType = MediaType.IMAGE
    media_base64: Optional[str] = field(default=None, repr=False)
    vision_text: Optional[str] = None

    def __post_init__(self):
        self.media_type = MediaType(self.media_type)
        self.media_base64 = self.media_base64 or None
        self.vision_text = (self.vision_text or "").strip() or None

        if not self.media_base64 and not self.vision_text:
            raise ValueError("媒体内容和文字描述不能同时为空")

    @property
    def is_text_only(self) -> bool:
        """是否为纯文字创意分析"""
        return not self.media_base64

    @property
    def mime_type(self) -> str:
        """媒体MIME类型，优先从data URL前缀中获取"""
        match = DATA_URL_PATTERN.match(self.media_base64 or "")
        if match:
            return match.group(1)
        return self.media_type.default_mime_type

    @property
    def media_data(self) -> str:
        """去掉data URL前缀后的base64数据"""
        media = self.media_base64 or ""
        if media.startswith("data:") and "," in media:
            return media.split(",", 1)[1]
        return media


@dataclass
class AnalysisResult:
    """媒体分析结果"""

    # 字段名到序列化键名的映射
    FIELD_ALIASES = {
        "title": "title",
        "style": "style",
        "prompt": "prompt",
        "key_tokens": "keyTokens",
        "creative_remixes": "creativeRemixes",
        "outpainting_prompts": "outpaintingPrompts",
        "animation_prompts": "animationPrompts",
        "music_prompts": "musicPrompts",
        "dialogue_prompts": "dialoguePrompts",
        "story_prompts": "storyPrompts",
    }

    title: str
    style: str
    prompt: str
    key_tokens: List[str] = field(default_factory=list)
    creative_remixes: List[str] = field(default_factory=list)
    outpainting_prompts: List[str] = field(default_factory=list)
    animation_prompts: List[str] = field(default_factory=list)
    music_prompts: List[str] = field(default_factory=list)
    dialogue_prompts: List[str] = field(default_factory=list)
    story_prompts: List[str] = field(default_factory=list)
    is_mock: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any], is_mock: bool = False) -> "AnalysisResult":
        """
        从模型返回的JSON创建结果，同时接受camelCase与snake_case键名

        Raises:
            ValueError: 缺少标题、风格或描述
        """
        values: Dict[str, Any] = {}
        for field_name, alias in cls.FIELD_ALIASES.items():
            value = data.get(alias, data.get(field_name))
            if field_name in ("title", "style", "prompt"):
                if not isinstance(value, str) or not value.strip():
                    raise ValueError(f"分析结果缺少字段: {alias}")
                values[field_name] = value.strip()
            else:
                values[field_name] = [str(item) for item in value] if isinstance(value, list) else []
        return cls(is_mock=is_mock, **values)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，使用camelCase键名"""
        data = {alias: getattr(self, name) for name, alias in self.FIELD_ALIASES.items()}
        data["isMock"] = self.is_mock
        return data
