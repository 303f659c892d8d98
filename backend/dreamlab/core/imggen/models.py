"""
图片生成数据模型
定义图片生成相关的枚举、请求与结果数据结构
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any

from dreamlab.utils.datetime_utils import get_current_iso_string


class ImageModel(str, Enum):
    """图片生成模型标识（提供商+变体）"""
    RAY_1_6 = "ray-1-6"
    RAY_2 = "ray-2"
    RAY_FLASH_2 = "ray-flash-2"
    DALL_E_3 = "dall-e-3"
    GPT_IMAGE_1 = "gpt-image-1"


class AspectRatio(str, Enum):
    """支持的宽高比"""
    SQUARE = "1:1"
    LANDSCAPE_16_9 = "16:9"
    PORTRAIT_9_16 = "9:16"
    LANDSCAPE_4_3 = "4:3"
    PORTRAIT_3_4 = "3:4"
    ULTRAWIDE_21_9 = "21:9"
    ULTRATALL_9_21 = "9:21"


class ImageQuality(str, Enum):
    """归一化的图片质量，具体取值是否有效取决于模型"""
    STANDARD = "standard"
    HD = "hd"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    AUTO = "auto"


class GenerationState(str, Enum):
    """生成状态，只会单调前进：pending → dreaming → completed | failed"""
    PENDING = "pending"
    DREAMING = "dreaming"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """是否为终止状态"""
        return self in (GenerationState.COMPLETED, GenerationState.FAILED)


DEFAULT_MODEL = ImageModel.RAY_FLASH_2
DEFAULT_ASPECT_RATIO = AspectRatio.SQUARE
DEFAULT_FAILURE_REASON = "Generation failed without specific reason"


@dataclass
class GenerationRequest:
    """
    与提供商无关的图片生成请求

    Attributes:
        prompt: 提示词，去除首尾空白后不能为空
        aspect_ratio: 宽高比
        model: 模型标识
        quality: 归一化质量，未知取值视为未指定，由适配器替换为提供商默认值
    """
    prompt: str
    aspect_ratio: AspectRatio = DEFAULT_ASPECT_RATIO
    model: ImageModel = DEFAULT_MODEL
    quality: Optional[ImageQuality] = None

    def __post_init__(self):
        self.prompt = (self.prompt or "").strip()
        if not self.prompt:
            raise ValueError("提示词不能为空")

        self.model = ImageModel(self.model) if self.model else DEFAULT_MODEL
        self.aspect_ratio = AspectRatio(self.aspect_ratio) if self.aspect_ratio else DEFAULT_ASPECT_RATIO

        if self.quality is not None and not isinstance(self.quality, ImageQuality):
            try:
                self.quality = ImageQuality(self.quality)
            except ValueError:
                self.quality = None


@dataclass
class GenerationResult:
    """
    归一化的图片生成结果

    Attributes:
        id: 生成ID（同步提供商由适配器分配）
        state: 生成状态
        created_at: 创建时间（ISO 8601）
        url: 图片地址，仅在completed状态下存在
        thumbnail_url: 缩略图地址（提供商返回时）
        failure_reason: 失败原因，仅在failed状态下存在
        assets: 提供商原生的资源结构，如 ``{"image": url}``
    """
    id: str
    state: GenerationState
    created_at: str = field(default_factory=get_current_iso_string)
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    failure_reason: Optional[str] = None
    assets: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        self.state = GenerationState(self.state)
        if self.state == GenerationState.COMPLETED and not self.url:
            raise ValueError("completed状态的生成结果必须包含url")
        if self.state != GenerationState.COMPLETED:
            self.url = None
        if self.state == GenerationState.FAILED:
            self.failure_reason = self.failure_reason or DEFAULT_FAILURE_REASON
        else:
            self.failure_reason = None

    @property
    def is_terminal(self) -> bool:
        """是否已到达终止状态"""
        return self.state.is_terminal

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，省略为空的可选字段"""
        data: Dict[str, Any] = {
            "id": self.id,
            "state": self.state.value,
            "created_at": self.created_at,
        }
        for key in ("url", "thumbnail_url", "failure_reason", "assets"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationResult":
        """从字典创建结果对象（用于跨HTTP边界的客户端）"""
        assets = data.get("assets") or None
        state = GenerationState(data.get("state"))
        url = data.get("url")
        if state == GenerationState.COMPLETED and isinstance(assets, dict):
            url = assets.get("image") or url
        return cls(
            id=str(data["id"]),
            state=state,
            created_at=data.get("created_at") or get_current_iso_string(),
            url=url,
            thumbnail_url=data.get("thumbnail_url"),
            failure_reason=data.get("failure_reason"),
            assets=assets,
        )
