"""
媒体分析Mock服务
提供固定的示例分析结果，用于开发环境或未配置分析模型时的降级
"""

from typing import Any, Dict, Optional

from dreamlab.core.analysis.models import AnalysisResult, MediaType
from dreamlab.core.log_utils import get_logger

logger = get_logger(__name__)


# 各媒体类型共用的创意提示词
BASE_ANALYSIS: Dict[str, Any] = {
    "creativeRemixes": [
        "Transform into medieval fantasy setting with magical elements replacing technological components in mystical environment.",
        "Reimagine as 1920s art deco style with geometric patterns and luxurious vintage aesthetic throughout composition.",
        "Convert to underwater scene with bioluminescent features and flowing aquatic elements creating ethereal atmosphere.",
    ],
    "outpaintingPrompts": [
        "Reveal vast surrounding environment with additional contextual elements extending beyond current boundaries of content.",
        "Expand to show broader narrative context with supporting characters and environmental details in background.",
        "Extend scope to include temporal elements showing progression and development of central theme.",
    ],
    "animationPrompts": [
        "Gentle rhythmic motion with subtle environmental changes and soft transitions creating peaceful flowing movement.",
        "Dynamic transformation sequence with dramatic lighting changes and particle effects building visual intensity.",
        "Cinematic camera movement revealing hidden details and creating immersive storytelling experience through motion.",
    ],
    "musicPrompts": [
        "Ethereal ambient soundscape with layered textures, evolving harmonies, and subtle rhythmic elements creating immersive atmospheric experience perfect for contemplation.",
        "Dynamic orchestral composition featuring dramatic crescendos, intricate melodies, and rich instrumentation that captures emotional depth and narrative complexity.",
        "Electronic fusion with synthesized textures, rhythmic patterns, and digital processing creating modern sonic interpretation of visual themes.",
    ],
    "dialoguePrompts": [
        "The essence of transformation unfolds",
        "Where reality meets imagination",
        "Beyond the realm of possibility",
    ],
    "storyPrompts": [
        "A simple discovery becomes the catalyst for extraordinary personal transformation and unexpected journey of growth.",
        "An intricate narrative exploring how seemingly unrelated elements connect across different dimensions of experience.",
        "A surreal adventure where boundaries between different realities blur creating infinite possibilities for exploration.",
    ],
}

# 按媒体类型区分的标题、风格、描述与关键词，"vision" 为带用户关注点时的版本
MEDIA_SAMPLES: Dict[MediaType, Dict[str, Dict[str, Any]]] = {
    MediaType.IMAGE: {
        "default": {
            "title": "Cybernetic Awakening",
            "style": "Futuristic Portrait",
            "prompt": "A young cyborg woman with platinum hair stands in ornate bathroom, synthetic skin glistening with moisture against warm ambient lighting.",
            "keyTokens": ["cybernetic portrait", "neon lighting", "futuristic aesthetic", "digital enhancement", "synthetic beauty", "technological fusion", "ethereal glow"],
        },
        "vision": {
            "title": "Vision Focused",
            "style": "Custom Analysis",
            "prompt": 'Analysis focused on your vision: "{vision_text}" revealing hidden depths and artistic elements within the composition through targeted examination.',
            "keyTokens": ["vision focused", "custom analysis", "targeted examination", "artistic elements", "hidden depths", "composition study", "creative interpretation"],
        },
    },
    MediaType.VIDEO: {
        "default": {
            "title": "Cinematic Flow",
            "style": "Moving Narrative",
            "prompt": "Dynamic sequence showing fluid camera movements through futuristic environments with dramatic lighting transitions and character interactions creating cinematic storytelling.",
            "keyTokens": ["cinematic flow", "camera movement", "lighting transitions", "dynamic sequence", "visual storytelling", "temporal narrative", "motion aesthetics"],
        },
        "vision": {
            "title": "Motion Vision",
            "style": "Dynamic Analysis",
            "prompt": 'Video analysis focused on your vision: "{vision_text}" capturing movement, transitions, and temporal elements within the dynamic composition.',
            "keyTokens": ["motion vision", "dynamic analysis", "temporal elements", "movement capture", "transition focus", "cinematic flow", "video interpretation"],
        },
    },
    MediaType.AUDIO: {
        "default": {
            "title": "Audio Landscape",
            "style": "Musical Journey",
            "prompt": "Rich layered soundscape featuring ethereal melodies, rhythmic percussion, and atmospheric textures creating immersive auditory experience with emotional depth.",
            "keyTokens": ["layered soundscape", "ethereal melodies", "rhythmic percussion", "atmospheric textures", "auditory experience", "emotional depth", "sonic composition"],
        },
        "vision": {
            "title": "Sonic Vision",
            "style": "Sound Analysis",
            "prompt": 'Audio analysis focused on your vision: "{vision_text}" translating sonic elements into visual concepts and creative interpretations.',
            "keyTokens": ["sonic vision", "sound analysis", "audio interpretation", "musical concepts", "rhythmic elements", "harmonic structure", "auditory aesthetics"],
        },
    },
}


class MockAnalysisService:
    """媒体分析Mock服务类"""

    def get_mock_analysis(
        self,
        media_type: MediaType,
        vision_text: Optional[str] = None
    ) -> AnalysisResult:
        """
        获取示例分析结果

        Args:
            media_type: 媒体类型
            vision_text: 用户关注点，存在时返回带关注点的版本

        Returns:
            AnalysisResult: 标记为Mock的分析结果
        """
        vision_text = (vision_text or "").strip()
        variant = "vision" if vision_text else "default"
        sample = dict(MEDIA_SAMPLES[MediaType(media_type)][variant])
        if vision_text:
            sample["prompt"] = sample["prompt"].replace("{vision_text}", vision_text)

        logger.info(
            "返回Mock分析结果",
            operation="mock_analysis",
            media_type=MediaType(media_type).value,
            variant=variant
        )
        return AnalysisResult.from_dict({**BASE_ANALYSIS, **sample}, is_mock=True)


# 全局Mock服务实例
mock_analysis_service = MockAnalysisService()
