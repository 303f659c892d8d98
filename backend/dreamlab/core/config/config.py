"""
应用配置管理模块
统一管理所有配置信息，包括环境变量和文件配置
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator, ConfigDict

from dreamlab.utils.config_utils import (
    get_workspace_path, get_config_path, parse_list_config
)


class Settings(BaseSettings):
    """应用配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_name: str = "Dreamlab"
    app_version: str = "1.0.0"
    app_debug: bool = False
    app_env: str = "development"

    # ==================== API配置 ====================
    api_v1_str: str = "/api/v1"
    project_name: str = "Dreamlab API"

    # ==================== 文件存储配置 ====================
    log_dir: str = "log"

    # 上传媒体以base64形式提交，限制解码前的长度
    max_media_base64_length: int = 27962028  # 约20MB原始文件

    # ==================== 日志配置 ====================
    log_level: str = "INFO"
    log_file: str = "backend.log"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_to_file: bool = True

    # ==================== 应用服务配置 ====================
    app_port: int = 8080
    app_host: str = "0.0.0.0"

    # ==================== CORS配置 ====================
    cors_origins: str = "*"

    # ==================== 图片生成提供商配置 ====================
    # 同步提供商（DALL-E 3 / GPT Image 1）
    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"

    # 异步提供商（Luma Dream Machine）
    luma_api_key: Optional[str] = None
    luma_base_url: str = "https://api.lumalabs.ai/dream-machine/v1"

    provider_request_timeout: float = 120.0

    # ==================== 轮询配置 ====================
    image_poll_interval: float = 5.0
    image_poll_max_attempts: int = 60

    # ==================== 媒体分析配置 ====================
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash-exp"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    analysis_temperature: float = 0.8
    analysis_max_output_tokens: int = 8192

    # 上游分析失败或未配置密钥时是否返回示例分析结果（演示模式）
    analysis_mock_fallback: bool = False

    # ==================== 验证器 ====================
    @field_validator("cors_origins")
    @classmethod
    def split_cors_origins(cls, value: str) -> List[str]:
        """将CORS origins字符串转换为列表"""
        return parse_list_config(value)

    @field_validator("image_poll_max_attempts")
    @classmethod
    def validate_poll_attempts(cls, value: int) -> int:
        """轮询次数至少为1"""
        if value < 1:
            raise ValueError("image_poll_max_attempts 必须大于0")
        return value

    # ==================== 计算属性 ====================
    @property
    def absolute_log_file(self) -> str:
        """获取绝对日志文件路径"""
        return str(get_workspace_path(self.log_dir) / self.log_file)

    model_config = ConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取应用配置实例"""
    # 环境变量文件加载由外部环境控制（Docker Compose、launch.json等）
    # 这里只返回配置实例，不主动加载环境文件
    return Settings()


# 全局配置实例
settings = get_settings()
