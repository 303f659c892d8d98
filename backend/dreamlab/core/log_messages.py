"""
日志消息模板模块
统一管理所有业务日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    START_OPERATION = "开始执行操作: {operation_name}"
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"
    OPERATION_FAILED = "操作执行失败: {operation_name}"

    # ==================== 图片生成相关 ====================
    GENERATION_DISPATCH = "提交图片生成请求: {provider}/{model}"
    GENERATION_COMPLETED = "图片生成完成: {generation_id}"
    GENERATION_FAILED = "图片生成失败: {generation_id}"
    PROVIDER_HTTP_ERROR = "{provider} API请求失败: {status_code}"
    PROVIDER_CREDENTIAL_MISSING = "{provider} API密钥未配置"

    # ==================== 轮询相关 ====================
    POLL_ATTEMPT = "查询生成状态: {generation_id} ({attempt}/{max_attempts})"
    POLL_TRANSIENT_ERROR = "查询生成状态失败，稍后重试: {generation_id}"
    POLL_TIMEOUT = "图片生成轮询超时: {generation_id}"

    # ==================== 媒体分析相关 ====================
    ANALYSIS_START = "开始媒体分析: {media_type}"
    ANALYSIS_SUCCESS = "媒体分析完成: {media_type}"
    ANALYSIS_MOCK_FALLBACK = "媒体分析降级为示例结果: {reason}"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
