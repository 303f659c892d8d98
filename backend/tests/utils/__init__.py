"""
测试工具包
提供统一的测试工具和辅助函数
"""

from .mock_utils import MockBuilder, ProviderMockTransport, RecordingSleep

__all__ = [
    'MockBuilder',
    'ProviderMockTransport',
    'RecordingSleep'
]
