"""
通用工具模块包
提供项目通用的工具函数和辅助类
"""

from .config_utils import (
    get_project_root,
    get_workspace_path,
    get_config_path,
    parse_list_config
)

from .id_utils import (
    generate_random_base36,
    generate_id_with_prefix
)

from .datetime_utils import (
    get_current_timestamp_ms,
    get_current_iso_string,
    format_duration
)

from .json_utils import (
    ResponseParser
)

__all__ = [
    # config_utils
    'get_project_root', 'get_workspace_path', 'get_config_path',
    'parse_list_config',

    # id_utils
    'generate_random_base36', 'generate_id_with_prefix',

    # datetime_utils
    'get_current_timestamp_ms', 'get_current_iso_string',
    'format_duration',

    # json_utils
    'ResponseParser',
]
