"""
Prompt模板管理器
负责加载、渲染和管理所有AI交互的提示词模板

模板按类别存放在本目录的子目录中（``<category>/<name>.yml``），
模板内容使用Jinja2语法，可以通过 ``{% include %}`` 引用同目录下的片段文件。
"""

from typing import Dict, Any, Optional
from pathlib import Path

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from dreamlab.core.config import settings
from dreamlab.core.log_utils import get_logger

# 获取日志记录器
logger = get_logger(__name__)


class PromptManager:
    """Prompt模板管理器"""

    def __init__(self, prompts_dir: Optional[Path] = None):
        """初始化prompt管理器

        Args:
            prompts_dir: 模板根目录，默认为本模块所在目录
        """
        self.prompts_dir = Path(prompts_dir) if prompts_dir else Path(__file__).parent
        self.env = Environment(
            loader=FileSystemLoader(str(self.prompts_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined
        )
        self._templates_cache: Dict[str, Dict[str, Any]] = {}
        self._load_all_templates()

    def _load_all_templates(self) -> None:
        """加载所有模板文件，单个文件解析失败时跳过该文件"""
        for category_dir in self.prompts_dir.iterdir():
            if not category_dir.is_dir() or category_dir.name.startswith('__'):
                continue

            category_name = category_dir.name
            self._templates_cache[category_name] = {}

            for template_file in category_dir.glob('*.yml'):
                try:
                    with open(template_file, 'r', encoding='utf-8') as f:
                        template_data = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    logger.error(
                        "加载模板文件失败: {template_file}",
                        exception=e,
                        operation="load_template_error",
                        template_file=str(template_file)
                    )
                    continue
                self._templates_cache[category_name][template_file.stem] = template_data

        logger.info(
            "Prompt模板加载完成",
            operation="prompt_templates_loaded",
            categories=list(self._templates_cache.keys())
        )

    def get_template(self, category: str, template_name: str) -> Optional[Dict[str, Any]]:
        """获取指定模板"""
        return self._templates_cache.get(category, {}).get(template_name)

    def render_user_prompt(self, category: str, template_name: str, **kwargs: Any) -> str:
        """渲染用户提示词"""
        template_data = self.get_template(category, template_name)
        if not template_data:
            raise ValueError(f"模板不存在: {category}/{template_name}")

        user_prompt = template_data.get('user_prompt', '')
        if not user_prompt:
            raise ValueError(f"模板中未找到user_prompt: {category}/{template_name}")

        return self._render_template(user_prompt, **kwargs)

    def get_template_config(self, category: str, template_name: str) -> Dict[str, Any]:
        """获取模板配置信息，未在模板中声明的生成参数使用应用配置"""
        template_data = self.get_template(category, template_name) or {}

        return {
            'temperature': template_data.get('temperature', settings.analysis_temperature),
            'max_tokens': template_data.get('max_tokens', settings.analysis_max_output_tokens),
            'description': template_data.get('description', ''),
            'version': template_data.get('version', '1.0')
        }

    def _render_template(self, template_str: str, **kwargs: Any) -> str:
        """渲染模板字符串"""
        template = self.env.from_string(template_str)
        return template.render(**kwargs).strip()

    def list_templates(self) -> Dict[str, list]:
        """列出所有可用的模板"""
        return {
            category: list(templates.keys())
            for category, templates in self._templates_cache.items()
        }


# 全局prompt管理器实例
prompt_manager = PromptManager()


def get_prompt_manager() -> PromptManager:
    """获取prompt管理器实例"""
    return prompt_manager
