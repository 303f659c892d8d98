"""
JSON工具模块
提供统一的JSON处理函数
"""

import json
from typing import Dict, Any, Optional, Sequence


class ResponseParser:
    """响应解析器"""

    @staticmethod
    def parse_json_response(ai_response: str) -> Dict[str, Any]:
        """
        解析JSON格式的AI响应

        模型经常在JSON外包裹markdown代码块或附带说明文字，
        这里截取第一个 ``{`` 到最后一个 ``}`` 之间的内容再解析。

        Args:
            ai_response: AI响应内容

        Returns:
            Dict[str, Any]: 解析后的JSON数据

        Raises:
            ValueError: 解析失败时抛出
        """
        cleaned_response = (ai_response or "").strip()

        # 清理可能的markdown代码块
        cleaned_response = cleaned_response.replace("```json", "")
        if cleaned_response.endswith("```"):
            cleaned_response = cleaned_response[:-3]

        first_brace = cleaned_response.find("{")
        last_brace = cleaned_response.rfind("}")
        if first_brace == -1 or last_brace == -1 or first_brace >= last_brace:
            raise ValueError("No valid JSON object found in response")

        try:
            data = json.loads(cleaned_response[first_brace:last_brace + 1])
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse AI response as JSON: {str(e)}") from e

        if not isinstance(data, dict):
            raise ValueError("AI response JSON is not an object")
        return data

    @staticmethod
    def extract_error_message(
        error_text: str,
        field_paths: Sequence[str] = ("error.message", "detail", "message"),
    ) -> Optional[str]:
        """
        从错误响应体中提取错误消息

        先尝试按JSON解析并依次查找 ``field_paths`` 中的字段（支持 ``a.b`` 形式的嵌套路径），
        解析失败或字段都不存在时返回原始文本。

        Args:
            error_text: 原始响应文本
            field_paths: 候选字段路径，按优先级排列

        Returns:
            Optional[str]: 错误消息，原始文本为空时返回None
        """
        if not error_text:
            return None

        try:
            data = json.loads(error_text)
        except (json.JSONDecodeError, TypeError):
            return error_text

        if not isinstance(data, dict):
            return error_text

        for path in field_paths:
            value: Any = data
            for key in path.split("."):
                if not isinstance(value, dict):
                    value = None
                    break
                value = value.get(key)
            if value:
                return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)

        return error_text
