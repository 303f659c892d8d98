"""
工具函数单元测试
"""

import re

import pytest

from dreamlab.utils.config_utils import parse_list_config
from dreamlab.utils.datetime_utils import format_duration
from dreamlab.utils.id_utils import generate_id_with_prefix, generate_random_base36
from dreamlab.utils.json_utils import ResponseParser


@pytest.mark.unit
@pytest.mark.utils
class TestIdUtils:
    """ID生成测试类"""

    def test_prefixed_id_format(self):
        """测试带前缀ID的格式"""
        generation_id = generate_id_with_prefix("openai")

        assert re.fullmatch(r"openai_\d{13}_[0-9a-z]{9}", generation_id)

    def test_ids_are_unique(self):
        """测试连续生成的ID不重复"""
        ids = {generate_id_with_prefix("openai") for _ in range(200)}

        assert len(ids) == 200

    def test_random_length(self):
        """测试随机串长度"""
        assert len(generate_random_base36(4)) == 4
        with pytest.raises(ValueError):
            generate_random_base36(0)


@pytest.mark.unit
@pytest.mark.utils
class TestFormatDuration:
    """持续时间格式化测试类"""

    @pytest.mark.parametrize("seconds, expected", [
        (300, "5 minutes"),
        (60, "1 minute"),
        (90, "90 seconds"),
        (7.5, "7.5 seconds"),
        (0, "0 seconds"),
    ])
    def test_format_duration(self, seconds, expected):
        """测试持续时间描述"""
        assert format_duration(seconds) == expected


@pytest.mark.unit
@pytest.mark.utils
class TestResponseParser:
    """响应解析测试类"""

    def test_parse_markdown_wrapped_json(self):
        """测试解析markdown代码块包裹的JSON"""
        text = 'Here you go:\n```json\n{"title": "Neon Dusk", "keyTokens": ["a"]}\n```'

        assert ResponseParser.parse_json_response(text) == {"title": "Neon Dusk", "keyTokens": ["a"]}

    @pytest.mark.parametrize("text", ["", "no json here", "{broken", '["a", "b"]'])
    def test_parse_invalid(self, text):
        """测试无法解析的响应"""
        with pytest.raises(ValueError):
            ResponseParser.parse_json_response(text)

    def test_extract_nested_error_message(self):
        """测试按嵌套路径提取错误消息"""
        body = '{"error": {"message": "Billing hard limit reached", "type": "billing"}}'

        assert ResponseParser.extract_error_message(body) == "Billing hard limit reached"

    def test_extract_respects_field_order(self):
        """测试按字段优先级提取错误消息"""
        body = '{"message": "generic", "detail": "specific"}'

        assert ResponseParser.extract_error_message(body, ("detail", "message")) == "specific"

    def test_extract_structured_detail(self):
        """测试非字符串的错误字段被序列化"""
        body = '{"detail": [{"loc": ["body", "prompt"], "msg": "field required"}]}'

        message = ResponseParser.extract_error_message(body, ("detail",))

        assert "field required" in message

    def test_extract_falls_back_to_raw_text(self):
        """测试无法解析或没有匹配字段时返回原始文本"""
        assert ResponseParser.extract_error_message("Bad Gateway") == "Bad Gateway"
        assert ResponseParser.extract_error_message('{"code": 1}') == '{"code": 1}'
        assert ResponseParser.extract_error_message("") is None


@pytest.mark.unit
@pytest.mark.utils
class TestConfigUtils:
    """配置工具测试类"""

    def test_parse_list_config(self):
        """测试解析逗号分隔的配置"""
        assert parse_list_config("http://a.test, http://b.test ,") == ["http://a.test", "http://b.test"]
        assert parse_list_config("") == []
