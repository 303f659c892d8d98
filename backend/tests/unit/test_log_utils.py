"""
日志系统单元测试
遵循项目测试规范：快速执行，无外部依赖

测试 UnifiedLogger 的核心功能：模板格式化、已格式化字符串的处理以及结构化字段
"""

import pytest
import logging
from unittest.mock import patch

import httpx

from dreamlab.core.imggen.exceptions import ProviderRequestError
from dreamlab.core.imggen.models import GenerationRequest
from dreamlab.core.imggen.providers.openai_images import OpenAIImageProvider
from dreamlab.core.log_utils import UnifiedLogger, get_logger
from dreamlab.core.log_messages import LogMessages, log_messages
from utils.mock_utils import OPENAI_GENERATIONS_PATH


@pytest.mark.unit
@pytest.mark.logging
class TestUnifiedLogger:
    """UnifiedLogger 单元测试类"""

    def setup_method(self):
        """每个测试方法执行前的设置"""
        self.logger_name = "test_logger"
        self.unified_logger = UnifiedLogger(self.logger_name)

    def test_init(self):
        """测试 UnifiedLogger 初始化"""
        assert self.unified_logger.name == self.logger_name
        assert isinstance(self.unified_logger.logger, logging.Logger)
        assert self.unified_logger.logger.name == self.logger_name

    def test_info_with_simple_message(self):
        """测试记录简单消息（无格式化参数）"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            message = "简单的日志消息"
            self.unified_logger.info(message)

            mock_info.assert_called_once()
            call_args = mock_info.call_args

            assert call_args[0][0] == message
            assert call_args[1]['extra']['log_module'] == self.logger_name

    def test_info_with_formatted_dict(self):
        """测试已经通过 f-string 格式化且包含字典的消息不会被二次格式化"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            result = {"id": "gen-1", "state": "dreaming"}
            message = f"生成状态: {result}"

            self.unified_logger.info(message)

            mock_info.assert_called_once()
            assert "gen-1" in mock_info.call_args[0][0]

    def test_info_with_format_parameters(self):
        """测试使用格式化参数的消息"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info(
                log_messages.GENERATION_DISPATCH,
                provider="luma",
                model="ray-2"
            )

            call_args = mock_info.call_args
            assert call_args[0][0] == "提交图片生成请求: luma/ray-2"
            assert call_args[1]['extra']['provider'] == "luma"
            assert call_args[1]['extra']['model'] == "ray-2"

    def test_info_with_invalid_format(self):
        """测试格式化失败时使用原始消息"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            template = "操作 {operation_name} 完成"

            self.unified_logger.info(template, wrong_param="测试")

            assert mock_info.call_args[0][0] == template

    def test_reserved_record_keys_are_prefixed(self):
        """测试与LogRecord属性同名的字段加上前缀，不会导致日志记录失败"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info("提交完成", message="ok", filename="a.png", attempt=2)

            extra = mock_info.call_args[1]['extra']
            assert extra['ctx_message'] == "ok"
            assert extra['ctx_filename'] == "a.png"
            assert extra['attempt'] == 2
            assert 'message' not in extra

    def test_reserved_keys_reach_handlers(self, caplog):
        """测试带保留字段名的日志可以被真实的处理器记录"""
        logger = UnifiedLogger("dreamlab.test.reserved")

        with caplog.at_level(logging.INFO, logger="dreamlab.test.reserved"):
            logger.info("处理 {name}", name="gen-1")

        assert caplog.records[-1].getMessage() == "处理 gen-1"
        assert caplog.records[-1].ctx_name == "gen-1"

    def test_error_with_exception(self):
        """测试记录带异常的错误日志"""
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            test_exception = ValueError("测试异常")

            self.unified_logger.error("发生错误", exception=test_exception)

            call_args = mock_error.call_args
            assert call_args[0][0] == "发生错误"
            assert call_args[1]['extra']['exception_type'] == 'ValueError'
            assert call_args[1]['extra']['exception_message'] == '测试异常'
            assert call_args[1]['exc_info'] == test_exception

    def test_error_without_exception(self):
        """测试记录不带异常的错误日志"""
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            self.unified_logger.error("错误消息")

            assert mock_error.call_args[0][0] == "错误消息"
            assert 'exc_info' not in mock_error.call_args[1]

    def test_warning_with_parameters(self):
        """测试记录警告日志"""
        with patch.object(self.unified_logger.logger, 'warning') as mock_warning:
            self.unified_logger.warning(log_messages.POLL_TRANSIENT_ERROR, generation_id="gen-9")

            assert mock_warning.call_args[0][0] == "查询生成状态失败，稍后重试: gen-9"

    @patch('dreamlab.core.log_utils.settings')
    def test_debug_when_debug_enabled(self, mock_settings):
        """测试在调试模式开启时记录调试日志"""
        mock_settings.app_debug = True

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_called_once()

    @patch('dreamlab.core.log_utils.settings')
    def test_debug_when_debug_disabled(self, mock_settings):
        """测试在调试模式关闭时不记录调试日志"""
        mock_settings.app_debug = False

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_not_called()

    def test_critical_with_simple_message(self):
        """测试记录严重错误日志"""
        with patch.object(self.unified_logger.logger, 'critical') as mock_critical:
            self.unified_logger.critical("严重错误")

            assert mock_critical.call_args[0][0] == "严重错误"


@pytest.mark.unit
@pytest.mark.logging
class TestGetLogger:
    """测试 get_logger 工厂函数"""

    def test_get_logger_returns_unified_logger(self):
        """测试 get_logger 返回 UnifiedLogger 实例"""
        logger = get_logger("test_module")

        assert isinstance(logger, UnifiedLogger)
        assert logger.name == "test_module"

    def test_get_logger_caching(self):
        """测试 get_logger 的缓存机制"""
        assert get_logger("test_module") is get_logger("test_module")

    def test_get_logger_different_names(self):
        """测试不同名称返回不同的 logger 实例"""
        logger1 = get_logger("module1")
        logger2 = get_logger("module2")

        assert logger1 is not logger2
        assert logger1.name == "module1"
        assert logger2.name == "module2"


@pytest.mark.unit
@pytest.mark.logging
class TestLogMessages:
    """测试 LogMessages 类"""

    def test_format_message_multiple_params(self):
        """测试多参数消息格式化"""
        result = LogMessages.format_message(
            LogMessages.POLL_ATTEMPT,
            generation_id="gen-1",
            attempt=3,
            max_attempts=60
        )

        assert result == "查询生成状态: gen-1 (3/60)"

    def test_get_structured_data(self):
        """测试获取结构化数据"""
        data = LogMessages.get_structured_data(provider="openai", status_code=400)

        assert data == {"provider": "openai", "status_code": 400}


@pytest.mark.unit
@pytest.mark.logging
class TestCredentialSafety:
    """测试提供商密钥不会出现在日志中"""

    @pytest.mark.asyncio
    async def test_failed_request_logs_do_not_contain_key(self, generation_config, mock_transport, caplog):
        """测试提供商返回错误时日志中不包含密钥"""
        mock_transport.add("POST", OPENAI_GENERATIONS_PATH, httpx.Response(401, json={"error": {"message": "bad key"}}))
        provider = OpenAIImageProvider(generation_config, mock_transport.client())

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ProviderRequestError):
                await provider.generate_image(GenerationRequest(prompt="x", model="dall-e-3"))

        assert "sk-test-openai" not in caplog.text
        assert all("sk-test-openai" not in str(record.__dict__) for record in caplog.records)
        assert "sk-test-openai" not in repr(generation_config)
