"""
日志系统单元测试
遵循项目测试规范：快速执行，无外部依赖
"""

import pytest
import logging
from unittest.mock import patch

from postcard.core.log_utils import UnifiedLogger, get_logger
from postcard.core.log_messages import LogMessages, log_messages


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

    def test_info_with_simple_message(self):
        """测试记录简单消息（无格式化参数）"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info("简单的日志消息")

            mock_info.assert_called_once()
            call_args = mock_info.call_args
            assert call_args[0][0] == "简单的日志消息"
            assert call_args[1]['extra']['log_module'] == self.logger_name

    def test_info_with_postcard_template(self):
        """测试业务模板的格式化和结构化数据"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info(log_messages.POSTCARD_START, latitude=22.5, longitude=114.1)

            call_args = mock_info.call_args
            assert call_args[0][0] == "打卡图片生成开始: 位置 22.5, 114.1"
            assert call_args[1]['extra']['latitude'] == 22.5
            assert call_args[1]['extra']['longitude'] == 114.1

    def test_info_with_formatted_dict(self):
        """测试已经通过 f-string 格式化的消息（包含字典）不会再次格式化"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            result = {"path": "public/postcard_1_abc.png"}
            message = f"上传完成: {result}"

            self.unified_logger.info(message)

            assert mock_info.call_args[0][0] == message

    def test_info_with_invalid_format(self):
        """测试格式化失败时使用原始模板"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            template = "明信片图片已上传: {path}"

            self.unified_logger.info(template, wrong_param="测试")

            assert mock_info.call_args[0][0] == template

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

            assert 'exc_info' not in mock_error.call_args[1]

    def test_warning_with_simple_message(self):
        """测试记录警告日志"""
        with patch.object(self.unified_logger.logger, 'warning') as mock_warning:
            self.unified_logger.warning("警告消息")

            mock_warning.assert_called_once()
            assert mock_warning.call_args[0][0] == "警告消息"

    @patch('postcard.core.log_utils.settings')
    def test_debug_when_debug_enabled(self, mock_settings):
        """测试在调试模式开启时记录调试日志"""
        mock_settings.app_debug = True

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_called_once()

    @patch('postcard.core.log_utils.settings')
    def test_debug_when_debug_disabled(self, mock_settings):
        """测试在调试模式关闭时不记录调试日志"""
        mock_settings.app_debug = False

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_not_called()


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
        assert get_logger("module1") is not get_logger("module2")


@pytest.mark.unit
@pytest.mark.logging
class TestLogMessages:
    """测试 LogMessages 类"""

    def test_format_message(self):
        """测试消息格式化"""
        result = LogMessages.format_message(LogMessages.POSTCARD_COMPLETED, url="https://x/y.png")

        assert result == "打卡图片生成完成: https://x/y.png"

    def test_get_structured_data(self):
        """测试获取结构化数据"""
        data = LogMessages.get_structured_data(path="public/a.png", size=3)

        assert data == {"path": "public/a.png", "size": 3}
