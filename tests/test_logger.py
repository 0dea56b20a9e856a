"""
日志配置测试

测试 robuxbot 与 discord.py 日志共用处理器
"""

import logging
from logging.handlers import RotatingFileHandler
import pytest

from robuxbot.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def restore_loggers():
    """测试结束后移除 setup_logger 安装的处理器"""
    yield
    for name in ("robuxbot", "discord"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


class TestSetupLogger:
    """测试日志初始化"""

    def test_discord_logger_shares_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "bot.log"

        logger = setup_logger("DEBUG", str(log_file))
        discord_logger = logging.getLogger("discord")

        assert logger.level == logging.DEBUG
        assert discord_logger.level == logging.INFO
        assert discord_logger.handlers == logger.handlers
        assert any(isinstance(h, RotatingFileHandler) for h in discord_logger.handlers)

    def test_discord_records_reach_log_file(self, tmp_path):
        log_file = tmp_path / "bot.log"
        setup_logger("INFO", str(log_file))

        logging.getLogger("discord.gateway").warning("gateway reconnecting")
        for handler in logging.getLogger("discord").handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "discord.gateway - WARNING - gateway reconnecting" in content

    def test_rerun_replaces_handlers(self):
        setup_logger("INFO")
        setup_logger("WARNING")

        assert len(logging.getLogger("robuxbot").handlers) == 1
        assert len(logging.getLogger("discord").handlers) == 1
        assert logging.getLogger("discord").level == logging.WARNING
