"""
测试配置

提供测试所需的fixtures
"""

import logging
from unittest.mock import Mock, AsyncMock
import discord
import pytest

from helpers import interaction_data


@pytest.fixture
def mock_interaction():
    """创建模拟Discord交互对象"""
    interaction = Mock()
    interaction.type = discord.InteractionType.application_command
    interaction.data = interaction_data("help")
    interaction.guild = Mock()
    interaction.guild.id = 12345
    interaction.guild.name = "Test Guild"
    interaction.user = Mock()
    interaction.user.id = 67890
    interaction.user.display_name = "TestUser"
    interaction.client = Mock()
    interaction.client.user = None
    interaction.response = Mock()
    interaction.response.is_done = Mock(return_value=False)
    interaction.response.send_message = AsyncMock()
    return interaction


@pytest.fixture
def http_exception():
    """创建 Discord HTTP 异常"""
    response = Mock()
    response.status = 500
    response.reason = "Internal Server Error"
    return discord.HTTPException(response, "send failed")


@pytest.fixture(autouse=True)
def setup_logging():
    """设置测试日志"""
    # 禁用日志输出以保持测试输出清洁
    logging.getLogger("robuxbot").setLevel(logging.CRITICAL)
    yield
    logging.getLogger("robuxbot").setLevel(logging.NOTSET)
