"""
交互处理集成测试

从 interaction.data 到回复的完整流程：
- 成功结果
- 分发错误
- 校验错误
- 系统错误
- 发送失败
"""

from unittest.mock import AsyncMock, Mock, patch
import pytest

from robuxbot.app_commands.core.error_handler import GENERIC_ERROR_MESSAGE
from robuxbot.app_commands.integration import AppCommandsIntegration

from helpers import INTEGER, NUMBER, STRING, interaction_data


class TestAppCommandsIntegration:
    """测试 App Commands 集成器"""

    def setup_method(self):
        self.registry = Mock()
        self.registry.register = AsyncMock(return_value=[{"name": "help"}])
        self.integration = AppCommandsIntegration(Mock(), registry=self.registry)

    @pytest.mark.asyncio
    async def test_price_reply(self, mock_interaction):
        mock_interaction.data = interaction_data(
            "price", ("type", STRING, "b/t"), ("amount", INTEGER, 1000)
        )

        await self.integration.handle_interaction(mock_interaction)

        mock_interaction.response.send_message.assert_awaited_once()
        embed = mock_interaction.response.send_message.call_args.kwargs["embed"]
        assert embed.title == "Price Calculation"
        assert [f.value for f in embed.fields] == ["1000 R$", "£3.50", "$4.83"]

    @pytest.mark.asyncio
    async def test_convert_reply(self, mock_interaction):
        mock_interaction.data = interaction_data(
            "convert", ("currency", STRING, "GBP"), ("amount", NUMBER, 10)
        )

        await self.integration.handle_interaction(mock_interaction)

        embed = mock_interaction.response.send_message.call_args.kwargs["embed"]
        assert embed.fields[1].name == "Amount in USD"
        assert embed.fields[1].value == "13.80"

    @pytest.mark.asyncio
    async def test_help_reply_is_ephemeral(self, mock_interaction):
        await self.integration.handle_interaction(mock_interaction)

        kwargs = mock_interaction.response.send_message.call_args.kwargs
        assert kwargs["embed"].title == "Available Commands"
        assert kwargs["ephemeral"] is True

    @pytest.mark.asyncio
    async def test_unknown_command(self, mock_interaction):
        mock_interaction.data = interaction_data("foo")

        await self.integration.handle_interaction(mock_interaction)

        mock_interaction.response.send_message.assert_awaited_once_with(
            content="Unknown command: foo",
            ephemeral=False
        )
        assert self.integration.error_handler.get_error_stats() == {"DispatchError": 1}

    @pytest.mark.asyncio
    async def test_insufficient_options(self, mock_interaction):
        mock_interaction.data = interaction_data("robux", ("currency", STRING, "GBP"))

        await self.integration.handle_interaction(mock_interaction)

        mock_interaction.response.send_message.assert_awaited_once_with(
            content="Insufficient command options",
            ephemeral=False
        )

    @pytest.mark.asyncio
    async def test_invalid_enum(self, mock_interaction):
        mock_interaction.data = interaction_data(
            "price", ("type", STRING, "x"), ("amount", INTEGER, 5)
        )

        await self.integration.handle_interaction(mock_interaction)

        content = mock_interaction.response.send_message.call_args.kwargs["content"]
        assert content == "Invalid type. Use 'b/t' or 'a/t'."

    @pytest.mark.asyncio
    async def test_unexpected_error_gets_generic_reply(self, mock_interaction):
        with patch.object(self.integration.dispatcher, "dispatch", side_effect=RuntimeError("boom")):
            await self.integration.handle_interaction(mock_interaction)

        mock_interaction.response.send_message.assert_awaited_once_with(
            content=GENERIC_ERROR_MESSAGE,
            ephemeral=False
        )
        assert self.integration.error_handler.get_error_stats() == {"RuntimeError": 1}

    @pytest.mark.asyncio
    async def test_send_failure_does_not_retry(self, mock_interaction, http_exception):
        mock_interaction.response.send_message.side_effect = http_exception

        await self.integration.handle_interaction(mock_interaction)

        assert mock_interaction.response.send_message.await_count == 1
        assert self.integration.error_handler.get_error_stats() == {}

    @pytest.mark.asyncio
    async def test_register_commands_delegates(self):
        result = await self.integration.register_commands(111, 222)

        assert result == [{"name": "help"}]
        self.registry.register.assert_awaited_once_with(111, 222)

    def test_error_stats_reset(self):
        self.integration.error_handler._error_stats["DispatchError"] = 3
        self.integration.error_handler.reset_error_stats()
        assert self.integration.error_handler.get_error_stats() == {}

    def test_default_registry_uses_client(self):
        client = Mock()
        integration = AppCommandsIntegration(client)
        assert integration.registry.client is client
