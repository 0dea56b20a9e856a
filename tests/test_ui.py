"""
UI组件测试

测试嵌入消息、可见性和响应发送器
"""

from unittest.mock import Mock
import discord
import pytest

from robuxbot.app_commands.ui import EmbedBuilder, MessageVisibility, ResponseEmitter
from robuxbot.core.interfaces import ConversionResult, MessageType, ResultField


def _result(**kwargs):
    defaults = dict(
        title="Price Calculation",
        description="**Conversion Type:** b/t\n**Amount of Robux:** 1000",
        fields=(
            ResultField("Gamepass Price", "1000 R$"),
            ResultField("Amount in GBP", "£3.50"),
        ),
    )
    defaults.update(kwargs)
    return ConversionResult(**defaults)


class TestConversionResult:
    """测试换算结果数据类"""

    def test_values_are_read_only(self):
        raw = {'gbp_amount': 3.5}
        result = _result(values=raw)

        with pytest.raises(TypeError):
            result.values['gbp_amount'] = 0.0

        raw['gbp_amount'] = 0.0
        assert result.values['gbp_amount'] == 3.5

    def test_hashable(self):
        assert hash(_result(values={'gbp_amount': 3.5})) == hash(_result())


class TestEmbedBuilder:
    """测试嵌入消息构建器"""

    def test_result_embed(self):
        embed = EmbedBuilder.create_result_embed(_result())

        assert embed.title == "Price Calculation"
        assert embed.description.startswith("**Conversion Type:**")
        assert embed.color.value == 0x0096FF
        assert [(f.name, f.value, f.inline) for f in embed.fields] == [
            ("Gamepass Price", "1000 R$", True),
            ("Amount in GBP", "£3.50", True),
        ]

    def test_empty_description_omitted(self):
        embed = EmbedBuilder.create_result_embed(_result(description=""))
        assert embed.description is None

    def test_footer_with_bot_user(self):
        bot_user = Mock()
        bot_user.name = "RobuxBot"
        bot_user.display_avatar.url = "https://cdn.example.com/avatar.png"

        embed = EmbedBuilder.create_result_embed(_result(), bot_user)

        assert embed.footer.text == "Powered by RobuxBot"
        assert embed.footer.icon_url == "https://cdn.example.com/avatar.png"

    def test_no_footer_without_bot_user(self):
        embed = EmbedBuilder.create_result_embed(_result())
        assert embed.footer.text is None


class TestMessageVisibility:
    """测试消息可见性"""

    def test_rules(self):
        visibility = MessageVisibility()
        assert visibility.should_be_ephemeral(MessageType.HELP) is True
        assert visibility.should_be_ephemeral(MessageType.RESULT) is False
        assert visibility.should_be_ephemeral(MessageType.ERROR) is False


class TestResponseEmitter:
    """测试响应发送器"""

    def setup_method(self):
        self.emitter = ResponseEmitter()

    @pytest.mark.asyncio
    async def test_emit_result(self, mock_interaction):
        assert await self.emitter.emit_result(mock_interaction, _result()) is True

        mock_interaction.response.send_message.assert_awaited_once()
        kwargs = mock_interaction.response.send_message.call_args.kwargs
        assert isinstance(kwargs["embed"], discord.Embed)
        assert kwargs["ephemeral"] is False

    @pytest.mark.asyncio
    async def test_emit_help_is_ephemeral(self, mock_interaction):
        await self.emitter.emit_result(mock_interaction, _result(message_type=MessageType.HELP))

        kwargs = mock_interaction.response.send_message.call_args.kwargs
        assert kwargs["ephemeral"] is True

    @pytest.mark.asyncio
    async def test_emit_error_is_plain_text(self, mock_interaction):
        assert await self.emitter.emit_error(mock_interaction, "Unknown command: foo") is True

        mock_interaction.response.send_message.assert_awaited_once_with(
            content="Unknown command: foo",
            ephemeral=False
        )

    @pytest.mark.asyncio
    async def test_send_failure_is_logged_not_raised(self, mock_interaction, http_exception):
        mock_interaction.response.send_message.side_effect = http_exception

        assert await self.emitter.emit_result(mock_interaction, _result()) is False
        assert await self.emitter.emit_error(mock_interaction, "boom") is False
        assert mock_interaction.response.send_message.await_count == 2

    @pytest.mark.asyncio
    async def test_already_responded(self, mock_interaction):
        mock_interaction.response.send_message.side_effect = discord.InteractionResponded(mock_interaction)

        assert await self.emitter.emit_error(mock_interaction, "late") is False
