"""
响应发送器

每个命令调用只能回复一次：
- 成功结果以嵌入消息回复
- 错误以纯文本回复
- 发送失败只记录日志，不重试
"""

import logging
from typing import Optional
import discord

from robuxbot.core.interfaces import ConversionResult, MessageType
from .embed_builder import EmbedBuilder
from .message_visibility import MessageVisibility


class ResponseEmitter:
    """把结果或错误作为交互的即时回复发送出去"""

    def __init__(self, message_visibility: Optional[MessageVisibility] = None):
        """
        初始化响应发送器

        Args:
            message_visibility: 消息可见性控制器
        """
        self.logger = logging.getLogger("robuxbot.app_commands.response_emitter")
        self.message_visibility = message_visibility or MessageVisibility()

    async def emit_result(self, interaction: discord.Interaction, result: ConversionResult) -> bool:
        """
        发送换算结果

        Args:
            interaction: Discord交互对象
            result: 换算结果

        Returns:
            发送是否成功
        """
        bot_user = getattr(interaction.client, 'user', None)
        embed = EmbedBuilder.create_result_embed(result, bot_user)
        ephemeral = self.message_visibility.should_be_ephemeral(result.message_type)

        try:
            await interaction.response.send_message(embed=embed, ephemeral=ephemeral)
            return True
        except (discord.HTTPException, discord.InteractionResponded) as e:
            self.logger.error(f"发送响应失败: {e}")
            return False

    async def emit_error(self, interaction: discord.Interaction, message: str) -> bool:
        """
        发送纯文本错误回复

        Args:
            interaction: Discord交互对象
            message: 错误消息

        Returns:
            发送是否成功
        """
        ephemeral = self.message_visibility.should_be_ephemeral(MessageType.ERROR)

        try:
            await interaction.response.send_message(content=message, ephemeral=ephemeral)
            return True
        except (discord.HTTPException, discord.InteractionResponded) as e:
            self.logger.error(f"发送错误响应失败: {e}")
            return False
