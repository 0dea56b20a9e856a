"""
嵌入消息构建器

把换算结果转换为统一格式的 Discord 嵌入消息
"""

from typing import Optional
import discord

from robuxbot.core.interfaces import ConversionResult


class EmbedBuilder:
    """
    嵌入消息构建器

    所有结果消息使用同一主题色和页脚
    """

    RESULT_COLOR = discord.Color(0x0096FF)

    @classmethod
    def create_result_embed(
        cls,
        result: ConversionResult,
        bot_user: Optional[discord.ClientUser] = None
    ) -> discord.Embed:
        """
        创建换算结果嵌入

        Args:
            result: 换算结果
            bot_user: 机器人用户，用于页脚署名

        Returns:
            Discord嵌入消息
        """
        embed = discord.Embed(
            title=result.title,
            description=result.description or None,
            color=cls.RESULT_COLOR
        )

        for result_field in result.fields:
            embed.add_field(
                name=result_field.name,
                value=result_field.value,
                inline=result_field.inline
            )

        if bot_user is not None:
            embed.set_footer(
                text=f"Powered by {bot_user.name}",
                icon_url=bot_user.display_avatar.url
            )

        return embed
