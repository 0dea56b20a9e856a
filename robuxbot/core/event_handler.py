"""RobuxBot 事件处理器。"""
import logging
import discord

from robuxbot.app_commands.core import RegistrationError
from robuxbot.app_commands.integration import AppCommandsIntegration


class EventHandler:
    """
    RobuxBot 事件处理器。

    每种入站事件对应一个方法，进程启动时创建一次。
    """

    def __init__(self, client: discord.Client, integration: AppCommandsIntegration, guild_id: int):
        """
        初始化事件处理器。

        Args:
            client: Discord 客户端实例
            integration: App Commands 集成器
            guild_id: 命令注册的目标服务器ID
        """
        self.logger = logging.getLogger("robuxbot.events")
        self.client = client
        self.integration = integration
        self.guild_id = guild_id
        self.registration_attempted = False

        self._register_events()

    def _register_events(self) -> None:
        """注册 Discord 事件处理器。"""
        @self.client.event
        async def on_ready():
            await self.on_ready()

        @self.client.event
        async def on_interaction(interaction: discord.Interaction):
            await self.on_interaction(interaction)

        self.logger.debug("事件处理器注册完成")

    async def on_ready(self) -> None:
        """处理机器人就绪事件，首次就绪时注册命令。"""
        user = self.client.user
        if user is None:
            self.logger.error("机器人用户在 on_ready 事件中为 None")
            return

        self.logger.info(f"🤖 {user.name} 已连接 ({user.id})")

        # 断线重连也会触发 on_ready，每个进程只尝试注册一次
        if self.registration_attempted:
            return
        self.registration_attempted = True

        try:
            await self.integration.register_commands(self.guild_id, self.client.application_id)
            self.logger.info("✅ Slash Commands 已注册到 Discord")
        except RegistrationError as e:
            self.logger.error(f"❌ 注册命令失败: {e}")
            self.logger.warning("已注册过的命令仍可使用，新命令在注册成功前不会出现")

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        """
        处理交互事件。

        Args:
            interaction: Discord 交互对象
        """
        if interaction.type != discord.InteractionType.application_command:
            return

        await self.integration.handle_interaction(interaction)
