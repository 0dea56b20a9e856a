"""RobuxBot 主实现"""
import logging
import discord

from robuxbot.core.event_handler import EventHandler
from robuxbot.app_commands.integration import AppCommandsIntegration
from robuxbot.utils.config_manager import ConfigManager


class RobuxBot:
    """
    RobuxBot 主实现类。

    Robux 与英镑/美元换算机器人：
    - /price 计算 Robux 价格
    - /convert 英镑美元互换
    - /robux 计算金额可购买的 Robux
    - /help 命令说明
    """

    def __init__(self, config: ConfigManager):
        """
        初始化机器人。

        Args:
            config: 配置管理器

        Raises:
            ConfigurationError: 令牌或服务器ID缺失或无效
        """
        self.logger = logging.getLogger("robuxbot.bot")
        self.config = config

        self.token = config.get_discord_token()
        self.guild_id = config.get_guild_id()

        # Slash 命令交互不需要特权 intents
        intents = discord.Intents.default()
        self.client = discord.Client(intents=intents)

        self.integration = AppCommandsIntegration(self.client)
        self.event_handler = EventHandler(
            client=self.client,
            integration=self.integration,
            guild_id=self.guild_id
        )

        self.logger.info("🤖 机器人初始化成功")

    def run(self) -> None:
        """
        运行 Discord 机器人（阻塞式）。

        日志由 setup_logger 统一配置，不让 discord.py 再安装处理器。
        """
        try:
            self.client.run(self.token, log_handler=None)
        except KeyboardInterrupt:
            self.logger.info("用户停止了机器人")
        except Exception as e:
            self.logger.error(f"机器人崩溃: {e}", exc_info=True)
            raise
