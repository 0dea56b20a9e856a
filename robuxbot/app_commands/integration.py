"""
App Commands集成

把命令注册、分发、错误处理和响应发送组装在一起，供事件处理器调用
"""

import logging
import time
from typing import Any, Dict, List, Optional
import discord

from robuxbot.core.interfaces import CommandInvocation
from robuxbot.rates import DEFAULT_RATES, RateTable
from .core import AppCommandsErrorHandler, AppCommandsLogger, CommandDispatcher, CommandRegistry
from .conversion import ConvertCommand, PriceCommand, RobuxCommand
from .general import HelpCommand
from .ui import MessageVisibility, ResponseEmitter


class AppCommandsIntegration:
    """
    App Commands集成器

    进程启动时构造一次，之后只读
    """

    def __init__(self, client: discord.Client, rates: RateTable = DEFAULT_RATES,
                 registry: Optional[CommandRegistry] = None):
        """
        初始化集成器

        Args:
            client: Discord 客户端，命令注册复用它的 HTTP 会话
            rates: 汇率表
            registry: 命令注册器，默认基于 client 创建
        """
        self.logger = logging.getLogger("robuxbot.app_commands.integration")
        self.command_logger = AppCommandsLogger("commands")

        self.registry = registry or CommandRegistry(client)
        self.dispatcher = CommandDispatcher([
            HelpCommand(rates),
            PriceCommand(rates),
            ConvertCommand(rates),
            RobuxCommand(rates),
        ])
        self.emitter = ResponseEmitter(MessageVisibility())
        self.error_handler = AppCommandsErrorHandler(self.emitter)

        self.logger.info("App Commands集成器已初始化")

    async def register_commands(self, guild_id: int, application_id: int) -> List[Dict[str, Any]]:
        """
        注册命令到目标服务器

        Raises:
            RegistrationError: 注册失败
        """
        return await self.registry.register(guild_id, application_id)

    async def handle_interaction(self, interaction: discord.Interaction) -> None:
        """
        处理一次 Slash 命令交互

        分发和校验错误转为纯文本回复，不会向上抛出

        Args:
            interaction: Discord交互对象
        """
        invocation = CommandInvocation.from_interaction_data(interaction.data)
        start_time = time.time()

        self.command_logger.log_command_start(interaction, invocation.name)

        try:
            result = self.dispatcher.dispatch(invocation)
        except Exception as e:
            await self.error_handler.handle_error(interaction, e, invocation.name)
            return

        sent = await self.emitter.emit_result(interaction, result)
        if sent:
            self.command_logger.log_command_success(
                interaction,
                invocation.name,
                time.time() - start_time
            )
