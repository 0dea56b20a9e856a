"""
App Commands日志配置

提供命令执行相关的结构化日志记录：
- 命令开始/成功/失败
- 执行耗时
"""

import logging
import time
from typing import Any, Dict, Optional
import discord


class AppCommandsLogger:
    """
    App Commands专用日志记录器

    所有记录都附带 extra={'context': ...}，便于结构化日志处理器解析
    """

    def __init__(self, name: str):
        """
        初始化日志记录器

        Args:
            name: 日志记录器名称
        """
        self.logger = logging.getLogger(f"robuxbot.app_commands.{name}")

    @staticmethod
    def _base_context(interaction: discord.Interaction, command_name: str) -> Dict[str, Any]:
        user = getattr(interaction, 'user', None)
        guild = getattr(interaction, 'guild', None)
        return {
            'user_id': getattr(user, 'id', None),
            'user_name': getattr(user, 'display_name', None),
            'guild_id': getattr(guild, 'id', None),
            'command': command_name,
        }

    @staticmethod
    def _user_name(interaction: discord.Interaction) -> str:
        user = getattr(interaction, 'user', None)
        return getattr(user, 'display_name', None) or 'Unknown'

    def log_command_start(
        self,
        interaction: discord.Interaction,
        command_name: str,
        **kwargs
    ) -> None:
        """
        记录命令开始执行

        Args:
            interaction: Discord交互对象
            command_name: 命令名称
            **kwargs: 额外的上下文信息
        """
        context = {
            **self._base_context(interaction, command_name),
            'timestamp': time.time(),
            **kwargs
        }
        guild = getattr(interaction, 'guild', None)

        self.logger.info(
            f"命令开始 - {command_name} | "
            f"用户: {self._user_name(interaction)} | "
            f"服务器: {guild.name if guild else 'DM'}",
            extra={'context': context}
        )

    def log_command_success(
        self,
        interaction: discord.Interaction,
        command_name: str,
        execution_time: Optional[float] = None,
        **kwargs
    ) -> None:
        """
        记录命令成功执行

        Args:
            interaction: Discord交互对象
            command_name: 命令名称
            execution_time: 执行时间（秒）
            **kwargs: 额外的上下文信息
        """
        context = {
            **self._base_context(interaction, command_name),
            'execution_time': execution_time,
            'status': 'success',
            **kwargs
        }

        time_info = f" | 耗时: {execution_time:.3f}s" if execution_time else ""

        self.logger.info(
            f"命令成功 - {command_name} | "
            f"用户: {self._user_name(interaction)}{time_info}",
            extra={'context': context}
        )

    def log_command_error(
        self,
        interaction: discord.Interaction,
        command_name: str,
        error: Exception,
        execution_time: Optional[float] = None,
        exc_info: bool = True,
        **kwargs
    ) -> None:
        """
        记录命令执行错误

        Args:
            interaction: Discord交互对象
            command_name: 命令名称
            error: 异常对象
            execution_time: 执行时间（秒）
            exc_info: 是否附带堆栈信息
            **kwargs: 额外的上下文信息
        """
        context = {
            **self._base_context(interaction, command_name),
            'error_type': type(error).__name__,
            'error_message': str(error),
            'execution_time': execution_time,
            'status': 'error',
            **kwargs
        }

        time_info = f" | 耗时: {execution_time:.3f}s" if execution_time else ""

        self.logger.error(
            f"命令错误 - {command_name} | "
            f"用户: {self._user_name(interaction)} | "
            f"错误: {type(error).__name__}: {error}{time_info}",
            extra={'context': context},
            exc_info=error if exc_info else None
        )
