"""
App Commands错误处理系统

提供统一的错误分类和处理：
- 分类错误处理
- 错误消息回复
- 错误统计
"""

from enum import Enum
from typing import Callable, Dict, Optional
import discord

from .logging_config import AppCommandsLogger
from ..ui import ResponseEmitter


GENERIC_ERROR_MESSAGE = "An unexpected error occurred while handling the command."


class ErrorCategory(Enum):
    """错误分类枚举"""
    REGISTRATION_ERROR = "registration"  # 启动时命令注册失败
    DISPATCH_ERROR = "dispatch"          # 未知命令
    VALIDATION_ERROR = "validation"      # 参数缺失、类型错误或取值越界
    SYSTEM_ERROR = "system"              # 其他未预期的错误


class BotError(Exception):
    """机器人自定义异常基类"""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.SYSTEM_ERROR):
        """
        初始化自定义异常

        Args:
            message: 错误消息，也会原样回复给用户
            category: 错误分类
        """
        super().__init__(message)
        self.message = message
        self.category = category


class RegistrationError(BotError):
    """命令注册错误"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message, ErrorCategory.REGISTRATION_ERROR)
        self.status = status


class DispatchError(BotError):
    """命令分发错误"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCategory.DISPATCH_ERROR)


class OptionValidationError(BotError):
    """命令参数校验错误"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCategory.VALIDATION_ERROR)


class AppCommandsErrorHandler:
    """
    App Commands错误处理器

    将分发和校验错误转换为纯文本回复，其余异常记录堆栈后回复通用错误消息
    """

    def __init__(self, emitter: ResponseEmitter):
        """
        初始化错误处理器

        Args:
            emitter: 响应发送器
        """
        self.logger = AppCommandsLogger("error_handler")
        self.emitter = emitter

        # 错误统计
        self._error_stats: Dict[str, int] = {}

        self._error_handlers: Dict[ErrorCategory, Callable] = {
            ErrorCategory.DISPATCH_ERROR: self._handle_user_error,
            ErrorCategory.VALIDATION_ERROR: self._handle_user_error,
            ErrorCategory.SYSTEM_ERROR: self._handle_system_error,
        }

    async def handle_error(
        self,
        interaction: discord.Interaction,
        error: Exception,
        command_name: Optional[str] = None
    ) -> bool:
        """
        处理错误

        Args:
            interaction: Discord交互对象
            error: 异常对象
            command_name: 命令名称

        Returns:
            错误回复是否发送成功
        """
        error_type = type(error).__name__
        self._error_stats[error_type] = self._error_stats.get(error_type, 0) + 1

        category = self._categorize_error(error)

        self.logger.log_command_error(
            interaction,
            command_name or "unknown",
            error,
            exc_info=category is ErrorCategory.SYSTEM_ERROR,
            error_category=category.value
        )

        handler = self._error_handlers.get(category, self._handle_system_error)
        return await handler(interaction, error)

    def _categorize_error(self, error: Exception) -> ErrorCategory:
        """
        分类错误

        Args:
            error: 异常对象

        Returns:
            错误分类
        """
        if isinstance(error, BotError):
            return error.category
        return ErrorCategory.SYSTEM_ERROR

    async def _handle_user_error(self, interaction: discord.Interaction, error: Exception) -> bool:
        """处理用户可见的错误，回复原始错误消息"""
        return await self.emitter.emit_error(interaction, str(error))

    async def _handle_system_error(self, interaction: discord.Interaction, error: Exception) -> bool:
        """处理系统错误"""
        return await self.emitter.emit_error(interaction, GENERIC_ERROR_MESSAGE)

    def get_error_stats(self) -> Dict[str, int]:
        """
        获取错误统计

        Returns:
            错误类型到次数的映射
        """
        return self._error_stats.copy()

    def reset_error_stats(self) -> None:
        """重置错误统计"""
        self._error_stats.clear()
