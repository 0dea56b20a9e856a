"""
App Commands Core Infrastructure

提供Slash Commands的核心基础设施，包括：
- 基础命令类
- 参数解析
- 命令分发
- 命令注册系统
- 错误处理和日志
"""

from .logging_config import AppCommandsLogger
from .error_handler import (
    AppCommandsErrorHandler,
    BotError,
    DispatchError,
    ErrorCategory,
    OptionValidationError,
    RegistrationError
)
from .base_command import BaseConversionCommand
from .dispatcher import CommandDispatcher
from .registry import CommandRegistry, CommandSchema, OptionSchema, OptionChoice, build_command_schemas

__all__ = [
    'AppCommandsLogger',
    'AppCommandsErrorHandler',
    'BotError',
    'DispatchError',
    'ErrorCategory',
    'OptionValidationError',
    'RegistrationError',
    'BaseConversionCommand',
    'CommandDispatcher',
    'CommandRegistry',
    'CommandSchema',
    'OptionSchema',
    'OptionChoice',
    'build_command_schemas'
]
