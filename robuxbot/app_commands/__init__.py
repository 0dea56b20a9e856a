"""
Robux Bot Slash Commands Module

Robux 与英镑/美元换算的 Discord Slash Commands 实现

架构特点：
- 命令处理器只做校验和计算
- 分发器按名称路由
- 回复统一由响应发送器完成
"""

from .core import (
    BaseConversionCommand,
    CommandDispatcher,
    CommandRegistry,
    AppCommandsErrorHandler
)

from .conversion import (
    PriceCommand,
    ConvertCommand,
    RobuxCommand
)

from .general import HelpCommand

from .ui import (
    EmbedBuilder,
    MessageVisibility,
    ResponseEmitter
)

from .integration import AppCommandsIntegration

__all__ = [
    # Core infrastructure
    'BaseConversionCommand',
    'CommandDispatcher',
    'CommandRegistry',
    'AppCommandsErrorHandler',

    # Conversion commands
    'PriceCommand',
    'ConvertCommand',
    'RobuxCommand',

    # General commands
    'HelpCommand',

    # UI components
    'EmbedBuilder',
    'MessageVisibility',
    'ResponseEmitter',

    'AppCommandsIntegration'
]
