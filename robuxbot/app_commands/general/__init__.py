"""
通用命令模块

提供机器人的基础功能命令：
- 帮助信息
"""

from .help_command import HelpCommand, HELP_DESCRIPTION

__all__ = [
    'HelpCommand',
    'HELP_DESCRIPTION'
]
