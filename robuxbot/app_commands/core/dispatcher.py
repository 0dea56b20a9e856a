"""
命令分发器

按命令名称选择处理器，名称未知时抛出 DispatchError。
分发器不检查参数，参数校验由处理器负责。
"""

import logging
from typing import Dict, Iterable, List

from robuxbot.core.interfaces import CommandInvocation, ConversionResult
from .base_command import BaseConversionCommand
from .error_handler import DispatchError


class CommandDispatcher:
    """
    命令分发器

    构造后映射表固定，不在运行时增删
    """

    def __init__(self, handlers: Iterable[BaseConversionCommand]):
        """
        初始化命令分发器

        Args:
            handlers: 命令处理器列表，以各自的 name 为键
        """
        self.logger = logging.getLogger("robuxbot.app_commands.dispatcher")
        self._handlers: Dict[str, BaseConversionCommand] = {}

        for handler in handlers:
            if handler.name in self._handlers:
                raise ValueError(f"命令名称重复: {handler.name}")
            self._handlers[handler.name] = handler

        self.logger.debug(f"命令分发器已初始化: {', '.join(self._handlers)}")

    def dispatch(self, invocation: CommandInvocation) -> ConversionResult:
        """
        分发命令调用

        Args:
            invocation: 命令调用

        Returns:
            处理器返回的换算结果

        Raises:
            DispatchError: 命令名称未知
            OptionValidationError: 处理器参数校验失败
        """
        handler = self._handlers.get(invocation.name)
        if handler is None:
            self.logger.warning(f"未知命令: {invocation.name}")
            raise DispatchError(f"Unknown command: {invocation.name}")

        return handler.handle(invocation.options)

    def get_command_names(self) -> List[str]:
        """获取已注册的命令名称"""
        return list(self._handlers)
