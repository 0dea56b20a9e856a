"""
基础命令类

所有换算命令的基类：
- 命令名称与汇率表
- 统一的日志记录器
- 纯计算的 handle 接口
"""

import logging
from abc import ABC, abstractmethod

from robuxbot.core.interfaces import ConversionResult, OptionList
from robuxbot.rates import DEFAULT_RATES, RateTable


class BaseConversionCommand(ABC):
    """
    所有换算命令的基础类

    handle 只做校验和计算，不接触 Discord 交互对象
    """

    name: str = ""

    def __init__(self, rates: RateTable = DEFAULT_RATES):
        """
        初始化基础命令

        Args:
            rates: 汇率表
        """
        self.rates = rates
        self.logger = logging.getLogger(f"robuxbot.app_commands.{self.__class__.__name__}")

        self.logger.debug(f"初始化 {self.__class__.__name__}")

    @abstractmethod
    def handle(self, options: OptionList) -> ConversionResult:
        """
        校验参数并计算结果

        Args:
            options: 有序参数列表

        Returns:
            换算结果

        Raises:
            OptionValidationError: 参数校验失败
        """
        pass
