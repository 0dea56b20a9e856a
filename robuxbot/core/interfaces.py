"""
核心数据结构定义

定义命令调用和计算结果在各模块之间传递的数据类。
所有数据类在一次交互内创建并消费，不做持久化。
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple


class MessageType(Enum):
    """消息类型枚举"""
    RESULT = "result"
    HELP = "help"
    ERROR = "error"


@dataclass(frozen=True)
class CommandOption:
    """
    单个命令参数

    值的类型由 Discord 决定：字符串、整数或浮点数。
    """
    name: str
    type: int
    value: Any = None


@dataclass(frozen=True)
class CommandInvocation:
    """一次 Slash 命令调用：命令名称和按声明顺序排列的参数"""
    name: str
    options: Tuple[CommandOption, ...] = ()

    @classmethod
    def from_interaction_data(cls, data: Optional[Mapping[str, Any]]) -> "CommandInvocation":
        """
        从 interaction.data 构建命令调用

        Args:
            data: Discord 交互负载中的 data 字段

        Returns:
            命令调用对象
        """
        data = data or {}
        options = tuple(
            CommandOption(
                name=raw.get('name', ''),
                type=raw.get('type', 0),
                value=raw.get('value')
            )
            for raw in data.get('options') or []
        )
        return cls(name=data.get('name', ''), options=options)


@dataclass(frozen=True)
class ResultField:
    """嵌入消息中的一个字段"""
    name: str
    value: str
    inline: bool = True


@dataclass(frozen=True)
class ConversionResult:
    """
    换算结果数据类

    由命令处理器生成，交给响应发送器格式化。
    values 保存未格式化的计算数值，便于调试和测试，构造后只读。
    """
    title: str
    description: str = ""
    fields: Tuple[ResultField, ...] = ()
    values: Mapping[str, Any] = field(default_factory=dict, compare=False)
    message_type: MessageType = MessageType.RESULT

    def __post_init__(self):
        object.__setattr__(self, 'values', MappingProxyType(dict(self.values)))

    def get_field(self, name: str) -> Optional[ResultField]:
        """按名称查找字段"""
        for result_field in self.fields:
            if result_field.name == name:
                return result_field
        return None


OptionList = Sequence[CommandOption]
