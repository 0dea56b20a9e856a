"""
帮助命令

列出可用命令及其用法
"""

from robuxbot.core.interfaces import ConversionResult, MessageType, OptionList
from ..core import BaseConversionCommand


HELP_DESCRIPTION = (
    "Here are the available commands and their usage:\n"
    "/price: Calculate the price in GBP and USD for a given amount of Robux\n"
    "/convert: Convert between GBP and USD\n"
    "/robux: Convert GBP or USD to the amount of Robux"
)


class HelpCommand(BaseConversionCommand):
    """
    帮助命令处理器

    返回固定内容，忽略任何参数，回复仅调用者可见
    """

    name = "help"

    def handle(self, options: OptionList = ()) -> ConversionResult:
        return ConversionResult(
            title="Available Commands",
            description=HELP_DESCRIPTION,
            message_type=MessageType.HELP
        )
