"""
Robux 命令

计算一笔英镑或美元可以买到多少 Robux
"""

from robuxbot.core.interfaces import ConversionResult, OptionList
from ..core import BaseConversionCommand
from ..core.options import parse_currency_options


class RobuxCommand(BaseConversionCommand):
    """
    /robux 命令处理器

    先把金额统一换算为英镑，再由英镑重新计算美元金额。
    美元输入因此会经过一次英镑汇率的往返换算。
    """

    name = "robux"

    def handle(self, options: OptionList) -> ConversionResult:
        params = parse_currency_options(options)
        amount = params.amount

        if params.currency == "GBP":
            gbp_amount = amount
        else:
            gbp_amount = amount / self.rates.gbp_to_usd

        usd_amount = gbp_amount * self.rates.gbp_to_usd
        # int() 向零截断
        robux_amount = int(gbp_amount / self.rates.robux_to_gbp)

        return ConversionResult(
            title="Robux Calculation",
            description=(
                f"{amount:.2f} {params.currency} affords {robux_amount} R$ "
                f"(£{gbp_amount:.2f} / ${usd_amount:.2f})"
            ),
            values={
                'currency': params.currency,
                'amount': amount,
                'robux_amount': robux_amount,
                'gbp_amount': gbp_amount,
                'usd_amount': usd_amount,
            }
        )
