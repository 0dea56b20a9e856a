"""
货币换算命令
"""

from robuxbot.core.interfaces import ConversionResult, OptionList, ResultField
from ..core import BaseConversionCommand
from ..core.options import parse_currency_options


class ConvertCommand(BaseConversionCommand):
    """/convert 命令处理器，英镑与美元互换"""

    name = "convert"

    def handle(self, options: OptionList) -> ConversionResult:
        params = parse_currency_options(options)
        amount = params.amount

        if params.currency == "GBP":
            target_currency = "USD"
            converted_amount = amount * self.rates.gbp_to_usd
        else:
            target_currency = "GBP"
            converted_amount = amount / self.rates.gbp_to_usd

        return ConversionResult(
            title="Currency Conversion",
            fields=(
                ResultField(f"Amount in {params.currency}", f"{amount:.2f}"),
                ResultField(f"Amount in {target_currency}", f"{converted_amount:.2f}"),
            ),
            values={
                'source_currency': params.currency,
                'target_currency': target_currency,
                'amount': amount,
                'converted_amount': converted_amount,
            }
        )
