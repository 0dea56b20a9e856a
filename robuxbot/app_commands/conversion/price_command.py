"""
价格命令

计算给定 Robux 数量对应的英镑与美元价格
"""

from decimal import Decimal, ROUND_HALF_UP

from robuxbot.core.interfaces import ConversionResult, OptionList, ResultField
from ..core import BaseConversionCommand
from ..core.options import parse_price_options


def round_half_away_from_zero(value: float) -> int:
    """四舍五入到整数，0.5 远离零方向进位"""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


class PriceCommand(BaseConversionCommand):
    """
    /price 命令处理器

    b/t：税前，按基础汇率计算，Gamepass 价格即输入数量。
    a/t：税后，汇率和 Gamepass 价格都按平台抽成反推。
    """

    name = "price"

    def handle(self, options: OptionList) -> ConversionResult:
        params = parse_price_options(options)
        amount = params.amount

        if params.price_type == "a/t":
            rate = self.rates.after_tax_rate
            gamepass_price = round_half_away_from_zero(amount / (1 - self.rates.robux_markup))
        else:
            rate = self.rates.robux_to_gbp
            gamepass_price = amount

        gbp_amount = amount * rate
        usd_amount = gbp_amount * self.rates.gbp_to_usd

        self.logger.debug(
            f"价格计算 - 类型: {params.price_type}, 数量: {amount}, "
            f"Gamepass: {gamepass_price}, GBP: {gbp_amount}, USD: {usd_amount}"
        )

        return ConversionResult(
            title="Price Calculation",
            description=(
                f"**Conversion Type:** {params.price_type}\n"
                f"**Amount of Robux:** {amount}"
            ),
            fields=(
                ResultField("Gamepass Price", f"{gamepass_price} R$"),
                ResultField("Amount in GBP", f"£{gbp_amount:.2f}"),
                ResultField("Amount in USD", f"${usd_amount:.2f}"),
            ),
            values={
                'price_type': params.price_type,
                'robux_amount': amount,
                'gamepass_price': gamepass_price,
                'gbp_amount': gbp_amount,
                'usd_amount': usd_amount,
            }
        )
