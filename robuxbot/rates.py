"""
汇率表

进程级的固定汇率常量，启动后不可修改。
"""

from dataclasses import dataclass


ROBUX_TO_GBP_RATE = 0.0035
GBP_TO_USD_RATE = 1.38
ROBUX_MARKUP_RATE = 0.3


@dataclass(frozen=True)
class RateTable:
    """
    汇率表数据类

    Attributes:
        robux_to_gbp: 每 Robux 对应的英镑
        gbp_to_usd: 英镑兑美元汇率
        robux_markup: 平台抽成比例（0.3 = 30%）
    """
    robux_to_gbp: float = ROBUX_TO_GBP_RATE
    gbp_to_usd: float = GBP_TO_USD_RATE
    robux_markup: float = ROBUX_MARKUP_RATE

    def __post_init__(self) -> None:
        if self.robux_to_gbp <= 0 or self.gbp_to_usd <= 0:
            raise ValueError("汇率必须为正数")
        if not 0 < self.robux_markup < 1:
            raise ValueError("抽成比例必须在 0 和 1 之间")

    @property
    def after_tax_rate(self) -> float:
        """扣除平台抽成后每 Robux 对应的英镑"""
        return self.robux_to_gbp / (1 - self.robux_markup)


DEFAULT_RATES = RateTable()
