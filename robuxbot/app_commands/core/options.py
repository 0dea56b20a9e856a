"""
命令参数解析

把 Discord 传入的有序参数列表一次性解析为按命令划分的强类型参数对象。
参数按位置读取：索引 0 为第一个声明的参数，索引 1 为第二个。
"""

import math
from dataclasses import dataclass
from typing import Any

from robuxbot.core.interfaces import OptionList
from .error_handler import OptionValidationError


INSUFFICIENT_OPTIONS = "Insufficient command options"

UINT64_MAX = 2 ** 64 - 1

PRICE_TYPES = ("b/t", "a/t")
CURRENCIES = ("GBP", "USD")


@dataclass(frozen=True)
class PriceParams:
    """/price 命令参数"""
    price_type: str
    amount: int


@dataclass(frozen=True)
class CurrencyParams:
    """/convert 与 /robux 命令参数"""
    currency: str
    amount: float


def _require_count(options: OptionList, count: int) -> None:
    if len(options) < count:
        raise OptionValidationError(INSUFFICIENT_OPTIONS)


def _value_at(options: OptionList, index: int, field: str) -> Any:
    value = options[index].value
    if value is None:
        raise OptionValidationError(f"Missing {field}")
    return value


def expect_string(options: OptionList, index: int, field: str) -> str:
    """读取字符串参数"""
    value = _value_at(options, index, field)
    if not isinstance(value, str):
        raise OptionValidationError(f"Invalid {field}")
    return value


def expect_unsigned_int(options: OptionList, index: int, field: str) -> int:
    """读取 64 位无符号整数参数，bool 不算整数"""
    value = _value_at(options, index, field)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= UINT64_MAX:
        raise OptionValidationError(f"Invalid {field}")
    return value


def expect_float(options: OptionList, index: int, field: str) -> float:
    """读取浮点参数，JSON 中的整数会以 int 形式到达"""
    value = _value_at(options, index, field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise OptionValidationError(f"Invalid {field}")
    value = float(value)
    if not math.isfinite(value):
        raise OptionValidationError(f"Invalid {field}")
    return value


def parse_price_options(options: OptionList) -> PriceParams:
    """
    解析 /price 参数

    Args:
        options: 有序参数列表

    Returns:
        PriceParams

    Raises:
        OptionValidationError: 参数数量不足、缺失、类型错误或类型不在可选范围内
    """
    _require_count(options, 2)
    price_type = expect_string(options, 0, "price type")
    amount = expect_unsigned_int(options, 1, "amount")

    if price_type not in PRICE_TYPES:
        raise OptionValidationError("Invalid type. Use 'b/t' or 'a/t'.")

    return PriceParams(price_type=price_type, amount=amount)


def parse_currency_options(options: OptionList) -> CurrencyParams:
    """
    解析 /convert 和 /robux 参数

    Args:
        options: 有序参数列表

    Returns:
        CurrencyParams

    Raises:
        OptionValidationError: 参数数量不足、缺失、类型错误或货币不受支持
    """
    _require_count(options, 2)
    currency = expect_string(options, 0, "currency")
    amount = expect_float(options, 1, "amount")

    if currency not in CURRENCIES:
        raise OptionValidationError("Invalid currency. Use 'GBP' or 'USD'.")

    return CurrencyParams(currency=currency, amount=amount)
