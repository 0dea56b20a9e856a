"""
换算命令模块

提供 Robux 与货币换算相关的命令：
- 价格计算
- 货币换算
- Robux 数量计算
"""

from .price_command import PriceCommand, round_half_away_from_zero
from .convert_command import ConvertCommand
from .robux_command import RobuxCommand

__all__ = [
    'PriceCommand',
    'ConvertCommand',
    'RobuxCommand',
    'round_half_away_from_zero'
]
