"""测试辅助函数"""

import discord

from robuxbot.core.interfaces import CommandOption


STRING = discord.AppCommandOptionType.string.value
INTEGER = discord.AppCommandOptionType.integer.value
NUMBER = discord.AppCommandOptionType.number.value


def make_options(*triples):
    """按 (name, type, value) 三元组构建有序参数列表"""
    return tuple(CommandOption(name=name, type=type_, value=value) for name, type_, value in triples)


def price_options(price_type, amount):
    return make_options(("type", STRING, price_type), ("amount", INTEGER, amount))


def currency_options(currency, amount):
    return make_options(("currency", STRING, currency), ("amount", NUMBER, amount))


def interaction_data(name, *options):
    """构建 interaction.data 负载"""
    return {
        "id": "1",
        "name": name,
        "type": 1,
        "options": [{"name": n, "type": t, "value": v} for n, t, v in options],
    }
