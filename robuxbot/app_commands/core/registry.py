"""
命令注册系统

提供Slash命令的声明和注册功能：
- 命令结构声明
- 一次性整体覆盖指定服务器的命令
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple
import aiohttp
import discord

from .error_handler import RegistrationError


@dataclass(frozen=True)
class OptionChoice:
    """参数可选值"""
    name: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'value': self.value}


@dataclass(frozen=True)
class OptionSchema:
    """命令参数声明"""
    name: str
    description: str
    type: discord.AppCommandOptionType
    required: bool = True
    choices: Tuple[OptionChoice, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'name': self.name,
            'description': self.description,
            'type': self.type.value,
            'required': self.required,
        }
        if self.choices:
            payload['choices'] = [choice.to_dict() for choice in self.choices]
        return payload


@dataclass(frozen=True)
class CommandSchema:
    """Slash 命令声明"""
    name: str
    description: str
    options: Tuple[OptionSchema, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'type': discord.AppCommandType.chat_input.value,
            'options': [option.to_dict() for option in self.options],
        }


def _string_choices(*values: str) -> Tuple[OptionChoice, ...]:
    return tuple(OptionChoice(value, value) for value in values)


def _currency_options() -> Tuple[OptionSchema, ...]:
    return (
        OptionSchema(
            name="currency",
            description="Currency to convert from (GBP or USD)",
            type=discord.AppCommandOptionType.string,
            choices=_string_choices("GBP", "USD")
        ),
        OptionSchema(
            name="amount",
            description="Amount to convert",
            type=discord.AppCommandOptionType.number
        ),
    )


def build_command_schemas() -> List[CommandSchema]:
    """
    构建全部命令声明

    Returns:
        help、price、convert、robux 四个命令的声明列表
    """
    return [
        CommandSchema(
            name="help",
            description="Display the available commands and their usage"
        ),
        CommandSchema(
            name="price",
            description="Calculate the price in GBP and USD for a given amount of Robux",
            options=(
                OptionSchema(
                    name="type",
                    description="Conversion type (b/t or a/t)",
                    type=discord.AppCommandOptionType.string,
                    choices=_string_choices("b/t", "a/t")
                ),
                OptionSchema(
                    name="amount",
                    description="Amount of Robux",
                    type=discord.AppCommandOptionType.integer
                ),
            )
        ),
        CommandSchema(
            name="convert",
            description="Convert between GBP and USD",
            options=_currency_options()
        ),
        CommandSchema(
            name="robux",
            description="Convert GBP or USD to the amount of Robux",
            options=_currency_options()
        ),
    ]


class CommandRegistry:
    """
    命令注册器

    通过 discord.py 客户端的 HTTP 层发送完整的命令列表，覆盖目标服务器上已有的命令
    """

    def __init__(self, client: discord.Client, schemas: Optional[Sequence[CommandSchema]] = None):
        """
        初始化命令注册器

        Args:
            client: 已登录的 Discord 客户端
            schemas: 命令声明，默认使用 build_command_schemas()
        """
        self.client = client
        self.schemas: List[CommandSchema] = list(schemas) if schemas is not None else build_command_schemas()
        self.logger = logging.getLogger("robuxbot.app_commands.registry")

        self.logger.debug("命令注册器已初始化")

    def build_payload(self) -> List[Dict[str, Any]]:
        """构建注册请求体"""
        return [schema.to_dict() for schema in self.schemas]

    async def register(self, guild_id: int, application_id: int) -> List[Dict[str, Any]]:
        """
        将命令注册到指定服务器

        Args:
            guild_id: 目标服务器ID
            application_id: 应用ID

        Returns:
            Discord 返回的已注册命令列表

        Raises:
            RegistrationError: 网络错误或 Discord 拒绝请求
        """
        payload = self.build_payload()

        self.logger.debug(f"正在注册 {len(payload)} 个命令到服务器 {guild_id}")

        try:
            registered = await self.client.http.bulk_upsert_guild_commands(
                application_id,
                guild_id,
                payload
            )
        except discord.HTTPException as e:
            raise RegistrationError(
                f"注册命令失败: HTTP {e.status}: {e.text[:200]}",
                status=e.status
            ) from e
        except aiohttp.ClientError as e:
            raise RegistrationError(f"注册命令时网络错误: {e}") from e

        names = ', '.join(command.get('name', '?') for command in registered)
        self.logger.info(f"已注册 {len(registered)} 个命令到服务器 {guild_id}: {names}")
        return registered
