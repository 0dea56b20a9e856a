#!/usr/bin/env python3
"""
RobuxBot - Robux 与英镑/美元换算 Discord 机器人

主程序入口点，负责配置加载、日志设置和机器人启动。
"""
import logging

from robuxbot.bot import RobuxBot
from robuxbot.rates import DEFAULT_RATES
from robuxbot.utils.config_manager import ConfigManager, ConfigurationError
from robuxbot.utils.logger import setup_logger


def main() -> int:
    """
    RobuxBot 主入口函数。

    Returns:
        int: 退出代码（0表示成功，1表示错误）
    """
    config = ConfigManager()

    setup_logger(
        log_level=config.get_log_level(),
        log_file=config.get_log_file(),
        max_size=config.get_log_max_size(),
        backup_count=config.get_log_backup_count()
    )
    logger = logging.getLogger("robuxbot")

    logger.info("=" * 60)
    logger.info("💱 RobuxBot 启动中...")
    logger.info("=" * 60)

    try:
        bot = RobuxBot(config)
    except ConfigurationError as e:
        logger.error(f"❌ 配置错误: {e}")
        logger.error("请设置 DISCORD_TOKEN 和 GUILD_ID 环境变量，或在 config/config.yaml 中配置")
        return 1

    _log_bot_configuration(logger, bot)

    try:
        logger.info("🚀 启动机器人，按 Ctrl+C 停止")
        bot.run()
    except KeyboardInterrupt:
        logger.info("🛑 用户停止了机器人 (Ctrl+C)")
        return 0
    except Exception as e:
        logger.error(f"❌ 启动机器人时发生意外错误: {e}", exc_info=True)
        return 1

    return 0


def _log_bot_configuration(logger: logging.Logger, bot: RobuxBot) -> None:
    """记录机器人配置摘要。"""
    logger.info("📋 机器人配置摘要:")
    logger.info(f"   目标服务器: {bot.guild_id}")
    logger.info(f"   已声明命令: {', '.join(bot.integration.dispatcher.get_command_names())}")
    logger.info(
        f"   汇率: 1 R$ = £{DEFAULT_RATES.robux_to_gbp}, "
        f"£1 = ${DEFAULT_RATES.gbp_to_usd}, 抽成 {DEFAULT_RATES.robux_markup:.0%}"
    )
    logger.info("=" * 60)


if __name__ == "__main__":
    exit(main())
