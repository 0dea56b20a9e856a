"""
消息可见性控制

决定回复是否为 Ephemeral（仅调用者可见）
"""

import logging

from robuxbot.core.interfaces import MessageType


class MessageVisibility:
    """
    消息可见性控制器

    根据消息类型决定可见性策略
    """

    def __init__(self):
        """初始化消息可见性控制器"""
        self.logger = logging.getLogger("robuxbot.app_commands.message_visibility")

        self._visibility_rules = {
            # Ephemeral消息（仅用户可见）
            MessageType.HELP: True,

            # Public消息（所有用户可见）
            MessageType.RESULT: False,
            MessageType.ERROR: False
        }

    def should_be_ephemeral(self, message_type: MessageType) -> bool:
        """
        判断消息是否应该是ephemeral

        Args:
            message_type: 消息类型

        Returns:
            True if should be ephemeral, False if should be public
        """
        ephemeral = self._visibility_rules.get(message_type, False)
        self.logger.debug(f"消息可见性决策 - 类型: {message_type.value}, ephemeral: {ephemeral}")
        return ephemeral
