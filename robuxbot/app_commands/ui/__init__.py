"""
UI组件模块

提供回复相关的组件：
- 嵌入消息构建器
- 消息可见性控制
- 响应发送器
"""

from .embed_builder import EmbedBuilder
from .message_visibility import MessageVisibility
from .response_emitter import ResponseEmitter

__all__ = [
    'EmbedBuilder',
    'MessageVisibility',
    'ResponseEmitter'
]
