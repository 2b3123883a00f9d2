from .base import Base
from .message import MAX_MESSAGE_ID, Message, MessageStatus

__all__ = [
    "MAX_MESSAGE_ID",
    "Base",
    "Message",
    "MessageStatus",
]
