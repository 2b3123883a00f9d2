import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


# Ids are stored in a 32-bit signed integer column
MAX_MESSAGE_ID = 2**31 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MessageStatus(str, enum.Enum):
    """Lifecycle of a message; only moves from active to deleted."""

    ACTIVE = "active"
    DELETED = "deleted"


class Message(Base):
    """Recognition note written by a sender to a recipient."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    remetente_nome: Mapped[str] = mapped_column(String(255), nullable=False)
    destinatario_nome: Mapped[str] = mapped_column(String(255), nullable=False)
    mensagem: Mapped[str] = mapped_column(Text, nullable=False)
    is_printed: Mapped[bool] = mapped_column(
        "isprinted", Boolean, nullable=False, default=False, server_default=false()
    )
    printed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=MessageStatus.ACTIVE.value,
        server_default=MessageStatus.ACTIVE.value,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Message id={self.id} status={self.status} printed={self.is_printed}>"
