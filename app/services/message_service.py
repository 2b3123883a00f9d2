"""Message Service for data access operations."""

import asyncio
import functools
import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from sqlalchemy import Select, desc, distinct, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from app.core.exceptions import DatabaseError, NotFoundError, ValidationError
from app.database.connection import DatabaseManager
from models import MAX_MESSAGE_ID, Message, MessageStatus
from models.message import utcnow
from schemas.message import MessageResponse, MessageStats, MessageSummary

from .result import ServiceResult

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"destinatario_nome", "mensagem"})

_is_active = Message.status == MessageStatus.ACTIVE.value


def storage_operation(action: str) -> Callable:
    """Convert storage failures of the wrapped operation into a failed result."""

    def decorator(func: Callable[..., ServiceResult]) -> Callable[..., ServiceResult]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> ServiceResult:
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.exception(f"Failed to {action}")
                return ServiceResult.fail(
                    DatabaseError(f"Failed to {action}", details={"reason": str(e)})
                )

        return wrapper

    return decorator


def _not_found(message_id: int) -> ServiceResult:
    return ServiceResult.fail(NotFoundError("Message", str(message_id)))


def _storable_id(message_id: int) -> bool:
    return 1 <= message_id <= MAX_MESSAGE_ID


def _to_response(messages: list[Message]) -> list[MessageResponse]:
    return [MessageResponse.model_validate(m) for m in messages]


class MessageService:
    """Service for message data operations."""

    def __init__(self, db: DatabaseManager, recent_days: int = 7):
        """Initialize MessageService with the database manager."""
        self.db = db
        self.recent_days = recent_days

    def _active_by_id(
        self, session: Session, message_id: int, lock: bool = False
    ) -> Message | None:
        stmt = select(Message).where(Message.id == message_id, _is_active)
        if lock:
            stmt = stmt.with_for_update()
        return session.scalars(stmt).first()

    @storage_operation("save message")
    def insert(
        self, remetente_nome: str, destinatario_nome: str, mensagem: str
    ) -> ServiceResult[MessageResponse]:
        """Store a new active, unprinted message."""
        with self.db.session_scope() as session:
            message = Message(
                remetente_nome=remetente_nome,
                destinatario_nome=destinatario_nome,
                mensagem=mensagem,
                is_printed=False,
                status=MessageStatus.ACTIVE.value,
            )
            session.add(message)
            session.flush()
            session.refresh(message)
            logger.info(f"Stored message {message.id}")
            return ServiceResult.ok(MessageResponse.model_validate(message))

    @storage_operation("list messages")
    def list_active(self) -> ServiceResult[list[MessageResponse]]:
        """Active messages, newest first."""
        with self.db.session_scope() as session:
            messages = session.scalars(
                select(Message)
                .where(_is_active)
                .order_by(desc(Message.created_at), desc(Message.id))
            ).all()
            return ServiceResult.ok(_to_response(messages))

    @storage_operation("get message")
    def get_by_id(self, message_id: int) -> ServiceResult[MessageResponse]:
        if not _storable_id(message_id):
            return _not_found(message_id)
        with self.db.session_scope() as session:
            message = self._active_by_id(session, message_id)
            if message is None:
                return _not_found(message_id)
            return ServiceResult.ok(MessageResponse.model_validate(message))

    @storage_operation("delete message")
    def soft_delete(self, message_id: int) -> ServiceResult[MessageResponse]:
        """Mark one active message as deleted and return it."""
        if not _storable_id(message_id):
            return _not_found(message_id)
        with self.db.session_scope() as session:
            message = self._active_by_id(session, message_id, lock=True)
            if message is None:
                return _not_found(message_id)
            message.status = MessageStatus.DELETED.value
            session.flush()
            logger.info(f"Soft-deleted message {message_id}")
            return ServiceResult.ok(MessageResponse.model_validate(message))

    @storage_operation("delete all messages")
    def soft_delete_all(self) -> ServiceResult[list[MessageResponse]]:
        """Mark every active message as deleted.

        The rows are locked by the read that produces the count, so the count
        and the update cover the same set.
        """
        with self.db.session_scope() as session:
            messages = session.scalars(
                select(Message).where(_is_active).with_for_update()
            ).all()
            for message in messages:
                message.status = MessageStatus.DELETED.value
            session.flush()
            logger.info(f"Soft-deleted {len(messages)} messages")
            return ServiceResult.ok(_to_response(messages), count=len(messages))

    @storage_operation("mark message as printed")
    def mark_printed(self, message_id: int) -> ServiceResult[MessageResponse]:
        """Flag a message as printed. Every call re-stamps printed_at."""
        if not _storable_id(message_id):
            return _not_found(message_id)
        with self.db.session_scope() as session:
            message = session.get(Message, message_id, with_for_update=True)
            if message is None:
                return _not_found(message_id)
            message.is_printed = True
            message.printed_at = utcnow()
            session.flush()
            return ServiceResult.ok(MessageResponse.model_validate(message))

    @storage_operation("update message")
    def update(self, message_id: int, changes: dict[str, str]) -> ServiceResult[MessageResponse]:
        """Edit recipient and/or body of an active message."""
        fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v}
        if not fields:
            return ServiceResult.fail(
                ValidationError("No updatable fields provided", error_code="EMPTY_UPDATE")
            )
        if not _storable_id(message_id):
            return _not_found(message_id)

        with self.db.session_scope() as session:
            message = self._active_by_id(session, message_id, lock=True)
            if message is None:
                return _not_found(message_id)
            for key, value in fields.items():
                setattr(message, key, value)
            session.flush()
            logger.info(f"Updated message {message_id}: {sorted(fields)}")
            return ServiceResult.ok(MessageResponse.model_validate(message))

    @storage_operation("list ordered messages")
    def list_ordered(self) -> ServiceResult[list[MessageResponse]]:
        """Active messages, unprinted first, each group newest first."""
        with self.db.session_scope() as session:
            messages = session.scalars(
                select(Message)
                .where(_is_active)
                .order_by(
                    Message.is_printed.asc(),
                    desc(Message.created_at),
                    desc(Message.id),
                )
            ).all()
            return ServiceResult.ok(_to_response(messages))

    @storage_operation("list messages since id")
    def list_since_id(
        self, since_id: int = 0, limit: int = 50
    ) -> ServiceResult[list[MessageResponse]]:
        """Messages of any status with id above since_id, highest id first."""
        since_id = max(0, min(since_id, MAX_MESSAGE_ID))
        with self.db.session_scope() as session:
            messages = session.scalars(
                select(Message)
                .where(Message.id > since_id)
                .order_by(desc(Message.id))
                .limit(limit)
            ).all()
            return ServiceResult.ok(_to_response(messages))

    @storage_operation("count unprinted messages")
    def count_unprinted(self) -> ServiceResult[int]:
        with self.db.session_scope() as session:
            count = session.scalar(
                select(func.count(Message.id)).where(Message.is_printed.is_(False))
            ) or 0
            return ServiceResult.ok(count, count=count)

    @storage_operation("list latest messages")
    def list_latest(self, limit: int = 10) -> ServiceResult[list[MessageSummary]]:
        with self.db.session_scope() as session:
            messages = session.scalars(
                select(Message).order_by(desc(Message.id)).limit(limit)
            ).all()
            return ServiceResult.ok([MessageSummary.model_validate(m) for m in messages])

    def _count(self, stmt: Select) -> int:
        with self.db.session_scope() as session:
            return session.scalar(stmt) or 0

    async def get_stats(self) -> ServiceResult[MessageStats]:
        """Four independent counts over active messages, run concurrently."""
        since = utcnow() - timedelta(days=self.recent_days)
        queries = [
            select(func.count(Message.id)).where(_is_active),
            select(func.count(Message.id)).where(_is_active, Message.is_printed.is_(True)),
            select(func.count(distinct(Message.destinatario_nome))).where(_is_active),
            select(func.count(Message.id)).where(_is_active, Message.created_at >= since),
        ]

        try:
            total, printed, recipients, recent = await asyncio.gather(
                *(run_in_threadpool(self._count, stmt) for stmt in queries)
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to compute message statistics")
            return ServiceResult.fail(
                DatabaseError("Failed to compute message statistics", details={"reason": str(e)})
            )

        return ServiceResult.ok(
            MessageStats(
                total=total,
                printed_count=printed,
                unique_recipients=recipients,
                recent_count=recent,
            )
        )

    def health_check(self) -> bool:
        return self.db.health_check()
