"""Message endpoints.

Reading the active list and submitting a note are public; every other
operation needs the admin token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from app.config.api import ApiSettings
from app.core.dependencies import get_current_admin, get_locale, get_message_service, get_settings
from app.core.i18n import translate
from app.services.message_service import MessageService
from models import MAX_MESSAGE_ID
from schemas.message import MessageCreate, MessageUpdate

router = APIRouter(prefix="/messages", tags=["messages"])

admin_only = [Depends(get_current_admin)]

MessageId = Annotated[int, Path(ge=1, le=MAX_MESSAGE_ID)]


def _listing(items: list) -> dict:
    return {"success": True, "count": len(items), "data": items}


def _create_message(payload: MessageCreate, message_service: MessageService, locale: str) -> dict:
    message = message_service.insert(
        remetente_nome=payload.remetente_nome,
        destinatario_nome=payload.destinatario_nome,
        mensagem=payload.mensagem,
    ).unwrap()
    return {"success": True, "message": translate("MESSAGE_SAVED", locale), "data": message}


@router.get("")
def list_messages(message_service: MessageService = Depends(get_message_service)) -> dict:
    """All active messages, newest first."""
    return _listing(message_service.list_active().unwrap())


@router.post("/public", status_code=status.HTTP_201_CREATED)
def create_public_message(
    payload: MessageCreate,
    message_service: MessageService = Depends(get_message_service),
    locale: str = Depends(get_locale),
) -> dict:
    """Submit a message without logging in."""
    return _create_message(payload, message_service, locale)


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=admin_only)
def create_message(
    payload: MessageCreate,
    message_service: MessageService = Depends(get_message_service),
    locale: str = Depends(get_locale),
) -> dict:
    """Submit a message from the admin console."""
    return _create_message(payload, message_service, locale)


@router.delete("", dependencies=admin_only)
def delete_all_messages(
    message_service: MessageService = Depends(get_message_service),
    locale: str = Depends(get_locale),
) -> dict:
    """Soft-delete every active message."""
    result = message_service.soft_delete_all()
    result.unwrap()

    return {
        "success": True,
        "message": translate("MESSAGES_DELETED", locale, count=result.count),
        "count": result.count,
    }


@router.get("/ordered", dependencies=admin_only)
def list_ordered_messages(
    message_service: MessageService = Depends(get_message_service),
) -> dict:
    """Print queue: unprinted first, newest first within each group."""
    return _listing(message_service.list_ordered().unwrap())


@router.get("/new", dependencies=admin_only)
def list_new_messages(
    since_id: int = Query(
        0, ge=0, le=MAX_MESSAGE_ID, description="Return messages with a greater id"
    ),
    limit: int | None = Query(None, ge=1, le=500, description="Maximum rows"),
    message_service: MessageService = Depends(get_message_service),
    settings: ApiSettings = Depends(get_settings),
) -> dict:
    """Poll for messages created after since_id, highest id first."""
    if limit is None:
        limit = settings.POLL_DEFAULT_LIMIT
    return _listing(message_service.list_since_id(since_id, limit).unwrap())


@router.get("/unread-count", dependencies=admin_only)
def unread_count(message_service: MessageService = Depends(get_message_service)) -> dict:
    """Number of messages not printed yet."""
    return {"success": True, "count": message_service.count_unprinted().unwrap()}


@router.get("/latest", dependencies=admin_only)
def list_latest_messages(
    limit: int | None = Query(None, ge=1, le=100),
    message_service: MessageService = Depends(get_message_service),
    settings: ApiSettings = Depends(get_settings),
) -> dict:
    """Most recent messages without their body."""
    if limit is None:
        limit = settings.LATEST_DEFAULT_LIMIT
    return _listing(message_service.list_latest(limit).unwrap())


@router.get("/{message_id}", dependencies=admin_only)
def get_message(
    message_id: MessageId,
    message_service: MessageService = Depends(get_message_service),
) -> dict:
    return {"success": True, "data": message_service.get_by_id(message_id).unwrap()}


@router.put("/{message_id}", dependencies=admin_only)
def update_message(
    message_id: MessageId,
    payload: MessageUpdate,
    message_service: MessageService = Depends(get_message_service),
    locale: str = Depends(get_locale),
) -> dict:
    """Edit recipient and/or body of an active message."""
    message = message_service.update(message_id, payload.changes()).unwrap()
    return {"success": True, "message": translate("MESSAGE_UPDATED", locale), "data": message}


@router.put("/{message_id}/printed", dependencies=admin_only)
def mark_message_printed(
    message_id: MessageId,
    message_service: MessageService = Depends(get_message_service),
    locale: str = Depends(get_locale),
) -> dict:
    message = message_service.mark_printed(message_id).unwrap()
    return {"success": True, "message": translate("MESSAGE_PRINTED", locale), "data": message}


@router.delete("/{message_id}", dependencies=admin_only)
def delete_message(
    message_id: MessageId,
    message_service: MessageService = Depends(get_message_service),
    locale: str = Depends(get_locale),
) -> dict:
    message = message_service.soft_delete(message_id).unwrap()
    return {"success": True, "message": translate("MESSAGE_DELETED", locale), "data": message}
