"""Message statistics endpoint."""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_message_service
from app.services.message_service import MessageService

router = APIRouter(tags=["messages"])


@router.get("/stats")
async def get_stats(message_service: MessageService = Depends(get_message_service)) -> dict:
    """Totals over active messages."""
    stats = (await message_service.get_stats()).unwrap()
    return {"success": True, "data": stats.model_dump(by_alias=True)}
