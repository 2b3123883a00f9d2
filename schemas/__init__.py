from .auth import AdminUser, LoginData, LoginRequest, TokenClaims
from .message import (
    MessageCreate,
    MessageResponse,
    MessageStats,
    MessageSummary,
    MessageUpdate,
)

__all__ = [
    # Message schemas
    "MessageCreate",
    "MessageUpdate",
    "MessageResponse",
    "MessageSummary",
    "MessageStats",
    # Auth schemas
    "LoginRequest",
    "LoginData",
    "AdminUser",
    "TokenClaims",
]
