from .auth_service import AuthService
from .message_service import MessageService
from .result import ServiceResult

__all__ = ["AuthService", "MessageService", "ServiceResult"]
