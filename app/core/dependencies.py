"""Common dependencies for the application."""

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config.api import ApiSettings
from app.core.exceptions import AuthenticationError
from app.core.i18n import resolve_locale
from app.database.connection import DatabaseManager
from app.services.auth_service import AuthService
from app.services.message_service import MessageService
from schemas.auth import TokenClaims

# Missing credentials must answer 401, not the 403 HTTPBearer raises itself
security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> ApiSettings:
    return request.app.state.settings


def get_database_manager(request: Request) -> DatabaseManager:
    return request.app.state.db_manager


def get_locale(request: Request, settings: ApiSettings = Depends(get_settings)) -> str:
    """Locale for user-facing messages of this request."""
    return resolve_locale(request.headers.get("accept-language"), settings.DEFAULT_LOCALE)


def get_message_service(
    db_manager: DatabaseManager = Depends(get_database_manager),
    settings: ApiSettings = Depends(get_settings),
) -> MessageService:
    """Get message service instance."""
    return MessageService(db_manager, recent_days=settings.STATS_RECENT_DAYS)


def get_auth_service(settings: ApiSettings = Depends(get_settings)) -> AuthService:
    """Get auth service instance."""
    return AuthService(settings)


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenClaims:
    """Claims of the bearer token; 401 when absent, 403 when invalid."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    return auth_service.verify(credentials.credentials).unwrap()
