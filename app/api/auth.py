"""Admin authentication endpoints."""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_auth_service, get_current_admin, get_locale
from app.core.i18n import translate
from app.services.auth_service import AuthService
from schemas.auth import LoginRequest, TokenClaims

router = APIRouter(tags=["authentication"])


@router.post("/login")
def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
    locale: str = Depends(get_locale),
) -> dict:
    """Exchange the admin credentials for a bearer token."""
    login_data = auth_service.login(request.email, request.password).unwrap()

    return {
        "success": True,
        "message": translate("LOGIN_OK", locale),
        "token": login_data.token,
        "user": login_data.user.model_dump(),
    }


@router.get("/verify-token")
async def verify_token(current_admin: TokenClaims = Depends(get_current_admin)) -> dict:
    """Echo the claims of a valid token."""
    return {"success": True, "user": current_admin.model_dump(exclude_none=True)}
