"""Authentication service for the admin login and JWT tokens."""

import logging
import secrets
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import ValidationError as ClaimsError

from app.config.api import ApiSettings
from app.core.exceptions import AuthorizationError, InvalidCredentialsError, ValidationError
from schemas.auth import AdminUser, LoginData, TokenClaims

from .result import ServiceResult

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def _matches(provided: str, expected: str) -> bool:
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


class AuthService:
    """Service for handling authentication operations."""

    def __init__(self, settings: ApiSettings) -> None:
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.access_token_expire_hours = settings.JWT_TOKEN_EXPIRE_HOURS
        self._admin_email = settings.ADMIN_EMAIL
        self._admin_password = settings.ADMIN_PASSWORD

    def login(self, email: str | None, password: str | None) -> ServiceResult[LoginData]:
        """Check the admin credentials and issue a token.

        A mismatch never says which of the two fields was wrong.
        """
        if not email or not password:
            return ServiceResult.fail(
                ValidationError(
                    "Email and password are required", error_code="MISSING_CREDENTIALS"
                )
            )

        # Evaluate both comparisons so timing does not reveal which one failed
        email_ok = _matches(email, self._admin_email)
        password_ok = _matches(password, self._admin_password)
        if not (email_ok and password_ok):
            logger.warning("Rejected admin login attempt")
            return ServiceResult.fail(InvalidCredentialsError())

        token = self.create_access_token(email)
        logger.info("Admin logged in")
        return ServiceResult.ok(LoginData(token=token, user=AdminUser(email=email)))

    def create_access_token(self, email: str, expires_delta: timedelta | None = None) -> str:
        """Create a JWT access token."""
        now = datetime.now(timezone.utc)
        if expires_delta is None:
            expires_delta = timedelta(hours=self.access_token_expire_hours)

        to_encode = {
            "email": email,
            "role": ADMIN_ROLE,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> ServiceResult[TokenClaims]:
        """Verify signature and expiry of a token and return its claims."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except JWTError as e:
            logger.info(f"Rejected token: {e}")
            return ServiceResult.fail(AuthorizationError())

        if payload.get("role") != ADMIN_ROLE or not payload.get("email"):
            return ServiceResult.fail(AuthorizationError("Token does not carry the admin role"))

        try:
            claims = TokenClaims.model_validate(payload)
        except ClaimsError as e:
            logger.info(f"Rejected token claims: {e}")
            return ServiceResult.fail(AuthorizationError())

        return ServiceResult.ok(claims)
