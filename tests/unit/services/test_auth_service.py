"""Unit tests for the authentication service."""

from datetime import timedelta

import pytest
from jose import jwt

from app.core.exceptions import AuthorizationError, InvalidCredentialsError, ValidationError
from app.services.auth_service import AuthService


class TestLogin:
    def test_login_success(self, auth_service, settings):
        """Test correct credentials issue an admin token valid for 24 hours."""
        result = auth_service.login(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)

        assert result.success is True
        assert result.data.user.email == settings.ADMIN_EMAIL
        assert result.data.user.role == "admin"

        payload = jwt.decode(result.data.token, settings.SECRET_KEY, algorithms=["HS256"])
        assert payload["email"] == settings.ADMIN_EMAIL
        assert payload["role"] == "admin"
        assert payload["exp"] - payload["iat"] == 24 * 3600

    @pytest.mark.parametrize(
        "email, password",
        [
            (None, "x"),
            ("rh.admin", None),
            ("", "x"),
            ("rh.admin", ""),
            (None, None),
        ],
    )
    def test_login_missing_fields(self, auth_service, email, password):
        result = auth_service.login(email, password)

        assert result.success is False
        assert isinstance(result.error, ValidationError)
        assert result.error.error_code == "MISSING_CREDENTIALS"
        assert result.error.status_code == 400

    def test_login_wrong_password(self, auth_service, settings):
        """Test a wrong password fails even with the right email."""
        result = auth_service.login(settings.ADMIN_EMAIL, "wrong")

        assert result.success is False
        assert isinstance(result.error, InvalidCredentialsError)
        assert result.error.status_code == 401

    def test_login_wrong_email(self, auth_service, settings):
        result = auth_service.login("someone@else", settings.ADMIN_PASSWORD)

        assert isinstance(result.error, InvalidCredentialsError)

    def test_login_same_error_for_either_field(self, auth_service, settings):
        """Test the error does not reveal which field was wrong."""
        bad_email = auth_service.login("nope", settings.ADMIN_PASSWORD).error
        bad_password = auth_service.login(settings.ADMIN_EMAIL, "nope").error

        assert bad_email.message == bad_password.message
        assert bad_email.details == bad_password.details == {}

    def test_login_is_exact_match(self, auth_service, settings):
        result = auth_service.login(settings.ADMIN_EMAIL.upper(), settings.ADMIN_PASSWORD)

        assert result.success is False


class TestVerify:
    def test_verify_valid_token(self, auth_service, settings):
        token = auth_service.create_access_token(settings.ADMIN_EMAIL)

        result = auth_service.verify(token)

        assert result.success is True
        assert result.data.email == settings.ADMIN_EMAIL
        assert result.data.role == "admin"

    def test_verify_expired_token(self, auth_service, settings):
        token = auth_service.create_access_token(
            settings.ADMIN_EMAIL, expires_delta=timedelta(seconds=-10)
        )

        result = auth_service.verify(token)

        assert result.success is False
        assert isinstance(result.error, AuthorizationError)
        assert result.error.status_code == 403

    def test_verify_wrong_signature(self, auth_service, settings):
        other = AuthService(settings.model_copy(update={"SECRET_KEY": "x" * 40}))
        token = other.create_access_token(settings.ADMIN_EMAIL)

        result = auth_service.verify(token)

        assert isinstance(result.error, AuthorizationError)

    def test_verify_malformed_token(self, auth_service):
        result = auth_service.verify("not-a-jwt")

        assert isinstance(result.error, AuthorizationError)

    def test_verify_requires_admin_role(self, auth_service, settings):
        token = jwt.encode(
            {"email": settings.ADMIN_EMAIL, "role": "viewer", "exp": 4102444800},
            settings.SECRET_KEY,
            algorithm="HS256",
        )

        result = auth_service.verify(token)

        assert result.success is False
        assert isinstance(result.error, AuthorizationError)

    def test_verify_requires_expiry(self, auth_service, settings):
        token = jwt.encode(
            {"email": settings.ADMIN_EMAIL, "role": "admin"},
            settings.SECRET_KEY,
            algorithm="HS256",
        )

        result = auth_service.verify(token)

        assert result.success is False
        assert isinstance(result.error, AuthorizationError)

    def test_verify_rejects_malformed_claims(self, auth_service, settings):
        token = jwt.encode(
            {"email": 12345, "role": "admin", "exp": 4102444800},
            settings.SECRET_KEY,
            algorithm="HS256",
        )

        result = auth_service.verify(token)

        assert result.success is False
        assert isinstance(result.error, AuthorizationError)
