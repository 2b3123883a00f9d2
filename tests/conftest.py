import pytest
from fastapi.testclient import TestClient

from app.config.api import ApiSettings
from app.database.connection import DatabaseManager
from app.main import create_app
from app.services.auth_service import AuthService
from app.services.message_service import MessageService

ADMIN_EMAIL = "rh.admin"
ADMIN_PASSWORD = "wMb~IVrfnM*%\"ç"
SECRET_KEY = "test_secret_key_for_testing_12345678901234567890"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


def make_settings(database_url: str, **overrides) -> ApiSettings:
    """Build settings explicitly so the process environment and .env are not consulted."""
    values = {
        "ENVIRONMENT": "test",
        "DEBUG": False,
        "LOG_LEVEL": "WARNING",
        "SECRET_KEY": SECRET_KEY,
        "DATABASE_URL": database_url,
        "ADMIN_EMAIL": ADMIN_EMAIL,
        "ADMIN_PASSWORD": ADMIN_PASSWORD,
    }
    values.update(overrides)
    return ApiSettings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path) -> ApiSettings:
    """Settings backed by a SQLite file, so threadpool sessions share one database."""
    return make_settings(f"sqlite:///{tmp_path / 'omedeto.sqlite3'}")


@pytest.fixture
def db_manager(settings):
    """Database manager with tables created."""
    manager = DatabaseManager(settings)
    manager.create_tables()

    yield manager

    manager.close()


@pytest.fixture
def message_service(db_manager) -> MessageService:
    return MessageService(db_manager)


@pytest.fixture
def auth_service(settings) -> AuthService:
    return AuthService(settings)


@pytest.fixture
def client(settings, db_manager):
    """Test client with the application lifespan running."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(auth_service) -> str:
    return auth_service.create_access_token(ADMIN_EMAIL)


@pytest.fixture
def admin_headers(admin_token) -> dict[str, str]:
    """Authorization headers for the admin account."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def make_message(message_service):
    """Insert a message through the service and return it."""

    def _make(
        remetente_nome: str = "Ana",
        destinatario_nome: str = "Bruno",
        mensagem: str = "Obrigada pela ajuda no projeto!",
    ):
        return message_service.insert(remetente_nome, destinatario_nome, mensagem).unwrap()

    return _make
