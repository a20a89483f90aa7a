"""
Cognitia API - configuración de tests y fixtures
"""
import os

# Antes de importar la app: settings se leen al importar
os.environ["JWT_SECRET"] = "test-jwt-secret-key-for-testing-only-0123456789"
os.environ["SMTP_HOST"] = ""

import pytest
from fastapi.testclient import TestClient

from app.core import rate_limit
from app.infrastructure.db.bootstrap import seed_collections
from app.infrastructure.db.seed_data import DEMO_USER_ID
from app.infrastructure.security.token_service import create_access_token
from app.main import app
from app.repositories import auth_repo


@pytest.fixture(autouse=True)
def seeded_store():
    """Almacén limpio y con datos de demo en cada test."""
    seed_collections()
    rate_limit.reset()
    yield
    rate_limit.reset()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def demo_user():
    return auth_repo.get_user_by_id(DEMO_USER_ID)


@pytest.fixture
def auth_headers(demo_user):
    return {"Authorization": f"Bearer {create_access_token(user=demo_user)}"}
