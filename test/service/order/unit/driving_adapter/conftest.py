from typing import Iterator

from fastapi import FastAPI
from fastapi.testclient import TestClient
import jwt
import pytest

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES


ORDERS_URL = f'{settings.API_PREFIX}/v1/customerapp/orders'
EVENTS_URL = f'{settings.API_PREFIX}/v1/adminapp/events'


def make_token(
    *, account_id: int = 7, role: str = 'customer', secret: str | None = None, **claims
) -> str:
    payload = {
        'account_id': account_id,
        'name': 'Budi Santoso',
        'email': 'budi@example.com',
        'role': role,
        **claims,
    }
    return jwt.encode(
        payload, secret or settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM
    )


def auth_header(**kwargs) -> dict[str, str]:
    return {'Authorization': f'Bearer {make_token(**kwargs)}'}


@pytest.fixture
def app() -> Iterator[FastAPI]:
    container.wire(modules=WIRE_MODULES)
    app = create_app(title_suffix=' (Test)')
    yield app
    app.dependency_overrides.clear()
    container.unwire()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
