"""
Test configuration and fixtures for the Qanyare restaurant service
"""

import pytest
from fastapi.testclient import TestClient

from qanyare.infrastructure.configuration.config import Settings
from qanyare.infrastructure.database.operations import DatabaseManager
from qanyare.infrastructure.repositories import (
    build_in_memory_storage,
    build_sqlalchemy_storage,
)
from qanyare.presentation.api.app import create_app

BACKENDS = ["memory", "database"]


def make_settings(tmp_path, **overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file"""
    values = {
        "database_url": "sqlite:///:memory:",
        "storage_backend": "memory",
        "seed_on_startup": False,
        "environment": "test",
        "log_level": "DEBUG",
        "log_to_file": False,
        "log_dir": str(tmp_path / "logs"),
        "client_storage_path": str(tmp_path / "client_storage.json"),
        "api_base_url": "http://testserver",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture(params=BACKENDS)
def backend_settings(request, tmp_path) -> Settings:
    """Settings for each storage backend in turn"""
    return make_settings(tmp_path, storage_backend=request.param)


@pytest.fixture(params=BACKENDS)
def storage(request, tmp_path):
    """Empty storage for each backend in turn"""
    if request.param == "memory":
        yield build_in_memory_storage()
        return

    db_manager = DatabaseManager(make_settings(tmp_path, storage_backend="database"))
    db_manager.create_tables()
    yield build_sqlalchemy_storage(db_manager)
    db_manager.close()


@pytest.fixture
def client(backend_settings):
    """API client over empty storage"""
    with TestClient(create_app(backend_settings)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(backend_settings):
    """API client over storage loaded with the fixture data"""
    seeded = backend_settings.model_copy(update={"seed_on_startup": True})
    with TestClient(create_app(seeded)) as test_client:
        yield test_client


@pytest.fixture
def enforcing_client(tmp_path):
    """API client with status transitions enforced"""
    config = make_settings(tmp_path, enforce_status_transitions=True)
    with TestClient(create_app(config)) as test_client:
        yield test_client


def order_payload(customer_name: str = "Amina Yusuf", total: int = 300, **overrides):
    payload = {
        "customerName": customer_name,
        "customerPhone": "+254 700 000 001",
        "items": [{"id": 1, "name": "Somali Tea", "price": 150, "quantity": 2}],
        "total": total,
    }
    payload.update(overrides)
    return payload


def reservation_payload(customer_name: str = "Omar Abdi", **overrides):
    payload = {
        "customerName": customer_name,
        "customerPhone": "+254 700 000 002",
        "date": "2025-06-01",
        "time": "19:30",
        "guests": 4,
        "eventType": "dinner",
        "tableId": "1",
    }
    payload.update(overrides)
    return payload
