# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.routes.health import get_database_probe


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def set_probe() -> Iterator:
    """Подменяет проверку БД: set_probe(True), set_probe(False) или set_probe(exc)."""

    def _set(outcome: bool | Exception) -> None:
        async def probe() -> bool:
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        app.dependency_overrides[get_database_probe] = lambda: probe

    yield _set
    app.dependency_overrides.pop(get_database_probe, None)


@pytest.fixture
def client() -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()
