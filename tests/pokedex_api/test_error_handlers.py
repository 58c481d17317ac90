"""Exception handler coverage for :mod:`pokedex_api.main`."""

from __future__ import annotations

import json

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.exc import TimeoutError as SQLAlchemyTimeoutError
from starlette.requests import Request

from pokedex_api import main
from pokedex_api.services.dependencies import get_pokemon_service
from pokedex_api.services.errors import NotFoundError, PersistenceError


def _request(path: str = "/pokemon") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.asyncio
async def test_domain_error_uses_its_own_status() -> None:
    response = await main.pokedex_exception_handler(
        _request("/pokemon/9"), NotFoundError("Pokémon not found", detail="id=9")
    )

    assert response.status_code == 404
    body = _body(response)
    assert body["error_type"] == "not_found"
    assert body["message"] == "Pokémon not found"
    assert body["detail"] == "id=9"
    assert body["path"] == "/pokemon/9"


@pytest.mark.asyncio
async def test_persistence_error_maps_to_500() -> None:
    response = await main.pokedex_exception_handler(
        _request("/fight"), PersistenceError("Error recording the fight")
    )

    assert response.status_code == 500
    assert _body(response)["error_type"] == "database_error"


@pytest.mark.asyncio
async def test_integrity_error_maps_to_conflict() -> None:
    exc = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    response = await main.database_integrity_exception_handler(_request(), exc)

    assert response.status_code == 409
    assert _body(response)["error_type"] == "conflict"


@pytest.mark.asyncio
async def test_timeout_error_reports_retry_hint() -> None:
    response = await main.database_timeout_exception_handler(
        _request(), SQLAlchemyTimeoutError("QueuePool limit reached")
    )

    assert response.status_code == 500
    body = _body(response)
    assert body["error_type"] == "timeout_error"
    assert body["retry_after"] == 3


@pytest.mark.asyncio
async def test_unexpected_error_maps_to_internal_error() -> None:
    response = await main.generic_exception_handler(_request(), KeyError("boom"))

    assert response.status_code == 500
    body = _body(response)
    assert body["error_type"] == "internal_error"
    assert "KeyError" in body["detail"]


@pytest.mark.asyncio
async def test_store_outage_during_request_returns_500(api_client: AsyncClient) -> None:
    class UnavailableService:
        async def list_pokemon(self):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    main.app.dependency_overrides[get_pokemon_service] = lambda: UnavailableService()

    response = await api_client.get("/pokemon", headers={"X-Request-ID": "outage-1"})

    assert response.status_code == 500
    body = response.json()
    assert body["error_type"] == "database_error"
    assert body["message"] == "Database connection failed"
    assert body["request_id"] == "outage-1"


@pytest.mark.asyncio
async def test_malformed_json_body_is_bad_request(api_client: AsyncClient) -> None:
    response = await api_client.post(
        "/pokemon",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error_type"] == "validation_error"


@pytest.mark.asyncio
async def test_health_endpoint(api_client: AsyncClient) -> None:
    response = await api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_sanitize_database_url_masks_password() -> None:
    assert (
        main._sanitize_database_url("postgresql+psycopg://ash:pikachu@db:5432/pokedex")
        == "postgresql+psycopg://ash:***@db:5432/pokedex"
    )
    assert main._sanitize_database_url("sqlite+aiosqlite:///./data/pokedex.db") == (
        "sqlite+aiosqlite:///./data/pokedex.db"
    )
