"""
Tests for the error-to-status translation.

A small app raises each kind of failure from a route; the handlers must
produce the documented status and body.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from quiz_service.domain.exceptions import (DomainException, ErrorCode,
                                            ValidationException)
from quiz_service.error_handlers import (INTERNAL_ERROR_MESSAGE, error_body,
                                         register_error_handlers,
                                         status_for_code)

EXPECTED_STATUS = {
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.GENRE_EXISTS: 409,
    ErrorCode.USER_EXISTS: 409,
}


class Payload(BaseModel):
    count: int = 0


@pytest.fixture
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/domain/{code}")
    def raise_domain(code: str):
        raise DomainException(ErrorCode(code), f"{code} happened")

    @app.get("/validation")
    def raise_validation():
        raise ValidationException("name", "genre name is required")

    @app.get("/boom")
    def raise_unexpected():
        raise RuntimeError("connection string postgres://secret@db")

    @app.post("/body")
    def accept_body(payload: Payload):
        return {"count": payload.count}

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_every_code_has_a_status():
    assert {code: status_for_code(code) for code in ErrorCode} == EXPECTED_STATUS


@pytest.mark.parametrize("code", list(ErrorCode))
def test_domain_errors(client, code):
    response = client.get(f"/domain/{code.value}")

    assert response.status_code == EXPECTED_STATUS[code]
    assert response.json()["message"] == f"{code.value} happened"


def test_validation_error(client):
    response = client.get("/validation")

    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request", "message": "genre name is required"}


def test_undecodable_body(client):
    response = client.post("/body", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["error"] == "Bad Request"


def test_wrong_field_type(client):
    response = client.post("/body", json={"count": "many"})

    assert response.status_code == 400


def test_unknown_route_keeps_its_status(client):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json()["error"] == "Not Found"


def test_unexpected_error_does_not_leak(client):
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error", "message": INTERNAL_ERROR_MESSAGE}
    assert "secret" not in response.text


def test_error_body_phrase():
    assert error_body(409, "exists") == {"error": "Conflict", "message": "exists"}
