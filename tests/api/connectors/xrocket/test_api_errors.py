"""Testes para parsing e classificação de erros da API xRocket."""

from __future__ import annotations

import pytest

from api.connectors.xrocket.api_errors import (
    XRocketApiError,
    is_permanent_error,
    parse_api_error,
)


@pytest.mark.parametrize(
    ("status_code", "permanent"),
    [(400, True), (401, True), (404, True), (429, False), (500, False), (503, False)],
)
def test_is_permanent_error(status_code: int, permanent: bool) -> None:
    assert is_permanent_error(status_code) is permanent


def test_parse_api_error_success_returns_none() -> None:
    assert parse_api_error(200, {"success": True, "data": {}}) is None
    assert parse_api_error(200, {"version": "1.0"}) is None


def test_parse_api_error_uses_message() -> None:
    error = parse_api_error(401, {"success": False, "message": "Invalid key"})

    assert error == XRocketApiError(status_code=401, message="Invalid key", is_permanent=True)


def test_parse_api_error_success_false_on_200() -> None:
    error = parse_api_error(200, {"success": False, "message": "Not enough funds"})

    assert error is not None
    assert error.message == "Not enough funds"


@pytest.mark.parametrize("response_data", [None, [], "boom", {"message": ""}, {"message": 3}])
def test_parse_api_error_unknown_message(response_data: object) -> None:
    error = parse_api_error(502, response_data)

    assert error is not None
    assert error.message == "Erro desconhecido"
    assert error.is_permanent is False
