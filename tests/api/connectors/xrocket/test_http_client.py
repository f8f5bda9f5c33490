"""Testes para XRocketPayClient usando httpx.MockTransport."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import httpx
import pytest

from api.connectors.xrocket.http_base import HttpError
from api.connectors.xrocket.http_client import (
    XRocketPayClient,
    XRocketPayConfig,
    create_xrocket_client,
)
from api.connectors.xrocket.models import (
    CreateInvoiceRequest,
    CreateTransferRequest,
    CreateWithdrawalRequest,
    Network,
    PaginationParams,
    UpdateChequeRequest,
)

BASE_URL = "https://pay.example.test/"
API_KEY = "app-key"

INVOICE = {
    "id": 7,
    "amount": 1.5,
    "currency": "TONCOIN",
    "status": "active",
    "link": "https://t.me/xrocket?start=inv_7",
    "totalActivations": 1,
    "activationsLeft": 1,
}


class _Recorder:
    """Transport que registra requisições e responde com payload fixo."""

    def __init__(self, status_code: int = 200, payload: Any = None, content: bytes | None = None):
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._payload = payload
        self._content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        return httpx.Response(self._status_code, json=self._payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(recorder: _Recorder, api_key: str = API_KEY) -> XRocketPayClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return XRocketPayClient(
        XRocketPayConfig(base_url=BASE_URL, api_key=api_key, timeout_seconds=5),
        http_client=http_client,
    )


@pytest.mark.asyncio
async def test_get_version_without_api_key() -> None:
    recorder = _Recorder(payload={"version": "1.3.1"})
    client = _client(recorder, api_key="")

    version = await client.get_version()

    assert version.version == "1.3.1"
    assert recorder.last.method == "GET"
    assert str(recorder.last.url) == "https://pay.example.test/version"
    assert "rocket-pay-key" not in recorder.last.headers


@pytest.mark.asyncio
async def test_get_available_currencies() -> None:
    recorder = _Recorder(
        payload={
            "success": True,
            "data": {
                "results": [
                    {
                        "currency": "TONCOIN",
                        "name": "Toncoin",
                        "minTransfer": 0.01,
                        "minCheque": 0.1,
                        "minInvoice": 0.01,
                        "minWithdraw": 0.5,
                        "feeWithdraw": {
                            "currency": "TONCOIN",
                            "networks": [
                                {
                                    "networkCode": "TON",
                                    "feeWithdraw": {"fee": 0.05, "currency": "TONCOIN"},
                                }
                            ],
                        },
                    }
                ]
            },
        }
    )

    response = await _client(recorder, api_key="").get_available_currencies()

    assert response.success is True
    assert response.data is not None
    coin = response.data[0]
    assert coin.currency == "TONCOIN"
    assert coin.fee_withdraw is not None
    assert coin.fee_withdraw.networks[0].fee == 0.05


@pytest.mark.asyncio
async def test_create_invoice_sends_api_key_and_camel_case_body() -> None:
    recorder = _Recorder(payload={"success": True, "data": INVOICE})
    client = _client(recorder)

    response = await client.create_invoice(
        CreateInvoiceRequest(
            amount=1.5,
            currency="TONCOIN",
            num_payments=1,
            callback_url="https://example.com/back",
        )
    )

    request = recorder.last
    assert request.method == "POST"
    assert request.url.path == "/tg-invoices"
    assert request.headers["Rocket-Pay-Key"] == API_KEY
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "amount": 1.5,
        "currency": "TONCOIN",
        "numPayments": 1,
        "callbackUrl": "https://example.com/back",
    }
    assert response.data is not None
    assert response.data.id == 7
    assert response.data.link == "https://t.me/xrocket?start=inv_7"


@pytest.mark.asyncio
async def test_get_invoices_sends_pagination_query() -> None:
    recorder = _Recorder(
        payload={
            "success": True,
            "data": {"total": 1, "limit": 10, "offset": 20, "results": [INVOICE]},
        }
    )

    response = await _client(recorder).get_invoices(PaginationParams(limit=10, offset=20))

    assert recorder.last.url.params["limit"] == "10"
    assert recorder.last.url.params["offset"] == "20"
    assert response.data is not None
    assert response.data.total == 1
    assert response.data.results[0].currency == "TONCOIN"


@pytest.mark.asyncio
async def test_get_invoices_without_params_has_no_query() -> None:
    recorder = _Recorder(payload={"success": True, "data": {"total": 0, "results": []}})

    response = await _client(recorder).get_invoices()

    assert recorder.last.url.query == b""
    assert response.data is not None
    assert response.data.results == []


@pytest.mark.asyncio
async def test_get_invoice_parses_payments() -> None:
    recorder = _Recorder(
        payload={
            "success": True,
            "data": {
                **INVOICE,
                "payments": [
                    {
                        "userId": 42,
                        "paymentNum": 1,
                        "paymentAmount": 1.5,
                        "paid": "2024-01-01T00:05:00Z",
                    }
                ],
            },
        }
    )

    response = await _client(recorder).get_invoice(7)

    assert recorder.last.url.path == "/tg-invoices/7"
    assert response.data is not None
    assert response.data.payments[0].user_id == 42


@pytest.mark.asyncio
async def test_delete_invoice() -> None:
    recorder = _Recorder(payload={"success": True})

    response = await _client(recorder).delete_invoice(7)

    assert recorder.last.method == "DELETE"
    assert response.success is True


@pytest.mark.asyncio
async def test_get_app_info() -> None:
    recorder = _Recorder(
        payload={
            "success": True,
            "data": {
                "name": "shop",
                "feePercents": 1.5,
                "balances": [{"currency": "TONCOIN", "balance": 10}],
            },
        }
    )

    response = await _client(recorder).get_app_info()

    assert recorder.last.url.path == "/app/info"
    assert response.data is not None
    assert response.data.balances[0].balance == 10


@pytest.mark.asyncio
async def test_create_transfer() -> None:
    recorder = _Recorder(
        payload={
            "success": True,
            "data": {"id": 1, "tgUserId": 42, "currency": "TONCOIN", "amount": 2},
        }
    )

    response = await _client(recorder).create_transfer(
        CreateTransferRequest(tg_user_id=42, currency="TONCOIN", amount=2, transfer_id="t-1")
    )

    assert json.loads(recorder.last.content) == {
        "tgUserId": 42,
        "currency": "TONCOIN",
        "amount": 2,
        "transferId": "t-1",
    }
    assert response.data is not None
    assert response.data.tg_user_id == 42


@pytest.mark.asyncio
async def test_get_withdrawal_fees_with_currency_filter() -> None:
    recorder = _Recorder(
        payload={
            "success": True,
            "data": [
                {
                    "code": "TONCOIN",
                    "minWithdraw": 0.5,
                    "fees": [
                        {"networkCode": "TON", "feeWithdraw": {"fee": 0.05, "currency": "TONCOIN"}}
                    ],
                }
            ],
        }
    )

    response = await _client(recorder).get_withdrawal_fees("TONCOIN")

    assert recorder.last.url.params["currency"] == "TONCOIN"
    assert response.data is not None
    assert response.data[0].fees[0].network_code == "TON"


@pytest.mark.asyncio
async def test_create_withdrawal_and_status() -> None:
    withdrawal = {
        "network": "TON",
        "currency": "TONCOIN",
        "amount": 1,
        "address": "EQ...",
        "withdrawalId": "w-1",
        "status": "COMPLETED",
        "txHash": "abc",
    }
    recorder = _Recorder(payload={"success": True, "data": withdrawal})
    client = _client(recorder)

    created = await client.create_withdrawal(
        CreateWithdrawalRequest(
            currency="TONCOIN",
            amount=1,
            withdrawal_id="w-1",
            network=Network.TON,
            address="EQ...",
        )
    )
    status = await client.get_withdrawal_status("w-1")

    assert json.loads(recorder.requests[0].content)["network"] == "TON"
    assert recorder.last.url.path == "/app/withdrawal/status/w-1"
    assert created.data is not None
    assert status.data is not None
    assert status.data.is_final is True


@pytest.mark.asyncio
async def test_update_multicheque_serializes_lists() -> None:
    recorder = _Recorder(
        payload={
            "success": True,
            "data": {
                "id": 3,
                "currency": "TONCOIN",
                "total": 10,
                "perUser": 1,
                "users": 10,
                "state": "active",
                "link": "https://t.me/xrocket?start=mc_3",
            },
        }
    )

    response = await _client(recorder).update_multicheque(
        3, UpdateChequeRequest(description="promo", enabled_countries=("BR", "PT"))
    )

    assert recorder.last.method == "PUT"
    assert json.loads(recorder.last.content) == {
        "description": "promo",
        "enabledCountries": ["BR", "PT"],
    }
    assert response.data is not None
    assert response.data.send_notifications is True
    assert response.data.tg_resources == []


@pytest.mark.asyncio
async def test_authenticated_call_without_api_key_raises_before_request() -> None:
    recorder = _Recorder(payload={"success": True})
    client = _client(recorder, api_key="  ")

    with pytest.raises(ValueError, match="create_invoice"):
        await client.create_invoice(CreateInvoiceRequest(amount=1))

    assert recorder.requests == []


@pytest.mark.asyncio
async def test_set_api_key_enables_authenticated_calls() -> None:
    recorder = _Recorder(payload={"success": True})
    client = _client(recorder, api_key="")

    client.set_api_key("new-key")
    await client.delete_multicheque(3)

    assert client.get_config().api_key == "new-key"
    assert recorder.last.headers["Rocket-Pay-Key"] == "new-key"


@pytest.mark.asyncio
async def test_api_error_raises_http_error() -> None:
    recorder = _Recorder(status_code=400, payload={"success": False, "message": "Bad amount"})

    with pytest.raises(HttpError) as exc_info:
        await _client(recorder).create_invoice(CreateInvoiceRequest(amount=-1))

    assert exc_info.value.status_code == 400
    assert exc_info.value.is_retryable is False
    assert "Bad amount" in str(exc_info.value)


@pytest.mark.asyncio
async def test_success_false_with_200_is_error() -> None:
    recorder = _Recorder(payload={"success": False})

    with pytest.raises(HttpError, match="Erro desconhecido"):
        await _client(recorder).get_app_info()


@pytest.mark.asyncio
async def test_server_error_is_retryable() -> None:
    recorder = _Recorder(status_code=503, content=b"upstream down")

    with pytest.raises(HttpError) as exc_info:
        await _client(recorder).get_app_info()

    assert exc_info.value.status_code == 503
    assert exc_info.value.is_retryable is True


@pytest.mark.asyncio
async def test_non_utf8_error_body_is_retryable_http_error() -> None:
    recorder = _Recorder(status_code=502, content=b"\x80\x81 bad gateway")

    with pytest.raises(HttpError) as exc_info:
        await _client(recorder, api_key="").get_version()

    assert exc_info.value.status_code == 502
    assert exc_info.value.is_retryable is True


@pytest.mark.asyncio
async def test_non_json_success_response_raises() -> None:
    recorder = _Recorder(status_code=200, content=b"<html>")

    with pytest.raises(HttpError, match="Response JSON inválido"):
        await _client(recorder, api_key="").get_version()


@pytest.mark.asyncio
async def test_connection_error_is_retryable_http_error() -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    client = XRocketPayClient(
        XRocketPayConfig(base_url=BASE_URL, api_key=API_KEY),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(_fail)),
    )

    with pytest.raises(HttpError) as exc_info:
        await client.get_app_info()

    assert str(exc_info.value) == "http_connection_error"
    assert exc_info.value.is_retryable is True


def test_create_xrocket_client_from_settings() -> None:
    settings = SimpleNamespace(
        base_url="https://other.example/",
        api_key="k",
        request_timeout_seconds=12.0,
    )

    client = create_xrocket_client(settings)  # type: ignore[arg-type]

    assert client.get_config() == XRocketPayConfig(
        base_url="https://other.example/", api_key="k", timeout_seconds=12.0
    )


def test_create_xrocket_client_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XROCKET_PAY_API_KEY", "env-key")
    monkeypatch.delenv("XROCKET_PAY_BASE_URL", raising=False)
    monkeypatch.delenv("XROCKET_PAY_TIMEOUT_SECONDS", raising=False)

    config = create_xrocket_client().get_config()

    assert config.api_key == "env-key"
    assert config.base_url == "https://pay.xrocket.tg/"
    assert config.timeout_seconds == 30.0
