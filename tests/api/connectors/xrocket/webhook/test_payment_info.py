"""Testes para is_invoice_paid e extract_payment_info."""

from __future__ import annotations

import copy
import json
from typing import Any

import pytest

from api.connectors.xrocket.webhook import (
    PaymentInfo,
    extract_payment_info,
    is_invoice_paid,
    parse_webhook_payload,
)

BASE_WEBHOOK: dict[str, Any] = {
    "type": "invoicePay",
    "timestamp": "2024-01-01T00:00:00Z",
    "data": {
        "id": 1,
        "amount": 5,
        "currency": "TONCOIN",
        "status": "paid",
        "payment": {
            "userId": 42,
            "paymentNum": 1,
            "paymentAmount": 5,
            "paid": "2024-01-01T00:05:00Z",
        },
    },
}


def _webhook(**data_overrides: Any):
    payload = copy.deepcopy(BASE_WEBHOOK)
    payment_overrides = data_overrides.pop("payment", {})
    payload["data"].update(data_overrides)
    payload["data"]["payment"].update(payment_overrides)
    return parse_webhook_payload(json.dumps(payload))


@pytest.mark.parametrize(
    ("status", "expected"),
    [("paid", True), ("active", False), ("expired", False), ("PAID", False)],
)
def test_is_invoice_paid(status: str, expected: bool) -> None:
    assert is_invoice_paid(_webhook(status=status)) is expected


def test_extract_payment_info_minimal() -> None:
    info = extract_payment_info(_webhook())

    assert info == PaymentInfo(
        invoice_id=1,
        amount=5,
        currency="TONCOIN",
        status="paid",
        user_id=42,
        payment_amount=5,
        payment_number=1,
        paid_at="2024-01-01T00:05:00Z",
    )
    assert info.payment_amount_received is None
    assert info.comment is None
    assert info.payload is None
    assert info.description is None
    assert info.activations_left is None
    assert info.activations_used is None


def test_extract_payment_info_full() -> None:
    info = extract_payment_info(
        _webhook(
            description="Plano mensal",
            payload="order-77",
            totalActivations=10,
            activationsLeft=3,
            payment={"paymentAmountReceived": 4.95, "comment": "valeu", "paymentNum": 7},
        )
    )

    assert info.description == "Plano mensal"
    assert info.payload == "order-77"
    assert info.comment == "valeu"
    assert info.payment_number == 7
    assert info.payment_amount_received == 4.95
    assert info.total_activations == 10
    assert info.activations_left == 3
    assert info.activations_used == 7


def test_extract_payment_info_empty_strings_become_none() -> None:
    info = extract_payment_info(
        _webhook(description="", payload="", payment={"comment": ""})
    )

    assert info.description is None
    assert info.payload is None
    assert info.comment is None


def test_extract_payment_info_keeps_zero_values() -> None:
    info = extract_payment_info(
        _webhook(activationsLeft=0, totalActivations=1, payment={"paymentAmountReceived": 0})
    )

    assert info.activations_left == 0
    assert info.payment_amount_received == 0
    assert info.activations_used == 1


def test_extract_payment_info_for_unpaid_invoice() -> None:
    info = extract_payment_info(_webhook(status="active"))

    assert info.status == "active"
    assert info.invoice_id == 1
