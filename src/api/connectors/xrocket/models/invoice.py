"""DTOs de invoices (tg-invoices)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..webhook.models import PaymentRecord
from .common import to_camel_payload


@dataclass(frozen=True, slots=True)
class CreateInvoiceRequest:
    """Request de criação de invoice.

    amount None + min_payment cria multi-invoice de valor livre.
    """

    amount: float | None = None
    min_payment: float | None = None
    num_payments: int | None = None
    currency: str | None = None
    description: str | None = None
    hidden_message: str | None = None
    comments_enabled: bool | None = None
    callback_url: str | None = None
    payload: str | None = None
    expired_in: int | None = None
    platform_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return to_camel_payload(self)


@dataclass(frozen=True, slots=True)
class Invoice:
    """Invoice retornada por criação e listagem."""

    id: int
    amount: float
    currency: str
    status: str
    link: str | None = None
    min_payment: float | None = None
    total_activations: int | None = None
    activations_left: int | None = None
    description: str | None = None
    hidden_message: str | None = None
    payload: str | None = None
    callback_url: str | None = None
    comments_enabled: bool | None = None
    created: str | None = None
    paid: str | None = None
    expired_in: int | None = None

    @classmethod
    def _fields_from_dict(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": data["id"],
            "amount": data["amount"],
            "currency": data["currency"],
            "status": data["status"],
            "link": data.get("link"),
            "min_payment": data.get("minPayment"),
            "total_activations": data.get("totalActivations"),
            "activations_left": data.get("activationsLeft"),
            "description": data.get("description"),
            "hidden_message": data.get("hiddenMessage"),
            "payload": data.get("payload"),
            "callback_url": data.get("callbackUrl"),
            "comments_enabled": data.get("commentsEnabled"),
            "created": data.get("created"),
            "paid": data.get("paid"),
            "expired_in": data.get("expiredIn"),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Invoice:
        return cls(**cls._fields_from_dict(data))


@dataclass(frozen=True, slots=True)
class FullInvoice(Invoice):
    """Invoice com a lista de pagamentos (GET /tg-invoices/{id})."""

    payments: list[PaymentRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FullInvoice:
        return cls(
            **Invoice._fields_from_dict(data),
            payments=[PaymentRecord.from_dict(item) for item in data.get("payments") or []],
        )
