"""Modelos tipados do webhook de pagamento de invoice.

Construídos somente depois que o dict bruto passou por todas as checagens
de receive.parse_webhook_payload. Campos opcionais ausentes viram None.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class WebhookType(StrEnum):
    """Tipos de notificação reconhecidos."""

    INVOICE_PAY = "invoicePay"


class InvoiceStatus(StrEnum):
    """Status possíveis de uma invoice."""

    ACTIVE = "active"
    PAID = "paid"
    EXPIRED = "expired"


# Campos obrigatórios (nomes no wire), verificados na ordem listada
REQUIRED_DATA_FIELDS: tuple[str, ...] = ("id", "amount", "currency", "status", "payment")
REQUIRED_PAYMENT_FIELDS: tuple[str, ...] = ("userId", "paymentNum", "paymentAmount", "paid")


@dataclass(frozen=True, slots=True)
class PaymentRecord:
    """Um pagamento individual contra a invoice."""

    user_id: int
    payment_num: int
    payment_amount: float
    paid: str
    payment_amount_received: float | None = None
    comment: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaymentRecord:
        return cls(
            user_id=data["userId"],
            payment_num=data["paymentNum"],
            payment_amount=data["paymentAmount"],
            paid=data["paid"],
            payment_amount_received=data.get("paymentAmountReceived"),
            comment=data.get("comment"),
        )


@dataclass(frozen=True, slots=True)
class InvoicePaymentData:
    """Dados da invoice enviados no webhook invoicePay."""

    id: int
    amount: float
    currency: str
    status: str
    payment: PaymentRecord
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
    link: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InvoicePaymentData:
        return cls(
            id=data["id"],
            amount=data["amount"],
            currency=data["currency"],
            status=data["status"],
            payment=PaymentRecord.from_dict(data["payment"]),
            min_payment=data.get("minPayment"),
            total_activations=data.get("totalActivations"),
            activations_left=data.get("activationsLeft"),
            description=data.get("description"),
            hidden_message=data.get("hiddenMessage"),
            payload=data.get("payload"),
            callback_url=data.get("callbackUrl"),
            comments_enabled=data.get("commentsEnabled"),
            created=data.get("created"),
            paid=data.get("paid"),
            expired_in=data.get("expiredIn"),
            link=data.get("link"),
        )


@dataclass(frozen=True, slots=True)
class WebhookEnvelope:
    """Envelope {type, timestamp, data} de uma notificação validada.

    Attributes:
        type: Tipo da notificação (hoje apenas invoicePay)
        timestamp: Momento de envio (ISO-8601, apenas informativo)
        data: Payload de pagamento da invoice
        raw: Dict original, preserva campos desconhecidos pelo SDK
    """

    type: WebhookType
    timestamp: str
    data: InvoicePaymentData
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> WebhookEnvelope:
        return cls(
            type=WebhookType(payload["type"]),
            timestamp=payload["timestamp"],
            data=InvoicePaymentData.from_dict(payload["data"]),
            raw=payload,
        )
