"""Parse e validação estrutural do webhook xRocket Pay.

Checagens em ordem, cada uma interrompe na primeira falha:
1. corpo vazio
2. JSON inválido
3. payload não é objeto
4. type/timestamp ausentes
5. type não suportado
6. data ausente ou não objeto
7. campo obrigatório ausente em data
8. payment ausente ou não objeto
9. campo obrigatório ausente em payment

Nenhum objeto parcial é devolvido: ou o envelope inteiro é válido, ou
WebhookParseError é levantado.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

from .models import (
    REQUIRED_DATA_FIELDS,
    REQUIRED_PAYMENT_FIELDS,
    WebhookEnvelope,
    WebhookType,
)
from .signature import verify_webhook_signature


class ParseFailure(StrEnum):
    """Motivos de rejeição do payload."""

    EMPTY_BODY = "empty_body"
    INVALID_JSON = "invalid_json"
    PAYLOAD_NOT_OBJECT = "payload_not_object"
    MISSING_ENVELOPE_FIELDS = "missing_envelope_fields"
    UNSUPPORTED_TYPE = "unsupported_type"
    INVALID_DATA = "invalid_data"
    MISSING_DATA_FIELD = "missing_data_field"
    INVALID_PAYMENT = "invalid_payment"
    MISSING_PAYMENT_FIELD = "missing_payment_field"


class WebhookError(ValueError):
    """Erro base para falhas de webhook."""


class WebhookSignatureError(WebhookError):
    """Assinatura inválida do webhook (sem detalhes adicionais)."""

    def __init__(self) -> None:
        super().__init__("invalid_signature")


class WebhookParseError(WebhookError):
    """Payload do webhook estruturalmente inválido.

    Attributes:
        reason: Checagem que falhou
        field: Nome do campo ausente (apenas para missing_*_field)
    """

    def __init__(
        self,
        reason: ParseFailure,
        message: str,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.field = field


def _load_json(body: bytes | str) -> Any:
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise WebhookParseError(
            ParseFailure.INVALID_JSON, "JSON inválido no corpo do webhook"
        ) from exc


def _validate_envelope(payload: dict[str, Any]) -> None:
    if not payload.get("type") or not payload.get("timestamp"):
        raise WebhookParseError(
            ParseFailure.MISSING_ENVELOPE_FIELDS,
            "Webhook sem campos obrigatórios: type, timestamp",
        )

    if payload["type"] != WebhookType.INVOICE_PAY:
        raise WebhookParseError(
            ParseFailure.UNSUPPORTED_TYPE,
            f"Tipo de webhook não suportado: {payload['type']}",
        )


def _validate_data(data: Any) -> None:
    if not isinstance(data, dict):
        raise WebhookParseError(
            ParseFailure.INVALID_DATA, "Campo data ausente ou inválido"
        )

    for name in REQUIRED_DATA_FIELDS:
        if name not in data:
            raise WebhookParseError(
                ParseFailure.MISSING_DATA_FIELD,
                f"Campo obrigatório ausente em data: {name}",
                field=name,
            )

    payment = data["payment"]
    if not isinstance(payment, dict):
        raise WebhookParseError(
            ParseFailure.INVALID_PAYMENT, "Campo payment ausente ou inválido"
        )

    for name in REQUIRED_PAYMENT_FIELDS:
        if name not in payment:
            raise WebhookParseError(
                ParseFailure.MISSING_PAYMENT_FIELD,
                f"Campo obrigatório ausente em payment: {name}",
                field=name,
            )


def parse_webhook_payload(body: bytes | str) -> WebhookEnvelope:
    """Parseia e valida o corpo bruto de um webhook.

    Args:
        body: Corpo bruto da requisição

    Raises:
        WebhookParseError: Se qualquer checagem estrutural falhar

    Returns:
        WebhookEnvelope com InvoicePaymentData validado
    """
    if not body:
        raise WebhookParseError(ParseFailure.EMPTY_BODY, "Corpo do webhook vazio")

    payload = _load_json(body)

    if not isinstance(payload, dict):
        raise WebhookParseError(
            ParseFailure.PAYLOAD_NOT_OBJECT, "Payload do webhook deve ser um objeto"
        )

    _validate_envelope(payload)
    _validate_data(payload.get("data"))

    return WebhookEnvelope.from_dict(payload)


def verify_and_parse_webhook(
    body: bytes | str,
    signature: str,
    token: bytes | str,
) -> WebhookEnvelope:
    """Valida assinatura e parseia o payload em um passo.

    O parser só roda depois da assinatura confirmada.

    Args:
        body: Corpo bruto da requisição
        signature: Valor do header rocket-pay-signature
        token: API key da aplicação

    Raises:
        WebhookSignatureError: Se a assinatura for inválida
        WebhookParseError: Se o payload for inválido

    Returns:
        WebhookEnvelope validado
    """
    if not verify_webhook_signature(body, signature, token):
        raise WebhookSignatureError()

    return parse_webhook_payload(body)
