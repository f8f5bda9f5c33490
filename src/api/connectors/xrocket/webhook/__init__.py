"""Webhook xRocket Pay: assinatura, parsing seguro e interpretação."""

from .models import (
    InvoicePaymentData,
    InvoiceStatus,
    PaymentRecord,
    WebhookEnvelope,
    WebhookType,
)
from .payment import PaymentInfo, extract_payment_info, is_invoice_paid
from .receive import (
    ParseFailure,
    WebhookError,
    WebhookParseError,
    WebhookSignatureError,
    parse_webhook_payload,
    verify_and_parse_webhook,
)
from .signature import (
    compute_webhook_signature,
    derive_signing_key,
    verify_webhook_signature,
)

__all__ = [
    "InvoicePaymentData",
    "InvoiceStatus",
    "ParseFailure",
    "PaymentInfo",
    "PaymentRecord",
    "WebhookEnvelope",
    "WebhookError",
    "WebhookParseError",
    "WebhookSignatureError",
    "WebhookType",
    "compute_webhook_signature",
    "derive_signing_key",
    "extract_payment_info",
    "is_invoice_paid",
    "parse_webhook_payload",
    "verify_and_parse_webhook",
    "verify_webhook_signature",
]
