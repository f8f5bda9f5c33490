"""Formatter de logs JSON com campos obrigatórios.

Exemplo de output:
    {
        "asctime": "2026-02-02 10:30:00,123",
        "level": "INFO",
        "logger": "api.routes.xrocket.webhook",
        "message": "invoice_payment_received",
        "correlation_id": "abc-123",
        "service": "xrocket_pay",
        "invoice_id": 42
    }
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
