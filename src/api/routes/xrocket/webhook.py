"""Endpoint de webhook da xRocket Pay.

Endpoints:
- POST /webhook/xrocket: notificações de pagamento de invoice

Fluxo:
1. Lê o corpo bruto (sem re-serializar; a assinatura cobre os bytes exatos)
2. Valida HMAC do header rocket-pay-signature com a API key
3. Valida estrutura do payload
4. Responde 200 OK com o status de pagamento

Segurança:
- Falha de assinatura responde 401 sem detalhes
- Falha de payload responde 400 apenas com o código do motivo
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.xrocket.webhook import (
    WebhookParseError,
    WebhookSignatureError,
    extract_payment_info,
    is_invoice_paid,
    verify_and_parse_webhook,
)
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_xrocket_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebimento de notificações invoicePay.

    Returns:
        Confirmação de recebimento ou Response de erro.
    """
    correlation_id = request.headers.get("x-correlation-id")
    token = set_correlation_id(correlation_id)

    try:
        settings = get_xrocket_settings()
        if not settings.api_key:
            logger.error(
                "webhook_secret_not_configured",
                extra={"channel": "xrocket", "correlation_id": get_correlation_id()},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "webhook_secret_not_configured"},
            )

        signature = request.headers.get(settings.signature_header)
        if not signature:
            logger.warning(
                "webhook_signature_missing",
                extra={"channel": "xrocket", "correlation_id": get_correlation_id()},
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "missing_signature_header"},
            )

        raw_body = await request.body()

        try:
            webhook = verify_and_parse_webhook(raw_body, signature, settings.api_key)
        except WebhookSignatureError:
            logger.warning(
                "webhook_signature_invalid",
                extra={
                    "channel": "xrocket",
                    "correlation_id": get_correlation_id(),
                    "payload_size": len(raw_body),
                },
            )
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except WebhookParseError as exc:
            logger.warning(
                "webhook_payload_invalid",
                extra={
                    "channel": "xrocket",
                    "correlation_id": get_correlation_id(),
                    "reason": str(exc.reason),
                    "field": exc.field,
                },
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "invalid_payload", "reason": str(exc.reason)},
            )

        info = extract_payment_info(webhook)
        paid = is_invoice_paid(webhook)
        logger.info(
            "invoice_payment_received" if paid else "invoice_status_received",
            extra={
                "channel": "xrocket",
                "correlation_id": get_correlation_id(),
                "webhook_type": str(webhook.type),
                "invoice_id": info.invoice_id,
                "invoice_status": info.status,
                "currency": info.currency,
                "payment_number": info.payment_number,
            },
        )

        return {
            "status": "received",
            "paid": paid,
            "correlation_id": get_correlation_id(),
        }

    finally:
        reset_correlation_id(token)
