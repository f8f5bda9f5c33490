"""Interpretação de webhooks de pagamento já validados."""

from __future__ import annotations

from dataclasses import dataclass

from .models import InvoiceStatus, WebhookEnvelope


@dataclass(frozen=True, slots=True)
class PaymentInfo:
    """Resumo plano de um pagamento de invoice.

    Campos ausentes no webhook ficam None (nunca 0 ou string vazia),
    preservando a diferença entre "zero" e "não informado".
    """

    invoice_id: int
    amount: float
    currency: str
    status: str
    user_id: int
    payment_amount: float
    payment_number: int
    paid_at: str
    payment_amount_received: float | None = None
    comment: str | None = None
    payload: str | None = None
    description: str | None = None
    activations_left: int | None = None
    total_activations: int | None = None

    @property
    def activations_used(self) -> int | None:
        """Ativações consumidas, quando ambos os contadores são conhecidos."""
        if self.total_activations is None or self.activations_left is None:
            return None
        return self.total_activations - self.activations_left


def is_invoice_paid(webhook: WebhookEnvelope) -> bool:
    """Retorna True se a invoice do webhook está paga."""
    return webhook.data.status == InvoiceStatus.PAID


def extract_payment_info(webhook: WebhookEnvelope) -> PaymentInfo:
    """Extrai o resumo do pagamento de um webhook validado.

    comment, payload e description vazios são normalizados para None.
    """
    data = webhook.data
    payment = data.payment
    return PaymentInfo(
        invoice_id=data.id,
        amount=data.amount,
        currency=data.currency,
        status=data.status,
        user_id=payment.user_id,
        payment_amount=payment.payment_amount,
        payment_number=payment.payment_num,
        paid_at=payment.paid,
        payment_amount_received=payment.payment_amount_received,
        comment=payment.comment or None,
        payload=data.payload or None,
        description=data.description or None,
        activations_left=data.activations_left,
        total_activations=data.total_activations,
    )
