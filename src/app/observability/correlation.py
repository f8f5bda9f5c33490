"""Gerenciamento de correlation_id por entrega de webhook.

O valor vem do header x-correlation-id (quando o host o envia) ou é gerado.
Usa ContextVar para ser thread/async-safe.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        # processar webhook
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

# Headers externos não são confiáveis: aceita só ids curtos e seguros para log
MAX_CORRELATION_ID_LENGTH = 128
_SAFE_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._:-]+$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def _sanitize(correlation_id: str | None) -> str | None:
    if not correlation_id:
        return None
    candidate = correlation_id.strip()
    if len(candidate) > MAX_CORRELATION_ID_LENGTH:
        return None
    if not _SAFE_CORRELATION_ID.match(candidate):
        return None
    return candidate


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID recebido. Se ausente ou inválido, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = _sanitize(correlation_id) or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)
