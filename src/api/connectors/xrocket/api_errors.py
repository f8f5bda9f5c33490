"""Erros e helpers de parsing para a API xRocket Pay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class XRocketApiError:
    """Erro retornado pela API xRocket Pay."""

    status_code: int
    message: str
    is_permanent: bool  # True se erro não é retentável


def is_permanent_error(status_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros transitórios: 429 (rate limit), 500+ (server errors)
    """
    return status_code != 429 and status_code < 500


def parse_api_error(status_code: int, response_data: Any) -> XRocketApiError | None:
    """Extrai informações de erro do response da API.

    Args:
        status_code: Status HTTP recebido
        response_data: JSON do response (ou None se não for JSON)

    Returns:
        XRocketApiError se houver erro, None se sucesso
    """
    body = response_data if isinstance(response_data, dict) else {}
    failed = status_code >= 400 or body.get("success") is False
    if not failed:
        return None

    message = body.get("message")
    if not isinstance(message, str) or not message:
        message = "Erro desconhecido"

    return XRocketApiError(
        status_code=status_code,
        message=message,
        is_permanent=is_permanent_error(status_code),
    )
