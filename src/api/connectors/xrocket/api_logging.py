"""Helpers de logging para API xRocket Pay (sem API key nem payloads)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import XRocketApiError

logger = logging.getLogger(__name__)


def log_api_error(
    api_error: XRocketApiError,
    method: str,
    path: str,
) -> None:
    """Loga erro da API sem expor dados sensíveis."""
    logger.warning(
        "xrocket_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": api_error.status_code,
            "is_permanent": api_error.is_permanent,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    logger.debug(
        "xrocket_api_success",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
