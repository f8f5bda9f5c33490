"""Agregador de settings do xrocket-pay.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.xrocket import (
    XROCKET_API_BASE_URL,
    XROCKET_API_KEY_HEADER,
    XROCKET_SIGNATURE_HEADER,
    XRocketSettings,
    get_xrocket_settings,
)

__all__ = [
    "XROCKET_API_BASE_URL",
    "XROCKET_API_KEY_HEADER",
    "XROCKET_SIGNATURE_HEADER",
    "BaseSettings",
    "Environment",
    "XRocketSettings",
    "get_base_settings",
    "get_xrocket_settings",
]
