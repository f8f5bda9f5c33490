"""Settings específicas da API xRocket Pay.

A mesma API key autentica as chamadas de saída e assina os webhooks de
entrada: o receptor valida assinaturas com a key que o app usa na API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

XROCKET_API_BASE_URL: str = "https://pay.xrocket.tg/"
XROCKET_API_KEY_HEADER: str = "Rocket-Pay-Key"
XROCKET_SIGNATURE_HEADER: str = "rocket-pay-signature"


@dataclass(frozen=True)
class XRocketSettings:
    """Configurações da integração xRocket Pay.

    Attributes:
        api_key: API key da aplicação (Rocket-Pay-Key e segredo do webhook)
        base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        signature_header: Header com a assinatura do webhook
    """

    api_key: str = ""
    base_url: str = XROCKET_API_BASE_URL
    request_timeout_seconds: float = 30.0
    signature_header: str = XROCKET_SIGNATURE_HEADER

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("XROCKET_PAY_API_KEY não configurado")

        if not self.base_url.startswith(("https://", "http://")):
            errors.append("XROCKET_PAY_BASE_URL deve começar com http(s)://")

        if self.request_timeout_seconds <= 0:
            errors.append("XROCKET_PAY_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> XRocketSettings:
    """Carrega XRocketSettings a partir de variáveis de ambiente."""
    return XRocketSettings(
        api_key=os.getenv("XROCKET_PAY_API_KEY", ""),
        base_url=os.getenv("XROCKET_PAY_BASE_URL", XROCKET_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("XROCKET_PAY_TIMEOUT_SECONDS", "30")),
        signature_header=os.getenv("XROCKET_PAY_SIGNATURE_HEADER", XROCKET_SIGNATURE_HEADER),
    )


@lru_cache(maxsize=1)
def get_xrocket_settings() -> XRocketSettings:
    """Retorna instância cacheada de XRocketSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
