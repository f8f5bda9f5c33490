"""Validação de assinatura HMAC-SHA256 dos webhooks xRocket Pay.

A chave de assinatura é derivada da API key da aplicação:
    key = SHA256(api_key)
    assinatura = hex(HMAC_SHA256(key, corpo_bruto))

O corpo deve ser o conteúdo exato recebido no request. Re-serializar o JSON
altera os bytes e invalida toda assinatura legítima.
"""

from __future__ import annotations

import hashlib
import hmac


def _as_bytes(value: bytes | str) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def derive_signing_key(token: bytes | str) -> bytes:
    """Deriva a chave HMAC (32 bytes) a partir da API key."""
    return hashlib.sha256(_as_bytes(token)).digest()


def compute_webhook_signature(body: bytes | str, token: bytes | str) -> str:
    """Calcula a assinatura esperada para um corpo de webhook.

    Args:
        body: Corpo bruto da requisição
        token: API key da aplicação

    Returns:
        HMAC-SHA256 em hexadecimal minúsculo
    """
    key = derive_signing_key(token)
    return hmac.new(key, _as_bytes(body), hashlib.sha256).hexdigest()


def verify_webhook_signature(
    body: bytes | str,
    signature: str,
    token: bytes | str,
) -> bool:
    """Valida assinatura do header rocket-pay-signature.

    Nunca levanta exceção: qualquer falha de encoding/hash conta como
    assinatura inválida.

    Args:
        body: Corpo bruto da requisição (bytes ou str, sem re-serialização)
        signature: Valor do header rocket-pay-signature
        token: API key da aplicação

    Returns:
        True somente se corpo, assinatura e token forem não vazios e o
        HMAC calculado for idêntico à assinatura recebida
    """
    if not body or not signature or not token:
        return False

    try:
        computed = compute_webhook_signature(body, token)
        return hmac.compare_digest(computed, signature)
    except Exception:
        return False
