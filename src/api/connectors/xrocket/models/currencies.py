"""DTOs de moedas disponíveis (GET /currencies/available)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .app import WithdrawalNetworkFee


@dataclass(frozen=True, slots=True)
class CoinWithdrawFee:
    """Taxas de saque de token, cobradas na moeda principal."""

    currency: str
    networks: list[WithdrawalNetworkFee] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CoinWithdrawFee:
        return cls(
            currency=data["currency"],
            networks=[WithdrawalNetworkFee.from_dict(item) for item in data.get("networks") or []],
        )


@dataclass(frozen=True, slots=True)
class Coin:
    currency: str
    name: str
    min_transfer: float
    min_cheque: float
    min_invoice: float
    min_withdraw: float
    fee_withdraw: CoinWithdrawFee | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Coin:
        fee_withdraw = data.get("feeWithdraw")
        return cls(
            currency=data["currency"],
            name=data["name"],
            min_transfer=data["minTransfer"],
            min_cheque=data["minCheque"],
            min_invoice=data["minInvoice"],
            min_withdraw=data["minWithdraw"],
            fee_withdraw=CoinWithdrawFee.from_dict(fee_withdraw) if fee_withdraw else None,
        )


def parse_coins(data: dict[str, Any]) -> list[Coin]:
    """Extrai a lista de moedas de {results: [...]}."""
    return [Coin.from_dict(item) for item in data.get("results") or []]
