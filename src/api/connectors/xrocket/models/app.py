"""DTOs de aplicação: info, transferências e saques."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .common import to_camel_payload


class Network(StrEnum):
    """Redes suportadas para saque."""

    TON = "TON"
    BSC = "BSC"
    ETH = "ETH"
    BTC = "BTC"
    TRX = "TRX"
    SOL = "SOL"


class WithdrawalStatus(StrEnum):
    """Status de um saque."""

    CREATED = "CREATED"
    COMPLETED = "COMPLETED"
    FAIL = "FAIL"


@dataclass(frozen=True, slots=True)
class AppBalance:
    currency: str
    balance: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppBalance:
        return cls(currency=data["currency"], balance=data["balance"])


@dataclass(frozen=True, slots=True)
class AppInfo:
    """Informações da aplicação (GET /app/info)."""

    name: str
    fee_percents: float
    balances: list[AppBalance] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppInfo:
        return cls(
            name=data["name"],
            fee_percents=data["feePercents"],
            balances=[AppBalance.from_dict(item) for item in data.get("balances") or []],
        )


@dataclass(frozen=True, slots=True)
class CreateTransferRequest:
    """Transferência para um usuário Telegram.

    transfer_id deve ser único no sistema do chamador (evita gasto duplo).
    """

    tg_user_id: int
    currency: str
    amount: float
    transfer_id: str
    description: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return to_camel_payload(self)


@dataclass(frozen=True, slots=True)
class Transfer:
    id: int
    tg_user_id: int
    currency: str
    amount: float
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transfer:
        return cls(
            id=data["id"],
            tg_user_id=data["tgUserId"],
            currency=data["currency"],
            amount=data["amount"],
            description=data.get("description"),
        )


@dataclass(frozen=True, slots=True)
class CreateWithdrawalRequest:
    """Saque para endereço externo."""

    currency: str
    amount: float
    withdrawal_id: str
    network: Network | str
    address: str
    comment: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return to_camel_payload(self)


@dataclass(frozen=True, slots=True)
class Withdrawal:
    """Saque (criação e consulta de status)."""

    network: str
    currency: str
    amount: float
    address: str
    withdrawal_id: str
    status: str
    comment: str | None = None
    tx_hash: str | None = None
    tx_link: str | None = None
    error: str | None = None

    @property
    def is_final(self) -> bool:
        return self.status in (WithdrawalStatus.COMPLETED, WithdrawalStatus.FAIL)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Withdrawal:
        return cls(
            network=data["network"],
            currency=data["currency"],
            amount=data["amount"],
            address=data["address"],
            withdrawal_id=data["withdrawalId"],
            status=data["status"],
            comment=data.get("comment"),
            tx_hash=data.get("txHash"),
            tx_link=data.get("txLink"),
            error=data.get("error"),
        )


@dataclass(frozen=True, slots=True)
class WithdrawalNetworkFee:
    network_code: str
    fee: float
    fee_currency: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WithdrawalNetworkFee:
        fee_withdraw = data.get("feeWithdraw") or {}
        return cls(
            network_code=data["networkCode"],
            fee=fee_withdraw.get("fee", 0),
            fee_currency=fee_withdraw.get("currency", ""),
        )


@dataclass(frozen=True, slots=True)
class WithdrawalCoin:
    """Taxas e mínimo de saque de uma moeda."""

    code: str
    min_withdraw: float
    fees: list[WithdrawalNetworkFee] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WithdrawalCoin:
        return cls(
            code=data["code"],
            min_withdraw=data["minWithdraw"],
            fees=[WithdrawalNetworkFee.from_dict(item) for item in data.get("fees") or []],
        )
