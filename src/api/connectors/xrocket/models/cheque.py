"""DTOs de multi-cheques."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .common import to_camel_payload


class ChequeState(StrEnum):
    ACTIVE = "active"
    COMPLETED = "completed"
    DRAFT = "draft"


@dataclass(frozen=True, slots=True)
class UpdateChequeRequest:
    """Campos editáveis de um multi-cheque."""

    password: str | None = None
    description: str | None = None
    send_notifications: bool | None = None
    enable_captcha: bool | None = None
    telegram_resources_ids: tuple[str, ...] | None = None
    for_premium: bool | None = None
    linked_wallet: bool | None = None
    disabled_languages: tuple[str, ...] | None = None
    enabled_countries: tuple[str, ...] | None = None

    def to_payload(self) -> dict[str, Any]:
        return to_camel_payload(self)


@dataclass(frozen=True, slots=True)
class CreateChequeRequest:
    """Criação de multi-cheque.

    Attributes:
        cheque_per_user: Valor por usuário (9 casas decimais)
        users_number: Quantidade de usuários (>= 1)
        ref_program: Percentual do programa de indicação (0-100)
    """

    cheque_per_user: float
    users_number: int
    ref_program: int
    currency: str | None = None
    password: str | None = None
    description: str | None = None
    send_notifications: bool | None = None
    enable_captcha: bool | None = None
    telegram_resources_ids: tuple[str, ...] | None = None
    for_premium: bool | None = None
    linked_wallet: bool | None = None
    disabled_languages: tuple[str, ...] | None = None
    enabled_countries: tuple[str, ...] | None = None

    def to_payload(self) -> dict[str, Any]:
        return to_camel_payload(self)


@dataclass(frozen=True, slots=True)
class TgResource:
    telegram_id: str
    name: str
    username: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TgResource:
        return cls(
            telegram_id=data["telegramId"],
            name=data["name"],
            username=data.get("username"),
        )


@dataclass(frozen=True, slots=True)
class ShortCheque:
    """Multi-cheque resumido (listagem)."""

    id: int
    currency: str
    total: float
    per_user: float
    users: int
    state: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShortCheque:
        return cls(
            id=data["id"],
            currency=data["currency"],
            total=data["total"],
            per_user=data["perUser"],
            users=data["users"],
            state=data["state"],
            description=data.get("description"),
        )


@dataclass(frozen=True, slots=True)
class Cheque:
    """Multi-cheque completo."""

    id: int
    currency: str
    total: float
    per_user: float
    users: int
    state: str
    link: str
    password: str | None = None
    description: str | None = None
    send_notifications: bool = True
    captcha_enabled: bool = True
    ref_program_percents: float = 0
    ref_reward_per_user: float = 0
    for_premium: bool = False
    for_new_users_only: bool = False
    linked_wallet: bool = False
    disabled_languages: list[str] = field(default_factory=list)
    enabled_countries: list[str] = field(default_factory=list)
    tg_resources: list[TgResource] = field(default_factory=list)
    activations: int = 0
    ref_rewards: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cheque:
        return cls(
            id=data["id"],
            currency=data["currency"],
            total=data["total"],
            per_user=data["perUser"],
            users=data["users"],
            state=data["state"],
            link=data["link"],
            password=data.get("password"),
            description=data.get("description"),
            send_notifications=data.get("sendNotifications", True),
            captcha_enabled=data.get("captchaEnabled", True),
            ref_program_percents=data.get("refProgramPercents", 0),
            ref_reward_per_user=data.get("refRewardPerUser", 0),
            for_premium=data.get("forPremium", False),
            for_new_users_only=data.get("forNewUsersOnly", False),
            linked_wallet=data.get("linkedWallet", False),
            disabled_languages=list(data.get("disabledLanguages") or []),
            enabled_countries=list(data.get("enabledCountries") or []),
            tg_resources=[TgResource.from_dict(item) for item in data.get("tgResources") or []],
            activations=data.get("activations", 0),
            ref_rewards=data.get("refRewards", 0),
        )
