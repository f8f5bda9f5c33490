"""Contratos comuns da API xRocket Pay (envelope, paginação, versão)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_camel_payload(obj: Any) -> dict[str, Any]:
    """Serializa dataclass de request em dict camelCase sem campos None."""
    payload: dict[str, Any] = {}
    for item in fields(obj):
        value = getattr(obj, item.name)
        if value is None:
            continue
        if isinstance(value, tuple):
            value = list(value)
        payload[_camel(item.name)] = value
    return payload


@dataclass(frozen=True, slots=True)
class Version:
    """Versão da API (GET /version)."""

    version: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Version:
        return cls(version=str(data.get("version", "")))


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Envelope padrão {success, data} das respostas."""

    success: bool
    data: T | None = None

    @classmethod
    def from_dict(
        cls,
        payload: dict[str, Any],
        parse: Callable[[Any], T],
    ) -> ApiResponse[T]:
        raw_data = payload.get("data")
        return cls(
            success=bool(payload.get("success", False)),
            data=parse(raw_data) if raw_data is not None else None,
        )


@dataclass(frozen=True, slots=True)
class DeleteResponse:
    """Resposta de operações DELETE."""

    success: bool

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> DeleteResponse:
        return cls(success=bool(payload.get("success", False)))


@dataclass(frozen=True, slots=True)
class PaginationParams:
    """Parâmetros de paginação (limit 1-1000, offset >= 0)."""

    limit: int | None = None
    offset: int | None = None

    def to_query(self) -> dict[str, str]:
        """Query string apenas com os parâmetros informados."""
        query: dict[str, str] = {}
        if self.limit is not None:
            query["limit"] = str(self.limit)
        if self.offset is not None:
            query["offset"] = str(self.offset)
        return query


@dataclass(frozen=True)
class Page(Generic[T]):
    """Página de resultados com metadados de paginação."""

    total: int
    limit: int
    offset: int
    results: list[T] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        parse_item: Callable[[dict[str, Any]], T],
    ) -> Page[T]:
        return cls(
            total=data.get("total", 0),
            limit=data.get("limit", 0),
            offset=data.get("offset", 0),
            results=[parse_item(item) for item in data.get("results", [])],
        )
