"""Testes para correlation_id em ContextVar."""

from __future__ import annotations

import asyncio
import uuid

import pytest

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.correlation import MAX_CORRELATION_ID_LENGTH


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_set_and_reset_restores_previous_value() -> None:
    token = set_correlation_id("cid-123")
    try:
        assert get_correlation_id() == "cid-123"
    finally:
        reset_correlation_id(token)

    assert get_correlation_id() == ""


def test_missing_value_generates_uuid() -> None:
    token = set_correlation_id(None)
    try:
        assert _is_uuid(get_correlation_id())
    finally:
        reset_correlation_id(token)


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "with space", "quebra\nde-linha", "<script>", "a" * (MAX_CORRELATION_ID_LENGTH + 1)],
)
def test_unsafe_values_are_replaced(raw: str) -> None:
    token = set_correlation_id(raw)
    try:
        value = get_correlation_id()
        assert value != raw
        assert _is_uuid(value)
    finally:
        reset_correlation_id(token)


def test_safe_value_is_stripped() -> None:
    token = set_correlation_id("  trace:abc-1.2_3  ")
    try:
        assert get_correlation_id() == "trace:abc-1.2_3"
    finally:
        reset_correlation_id(token)


def test_generate_correlation_id_is_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


@pytest.mark.asyncio
async def test_correlation_id_is_isolated_per_task() -> None:
    async def _worker(value: str) -> str:
        token = set_correlation_id(value)
        try:
            await asyncio.sleep(0)
            return get_correlation_id()
        finally:
            reset_correlation_id(token)

    results = await asyncio.gather(_worker("a-1"), _worker("b-2"))

    assert results == ["a-1", "b-2"]
