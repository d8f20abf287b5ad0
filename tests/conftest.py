"""Shared test fixtures for jirafields."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from jirafields.client.provider import RemoteFieldSource


def custom_record(field_id: str, name: str, schema_type: str = "string") -> dict[str, Any]:
    """A custom field record as returned by GET /rest/api/2/field."""
    return {
        "id": field_id,
        "name": name,
        "custom": True,
        "schema": {"type": schema_type, "custom": "com.example:" + schema_type},
    }


def system_record(field_id: str, name: str, schema_type: str = "string") -> dict[str, Any]:
    """A system (non-custom) field record."""
    return {"id": field_id, "name": name, "custom": False, "schema": {"type": schema_type}}


DEFAULT_RECORDS: list[dict[str, Any]] = [
    system_record("summary", "Summary"),
    system_record("status", "Status", "status"),
    custom_record("customfield_10016", "Story Points", "number"),
    custom_record("customfield_10014", "Epic Link", "any"),
    custom_record("customfield_10020", "Sprint", "array"),
]


class FakeFieldSource(RemoteFieldSource):
    """In-memory field source that counts calls.

    Set ``gate`` to an asyncio.Event to hold every fetch until it is set, and
    ``error`` to make fetches fail.
    """

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        self.records = list(DEFAULT_RECORDS if records is None else records)
        self.calls: list[str] = []
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def fetch_remote_fields(self, entity_type: str) -> list[dict[str, Any]]:
        self.calls.append(entity_type)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return [dict(record) for record in self.records]

    async def aclose(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def source() -> FakeFieldSource:
    """Field source returning the default records."""
    return FakeFieldSource()


@pytest.fixture
def make_source() -> type[FakeFieldSource]:
    """Factory for field sources with custom records."""
    return FakeFieldSource


@pytest.fixture
def record() -> Any:
    """Builder for custom field records."""
    return custom_record


@pytest.fixture
def clock() -> FakeClock:
    """Controllable clock for TTL and LRU tests."""
    return FakeClock()
