"""Base model and timestamp helpers shared by the outagemap models.

Every model inherits from :class:`OutageMapBaseModel`, which is frozen:
reports, coordinates and location results never change once built.

Timestamps are always timezone-aware UTC. Naive datetimes are assumed to
already be UTC and get the tzinfo attached, so comparisons between values
coming from different clocks never raise.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def utcnow() -> datetime:
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _coerce_utc(value: Any) -> Any:
    if isinstance(value, datetime):
        return ensure_utc(value)
    return value


UtcDatetime = Annotated[datetime, BeforeValidator(_coerce_utc)]
"""Annotated type that normalises datetimes to aware UTC."""


class OutageMapBaseModel(BaseModel):
    """Base for all outagemap value objects."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )
