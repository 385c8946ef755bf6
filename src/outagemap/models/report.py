"""Outage report model."""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field, TypeAdapter, model_validator

from outagemap._constants import REPORT_TTL
from outagemap.models._base import OutageMapBaseModel, UtcDatetime, ensure_utc, utcnow
from outagemap.models.geo import Coordinates


class ReportKind(StrEnum):
    OUTAGE = "outage"
    WORKING = "working"


_DATETIME_ADAPTER: TypeAdapter[datetime] = TypeAdapter(datetime)


def _new_report_id() -> str:
    return uuid.uuid4().hex


class OutageReport(OutageMapBaseModel):
    """A single crowd-sourced marker.

    Reports are immutable. ``expires_at`` is derived from ``created_at`` when
    omitted, and any other offset than the report TTL is rejected.

    Parameters
    ----------
    id : str
        Unique identifier, generated at creation.
    coordinates : Coordinates
        Where the marker is anchored.
    created_at : datetime
        Creation time (aware UTC).
    expires_at : datetime
        ``created_at`` plus one hour.
    kind : ReportKind
        Outage or working-on-it.
    """

    id: str = Field(default_factory=_new_report_id, min_length=1)
    coordinates: Coordinates
    created_at: UtcDatetime = Field(default_factory=utcnow)
    expires_at: UtcDatetime
    kind: ReportKind

    @model_validator(mode="before")
    @classmethod
    def _derive_expiry(cls, values: Any) -> Any:
        if not isinstance(values, dict) or values.get("expires_at") is not None:
            return values
        merged = dict(values)
        created_at = merged.get("created_at")
        if created_at is None:
            created_at = utcnow()
        elif not isinstance(created_at, datetime):
            # ISO strings and epoch numbers, parsed the same way the field would be.
            created_at = _DATETIME_ADAPTER.validate_python(created_at)
        created_at = ensure_utc(created_at)
        merged["created_at"] = created_at
        merged["expires_at"] = created_at + REPORT_TTL
        return merged

    @model_validator(mode="after")
    def _check_ttl(self) -> OutageReport:
        if self.expires_at - self.created_at != REPORT_TTL:
            raise ValueError(f"expires_at must be exactly {int(REPORT_TTL.total_seconds())}s after created_at")
        return self

    @classmethod
    def create(
        cls,
        kind: ReportKind,
        coordinates: Coordinates,
        *,
        now: datetime | None = None,
    ) -> OutageReport:
        """Build a fresh report anchored at *coordinates* created at *now*."""
        created_at = ensure_utc(now) if now is not None else utcnow()
        return cls(
            coordinates=coordinates,
            created_at=created_at,
            expires_at=created_at + REPORT_TTL,
            kind=kind,
        )

    def is_expired(self, now: datetime) -> bool:
        return ensure_utc(now) >= self.expires_at
