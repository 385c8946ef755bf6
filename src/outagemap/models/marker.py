"""Marker specs handed to the mapping collaborator."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from outagemap.models._base import OutageMapBaseModel
from outagemap.models.geo import Coordinates
from outagemap.models.report import ReportKind


class MarkerVariant(StrEnum):
    """Visual variant of a marker icon."""

    RED = "red"
    BLUE = "blue"


class MarkerPopup(OutageMapBaseModel):
    title: str
    lines: tuple[str, ...] = ()

    def as_text(self) -> str:
        return "\n".join((self.title, *self.lines))


class MarkerSpec(OutageMapBaseModel):
    """Everything a map needs to draw one report.

    Parameters
    ----------
    report_id : str
        Id of the report this marker represents; stable across renders.
    kind : ReportKind
        Kind of the underlying report.
    position : Coordinates
        Marker anchor.
    variant : MarkerVariant
        Icon colour keyed by ``kind``.
    z_index_offset : int
        Ordering hint; higher draws above lower.
    popup : MarkerPopup
        Human-readable created/expiry times.
    """

    report_id: str
    kind: ReportKind
    position: Coordinates
    variant: MarkerVariant
    z_index_offset: int = Field(default=0)
    popup: MarkerPopup
