"""Interfaces of the collaborators outagemap drives but does not implement.

Map rendering and device location sensing live in the host UI. The library
only needs the narrow surface described here.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol, runtime_checkable

from outagemap.models.geo import Coordinates
from outagemap.models.location import LocationResult
from outagemap.models.marker import MarkerSpec


@runtime_checkable
class ViewportSource(Protocol):
    def get_viewport_center(self) -> Coordinates:
        """Geographic point currently at the center of the rendered map."""
        ...


@runtime_checkable
class MapSurface(ViewportSource, Protocol):
    """A rendered map with a fixed tile layer."""

    def recenter(self, lat: float, lng: float, zoom: int) -> None: ...

    def show_markers(self, markers: Sequence[MarkerSpec]) -> None:
        """Replace the markers currently drawn with *markers*."""
        ...


#: One-shot async device location request.
LocationProvider = Callable[[], Awaitable[LocationResult]]

#: Blocking user notice (alert box, toast, ...).
Notifier = Callable[[str], None]
