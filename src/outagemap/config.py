"""Configuration for outagemap."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from pydantic import ValidationError

from outagemap._constants import (
    DEFAULT_ZOOM,
    DISPLAY_UTC_OFFSET,
    LOCATED_ZOOM,
    SKN_CENTER,
    SWEEP_INTERVAL_SECONDS,
)
from outagemap.exceptions import OutageMapConfigError
from outagemap.models.geo import Coordinates, GeofenceBounds


def _default_center() -> Coordinates:
    return Coordinates.of(*SKN_CENTER)


@dataclasses.dataclass(frozen=True)
class OutageMapConfig:
    """Runtime configuration.

    Parameters
    ----------
    bounds : GeofenceBounds
        Service area. Defaults to St. Kitts & Nevis. A plain mapping of
        ``north``/``south``/``east``/``west`` is converted on construction.
    default_center : Coordinates
        Where the map is centered when the device location is unknown or
        outside the service area. A ``latitude``/``longitude`` mapping is
        converted on construction.
    sweep_interval : float
        Seconds between two expiry sweeps.
    located_zoom : int
        Zoom level used when centering on the device.
    default_zoom : int
        Zoom level used when centering on ``default_center``.
    display_utc_offset : timedelta
        Offset applied to timestamps shown in marker popups.
    """

    bounds: GeofenceBounds = dataclasses.field(default_factory=GeofenceBounds)
    default_center: Coordinates = dataclasses.field(default_factory=_default_center)
    sweep_interval: float = SWEEP_INTERVAL_SECONDS
    located_zoom: int = LOCATED_ZOOM
    default_zoom: int = DEFAULT_ZOOM
    display_utc_offset: timedelta = DISPLAY_UTC_OFFSET

    def __post_init__(self) -> None:
        try:
            if isinstance(self.bounds, Mapping):
                object.__setattr__(self, "bounds", GeofenceBounds(**self.bounds))
            if isinstance(self.default_center, Mapping):
                object.__setattr__(self, "default_center", Coordinates.model_validate(self.default_center))
        except ValidationError as exc:
            raise OutageMapConfigError(f"Invalid service area: {exc}") from exc
        if self.sweep_interval <= 0:
            raise OutageMapConfigError(f"sweep_interval must be positive, got {self.sweep_interval}")
        for name in ("located_zoom", "default_zoom"):
            zoom = getattr(self, name)
            if not 0 <= zoom <= 22:
                raise OutageMapConfigError(f"{name} must be between 0 and 22, got {zoom}")

    @classmethod
    def from_env(cls, **overrides: Any) -> OutageMapConfig:
        """Create configuration from environment variables.

        Reads optional ``OUTAGEMAP_*`` variables. Explicit keyword arguments
        override environment values.

        outagemap itself never calls this and never reads the environment;
        :class:`OutageMapApp` uses whatever config it is handed, defaulting to
        ``OutageMapConfig()``. This hook is for host applications only.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        OutageMapConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_BOUNDS_MAP = {
            "OUTAGEMAP_BOUNDS_NORTH": "north",
            "OUTAGEMAP_BOUNDS_SOUTH": "south",
            "OUTAGEMAP_BOUNDS_EAST": "east",
            "OUTAGEMAP_BOUNDS_WEST": "west",
        }
        bounds_kwargs: dict[str, float] = {}
        try:
            for env_key, field_name in _ENV_BOUNDS_MAP.items():
                val = env.get(env_key)
                if val is not None:
                    bounds_kwargs[field_name] = float(val)
            if bounds_kwargs and "bounds" not in overrides:
                config_kwargs["bounds"] = GeofenceBounds(**bounds_kwargs)

            lat_env = env.get("OUTAGEMAP_CENTER_LAT")
            lng_env = env.get("OUTAGEMAP_CENTER_LNG")
            if lat_env is not None and lng_env is not None and "default_center" not in overrides:
                config_kwargs["default_center"] = Coordinates.of(float(lat_env), float(lng_env))

            interval_env = env.get("OUTAGEMAP_SWEEP_INTERVAL")
            if interval_env is not None and "sweep_interval" not in overrides:
                config_kwargs["sweep_interval"] = float(interval_env)

            for env_key, field_name in (
                ("OUTAGEMAP_LOCATED_ZOOM", "located_zoom"),
                ("OUTAGEMAP_DEFAULT_ZOOM", "default_zoom"),
            ):
                val = env.get(env_key)
                if val is not None and field_name not in overrides:
                    config_kwargs[field_name] = int(val)

            offset_env = env.get("OUTAGEMAP_DISPLAY_UTC_OFFSET_HOURS")
            if offset_env is not None and "display_utc_offset" not in overrides:
                config_kwargs["display_utc_offset"] = timedelta(hours=float(offset_env))
        except (ValueError, ValidationError) as exc:
            raise OutageMapConfigError(f"Invalid OUTAGEMAP_* environment value: {exc}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
