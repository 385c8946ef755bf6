from __future__ import annotations

from datetime import timedelta

import pytest

from outagemap.app import OutageMapApp
from outagemap.config import OutageMapConfig
from outagemap.exceptions import OutageMapConfigError
from outagemap.models import Coordinates, GeofenceBounds


def test_defaults() -> None:
    config = OutageMapConfig()
    assert config.bounds == GeofenceBounds()
    assert config.default_center == Coordinates.of(17.3026, -62.7177)
    assert config.sweep_interval == 60.0
    assert (config.located_zoom, config.default_zoom) == (15, 12)
    assert config.display_utc_offset == timedelta(hours=-4)


def test_invalid_interval_rejected() -> None:
    with pytest.raises(OutageMapConfigError):
        OutageMapConfig(sweep_interval=0)


def test_invalid_zoom_rejected() -> None:
    with pytest.raises(OutageMapConfigError):
        OutageMapConfig(located_zoom=30)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTAGEMAP_BOUNDS_NORTH", "18.0")
    monkeypatch.setenv("OUTAGEMAP_CENTER_LAT", "17.2")
    monkeypatch.setenv("OUTAGEMAP_CENTER_LNG", "-62.6")
    monkeypatch.setenv("OUTAGEMAP_SWEEP_INTERVAL", "30")
    monkeypatch.setenv("OUTAGEMAP_LOCATED_ZOOM", "16")
    monkeypatch.setenv("OUTAGEMAP_DISPLAY_UTC_OFFSET_HOURS", "0")

    config = OutageMapConfig.from_env()

    assert config.bounds.north == 18.0
    assert config.bounds.south == 17.06
    assert config.default_center == Coordinates.of(17.2, -62.6)
    assert config.sweep_interval == 30.0
    assert config.located_zoom == 16
    assert config.display_utc_offset == timedelta(0)


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTAGEMAP_SWEEP_INTERVAL", "30")
    config = OutageMapConfig.from_env(sweep_interval=5.0)
    assert config.sweep_interval == 5.0


def test_from_env_bad_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTAGEMAP_SWEEP_INTERVAL", "soon")
    with pytest.raises(OutageMapConfigError):
        OutageMapConfig.from_env()


def test_from_env_inverted_bounds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTAGEMAP_BOUNDS_NORTH", "10.0")
    with pytest.raises(OutageMapConfigError):
        OutageMapConfig.from_env()


def test_mapping_bounds_converted() -> None:
    config = OutageMapConfig(
        bounds={"north": 1.0, "south": -1.0, "east": 1.0, "west": -1.0},  # type: ignore[arg-type]
        default_center={"lat": 0.5, "lng": 0.5},  # type: ignore[arg-type]
    )
    assert config.bounds == GeofenceBounds(north=1.0, south=-1.0, east=1.0, west=-1.0)
    assert config.default_center == Coordinates.of(0.5, 0.5)


def test_inverted_mapping_bounds_raise_config_error() -> None:
    with pytest.raises(OutageMapConfigError):
        OutageMapConfig(bounds={"north": 17.0, "south": 18.0})  # type: ignore[arg-type]


def test_invalid_center_raises_config_error() -> None:
    with pytest.raises(OutageMapConfigError):
        OutageMapConfig(default_center={"lat": 95.0, "lng": 0.0})  # type: ignore[arg-type]


def test_app_default_config_ignores_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Map:
        def get_viewport_center(self) -> Coordinates:
            return Coordinates.of(17.3, -62.7)

        def recenter(self, lat: float, lng: float, zoom: int) -> None:
            pass

        def show_markers(self, markers: object) -> None:
            pass

    monkeypatch.setenv("OUTAGEMAP_SWEEP_INTERVAL", "5")
    assert OutageMapApp(_Map()).config.sweep_interval == 60.0
