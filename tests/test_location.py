from __future__ import annotations

import pytest

from outagemap.location import DeviceLocationTracker
from outagemap.models import LocationFailure, LocationFix, LocationResult


@pytest.mark.asyncio
async def test_pending_until_resolved() -> None:
    tracker = DeviceLocationTracker()
    assert tracker.current is None

    async def provider() -> LocationResult:
        return LocationFix.at(17.30, -62.71)

    result = await tracker.request(provider)

    assert tracker.current == result
    assert tracker.fix is not None
    assert tracker.fix.coordinates.latitude == 17.30


@pytest.mark.asyncio
async def test_failure_result_is_kept() -> None:
    tracker = DeviceLocationTracker()

    async def provider() -> LocationResult:
        return LocationFailure(reason="timeout")

    await tracker.request(provider)

    assert isinstance(tracker.current, LocationFailure)
    assert tracker.fix is None


@pytest.mark.asyncio
async def test_provider_exception_becomes_failure() -> None:
    tracker = DeviceLocationTracker()

    async def provider() -> LocationResult:
        raise PermissionError("User denied Geolocation")

    result = await tracker.request(provider)

    assert isinstance(result, LocationFailure)
    assert result.reason == "User denied Geolocation"


@pytest.mark.asyncio
async def test_reset() -> None:
    tracker = DeviceLocationTracker()

    async def provider() -> LocationResult:
        return LocationFix.at(17.30, -62.71)

    await tracker.request(provider)
    tracker.reset()
    assert tracker.current is None
