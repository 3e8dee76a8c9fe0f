"""
LocationCache — last known simulated coordinate per device.

Pure data structure with no HA dependencies. Entries live for the lifetime
of the process unless evicted explicitly.
"""
from __future__ import annotations

from collections.abc import Iterator

from .models import Coordinate


class LocationCache:
    """Mapping of device UDID to the last coordinate its session held."""

    def __init__(self) -> None:
        self._locations: dict[str, Coordinate] = {}

    def get(self, udid: str) -> Coordinate | None:
        return self._locations.get(udid)

    def set(self, udid: str, coordinate: Coordinate) -> None:
        """Store coordinate for udid, replacing any previous entry."""
        self._locations[udid] = coordinate

    def evict(self, udid: str) -> Coordinate | None:
        return self._locations.pop(udid, None)

    def __contains__(self, udid: object) -> bool:
        return udid in self._locations

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._locations)
