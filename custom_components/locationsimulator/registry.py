"""
DeviceRegistry — ordered list of currently reachable device UDIDs.

Order is discovery order as reported by the device transport. Duplicates are
never stored; removal is an exact match on the UDID.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator

_LOGGER = logging.getLogger(__name__)


class DeviceRegistry:
    """Reachable devices in the order they were discovered."""

    def __init__(self) -> None:
        self._udids: list[str] = []

    def add(self, udid: str) -> bool:
        """Append udid unless it is already registered. Returns True if added."""
        if udid in self._udids:
            _LOGGER.debug("Device %s already registered", udid)
            return False
        self._udids.append(udid)
        _LOGGER.debug("Device %s registered at index %s", udid, len(self._udids) - 1)
        return True

    def remove(self, udid: str) -> bool:
        """Remove udid if present. Returns True if something was removed."""
        try:
            self._udids.remove(udid)
        except ValueError:
            _LOGGER.debug("Device %s was not registered", udid)
            return False
        _LOGGER.debug("Device %s unregistered", udid)
        return True

    def index(self, udid: str) -> int | None:
        try:
            return self._udids.index(udid)
        except ValueError:
            return None

    def __getitem__(self, index: int) -> str:
        # Negative indices are rejected: the UI only ever presents 0..n-1
        if not 0 <= index < len(self._udids):
            raise IndexError(f"Device index {index} out of range (0..{len(self._udids) - 1})")
        return self._udids[index]

    def __contains__(self, udid: object) -> bool:
        return udid in self._udids

    def __len__(self) -> int:
        return len(self._udids)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._udids))
