"""
Device transport — the component that discovers attached devices.

Device enumeration itself happens outside this integration. A bridge that
talks to the devices fires the connect/pair/disconnect events on the Home
Assistant bus; the transport only says whether such notifications can be
generated at all.
"""
from __future__ import annotations

import logging
from typing import Protocol

from homeassistant.core import HomeAssistant

_LOGGER = logging.getLogger(__name__)


class DeviceTransport(Protocol):
    """Source of device lifecycle notifications."""

    def start_generating_device_notifications(self) -> bool:
        """Start notifications. Returns False if the transport is unavailable."""
        ...

    def stop_generating_device_notifications(self) -> None:
        ...


class BusDeviceTransport:
    """Transport whose notifications are bus events fired by a device bridge."""

    def __init__(self, hass: HomeAssistant) -> None:
        self.hass = hass
        self._generating = False

    def start_generating_device_notifications(self) -> bool:
        self._generating = True
        _LOGGER.debug("Waiting for device events on the bus")
        return True

    def stop_generating_device_notifications(self) -> None:
        if self._generating:
            _LOGGER.debug("No longer waiting for device events")
        self._generating = False
