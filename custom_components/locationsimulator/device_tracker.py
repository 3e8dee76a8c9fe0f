"""
Platform for the simulated location tracker.
This module renders the location reported by the active session's view
callbacks, so it follows hand-offs, restores and resets alike.
"""
from __future__ import annotations

import logging

from homeassistant import config_entries
from homeassistant.components.device_tracker import SourceType
from homeassistant.components.device_tracker.config_entry import TrackerEntity
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.dispatcher import async_dispatcher_connect

from .const import ATTR_UDID
from .coordinator import LocationSimulatorCoordinator
from .entity import LocationSimulatorEntity
from .models import Coordinate

_LOGGER = logging.getLogger(__name__)


class LocationSimulatorTracker(LocationSimulatorEntity, TrackerEntity):
    """
    Representation of the simulated location.
    Unknown until a session reports a location, and again after a reset or
    while switching devices.
    """

    _udid: str | None = None
    _latitude: float | None = None
    _longitude: float | None = None

    def __init__(self, coordinator: LocationSimulatorCoordinator) -> None:
        """Initialize the tracker."""
        super().__init__(coordinator, "location", "Simulated Location")
        self._attr_icon = "mdi:map-marker"

    async def async_added_to_hass(self) -> None:
        await super().async_added_to_hass()
        self.async_on_remove(
            async_dispatcher_connect(
                self.hass,
                self.coordinator.view.did_change_signal,
                self._async_location_changed,
            )
        )

    @callback
    def _async_location_changed(self, udid: str, coordinate: Coordinate | None) -> None:
        self._udid = udid
        if coordinate is None:
            self._latitude = None
            self._longitude = None
        else:
            self._latitude = coordinate.latitude
            self._longitude = coordinate.longitude
        self.async_write_ha_state()

    @property
    def latitude(self) -> float | None:
        """Return latitude value of the simulated location."""
        return self._latitude

    @property
    def longitude(self) -> float | None:
        """Return longitude value of the simulated location."""
        return self._longitude

    @property
    def source_type(self) -> SourceType:
        """Return the source type, eg gps or router, of the device."""
        return SourceType.GPS

    @property
    def extra_state_attributes(self) -> dict:
        return {ATTR_UDID: self._udid}


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: config_entries.ConfigEntry,
    async_add_entities,
):
    """Add the tracker for passed config_entry in HA."""
    coordinator: LocationSimulatorCoordinator = config_entry.runtime_data
    async_add_entities([LocationSimulatorTracker(coordinator)])
