"""
Platform for the autofocus switch.
The switch mirrors the autofocus-on-current-location preference announced on
the bus; turning it on only sticks while a simulated location is shown.
"""
from __future__ import annotations

import logging

from homeassistant import config_entries
from homeassistant.components.switch import SwitchDeviceClass, SwitchEntity
from homeassistant.core import HomeAssistant

from .coordinator import LocationSimulatorCoordinator
from .entity import LocationSimulatorEntity

_LOGGER = logging.getLogger(__name__)


class LocationSimulatorAutofocusSwitch(LocationSimulatorEntity, SwitchEntity):
    """Keeps the map centered on the simulated location."""

    def __init__(self, coordinator: LocationSimulatorCoordinator) -> None:
        """Initialize the switch."""
        super().__init__(coordinator, "autofocus", "Autofocus")
        self._attr_icon = "mdi:crosshairs-gps"

    @property
    def device_class(self) -> SwitchDeviceClass | str | None:
        return SwitchDeviceClass.SWITCH

    @property
    def is_on(self) -> bool:
        """Return true if the switch is on."""
        return self.coordinator.data.autofocus

    async def async_turn_on(self, **kwargs) -> None:
        """Turn the switch on."""
        await self.coordinator.async_toggle_autofocus(True)

    async def async_turn_off(self, **kwargs) -> None:
        """Turn the switch off."""
        await self.coordinator.async_toggle_autofocus(False)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: config_entries.ConfigEntry,
    async_add_entities,
):
    """Add switches for passed config_entry in HA."""
    coordinator: LocationSimulatorCoordinator = config_entry.runtime_data
    async_add_entities([LocationSimulatorAutofocusSwitch(coordinator)])
