"""
Platform for the device picker and the two move-type selectors.
The move-type selectors are redundant surfaces for the same value; both render
the coordinator's single move type and report changes back to it.
"""
from __future__ import annotations

import logging

from homeassistant import config_entries
from homeassistant.components.select import SelectEntity
from homeassistant.core import HomeAssistant

from .coordinator import LocationSimulatorCoordinator
from .entity import LocationSimulatorEntity
from .models import MoveType, MoveTypeControl

_LOGGER = logging.getLogger(__name__)

MOVE_TYPE_NAMES = {
    MoveTypeControl.PRIMARY: "Move Type",
    MoveTypeControl.SECONDARY: "Move Type (Secondary)",
}


class LocationSimulatorDeviceSelect(LocationSimulatorEntity, SelectEntity):
    """Picks the device whose location is simulated."""

    def __init__(self, coordinator: LocationSimulatorCoordinator) -> None:
        """Initialize the select."""
        super().__init__(coordinator, "device", "Device")
        self._attr_icon = "mdi:cellphone-link"

    @property
    def options(self) -> list[str]:
        return list(self.coordinator.data.devices)

    @property
    def current_option(self) -> str | None:
        return self.coordinator.data.active_device

    async def async_select_option(self, option: str) -> None:
        """Hand the simulation over to the chosen device."""
        await self.coordinator.async_select_device_udid(option)


class LocationSimulatorMoveTypeSelect(LocationSimulatorEntity, SelectEntity):
    """One of the two move-type controls."""

    def __init__(self, coordinator: LocationSimulatorCoordinator, control: MoveTypeControl) -> None:
        """Initialize the select."""
        super().__init__(coordinator, f"move_type_{control.value}", MOVE_TYPE_NAMES[control])
        self._control = control
        self._attr_icon = "mdi:speedometer"
        self._attr_options = [move_type.option for move_type in MoveType]

    @property
    def control(self) -> MoveTypeControl:
        return self._control

    @property
    def current_option(self) -> str | None:
        ordinal = self.coordinator.move_types.ordinal(self._control)
        return MoveType.from_ordinal(ordinal).option

    async def async_select_option(self, option: str) -> None:
        """Change the move type from this control."""
        await self.coordinator.async_change_move_type(MoveType[option.upper()].value, self._control)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: config_entries.ConfigEntry,
    async_add_entities,
):
    """Add selects for passed config_entry in HA."""
    coordinator: LocationSimulatorCoordinator = config_entry.runtime_data
    _LOGGER.debug("Adding Location Simulator selects")
    async_add_entities(
        [
            LocationSimulatorDeviceSelect(coordinator),
            LocationSimulatorMoveTypeSelect(coordinator, MoveTypeControl.PRIMARY),
            LocationSimulatorMoveTypeSelect(coordinator, MoveTypeControl.SECONDARY),
        ]
    )
