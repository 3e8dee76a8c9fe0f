"""
Platform for the dependent action buttons and the reset button.
A dependent action button is only available while the coordinator has the
action enabled; pressing it hands the action to the spoofing engine.
"""
from __future__ import annotations

import logging

from homeassistant import config_entries
from homeassistant.components.button import ButtonEntity
from homeassistant.core import HomeAssistant

from .coordinator import LocationSimulatorCoordinator
from .entity import LocationSimulatorEntity
from .models import DependentAction

_LOGGER = logging.getLogger(__name__)

ACTION_NAMES = {
    DependentAction.SET_LOCATION: ("Set Location", "mdi:map-marker-plus"),
    DependentAction.TOGGLE_AUTOMOVE: ("Toggle Automove", "mdi:play-pause"),
    DependentAction.MOVE_UP: ("Move Up", "mdi:arrow-up-bold"),
    DependentAction.MOVE_DOWN: ("Move Down", "mdi:arrow-down-bold"),
    DependentAction.MOVE_COUNTERCLOCKWISE: ("Rotate Counterclockwise", "mdi:rotate-left"),
    DependentAction.MOVE_CLOCKWISE: ("Rotate Clockwise", "mdi:rotate-right"),
    DependentAction.RECENT_LOCATION: ("Recent Location", "mdi:history"),
}


class LocationSimulatorActionButton(LocationSimulatorEntity, ButtonEntity):
    """Button for a single dependent action."""

    def __init__(self, coordinator: LocationSimulatorCoordinator, action: DependentAction) -> None:
        """Initialize the button."""
        name, icon = ACTION_NAMES[action]
        super().__init__(coordinator, f"action_{action.value}", name)
        self._action = action
        self._attr_icon = icon

    @property
    def action(self) -> DependentAction:
        return self._action

    @property
    def available(self) -> bool:
        return super().available and self._action in self.coordinator.data.enabled_actions

    async def async_press(self) -> None:
        await self.coordinator.async_trigger_action(self._action)


class LocationSimulatorResetButton(LocationSimulatorEntity, ButtonEntity):
    """Stops simulating a location on the active device."""

    def __init__(self, coordinator: LocationSimulatorCoordinator) -> None:
        """Initialize the button."""
        super().__init__(coordinator, "reset_location", "Reset Location")
        self._attr_icon = "mdi:map-marker-remove"

    async def async_press(self) -> None:
        await self.coordinator.async_reset_location()


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: config_entries.ConfigEntry,
    async_add_entities,
):
    """Add buttons for passed config_entry in HA."""
    coordinator: LocationSimulatorCoordinator = config_entry.runtime_data
    entities: list[ButtonEntity] = [
        LocationSimulatorActionButton(coordinator, action) for action in DependentAction
    ]
    entities.append(LocationSimulatorResetButton(coordinator))
    async_add_entities(entities)
