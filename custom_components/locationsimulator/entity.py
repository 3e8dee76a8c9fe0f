"""Base entity shared by every Location Simulator platform."""
from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import LocationSimulatorCoordinator


class LocationSimulatorEntity(CoordinatorEntity[LocationSimulatorCoordinator]):
    """
    Entity rendering part of the coordinator snapshot.
    All entities of one config entry belong to the same simulator device.
    """

    def __init__(self, coordinator: LocationSimulatorCoordinator, key: str, name: str) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        device_name = coordinator.get_device_info()["name"]
        self._attr_unique_id = f"{DOMAIN}_{coordinator.guid}_{key}"
        self._attr_name = f"{device_name} {name}"

    @property
    def device_info(self) -> DeviceInfo | None:
        """Return the device info."""
        return DeviceInfo(**self.coordinator.get_device_info())
