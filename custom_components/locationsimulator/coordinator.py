"""
DataUpdateCoordinator for the Location Simulator integration.

Responsibilities:
- Own the DeviceRegistry, LocationCache, DependentActionGate and
  MoveTypeSynchronizer for the lifetime of a config entry.
- Keep the registry current through DeviceNotificationListener.
- Run the device hand-off when the user picks another device: quiesce the
  old session, remember its location, load the new session and restore its
  cached location.
- Serialise every state change through CommandQueue (command_queue.py).
- Push CoordinatorData snapshots to entities after each change.
"""
from __future__ import annotations

import dataclasses
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from .action_gate import DependentActionGate
from .command_queue import CommandQueue
from .const import (
    ATTR_ACTION,
    ATTR_ENABLED,
    ATTR_UDID,
    CONF_DEFAULT_MOVE_TYPE,
    CONF_ENTRY_NAME,
    CONF_GUID,
    DEFAULT_ENTRY_NAME,
    DEFAULT_MOVE_TYPE,
    DOMAIN,
    EVENT_ACTION,
    EVENT_AUTOFOCUS_CHANGED,
    VERSION,
)
from .coordinator_data import CoordinatorData
from .device_listener import DeviceNotificationListener
from .location_cache import LocationCache
from .models import (
    MOVEMENT_ACTIONS,
    SESSION_ACTIONS,
    Coordinate,
    DependentAction,
    LocationDelegate,
    MoveState,
    MoveType,
    MoveTypeControl,
    Session,
)
from .move_type import MoveTypeSynchronizer
from .registry import DeviceRegistry
from .session_host import LocalSessionHost, SessionHost
from .transport import BusDeviceTransport, DeviceTransport
from .view import LocationView

__all__ = ["CoordinatorData", "LocationSimulatorCoordinator"]

_LOGGER = logging.getLogger(__name__)


def entry_option(entry: ConfigEntry, key: str, default=None):
    """Read a config value, letting options override the original data."""
    if key in entry.options:
        return entry.options[key]
    return entry.data.get(key, default)


# ---------------------------------------------------------------------------
# LocationSimulatorCoordinator — main coordinator
# ---------------------------------------------------------------------------

class LocationSimulatorCoordinator(DataUpdateCoordinator[CoordinatorData]):
    """
    Coordinator for the Location Simulator integration.

    Push-only: there is no polling interval, every snapshot is produced by a
    device notification or a user command.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        entry: ConfigEntry,
        transport: DeviceTransport | None = None,
        session_host: SessionHost | None = None,
        view: LocationDelegate | None = None,
    ) -> None:
        """Initialize the coordinator from a config entry and its collaborators."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=entry,
            name=DOMAIN,
            update_interval=None,
        )
        self._entry = entry

        self.registry = DeviceRegistry()
        self.location_cache = LocationCache()
        self.actions = DependentActionGate()
        self.move_types = MoveTypeSynchronizer(
            MoveType.from_option(entry_option(entry, CONF_DEFAULT_MOVE_TYPE, DEFAULT_MOVE_TYPE))
        )
        self._remove_move_type_listener = self.move_types.add_listener(self._async_move_type_changed)

        self._session_host: SessionHost = session_host or LocalSessionHost(self.registry.__contains__)
        self._view = view if view is not None else LocationView(hass, entry.entry_id)
        self._queue = CommandQueue()
        self._listener = DeviceNotificationListener(
            hass,
            transport or BusDeviceTransport(hass),
            self.registry,
            self._queue,
            on_device_added=self._async_device_added,
            on_device_removed=self._async_device_removed,
            on_autofocus_changed=self._async_autofocus_changed,
        )

        # Non-owning reference to the session loaded by the session host
        self._session: Session | None = None

        self.data = CoordinatorData(move_type=self.move_types.move_type)

    @property
    def guid(self) -> str:
        return self._entry.data[CONF_GUID]

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def view(self) -> LocationDelegate:
        return self._view

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @callback
    def async_start(self) -> bool:
        """Start listening for device notifications."""
        started = self._listener.async_start()
        self.async_set_updated_data(
            dataclasses.replace(self.data, transport_available=started)
        )
        return started

    async def async_shutdown(self) -> None:
        """Unsubscribe from the bus before anything else is torn down."""
        self._listener.async_stop()
        await self._queue.shutdown()
        if self._session is not None:
            self._session.delegate = None
            self._session.observer = None
        self._remove_move_type_listener()
        await super().async_shutdown()

    async def async_wait_idle(self) -> None:
        """Wait until every queued command has been processed."""
        await self._queue.join()

    # ------------------------------------------------------------------
    # User commands
    # ------------------------------------------------------------------

    async def async_select_device(self, index: int) -> bool:
        """
        Switch the active session to the device at index in the registry.

        Returns True when a session for that device is active afterwards.
        Raises IndexError for an index the registry does not have.
        """
        return await self._queue.submit(
            f"select device {index}", lambda: self._async_handoff(index)
        )

    async def async_select_device_udid(self, udid: str) -> bool:
        """
        Switch the active session to the device with the given UDID.

        The UDID is resolved to its registry index only when the job runs, so
        registry changes queued ahead of it cannot shift the selection.
        Raises HomeAssistantError if the device is gone by then.
        """
        return await self._queue.submit(
            f"select device {udid}", lambda: self._async_handoff_udid(udid)
        )

    async def async_change_move_type(self, ordinal: int, control: MoveTypeControl) -> MoveType:
        """Apply a move type picked on one of the two move-type controls."""
        return await self._queue.submit(
            "change move type", lambda: self._async_change_move_type(ordinal, control)
        )

    async def async_reset_location(self) -> None:
        """Stop simulating a location on the active device."""
        await self._queue.submit("reset location", self._async_reset_location)

    async def async_trigger_action(self, action: DependentAction | str) -> None:
        """Ask the spoofing engine to perform a dependent action."""
        action = DependentAction(action)
        await self._queue.submit(
            f"action {action}", lambda: self._async_trigger_action(action)
        )

    async def async_toggle_autofocus(self, enabled: bool) -> None:
        """Turn autofocus on the simulated location on or off."""
        if self._view.current_location is None:
            # Nothing to focus on, the toggle snaps back off
            _LOGGER.debug("No location shown, autofocus stays off")
            self._async_autofocus_changed(False)
            return
        self.hass.bus.async_fire(EVENT_AUTOFOCUS_CHANGED, {ATTR_ENABLED: enabled})

    # ------------------------------------------------------------------
    # Device hand-off
    # ------------------------------------------------------------------

    async def _async_handoff_udid(self, udid: str) -> bool:
        index = self.registry.index(udid)
        if index is None:
            raise HomeAssistantError(f"Device {udid} is no longer connected")
        return await self._async_handoff(index)

    async def _async_handoff(self, index: int) -> bool:
        # Nothing is actionable while the active device is in flux
        self.actions.disable_all()
        self._async_publish()

        udid = self.registry[index]

        session = self._session
        if session is not None:
            if session.udid == udid:
                _LOGGER.debug("Device %s is already active", udid)
                self._async_enable_actions(session)
                self._async_publish()
                return True
            self._async_deactivate(session)
            self._session = None

        try:
            loaded = await self._session_host.async_load_session(udid)
        except Exception as exc:  # noqa: BLE001
            _LOGGER.warning("Failed to load session for device %s: %s", udid, exc)
            loaded = False

        new_session = self._session_host.current_session if loaded else None
        if new_session is None:
            _LOGGER.warning("Could not activate device %s", udid)
            self._async_publish()
            return False

        self._session = new_session
        new_session.delegate = self._view
        new_session.observer = self._async_session_location_changed
        new_session.move_type = self.move_types.move_type

        cached = self.location_cache.get(udid)
        if cached is not None:
            new_session.current_location = cached
            self._view.will_change_location(new_session, cached)
            self._view.did_change_location(new_session, cached)
            new_session.move_state = MoveState.MANUAL

        self._async_enable_actions(new_session)
        _LOGGER.info("Device %s is now active", udid)
        self._async_publish()
        return True

    @callback
    def _async_deactivate(self, session: Session) -> None:
        """Quiesce session, remember where it was and clear the view."""
        session.move_state = MoveState.MANUAL
        session.delegate = None
        session.observer = None

        if session.current_location is not None:
            self.location_cache.set(session.udid, session.current_location)
        else:
            # A reset location must not come back on the next selection
            self.location_cache.evict(session.udid)

        self._view.will_change_location(session, None)
        self._view.did_change_location(session, None)

    @callback
    def _async_enable_actions(self, session: Session) -> None:
        """Enable what session supports: movement only while it holds a location."""
        self.actions.enable_all(SESSION_ACTIONS)
        if session.current_location is not None:
            self.actions.enable_all(MOVEMENT_ACTIONS)
        else:
            self.actions.disable_all(MOVEMENT_ACTIONS)

    @callback
    def _async_session_location_changed(self, session: Session, coordinate: Coordinate | None) -> None:
        if session is not self._session:
            return
        self._async_enable_actions(session)
        self._async_publish()

    # ------------------------------------------------------------------
    # Other queued commands
    # ------------------------------------------------------------------

    async def _async_change_move_type(self, ordinal: int, control: MoveTypeControl) -> MoveType:
        return self.move_types.select(ordinal, control)

    @callback
    def _async_move_type_changed(self, move_type: MoveType, origin: MoveTypeControl) -> None:
        if self._session is None:
            _LOGGER.debug("No active session, move type %s not forwarded", move_type.name)
        else:
            self._session.move_type = move_type
        self.async_set_updated_data(dataclasses.replace(self.data, move_type=move_type))

    async def _async_reset_location(self) -> None:
        if self._session is None:
            _LOGGER.debug("No active session, nothing to reset")
            return
        # The session observer disables movement and publishes
        self._session.reset_location()

    async def _async_trigger_action(self, action: DependentAction) -> None:
        if self._session is None or not self.actions.is_enabled(action):
            raise HomeAssistantError(f"Action {action} is not available right now")
        self.hass.bus.async_fire(
            EVENT_ACTION, {ATTR_ACTION: str(action), ATTR_UDID: self._session.udid}
        )

    # ------------------------------------------------------------------
    # Listener hooks
    # ------------------------------------------------------------------

    async def _async_device_added(self, udid: str) -> None:
        self._async_publish()

    async def _async_device_removed(self, udid: str) -> None:
        session = self._session
        if session is not None and session.udid == udid:
            _LOGGER.info("Active device %s disconnected", udid)
            self.actions.disable_all()
            self._async_deactivate(session)
            self._session = None
            await self._session_host.async_close_session(udid)
        self._async_publish()

    @callback
    def _async_autofocus_changed(self, enabled: bool) -> None:
        self.async_set_updated_data(dataclasses.replace(self.data, autofocus=enabled))

    # ------------------------------------------------------------------
    # Snapshot helpers
    # ------------------------------------------------------------------

    @callback
    def _async_publish(self) -> None:
        self.async_set_updated_data(
            dataclasses.replace(
                self.data,
                devices=tuple(self.registry),
                active_device=self._session.udid if self._session is not None else None,
                move_type=self.move_types.move_type,
                enabled_actions=self.actions.enabled_actions,
            )
        )

    # ------------------------------------------------------------------
    # Entity helper — device info dict
    # ------------------------------------------------------------------

    def get_device_info(self) -> dict:
        """Return the HA DeviceInfo dict for this simulator."""
        return {
            "identifiers": {(DOMAIN, self.guid)},
            "name": entry_option(self._entry, CONF_ENTRY_NAME, DEFAULT_ENTRY_NAME),
            "manufacturer": "Location Simulator",
            "model": "Device session coordinator",
            "sw_version": VERSION,
        }
