"""
LocationView — relays session location changes to the entities.

Acts as the delegate of the active session. Both callbacks are forwarded
through the Home Assistant dispatcher so the device tracker can redraw the
simulated location.
"""
from __future__ import annotations

import logging

from homeassistant.core import HomeAssistant
from homeassistant.helpers.dispatcher import async_dispatcher_send

from .const import SIGNAL_DID_CHANGE_LOCATION, SIGNAL_WILL_CHANGE_LOCATION
from .models import Coordinate, Session

_LOGGER = logging.getLogger(__name__)


class LocationView:
    """Dispatcher-backed view of the active session's location."""

    def __init__(self, hass: HomeAssistant, entry_id: str) -> None:
        self.hass = hass
        self._will_signal = SIGNAL_WILL_CHANGE_LOCATION.format(entry_id)
        self._did_signal = SIGNAL_DID_CHANGE_LOCATION.format(entry_id)
        # Location marker currently shown, None when nothing is simulated
        self.current_location: Coordinate | None = None

    @property
    def did_change_signal(self) -> str:
        return self._did_signal

    def will_change_location(self, session: Session, coordinate: Coordinate | None) -> None:
        _LOGGER.debug("Location of %s will change to %s", session.udid, coordinate)
        async_dispatcher_send(self.hass, self._will_signal, session.udid, coordinate)

    def did_change_location(self, session: Session, coordinate: Coordinate | None) -> None:
        self.current_location = coordinate
        async_dispatcher_send(self.hass, self._did_signal, session.udid, coordinate)
