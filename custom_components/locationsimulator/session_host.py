"""
Session Host — creates and owns device sessions.

The coordinator only ever asks the host to load a session for a UDID and then
reads the host's current session. The spoofing engine that moves a session
around lives outside this integration.
"""
from __future__ import annotations

import logging
from typing import Callable, Protocol

from .models import Session

_LOGGER = logging.getLogger(__name__)


class SessionHost(Protocol):
    """Collaborator that loads sessions for devices."""

    @property
    def current_session(self) -> Session | None:
        ...

    async def async_load_session(self, udid: str) -> bool:
        """Load a session for udid. Returns False if the device cannot be used."""
        ...

    async def async_close_session(self, udid: str) -> None:
        ...


class LocalSessionHost:
    """
    In-memory session host.

    A session can be loaded for any device that is currently reachable. New
    sessions start without a location, walking, with movement disabled until
    a location is known.
    """

    def __init__(self, is_reachable: Callable[[str], bool]) -> None:
        self._is_reachable = is_reachable
        self._current_session: Session | None = None

    @property
    def current_session(self) -> Session | None:
        return self._current_session

    async def async_load_session(self, udid: str) -> bool:
        if not self._is_reachable(udid):
            _LOGGER.warning("Cannot load session, device %s is not reachable", udid)
            self._current_session = None
            return False
        self._current_session = Session(udid)
        _LOGGER.debug("Loaded session for device %s", udid)
        return True

    async def async_close_session(self, udid: str) -> None:
        if self._current_session is not None and self._current_session.udid == udid:
            self._current_session = None
            _LOGGER.debug("Closed session for device %s", udid)
