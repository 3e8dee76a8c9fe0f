"""
DeviceNotificationListener — keeps the DeviceRegistry in step with the bus.

Listens for connect/pair/disconnect events carrying a device UDID and for the
autofocus preference event. Registry mutations are pushed through the
coordinator's CommandQueue so they never interleave with a device hand-off.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from homeassistant.core import CALLBACK_TYPE, Event, HomeAssistant, callback

from .command_queue import CommandQueue
from .const import (
    ATTR_ENABLED,
    ATTR_UDID,
    EVENT_AUTOFOCUS_CHANGED,
    EVENT_DEVICE_CONNECTED,
    EVENT_DEVICE_DISCONNECTED,
    EVENT_DEVICE_PAIRED,
)
from .registry import DeviceRegistry
from .transport import DeviceTransport

_LOGGER = logging.getLogger(__name__)

DeviceHook = Callable[[str], Awaitable[None]]


class DeviceNotificationListener:
    """
    Subscribes to device lifecycle events for one coordinator.

    Device events are only subscribed when the transport manages to start
    generating notifications; otherwise the listener stays inert and the
    registry stays empty. The autofocus mirror is subscribed regardless.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        transport: DeviceTransport,
        registry: DeviceRegistry,
        queue: CommandQueue,
        on_device_added: DeviceHook,
        on_device_removed: DeviceHook,
        on_autofocus_changed: Callable[[bool], None],
    ) -> None:
        self.hass = hass
        self._transport = transport
        self._registry = registry
        self._queue = queue
        self._on_device_added = on_device_added
        self._on_device_removed = on_device_removed
        self._on_autofocus_changed = on_autofocus_changed
        self._unsubscribers: list[CALLBACK_TYPE] = []
        self._transport_started = False

    @property
    def transport_started(self) -> bool:
        return self._transport_started

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @callback
    def async_start(self) -> bool:
        """Subscribe to the bus. Returns False when running without a transport."""
        self._unsubscribers.append(
            self.hass.bus.async_listen(EVENT_AUTOFOCUS_CHANGED, self._async_handle_autofocus)
        )

        try:
            started = self._transport.start_generating_device_notifications()
        except Exception as exc:  # noqa: BLE001
            _LOGGER.warning("Device transport failed to start: %s", exc)
            started = False

        if not started:
            _LOGGER.warning("Device notifications unavailable, no devices will be listed")
            return False

        self._transport_started = True
        for event_type, handler in (
            (EVENT_DEVICE_CONNECTED, self._async_handle_device_added),
            (EVENT_DEVICE_PAIRED, self._async_handle_device_added),
            (EVENT_DEVICE_DISCONNECTED, self._async_handle_device_removed),
        ):
            self._unsubscribers.append(self.hass.bus.async_listen(event_type, handler))
        _LOGGER.debug("Listening for device notifications")
        return True

    @callback
    def async_stop(self) -> None:
        """Remove every subscription made by async_start. Safe to call twice."""
        while self._unsubscribers:
            unsubscribe = self._unsubscribers.pop()
            unsubscribe()
        if self._transport_started:
            self._transport_started = False
            self._transport.stop_generating_device_notifications()

    # ------------------------------------------------------------------
    # Bus handlers
    # ------------------------------------------------------------------

    @callback
    def _async_handle_device_added(self, event: Event) -> None:
        udid = event.data.get(ATTR_UDID)
        if not udid:
            _LOGGER.debug("Ignoring %s without a device id", event.event_type)
            return
        self._submit(f"register {udid}", lambda: self._async_register(udid))

    @callback
    def _async_handle_device_removed(self, event: Event) -> None:
        udid = event.data.get(ATTR_UDID)
        if not udid:
            _LOGGER.debug("Ignoring %s without a device id", event.event_type)
            return
        self._submit(f"unregister {udid}", lambda: self._async_unregister(udid))

    @callback
    def _async_handle_autofocus(self, event: Event) -> None:
        # Presentation mirror only; anything but an explicit True shows off
        self._on_autofocus_changed(event.data.get(ATTR_ENABLED) is True)

    # ------------------------------------------------------------------
    # Queued jobs
    # ------------------------------------------------------------------

    async def _async_register(self, udid: str) -> None:
        if self._registry.add(udid):
            await self._on_device_added(udid)

    async def _async_unregister(self, udid: str) -> None:
        if self._registry.remove(udid):
            await self._on_device_removed(udid)

    def _submit(self, name: str, coro_factory) -> None:
        fut = self._queue.submit(name, coro_factory)
        fut.add_done_callback(_log_failure)


def _log_failure(fut: asyncio.Future) -> None:
    if fut.cancelled():
        return
    exc = fut.exception()
    if exc is not None:
        _LOGGER.error("Failed to process device notification: %s", exc)
