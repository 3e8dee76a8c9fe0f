"""
Domain models for the Location Simulator integration.

This module contains pure data classes representing simulator state.
These classes have no dependencies on Home Assistant internals.
"""
from __future__ import annotations

import dataclasses
import logging
from enum import Enum, IntEnum, StrEnum
from typing import Callable, Protocol

_LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Coordinate:
    """A simulated point on the earth's surface."""

    latitude: float
    longitude: float


class MoveType(IntEnum):
    """Movement speed applied to a session. Controls address it by ordinal."""

    WALK = 0
    CYCLE = 1
    DRIVE = 2

    @property
    def option(self) -> str:
        return self.name.lower()

    @classmethod
    def from_ordinal(cls, ordinal: int) -> MoveType:
        """Strict lookup. An unknown ordinal means the UI and core disagree."""
        try:
            return cls(ordinal)
        except ValueError as exc:
            raise ValueError(f"Invalid move type ordinal: {ordinal!r}") from exc

    @classmethod
    def from_option(cls, value, default: MoveType | None = None) -> MoveType:
        """Lenient lookup by option name or ordinal, falling back to walk."""
        fallback = cls.WALK if default is None else default
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                return fallback
        try:
            return cls(value)
        except (TypeError, ValueError):
            return fallback


class MoveState(Enum):
    """Movement state of a session."""

    MANUAL = "manual"
    AUTO = "auto"
    DISABLED = "disabled"


class MoveTypeControl(Enum):
    """The two redundant surfaces showing the move type."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class DependentAction(StrEnum):
    """Commands that are only meaningful with an active, loaded session."""

    SET_LOCATION = "set_location"
    TOGGLE_AUTOMOVE = "toggle_automove"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_COUNTERCLOCKWISE = "move_counterclockwise"
    MOVE_CLOCKWISE = "move_clockwise"
    RECENT_LOCATION = "recent_location"


# Enabled once a session holds a location and accepts interactive movement
MOVEMENT_ACTIONS: tuple[DependentAction, ...] = (
    DependentAction.TOGGLE_AUTOMOVE,
    DependentAction.MOVE_UP,
    DependentAction.MOVE_DOWN,
    DependentAction.MOVE_COUNTERCLOCKWISE,
    DependentAction.MOVE_CLOCKWISE,
)

# Enabled as soon as a session is loaded
SESSION_ACTIONS: tuple[DependentAction, ...] = (
    DependentAction.SET_LOCATION,
    DependentAction.RECENT_LOCATION,
)


class LocationDelegate(Protocol):
    """Receiver of location change callbacks (the external view)."""

    def will_change_location(self, session: Session, coordinate: Coordinate | None) -> None:
        ...

    def did_change_location(self, session: Session, coordinate: Coordinate | None) -> None:
        ...


class Session:
    """Binding between one device and its simulated location state."""

    udid: str
    current_location: Coordinate | None
    move_type: MoveType
    move_state: MoveState
    delegate: LocationDelegate | None
    # Told about every location change after the delegate
    observer: Callable[[Session, Coordinate | None], None] | None

    def __init__(
        self,
        udid: str,
        current_location: Coordinate | None = None,
        move_type: MoveType = MoveType.WALK,
        move_state: MoveState = MoveState.DISABLED,
    ) -> None:
        """Initialize the Session class."""
        self.udid = udid
        self.current_location = current_location
        self.move_type = move_type
        self.move_state = move_state
        self.delegate = None
        self.observer = None

    def set_location(self, coordinate: Coordinate) -> None:
        """Move the simulated location and tell the delegate about it."""
        if self.move_state == MoveState.DISABLED:
            self.move_state = MoveState.MANUAL
        self._change_location(coordinate)

    def reset_location(self) -> None:
        """Stop simulating a location for this device."""
        self.move_state = MoveState.DISABLED
        self._change_location(None)

    def _change_location(self, coordinate: Coordinate | None) -> None:
        delegate = self.delegate
        if delegate is not None:
            delegate.will_change_location(self, coordinate)
        self.current_location = coordinate
        _LOGGER.debug("Session %s location is now %s", self.udid, coordinate)
        if delegate is not None:
            delegate.did_change_location(self, coordinate)
        if self.observer is not None:
            self.observer(self, coordinate)

    def __repr__(self) -> str:
        return f"Session(udid={self.udid!r}, location={self.current_location!r}, move_type={self.move_type.name})"
