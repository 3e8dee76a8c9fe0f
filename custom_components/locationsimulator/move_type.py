"""
MoveTypeSynchronizer — one authoritative move type behind two redundant controls.

The primary and secondary move-type controls never talk to each other. Both
render the single value held here and report user changes back through
select(); listeners hear about a change only when the value actually moved.
"""
from __future__ import annotations

import logging
from typing import Callable

from .models import MoveType, MoveTypeControl

_LOGGER = logging.getLogger(__name__)

MoveTypeListener = Callable[[MoveType, MoveTypeControl], None]


class MoveTypeSynchronizer:
    """Holds the selected MoveType shared by every move-type control."""

    def __init__(self, initial: MoveType = MoveType.WALK) -> None:
        self._move_type = initial
        self._listeners: list[MoveTypeListener] = []

    @property
    def move_type(self) -> MoveType:
        return self._move_type

    def ordinal(self, control: MoveTypeControl) -> int:
        """Ordinal displayed by control. Identical for every control."""
        return int(self._move_type)

    def select(self, ordinal: int, origin: MoveTypeControl) -> MoveType:
        """
        Apply a change made on origin.

        Raises ValueError for an ordinal outside the MoveType enumeration.
        """
        move_type = MoveType.from_ordinal(ordinal)
        if move_type == self._move_type:
            _LOGGER.debug("Move type already %s, ignoring change from %s", move_type.name, origin.value)
            return move_type

        self._move_type = move_type
        _LOGGER.debug("Move type changed to %s from %s control", move_type.name, origin.value)
        for listener in list(self._listeners):
            listener(move_type, origin)
        return move_type

    def add_listener(self, listener: MoveTypeListener) -> Callable[[], None]:
        """Register listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def remove_listener() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove_listener
