"""
CoordinatorData — immutable snapshot of simulator state shared with entities.

This is a pure data module with no HA dependencies.
"""
from __future__ import annotations

import dataclasses

from .models import DependentAction, MoveType


@dataclasses.dataclass(frozen=True)
class CoordinatorData:
    """
    Typed, copy-on-write snapshot of the simulator state.

    Always replace via dataclasses.replace() — never mutate in place.
    """

    # Reachable device UDIDs in discovery order
    devices: tuple[str, ...] = ()

    # UDID of the device whose session is active, None while nothing is loaded
    active_device: str | None = None

    # Move type shown by both move-type controls
    move_type: MoveType = MoveType.WALK

    # Dependent actions that may currently be triggered
    enabled_actions: frozenset[DependentAction] = dataclasses.field(default_factory=frozenset)

    # Mirror of the map's autofocus-on-current-location preference
    autofocus: bool = False

    # False when the device transport could not be started
    transport_available: bool = False
