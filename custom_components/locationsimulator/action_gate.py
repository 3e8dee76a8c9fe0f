"""
DependentActionGate — enabled/disabled flag per dependent action.
"""
from __future__ import annotations

from collections.abc import Iterable

from .models import DependentAction


class DependentActionGate:
    """
    Tracks which dependent actions are currently usable.

    Every action starts disabled. enable() and disable() are idempotent and
    accept either the enum member or its string value; an unknown name raises
    ValueError.
    """

    def __init__(self) -> None:
        self._enabled: set[DependentAction] = set()

    def enable(self, action: DependentAction | str) -> None:
        self._enabled.add(DependentAction(action))

    def disable(self, action: DependentAction | str) -> None:
        self._enabled.discard(DependentAction(action))

    def enable_all(self, actions: Iterable[DependentAction | str]) -> None:
        for action in actions:
            self.enable(action)

    def disable_all(self, actions: Iterable[DependentAction | str] | None = None) -> None:
        """Disable the given actions, or every action when none are given."""
        if actions is None:
            self._enabled.clear()
            return
        for action in actions:
            self.disable(action)

    def is_enabled(self, action: DependentAction | str) -> bool:
        return DependentAction(action) in self._enabled

    @property
    def enabled_actions(self) -> frozenset[DependentAction]:
        return frozenset(self._enabled)
