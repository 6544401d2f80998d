from __future__ import annotations

import copy
from typing import Any

from furnmart.ports.state_store import StateStore


class InMemoryStateStore(StateStore):
    """
    Canonical contract implementation for tests.

    - Keeps a deep copy of the last saved state
    - Counts saves so tests can assert when engines persist
    """

    def __init__(self, state: dict[str, Any] | None = None) -> None:
        self._state = copy.deepcopy(state)
        self.save_count = 0

    def save(self, state: dict[str, Any]) -> None:
        self._state = copy.deepcopy(state)
        self.save_count += 1

    def load(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._state)
