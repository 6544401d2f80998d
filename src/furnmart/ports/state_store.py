from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class StateStore(ABC):
    """
    Port for best-effort persistence of engine state.

    Engines call save() after each mutation that changed their state and
    restore from load() when rebuilt. A missing store never affects
    correctness within a single session.

    Contract:
        - state is a JSON-compatible dict produced by the engine itself
        - load() returns None when nothing was saved yet
        - load() returns an equal dict to the last one passed to save()
    """

    @abstractmethod
    def save(self, state: dict[str, Any]) -> None: ...

    @abstractmethod
    def load(self) -> dict[str, Any] | None: ...
