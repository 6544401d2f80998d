from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from furnmart.ports.state_store import StateStore

logger = logging.getLogger(__name__)

MIN_SEARCH_LENGTH = 3


@dataclass(frozen=True, slots=True)
class SearchTicket:
    token: int
    text: str


class SearchRequestGate:
    """
    Drops stale search-as-you-type requests.

    Every submit() supersedes whatever was pending. A search that completes
    after being superseded must be ignored by the caller, which checks
    is_current() with the ticket's token before rendering results. Nothing
    blocks; tokens only grow.

    When a StateStore is attached, the latest token is saved after every
    submit() and cancel(), so tickets stay comparable across requests.
    """

    def __init__(
        self,
        min_length: int = MIN_SEARCH_LENGTH,
        latest: int = 0,
        store: StateStore | None = None,
    ) -> None:
        self._min_length = min_length
        self._latest = latest
        self._store = store

    @classmethod
    def restore(
        cls,
        store: StateStore,
        min_length: int = MIN_SEARCH_LENGTH,
    ) -> SearchRequestGate:
        state = store.load()
        if state is None:
            return cls(min_length=min_length, store=store)
        return cls.from_state(state, min_length=min_length, store=store)

    @classmethod
    def from_state(
        cls,
        state: Mapping[str, Any],
        min_length: int = MIN_SEARCH_LENGTH,
        store: StateStore | None = None,
    ) -> SearchRequestGate:
        return cls(min_length=min_length, latest=int(state.get("latest", 0)), store=store)

    def to_state(self) -> dict[str, Any]:
        return {"latest": self._latest}

    @property
    def latest(self) -> int:
        return self._latest

    def submit(self, text: str) -> SearchTicket | None:
        """Issue a ticket for text, or None when it is too short to search."""
        self._advance()
        query = text.strip()
        if len(query) < self._min_length:
            logger.debug("Search too short", extra={"length": len(query)})
            return None
        return SearchTicket(token=self._latest, text=query)

    def is_current(self, token: int) -> bool:
        return token == self._latest

    def cancel(self) -> None:
        self._advance()

    def _advance(self) -> None:
        self._latest += 1
        if self._store is not None:
            self._store.save(self.to_state())
