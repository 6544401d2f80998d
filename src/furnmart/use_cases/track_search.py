"""Track search-as-you-type requests use case."""

from __future__ import annotations

from dataclasses import dataclass

from furnmart.domain.search import MIN_SEARCH_LENGTH, SearchRequestGate, SearchTicket
from furnmart.ports.state_store import StateStore


@dataclass(frozen=True, slots=True)
class SearchStatus:
    """Ticket issued by the request (None when nothing should be searched) and the latest token."""

    ticket: SearchTicket | None
    latest: int


class TrackSearch:
    """
    Use case for issuing and checking search tickets for one browser session.

    The client submits every keystroke's text, runs the search for the returned
    ticket, and asks is_current() before rendering the results. Tickets
    superseded by a later submit or a cancel are stale.
    """

    def __init__(self, store: StateStore, min_length: int = MIN_SEARCH_LENGTH) -> None:
        self._store = store
        self._min_length = min_length

    def submit(self, text: str) -> SearchStatus:
        gate = self._gate()
        ticket = gate.submit(text)
        return SearchStatus(ticket=ticket, latest=gate.latest)

    def is_current(self, token: int) -> bool:
        return self._gate().is_current(token)

    def cancel(self) -> SearchStatus:
        gate = self._gate()
        gate.cancel()
        return SearchStatus(ticket=None, latest=gate.latest)

    def _gate(self) -> SearchRequestGate:
        return SearchRequestGate.restore(self._store, min_length=self._min_length)
