"""Manage wishlist use case."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from furnmart.domain.outcome import Outcome
from furnmart.domain.wishlist import Wishlist
from furnmart.ports.state_store import StateStore


@dataclass(frozen=True, slots=True)
class WishlistResult:
    product_ids: tuple[int, ...]
    outcome: Outcome

    @property
    def count(self) -> int:
        return len(self.product_ids)


class ManageWishlist:
    """Rebuilds the wishlist from the state store and runs one update on it."""

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def view(self) -> WishlistResult:
        return self._run(lambda wishlist: Outcome.unchanged())

    def toggle(self, product_id: int) -> WishlistResult:
        return self._run(lambda wishlist: wishlist.toggle(product_id))

    def add(self, product_id: int) -> WishlistResult:
        return self._run(lambda wishlist: wishlist.add(product_id))

    def remove(self, product_id: int) -> WishlistResult:
        return self._run(lambda wishlist: wishlist.remove(product_id))

    def _run(self, update: Callable[[Wishlist], Outcome]) -> WishlistResult:
        wishlist = Wishlist.restore(self._store)
        outcome = update(wishlist)
        return WishlistResult(product_ids=wishlist.product_ids, outcome=outcome)
