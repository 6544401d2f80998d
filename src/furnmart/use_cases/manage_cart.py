"""Manage cart use case."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from furnmart.domain.cart import CartLedger, CartTotals, LineItem, PromoTable
from furnmart.domain.outcome import Outcome
from furnmart.ports.state_store import StateStore


@dataclass(frozen=True, slots=True)
class CartResult:
    """Everything the caller needs to re-render the cart after an update."""

    items: tuple[LineItem, ...]
    promo_code: str | None
    totals: CartTotals
    is_empty: bool
    outcome: Outcome


class ManageCart:
    """
    Use case for viewing and editing one cart.

    Responsibilities:
    - Rebuild the ledger from the state store
    - Run one ledger update (the ledger saves itself when something changed)
    - Return the new snapshot together with the update outcome

    Expected failures (unknown promo code, missing item) come back in the
    outcome; this use case never raises for them.
    """

    def __init__(self, store: StateStore, promo_table: PromoTable) -> None:
        self._store = store
        self._promo_table = promo_table

    def view(self) -> CartResult:
        return self._run(lambda ledger: Outcome.unchanged())

    def add_item(self, item: LineItem) -> CartResult:
        return self._run(lambda ledger: ledger.add_item(item))

    def set_quantity(self, item_id: int, quantity: Any) -> CartResult:
        return self._run(lambda ledger: ledger.set_quantity(item_id, quantity))

    def remove_item(self, item_id: int) -> CartResult:
        return self._run(lambda ledger: ledger.remove_item(item_id))

    def apply_promo_code(self, code: str) -> CartResult:
        return self._run(lambda ledger: ledger.apply_promo_code(code))

    def clear_promo_code(self) -> CartResult:
        return self._run(lambda ledger: ledger.clear_promo_code())

    def _run(self, update: Callable[[CartLedger], Outcome]) -> CartResult:
        ledger = CartLedger.restore(promo_table=self._promo_table, store=self._store)
        outcome = update(ledger)
        return CartResult(
            items=ledger.items,
            promo_code=ledger.promo_code,
            totals=ledger.snapshot(),
            is_empty=ledger.is_empty,
            outcome=outcome,
        )
