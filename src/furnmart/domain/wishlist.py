from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from furnmart.domain.errors import ValidationError
from furnmart.domain.outcome import Outcome

if TYPE_CHECKING:
    from furnmart.ports.state_store import StateStore

logger = logging.getLogger(__name__)


class WishlistValidationError(ValidationError):
    """Raised when a product id is not a positive int."""

    pass


def _validate_product_id(product_id: Any) -> int:
    if isinstance(product_id, bool) or not isinstance(product_id, int) or product_id < 1:
        raise WishlistValidationError("product_id must be an int >= 1", product_id=str(product_id))
    return product_id


class Wishlist:
    """
    Saved products, in the order they were first added.

    - toggle() flips membership, as the heart button on a product card does
    - add() and remove() are idempotent
    - state is saved after every change when a StateStore is attached
    """

    def __init__(
        self,
        product_ids: Iterable[int] = (),
        store: StateStore | None = None,
    ) -> None:
        self._product_ids: list[int] = []
        for product_id in product_ids:
            _validate_product_id(product_id)
            if product_id not in self._product_ids:
                self._product_ids.append(product_id)
        self._store = store

    @classmethod
    def restore(cls, store: StateStore) -> Wishlist:
        state = store.load()
        if state is None:
            return cls(store=store)
        return cls.from_state(state, store=store)

    @classmethod
    def from_state(cls, state: Mapping[str, Any], store: StateStore | None = None) -> Wishlist:
        return cls(product_ids=state.get("product_ids", []), store=store)

    def to_state(self) -> dict[str, Any]:
        return {"product_ids": list(self._product_ids)}

    @property
    def product_ids(self) -> tuple[int, ...]:
        return tuple(self._product_ids)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._product_ids

    def __len__(self) -> int:
        return len(self._product_ids)

    def add(self, product_id: int) -> Outcome:
        _validate_product_id(product_id)
        if product_id in self._product_ids:
            return Outcome.unchanged()
        self._product_ids.append(product_id)
        return self._committed(product_id, saved=True)

    def remove(self, product_id: int) -> Outcome:
        _validate_product_id(product_id)
        if product_id not in self._product_ids:
            return Outcome.unchanged()
        self._product_ids.remove(product_id)
        return self._committed(product_id, saved=False)

    def toggle(self, product_id: int) -> Outcome:
        if product_id in self._product_ids:
            return self.remove(product_id)
        return self.add(product_id)

    def _committed(self, product_id: int, saved: bool) -> Outcome:
        logger.debug(
            "Wishlist updated",
            extra={"product_id": product_id, "saved": saved, "count": len(self._product_ids)},
        )
        if self._store is not None:
            self._store.save(self.to_state())
        return Outcome()
