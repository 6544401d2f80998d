"""
Test suite for ManageWishlist use case.

Covers:
- Restoring the wishlist from the state store on every call
- Idempotent add/remove reported through the outcome
"""

from __future__ import annotations

import pytest

from furnmart.adapters.in_memory_state_store import InMemoryStateStore
from furnmart.use_cases.manage_wishlist import ManageWishlist


@pytest.fixture()
def store() -> InMemoryStateStore:
    return InMemoryStateStore({"product_ids": [4]})


@pytest.fixture()
def use_case(store: InMemoryStateStore) -> ManageWishlist:
    return ManageWishlist(store=store)


def test_view_restores_saved_products(use_case: ManageWishlist) -> None:
    result = use_case.view()

    assert result.product_ids == (4,)
    assert result.count == 1
    assert not result.outcome.changed


def test_view_of_unknown_wishlist_is_empty() -> None:
    result = ManageWishlist(store=InMemoryStateStore()).view()

    assert result.product_ids == ()
    assert result.count == 0


def test_toggle_persists_between_calls(use_case: ManageWishlist, store: InMemoryStateStore) -> None:
    use_case.toggle(9)

    assert use_case.view().product_ids == (4, 9)
    assert store.load() == {"product_ids": [4, 9]}

    use_case.toggle(4)

    assert use_case.view().product_ids == (9,)


def test_add_existing_product_is_unchanged(use_case: ManageWishlist, store: InMemoryStateStore) -> None:
    result = use_case.add(4)

    assert result.outcome.ok
    assert not result.outcome.changed
    assert store.save_count == 0


def test_remove_product(use_case: ManageWishlist) -> None:
    result = use_case.remove(4)

    assert result.outcome.changed
    assert result.product_ids == ()
