"""
Test suite for Wishlist.

Covers:
- Toggle symmetry and idempotent add/remove
- First-added order
- Persistence hook and state round trip
"""

from __future__ import annotations

import pytest

from furnmart.adapters.in_memory_state_store import InMemoryStateStore
from furnmart.domain.wishlist import Wishlist, WishlistValidationError


# ==============================================================================
# Membership
# ==============================================================================


def test_new_wishlist_is_empty() -> None:
    wishlist = Wishlist()

    assert wishlist.product_ids == ()
    assert len(wishlist) == 0


def test_toggle_adds_then_removes() -> None:
    wishlist = Wishlist()

    added = wishlist.toggle(7)
    assert added.changed
    assert 7 in wishlist

    removed = wishlist.toggle(7)
    assert removed.changed
    assert 7 not in wishlist


def test_toggle_twice_restores_state() -> None:
    wishlist = Wishlist(product_ids=[3, 5])

    wishlist.toggle(4)
    wishlist.toggle(4)

    assert wishlist.product_ids == (3, 5)


def test_add_is_idempotent() -> None:
    wishlist = Wishlist()
    wishlist.add(2)

    outcome = wishlist.add(2)

    assert outcome.ok
    assert not outcome.changed
    assert wishlist.product_ids == (2,)


def test_remove_absent_product_is_a_no_op() -> None:
    outcome = Wishlist(product_ids=[1]).remove(9)

    assert outcome.ok
    assert not outcome.changed


def test_products_keep_first_added_order() -> None:
    wishlist = Wishlist()
    for product_id in (8, 2, 5, 2):
        wishlist.add(product_id)

    assert wishlist.product_ids == (8, 2, 5)


def test_duplicate_initial_ids_are_collapsed() -> None:
    assert Wishlist(product_ids=[4, 4, 1]).product_ids == (4, 1)


@pytest.mark.parametrize("product_id", [0, -1, True, "3"])
def test_invalid_product_ids_are_rejected(product_id: object) -> None:
    with pytest.raises(WishlistValidationError):
        Wishlist().toggle(product_id)  # type: ignore[arg-type]


# ==============================================================================
# Persistence
# ==============================================================================


def test_changes_are_saved() -> None:
    store = InMemoryStateStore()
    wishlist = Wishlist(store=store)

    wishlist.toggle(1)
    wishlist.toggle(2)
    wishlist.add(2)

    assert store.save_count == 2
    assert store.load() == {"product_ids": [1, 2]}


def test_restore_round_trip() -> None:
    store = InMemoryStateStore()
    Wishlist.restore(store).add(11)

    restored = Wishlist.restore(store)

    assert restored.product_ids == (11,)
