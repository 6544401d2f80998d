#!/usr/bin/env python3
"""
Seed a demo cart with the storefront prototype's starter items.

Features:
- Idempotent: safe to run multiple times (overwrites the cart's saved state)
- Goes through CartLedger, so seeded state obeys the same invariants as edits

Usage:
    python scripts/seed_cart.py            # seeds cart "demo"
    python scripts/seed_cart.py my-cart    # seeds cart "my-cart"
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from furnmart.adapters.sql_state_store import SqlStateStore
from furnmart.domain.cart import CartLedger, LineItem
from furnmart.infra import config
from furnmart.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

DEFAULT_CART_ID = "demo"

STARTER_ITEMS = [
    LineItem(
        id=1,
        name="Modern Dining Chair",
        unit_price=899,
        quantity=2,
        image_ref="images/products/chair-1.jpg",
        variant="Beige",
    ),
    LineItem(
        id=2,
        name="Coffee Table",
        unit_price=2299,
        quantity=1,
        image_ref="images/products/table-1.jpg",
        variant="Oak Wood",
    ),
]


def seed_cart(cart_id: str = DEFAULT_CART_ID) -> None:
    print(f"🌱 Seeding cart {cart_id!r} with {len(STARTER_ITEMS)} items...")

    with get_session() as session:
        store = SqlStateStore(session=session, key=f"cart:{cart_id}")
        ledger = CartLedger(items=STARTER_ITEMS, promo_table=config.promo_table())
        store.save(ledger.to_state())

        totals = ledger.snapshot()
        print(f"✅ Seeded {totals.item_count} units, subtotal P {totals.subtotal:,}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_cart(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CART_ID)
    except Exception as e:
        print(f"\n❌ Error seeding cart: {e}", file=sys.stderr)
        sys.exit(1)
