"""
Dependency injection for FastAPI routes.

Key principle: Database sessions and engines are per-request, not cached.
Only stateless configuration objects use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from furnmart.adapters.heuristic_result_counter import HeuristicResultCounter
from furnmart.adapters.sql_state_store import SqlStateStore
from furnmart.domain.cart import PromoTable
from furnmart.domain.catalog import FilterTaxonomy
from furnmart.infra import config
from furnmart.infra.db.session import get_session
from furnmart.ports.result_counter import ResultCounter
from furnmart.ports.state_store import StateStore
from furnmart.use_cases.browse_catalog import BrowseCatalog
from furnmart.use_cases.manage_cart import ManageCart
from furnmart.use_cases.manage_wishlist import ManageWishlist
from furnmart.use_cases.track_search import TrackSearch

SESSION_ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


@lru_cache
def get_promo_table() -> PromoTable:
    return config.promo_table()


@lru_cache
def get_filter_taxonomy() -> FilterTaxonomy:
    return config.filter_taxonomy()


@lru_cache
def get_result_counter() -> ResultCounter:
    return HeuristicResultCounter(base_count=config.result_base_count())


def get_cart_store(
    cart_id: str = Path(pattern=SESSION_ID_PATTERN, description="Cart (session) identifier"),
    db: Session = Depends(get_db),
) -> StateStore:
    """State store holding one cart, keyed by the cart id in the path."""
    return SqlStateStore(session=db, key=f"cart:{cart_id}")


def get_manage_cart_use_case(
    store: StateStore = Depends(get_cart_store),
    promo_table: PromoTable = Depends(get_promo_table),
) -> ManageCart:
    """
    Factory function that returns a ManageCart use case for the requested cart.

    Called per-request, so each request rebuilds the ledger from its saved
    state inside an isolated database session.
    """
    return ManageCart(store=store, promo_table=promo_table)


def get_browse_catalog_use_case(
    taxonomy: FilterTaxonomy = Depends(get_filter_taxonomy),
    result_counter: ResultCounter = Depends(get_result_counter),
) -> BrowseCatalog:
    return BrowseCatalog(
        taxonomy=taxonomy,
        result_counter=result_counter,
        max_pages=config.max_pages(),
        path=config.catalog_path(),
    )


def get_search_store(
    session_id: str = Path(pattern=SESSION_ID_PATTERN, description="Browser session identifier"),
    db: Session = Depends(get_db),
) -> StateStore:
    """State store holding the latest search token of one browser session."""
    return SqlStateStore(session=db, key=f"search:{session_id}")


def get_track_search_use_case(store: StateStore = Depends(get_search_store)) -> TrackSearch:
    return TrackSearch(store=store)


def get_wishlist_store(
    wishlist_id: str = Path(pattern=SESSION_ID_PATTERN, description="Wishlist (session) identifier"),
    db: Session = Depends(get_db),
) -> StateStore:
    return SqlStateStore(session=db, key=f"wishlist:{wishlist_id}")


def get_manage_wishlist_use_case(
    store: StateStore = Depends(get_wishlist_store),
) -> ManageWishlist:
    return ManageWishlist(store=store)
