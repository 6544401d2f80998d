from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

from furnmart.domain.coercion import MAX_QUANTITY, MIN_QUANTITY, parse_quantity
from furnmart.domain.errors import (
    ConfigurationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from furnmart.domain.outcome import Outcome

if TYPE_CHECKING:
    from furnmart.ports.state_store import StateStore

logger = logging.getLogger(__name__)


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class LineItemValidationError(ValidationError):
    """Raised when a line item is constructed with invalid fields."""

    pass


class InvalidPromoCode(ValidationError):
    error_code: str = "INVALID_PROMO_CODE"

    def __init__(self, promo_code: str) -> None:
        super().__init__("Invalid promo code", promo_code=promo_code)


class PromoCodeLocked(ConflictError):
    error_code: str = "PROMO_CODE_LOCKED"

    def __init__(self, active_code: str, attempted_code: str) -> None:
        super().__init__(
            f"Promo code {active_code} is already applied; clear it before using another",
            active_code=active_code,
            attempted_code=attempted_code,
        )


class ItemNotFound(NotFoundError):
    error_code: str = "ITEM_NOT_FOUND"

    def __init__(self, item_id: int) -> None:
        super().__init__(resource="Cart item", identifier=str(item_id))


class OutOfRangeQuantity(ValidationError):
    error_code: str = "OUT_OF_RANGE_QUANTITY"

    def __init__(self, requested: Any, applied: int) -> None:
        super().__init__(
            f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}",
            requested=str(requested),
            applied=applied,
        )


# ==============================================================================
# Promo codes
# ==============================================================================


class PromoKind(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True, slots=True)
class PromoRule:
    kind: PromoKind
    value: int

    def discount_for(self, subtotal: int) -> int:
        """
        Discount granted on the given subtotal.

        Percentages round half up to whole currency units (309.7 -> 310).
        """
        if self.kind is PromoKind.PERCENTAGE:
            amount = Decimal(subtotal) * Decimal(self.value) / Decimal(100)
            return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        return self.value


def normalize_promo_code(code: str) -> str:
    return code.strip().upper()


class PromoTable:
    """
    Immutable lookup of promo codes.

    Codes are normalized (trimmed, upper-case) on the way in, so lookups are
    case-insensitive.

    Raises:
        ConfigurationError: On blank codes, unknown kinds, or out-of-range values
    """

    def __init__(self, rules: Mapping[str, PromoRule]) -> None:
        table: dict[str, PromoRule] = {}
        for code, rule in rules.items():
            normalized = normalize_promo_code(code)
            if not normalized:
                raise ConfigurationError("promo codes cannot be blank")
            if normalized in table:
                raise ConfigurationError(f"duplicate promo code {normalized}")
            if not isinstance(rule.kind, PromoKind):
                raise ConfigurationError(f"promo code {normalized} has an unknown kind")
            if isinstance(rule.value, bool) or not isinstance(rule.value, int) or rule.value < 0:
                raise ConfigurationError(f"promo code {normalized} value must be an int >= 0")
            if rule.kind is PromoKind.PERCENTAGE and rule.value > 100:
                raise ConfigurationError(f"promo code {normalized} percentage must be <= 100")
            table[normalized] = rule
        self._rules = table

    @classmethod
    def from_config(cls, config: Mapping[str, Mapping[str, Any]]) -> PromoTable:
        """
        Build a table from plain config: {"SAVE10": {"type": "percentage", "value": 10}}.

        Raises:
            ConfigurationError: If an entry is malformed
        """
        rules: dict[str, PromoRule] = {}
        for code, entry in config.items():
            try:
                kind = PromoKind(entry["type"])
                value = entry["value"]
            except (KeyError, TypeError, ValueError) as exc:
                raise ConfigurationError(f"malformed promo code entry {code!r}") from exc
            rules[code] = PromoRule(kind=kind, value=value)
        return cls(rules)

    def lookup(self, code: str) -> PromoRule | None:
        return self._rules.get(normalize_promo_code(code))

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None

    def __len__(self) -> int:
        return len(self._rules)


# ==============================================================================
# Line items and ledger
# ==============================================================================


@dataclass(frozen=True, slots=True)
class LineItem:
    id: int
    name: str
    unit_price: int
    quantity: int = 1
    image_ref: str = ""
    variant: str = ""

    def validate(self) -> None:
        """
        Validate line item fields.

        Raises:
            LineItemValidationError: If a field is invalid
        """
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise LineItemValidationError("id must be an int")
        if not self.name:
            raise LineItemValidationError("name cannot be empty")
        if (
            isinstance(self.unit_price, bool)
            or not isinstance(self.unit_price, int)
            or self.unit_price < 0
        ):
            raise LineItemValidationError("unit_price must be an int >= 0")
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or not MIN_QUANTITY <= self.quantity <= MAX_QUANTITY
        ):
            raise LineItemValidationError(
                f"quantity must be an int between {MIN_QUANTITY} and {MAX_QUANTITY}"
            )

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity


@dataclass(frozen=True, slots=True)
class CartTotals:
    subtotal: int
    discount: int
    total: int
    item_count: int


class CartLedger:
    """
    Shopping cart line items, promo code, and derived totals.

    Invariants:
    - items keep insertion order (display order)
    - every quantity is within [1, 99]; line items are frozen and only the
      ledger replaces them
    - discount is derived from items and promo_code on every read, never stored
    - discount never exceeds the subtotal, so the total is never negative

    Expected input failures are returned as an Outcome; the ledger always stays
    renderable. When a StateStore is attached, state is saved after every
    mutation that changed something.
    """

    def __init__(
        self,
        items: Iterable[LineItem],
        promo_table: PromoTable,
        promo_code: str | None = None,
        store: StateStore | None = None,
    ) -> None:
        self._items: list[LineItem] = []
        for item in items:
            item.validate()
            if self._index(item.id) is not None:
                raise LineItemValidationError(f"duplicate line item id {item.id}")
            self._items.append(item)

        self._promo_table = promo_table
        self._promo_code: str | None = None
        if promo_code is not None:
            if promo_table.lookup(promo_code) is None:
                raise ConfigurationError(f"promo code {promo_code!r} is not in the promo table")
            self._promo_code = normalize_promo_code(promo_code)
        self._store = store

    @classmethod
    def restore(
        cls,
        promo_table: PromoTable,
        store: StateStore,
        default_items: Iterable[LineItem] = (),
    ) -> CartLedger:
        """Rebuild a ledger from the store, or start from default_items if nothing was saved."""
        state = store.load()
        if state is None:
            return cls(items=default_items, promo_table=promo_table, store=store)
        return cls.from_state(state, promo_table=promo_table, store=store)

    @classmethod
    def from_state(
        cls,
        state: Mapping[str, Any],
        promo_table: PromoTable,
        store: StateStore | None = None,
    ) -> CartLedger:
        items = [LineItem(**raw) for raw in state.get("items", [])]
        promo_code = state.get("promo_code")
        # A code dropped from the table since it was saved no longer applies
        if promo_code is not None and promo_table.lookup(promo_code) is None:
            logger.info("Dropping stale promo code", extra={"promo_code": promo_code})
            promo_code = None
        return cls(items=items, promo_table=promo_table, promo_code=promo_code, store=store)

    def to_state(self) -> dict[str, Any]:
        return {
            "items": [asdict(item) for item in self._items],
            "promo_code": self._promo_code,
        }

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def promo_code(self) -> str | None:
        return self._promo_code

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def subtotal(self) -> int:
        return sum(item.line_total for item in self._items)

    @property
    def discount(self) -> int:
        if self._promo_code is None:
            return 0
        rule = self._promo_table.lookup(self._promo_code)
        if rule is None:
            return 0
        subtotal = self.subtotal
        return min(rule.discount_for(subtotal), subtotal)

    def snapshot(self) -> CartTotals:
        subtotal = self.subtotal
        discount = self.discount
        return CartTotals(
            subtotal=subtotal,
            discount=discount,
            total=subtotal - discount,
            item_count=sum(item.quantity for item in self._items),
        )

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def add_item(self, item: LineItem) -> Outcome:
        """
        Add an item, or increase the quantity of the item with the same id.

        The merged quantity is clamped to the maximum.

        Raises:
            LineItemValidationError: If the new item is invalid
        """
        item.validate()
        index = self._index(item.id)
        if index is None:
            self._items.append(item)
            return self._committed(Outcome())

        existing = self._items[index]
        requested = existing.quantity + item.quantity
        applied = min(requested, MAX_QUANTITY)
        corrections = (OutOfRangeQuantity(requested, applied),) if applied != requested else ()
        if applied == existing.quantity:
            return Outcome(changed=False, corrections=corrections)
        self._items[index] = replace(existing, quantity=applied)
        return self._committed(Outcome(corrections=corrections))

    def set_quantity(self, item_id: int, quantity: Any) -> Outcome:
        """Set an item's quantity, clamped into [1, 99]; unknown ids are a no-op."""
        index = self._index(item_id)
        if index is None:
            return Outcome.rejected(ItemNotFound(item_id))
        item = self._items[index]

        parsed = parse_quantity(quantity)
        corrections = (OutOfRangeQuantity(quantity, parsed.value),) if parsed.adjusted else ()
        if item.quantity == parsed.value:
            return Outcome(changed=False, corrections=corrections)

        self._items[index] = replace(item, quantity=parsed.value)
        return self._committed(Outcome(corrections=corrections))

    def remove_item(self, item_id: int) -> Outcome:
        """Remove an item. Removing an absent id is a successful no-op."""
        index = self._index(item_id)
        if index is None:
            return Outcome.unchanged()

        del self._items[index]
        if self.is_empty:
            logger.debug("Cart is now empty")
        return self._committed(Outcome())

    def apply_promo_code(self, code: str) -> Outcome:
        """
        Apply a promo code. The first accepted code wins until cleared.

        Re-applying the active code is an idempotent success.
        """
        normalized = normalize_promo_code(code)

        if self._promo_code is not None:
            if normalized == self._promo_code:
                return Outcome.unchanged()
            logger.info(
                "Promo code rejected",
                extra={"promo_code": normalized, "reason": "locked"},
            )
            return Outcome.rejected(PromoCodeLocked(self._promo_code, normalized))

        if not normalized or self._promo_table.lookup(normalized) is None:
            logger.info(
                "Promo code rejected",
                extra={"promo_code": normalized, "reason": "unknown"},
            )
            return Outcome.rejected(InvalidPromoCode(normalized))

        self._promo_code = normalized
        return self._committed(Outcome())

    def clear_promo_code(self) -> Outcome:
        if self._promo_code is None:
            return Outcome.unchanged()
        self._promo_code = None
        return self._committed(Outcome())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index(self, item_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _committed(self, outcome: Outcome) -> Outcome:
        totals = self.snapshot()
        logger.debug(
            "Cart totals updated",
            extra={
                "subtotal": totals.subtotal,
                "discount": totals.discount,
                "total": totals.total,
                "item_count": totals.item_count,
            },
        )
        if self._store is not None:
            self._store.save(self.to_state())
        return outcome
