from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from furnmart.domain.errors import ConfigurationError, ValidationError

DEFAULT_SORT = "featured"
ITEMS_PER_PAGE = 12
DEFAULT_MAX_PAGES = 12
DEFAULT_CATALOG_PATH = "/products"


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when a filter group or option is not part of the taxonomy."""

    pass


class SortValidationError(ValidationError):
    """Raised when a sort key is not offered."""

    pass


class ViewModeValidationError(ValidationError):
    """Raised when a view mode is neither grid nor list."""

    pass


class OutOfRangePage(ValidationError):
    error_code: str = "OUT_OF_RANGE_PAGE"

    def __init__(self, requested: Any, applied: int, max_pages: int) -> None:
        super().__init__(
            f"Page must be between 1 and {max_pages}",
            requested=str(requested),
            applied=applied,
        )


# ==============================================================================
# Value types
# ==============================================================================


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class FilterTaxonomy:
    """
    Filter groups with their options, and the offered sort keys.

    Order matters: groups serialize in declaration order and selected values
    are kept in option order, which gives every selection one canonical form.

    Raises:
        ConfigurationError: On empty groups, duplicate or comma-bearing options,
            or a sort list that does not start with the default sort
    """

    groups: Mapping[str, tuple[str, ...]]
    sort_keys: tuple[str, ...] = (DEFAULT_SORT,)

    def __post_init__(self) -> None:
        if not self.groups:
            raise ConfigurationError("filter taxonomy needs at least one group")
        reserved = {"sort", "page", "view"}
        for group, options in self.groups.items():
            if not group or group in reserved:
                raise ConfigurationError(f"invalid filter group name {group!r}")
            if not options:
                raise ConfigurationError(f"filter group {group} has no options")
            if len(set(options)) != len(options):
                raise ConfigurationError(f"filter group {group} has duplicate options")
            if any(not option or "," in option for option in options):
                raise ConfigurationError(
                    f"filter group {group} options must be non-empty and comma-free"
                )
        if not self.sort_keys or self.sort_keys[0] != DEFAULT_SORT:
            raise ConfigurationError(f"sort keys must start with {DEFAULT_SORT!r}")
        if len(set(self.sort_keys)) != len(self.sort_keys):
            raise ConfigurationError("sort keys must be unique")

    @classmethod
    def from_config(
        cls,
        groups: Mapping[str, Sequence[str]],
        sort_keys: Sequence[str] = (DEFAULT_SORT,),
    ) -> FilterTaxonomy:
        return cls(
            groups={group: tuple(options) for group, options in groups.items()},
            sort_keys=tuple(sort_keys),
        )

    def empty_selection(self) -> dict[str, tuple[str, ...]]:
        return {group: () for group in self.groups}

    def canonical(self, group: str, values: Sequence[str]) -> tuple[str, ...]:
        """Known values of group, de-duplicated, in option order."""
        chosen = set(values)
        return tuple(option for option in self.groups[group] if option in chosen)


@dataclass(frozen=True, slots=True)
class CatalogQuery:
    filters: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    sort_by: str = DEFAULT_SORT
    view_mode: ViewMode = ViewMode.GRID
    current_page: int = 1
    items_per_page: int = ITEMS_PER_PAGE

    @property
    def active_filter_count(self) -> int:
        return sum(len(values) for values in self.filters.values())

    def selected(self, group: str) -> tuple[str, ...]:
        return self.filters.get(group, ())


