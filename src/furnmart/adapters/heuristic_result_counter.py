from __future__ import annotations

from furnmart.domain.catalog import CatalogQuery
from furnmart.ports.result_counter import ResultCounter

DEFAULT_BASE_COUNT = 165
DEFAULT_STEP = 15
DEFAULT_FLOOR = 10


class HeuristicResultCounter(ResultCounter):
    """
    Placeholder count used until a real product search backs the catalog.

    count = max(floor, base_count - step * active_filter_count)

    Non-increasing in the number of active filters and never below floor.
    """

    def __init__(
        self,
        base_count: int = DEFAULT_BASE_COUNT,
        step: int = DEFAULT_STEP,
        floor: int = DEFAULT_FLOOR,
    ) -> None:
        if step < 0:
            raise ValueError("step must be >= 0")
        self._base_count = base_count
        self._step = step
        self._floor = floor

    def count(self, query: CatalogQuery) -> int:
        return max(self._floor, self._base_count - self._step * query.active_filter_count)
