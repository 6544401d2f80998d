from __future__ import annotations

from abc import ABC, abstractmethod

from furnmart.domain.catalog import CatalogQuery


class ResultCounter(ABC):
    """
    Port for the number of products matching a catalog query.

    The catalog engine only needs a count to render "Showing N products";
    implementations may derive it or ask a real search backend.

    Contract:
        - count() returns a non-negative integer
        - adding a filter never increases the count
    """

    @abstractmethod
    def count(self, query: CatalogQuery) -> int: ...
