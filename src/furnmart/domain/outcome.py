from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from furnmart.domain.errors import DomainError


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Result of an engine update.

    - changed: the engine state differs from before the call
    - error: the request was rejected (state unchanged)
    - corrections: the request was accepted after adjusting its input
      (e.g. a quantity clamped into range)
    """

    changed: bool = True
    error: DomainError | None = None
    corrections: tuple[DomainError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def unchanged(cls) -> Outcome:
        return cls(changed=False)

    @classmethod
    def rejected(cls, error: DomainError) -> Outcome:
        return cls(changed=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        result: dict[str, Any] = {"ok": self.ok, "changed": self.changed}
        if self.error is not None:
            result["error"] = self.error.to_dict()
        if self.corrections:
            result["corrections"] = [c.to_dict() for c in self.corrections]
        return result
