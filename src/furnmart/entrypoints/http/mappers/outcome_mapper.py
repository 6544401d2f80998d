from __future__ import annotations

from furnmart.domain.outcome import Outcome
from furnmart.entrypoints.http.dtos.outcome import CorrectionDTO, OutcomeDTO


def to_outcome_response(outcome: Outcome) -> OutcomeDTO:
    """Converts a domain Outcome to its REST representation."""
    return OutcomeDTO(
        ok=outcome.ok,
        changed=outcome.changed,
        code=outcome.error.error_code if outcome.error else None,
        message=outcome.error.message if outcome.error else None,
        corrections=[
            CorrectionDTO(code=correction.error_code, message=correction.message)
            for correction in outcome.corrections
        ],
    )
