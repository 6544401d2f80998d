from __future__ import annotations

from furnmart.entrypoints.http.dtos.search import SearchTicketResponseDTO, SearchTicketStatusDTO
from furnmart.use_cases.track_search import SearchStatus


class SearchMapper:
    @staticmethod
    def to_response(status: SearchStatus) -> SearchTicketResponseDTO:
        ticket = status.ticket
        return SearchTicketResponseDTO(
            searched=ticket is not None,
            token=ticket.token if ticket else None,
            text=ticket.text if ticket else None,
            latest=status.latest,
        )

    @staticmethod
    def to_status(token: int, current: bool) -> SearchTicketStatusDTO:
        return SearchTicketStatusDTO(token=token, current=current)
