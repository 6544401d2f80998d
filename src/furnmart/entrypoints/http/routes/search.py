from fastapi import APIRouter, Depends

from furnmart.entrypoints.http.dependencies import get_track_search_use_case
from furnmart.entrypoints.http.dtos.search import (
    SearchTicketResponseDTO,
    SearchTicketStatusDTO,
    SubmitSearchDTO,
)
from furnmart.entrypoints.http.error_responses import ErrorResponse
from furnmart.entrypoints.http.mappers.search_mapper import SearchMapper
from furnmart.use_cases.track_search import TrackSearch


router = APIRouter(
    prefix="/search/{session_id}",
    tags=["Search"],
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)


@router.post(
    "",
    response_model=SearchTicketResponseDTO,
    summary="Submit search text",
    description="""
    Issue a ticket for the search box contents.

    Every submit supersedes the previous ticket, even when the text is too
    short to search (fewer than 3 characters after trimming). In that case
    `searched` is false and no token is returned.
    """,
)
def submit_search(
    payload: SubmitSearchDTO,
    use_case: TrackSearch = Depends(get_track_search_use_case),
) -> SearchTicketResponseDTO:
    return SearchMapper.to_response(use_case.submit(payload.text))


@router.get(
    "/tickets/{token}",
    response_model=SearchTicketStatusDTO,
    summary="Check ticket",
    description="Render search results only while their ticket is still current.",
)
def check_ticket(
    token: int,
    use_case: TrackSearch = Depends(get_track_search_use_case),
) -> SearchTicketStatusDTO:
    return SearchMapper.to_status(token, use_case.is_current(token))


@router.delete(
    "",
    response_model=SearchTicketResponseDTO,
    summary="Cancel pending search",
    description="Supersedes the pending ticket, e.g. when the search box is cleared.",
)
def cancel_search(
    use_case: TrackSearch = Depends(get_track_search_use_case),
) -> SearchTicketResponseDTO:
    return SearchMapper.to_response(use_case.cancel())
