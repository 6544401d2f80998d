from pydantic import BaseModel, Field


class SubmitSearchDTO(BaseModel):
    text: str = Field(description="Search box contents as typed", max_length=200, examples=["sofa"])


class SearchTicketResponseDTO(BaseModel):
    """Ticket for a search-as-you-type request."""

    searched: bool = Field(description="False when the text is too short to search")
    token: int | None = Field(description="Ticket token; null when nothing should be searched")
    text: str | None = Field(description="Trimmed search text", examples=["sofa"])
    latest: int = Field(description="Most recently issued token for the session")


class SearchTicketStatusDTO(BaseModel):
    token: int
    current: bool = Field(description="False once a newer submit or a cancel superseded the ticket")
