"""Response envelopes shared by every endpoint: `{success, message|data}`."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Outcome of an update or soft delete."""

    success: bool = Field(default=True, description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable outcome")


class CreatedResponse(MessageResponse):
    """Outcome of a create, with the new row's id."""

    id: int = Field(..., description="Primary key of the created row")
