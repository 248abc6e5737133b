"""Error response schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single structural validation failure."""

    name: str = Field(..., description="Offending field")
    message: str = Field(..., description="What is wrong with it")


class ErrorResponse(BaseModel):
    """Error response schema.

    ``fields`` is only present for request structure failures.
    """

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Error message")
    timestamp: datetime = Field(..., description="When the error happened")
    fields: Optional[List[FieldError]] = Field(
        None, description="Field level validation errors"
    )
