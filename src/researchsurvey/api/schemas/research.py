"""
Pydantic schemas for research catalog endpoints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, validator

from .base import CamelModel


class CreateResearchRequest(CamelModel):
    """Request schema for creating a research."""

    title: str = Field(..., min_length=1, max_length=200, description="Research title")
    description: Optional[str] = Field(None, description="Research description")
    starts_on: datetime = Field(..., description="Answers accepted from this instant")
    ends_on: Optional[datetime] = Field(None, description="Answers accepted until this instant")

    @validator("title")
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


class QuestionInput(CamelModel):
    """Request schema for adding or changing a question."""

    description: str = Field(..., min_length=1, description="Question text")
    multi_select: bool = Field(False, description="Whether several options may be selected")

    @validator("description")
    def validate_description(cls, v):
        if not v.strip():
            raise ValueError("Description cannot be blank")
        return v.strip()


class OptionInput(CamelModel):
    """Request schema for adding or changing an option."""

    description: str = Field(..., min_length=1, description="Option text")

    @validator("description")
    def validate_description(cls, v):
        if not v.strip():
            raise ValueError("Description cannot be blank")
        return v.strip()


class OptionResponse(CamelModel):
    id: str = Field(..., description="Option ID")
    sequence: int = Field(..., description="Option position")
    description: str = Field(..., description="Option text")


class QuestionResponse(CamelModel):
    id: str = Field(..., description="Question ID")
    sequence: int = Field(..., description="Question position")
    description: str = Field(..., description="Question text")
    multi_select: bool = Field(..., description="Whether several options may be selected")
    options: Optional[List[OptionResponse]] = Field(
        None, description="Options in sequence order, when requested"
    )


class ResearchResponse(CamelModel):
    id: str = Field(..., description="Research ID")
    title: str = Field(..., description="Research title")
    description: Optional[str] = None
    starts_on: datetime
    ends_on: Optional[datetime] = None
    questions: List[QuestionResponse] = Field(default_factory=list)
