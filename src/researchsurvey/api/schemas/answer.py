"""
Pydantic schemas for answer submission and answer reports.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from .base import CamelModel


class AnswerItemRequest(CamelModel):
    """One selected option of a question."""

    question_id: UUID = Field(..., description="Answered question ID")
    option_id: UUID = Field(..., description="Selected option ID")


class AnswerCriteriaSchema(CamelModel):
    """Filters applied to a report, echoed back to the caller."""

    date_from: Optional[datetime] = Field(None, description="Inclusive lower bound")
    date_to: Optional[datetime] = Field(None, description="Inclusive upper bound")
    question_id: Optional[str] = Field(None, description="Reported question only")


class OptionSummarySchema(CamelModel):
    id: str = Field(..., description="Option ID")
    sequence: int = Field(..., description="Option position")
    description: str = Field(..., description="Option text")
    amount: int = Field(..., ge=0, description="Number of matching answers")


class QuestionSummarySchema(CamelModel):
    id: str = Field(..., description="Question ID")
    sequence: int = Field(..., description="Question position")
    description: str = Field(..., description="Question text")
    multi_select: bool = Field(..., description="Whether several options may be selected")
    options: List[OptionSummarySchema] = Field(default_factory=list)


class AnswerSummaryResponse(CamelModel):
    """Summarized answers of a research."""

    id: str = Field(..., description="Research ID")
    title: str = Field(..., description="Research title")
    criteria: AnswerCriteriaSchema
    questions: List[QuestionSummarySchema] = Field(default_factory=list)
