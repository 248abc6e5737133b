"""
MongoDB Beanie models used by the persistence layer.

Each document carries its own UUID string key, indexed, next to Mongo's _id.
"""

from datetime import datetime
from typing import Optional

from beanie import Document
from pydantic import Field

from researchsurvey.domain.clock import utc_now


class ResearchMongo(Document):
    """MongoDB model for Research entity."""

    research_id: str = Field(..., description="Research ID")
    title: str = Field(..., description="Research title")
    description: Optional[str] = None
    starts_on: datetime = Field(..., description="Start of the answering window")
    ends_on: Optional[datetime] = Field(None, description="End of the answering window")
    created_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "researches"
        indexes = ["research_id"]


class QuestionMongo(Document):
    """MongoDB model for Question entity."""

    question_id: str = Field(..., description="Question ID")
    research_id: str = Field(..., description="Research ID reference")
    sequence: int = Field(..., description="Position within the research")
    description: str = Field(..., description="Question text")
    multi_select: bool = Field(default=False)

    class Settings:
        name = "questions"
        indexes = ["question_id", "research_id"]


class OptionMongo(Document):
    """MongoDB model for Option entity."""

    option_id: str = Field(..., description="Option ID")
    question_id: str = Field(..., description="Question ID reference")
    sequence: int = Field(..., description="Position within the question")
    description: str = Field(..., description="Option text")

    class Settings:
        name = "options"
        indexes = ["option_id", "question_id"]


class AnswerMongo(Document):
    """MongoDB model for an accepted answer."""

    research_id: str = Field(..., description="Research ID reference")
    question_id: str = Field(..., description="Question ID reference")
    option_id: str = Field(..., description="Option ID reference")
    answered_at: datetime = Field(..., description="Acceptance time")

    class Settings:
        name = "answers"
        indexes = ["research_id", "answered_at"]


DOCUMENT_MODELS = [ResearchMongo, QuestionMongo, OptionMongo, AnswerMongo]
