"""DTOs for answer submission and answer reports."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ...domain.entities.answer import AnswerItem


@dataclass
class CreateAnswersRequest:
    """Request DTO for submitting an answer batch."""

    research_id: str
    answers: List[AnswerItem] = field(default_factory=list)


@dataclass
class SearchAnswersRequest:
    """Request DTO for an answer report."""

    research_id: str
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    question_id: Optional[str] = None
