"""Answer entity, search criteria and summary value types."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..clock import as_utc


@dataclass(frozen=True)
class AnswerItem:
    """One proposed (question, option) selection of a batch."""

    question_id: str
    option_id: str


@dataclass(frozen=True)
class Answer:
    """Accepted answer. Never updated nor deleted once stored."""

    research_id: str
    question_id: str
    option_id: str
    answered_at: datetime


@dataclass(frozen=True)
class AnswerSearchCriteria:
    """Optional filters of an answer report; date bounds are inclusive."""

    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    question_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_from", as_utc(self.date_from))
        object.__setattr__(self, "date_to", as_utc(self.date_to))

    def matches(self, answer: Answer) -> bool:
        """Check an answer against the filters."""
        if self.question_id is not None and answer.question_id != self.question_id:
            return False
        answered_at = as_utc(answer.answered_at)
        if self.date_from is not None and answered_at < self.date_from:
            return False
        if self.date_to is not None and answered_at > self.date_to:
            return False
        return True


@dataclass
class OptionSummary:
    option_id: str
    sequence: int
    description: str
    amount: int = 0


@dataclass
class QuestionSummary:
    question_id: str
    sequence: int
    description: str
    multi_select: bool
    options: List[OptionSummary] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(option.amount for option in self.options)


@dataclass
class AnswerSummary:
    """Per-question, per-option vote counts of a research."""

    research_id: str
    title: str
    criteria: AnswerSearchCriteria
    questions: List[QuestionSummary] = field(default_factory=list)
