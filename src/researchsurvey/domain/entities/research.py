"""Research, Question and Option domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..clock import as_utc, utc_now


@dataclass
class Option:
    """A selectable choice of a question."""

    option_id: str
    question_id: str
    sequence: int
    description: str


@dataclass
class Question:
    """A survey prompt with ordered options."""

    question_id: str
    research_id: str
    sequence: int
    description: str
    multi_select: bool = False
    options: List[Option] = field(default_factory=list)

    def sorted_options(self) -> List[Option]:
        return sorted(self.options, key=lambda option: option.sequence)


@dataclass
class Research:
    """Time-bounded survey containing ordered questions."""

    research_id: str
    title: str
    starts_on: datetime
    ends_on: Optional[datetime] = None
    description: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    questions: List[Question] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Keep every instant timezone-aware."""
        self.starts_on = as_utc(self.starts_on)
        self.ends_on = as_utc(self.ends_on)
        self.created_at = as_utc(self.created_at)

    def is_started(self, now: datetime) -> bool:
        """Whether answers are accepted yet; ``starts_on`` is inclusive."""
        return as_utc(now) >= self.starts_on

    def is_finalized(self, now: datetime) -> bool:
        """Whether the research is closed; ``ends_on`` is inclusive."""
        return self.ends_on is not None and as_utc(now) > self.ends_on

    def has_valid_period(self) -> bool:
        return self.ends_on is None or self.ends_on >= self.starts_on


def _contains(text: str, fragment: Optional[str]) -> bool:
    return fragment is None or fragment.casefold() in text.casefold()


@dataclass(frozen=True)
class QuestionCriteria:
    """Question search filters; unset fields match everything."""

    description: Optional[str] = None
    multi_select: Optional[bool] = None

    def matches(self, question: Question) -> bool:
        if self.multi_select is not None and question.multi_select != self.multi_select:
            return False
        return _contains(question.description, self.description)


@dataclass(frozen=True)
class OptionCriteria:
    """Option search filters; unset fields match everything."""

    description: Optional[str] = None

    def matches(self, option: Option) -> bool:
        return _contains(option.description, self.description)
