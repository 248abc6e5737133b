"""DTOs for research catalog management."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class CreateResearchRequest:
    """Request DTO for creating a research."""

    title: str
    starts_on: datetime
    ends_on: Optional[datetime] = None
    description: Optional[str] = None


@dataclass
class CreateQuestionRequest:
    """Request DTO for adding a question to a research."""

    research_id: str
    description: str
    multi_select: bool = False


@dataclass
class CreateOptionRequest:
    """Request DTO for adding an option to a question."""

    research_id: str
    question_id: str
    description: str


@dataclass
class UpdateQuestionRequest:
    """Request DTO for changing a question; its sequence is kept."""

    research_id: str
    question_id: str
    description: str
    multi_select: bool


@dataclass
class UpdateOptionRequest:
    """Request DTO for changing an option; its sequence is kept."""

    research_id: str
    question_id: str
    option_id: str
    description: str


@dataclass
class SearchQuestionsRequest:
    research_id: str
    description: Optional[str] = None
    multi_select: Optional[bool] = None


@dataclass
class SearchOptionsRequest:
    research_id: str
    question_id: str
    description: Optional[str] = None
