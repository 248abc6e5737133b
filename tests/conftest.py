from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict

import pytest

from researchsurvey.domain.entities.research import Option, Question, Research
from tests.fakes import FixedClock, InMemoryAnswerRepository, InMemoryResearchRepository

NOW = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


def run(coro):
    """Drive a coroutine from a synchronous test."""
    return asyncio.run(coro)


@dataclass
class Survey:
    """Research fixture: question A (single select) and question B (multi select)."""

    research: Research
    questions: Dict[str, Question] = field(default_factory=dict)
    options: Dict[str, Option] = field(default_factory=dict)

    @property
    def research_id(self) -> str:
        return self.research.research_id

    def q(self, name: str) -> str:
        return self.questions[name].question_id

    def o(self, name: str) -> str:
        return self.options[name].option_id


def add_research(repo: InMemoryResearchRepository, starts_on=None, ends_on=None, title="Research") -> Research:
    research = Research(
        research_id=str(uuid.uuid4()),
        title=title,
        starts_on=starts_on or NOW - timedelta(days=1),
        ends_on=ends_on,
    )
    run(repo.save_research(research))
    return research


def add_question(repo, research: Research, sequence: int, multi_select: bool = False, description=None) -> Question:
    question = Question(
        question_id=str(uuid.uuid4()),
        research_id=research.research_id,
        sequence=sequence,
        description=description or f"Question {sequence}",
        multi_select=multi_select,
    )
    run(repo.save_question(question))
    return question


def add_option(repo, question: Question, sequence: int, description=None) -> Option:
    option = Option(
        option_id=str(uuid.uuid4()),
        question_id=question.question_id,
        sequence=sequence,
        description=description or f"Option {sequence}",
    )
    run(repo.save_option(option))
    return option


@pytest.fixture()
def research_repo() -> InMemoryResearchRepository:
    return InMemoryResearchRepository()


@pytest.fixture()
def answer_repo() -> InMemoryAnswerRepository:
    return InMemoryAnswerRepository()


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def survey(research_repo: InMemoryResearchRepository) -> Survey:
    research = add_research(research_repo, ends_on=NOW + timedelta(days=1))
    survey = Survey(research=research)

    survey.questions["A"] = add_question(research_repo, research, 1, multi_select=False)
    survey.options["A1"] = add_option(research_repo, survey.questions["A"], 1)
    survey.options["A2"] = add_option(research_repo, survey.questions["A"], 2)

    survey.questions["B"] = add_question(research_repo, research, 2, multi_select=True)
    survey.options["B1"] = add_option(research_repo, survey.questions["B"], 1)
    survey.options["B2"] = add_option(research_repo, survey.questions["B"], 2)
    return survey
