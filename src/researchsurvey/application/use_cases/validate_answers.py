"""Answer batch validation.

Decides whether a batch of proposed answers may be stored for a research.
The checks run in a fixed order and stop at the first failure:

1. the research exists
2. the research is open (started and not finalized)
3. every question of the research is answered
4. every answered question belongs to the research
5. every option exists and belongs to its paired question
6. single-select questions carry one option only, and no option is
   selected twice

Nothing is persisted here.
"""

from typing import Dict, List, Optional, Set

from ...domain.clock import Clock, utc_now
from ...domain.entities.answer import AnswerItem
from ...domain.entities.research import Option, Question
from ...domain.errors import (
    InvalidAnswerError,
    MultipleOptionsNotAllowedError,
    OptionNotFoundError,
    QuestionNotFoundError,
    RepeatedOptionError,
    ResearchFinalizedError,
    ResearchNotFoundError,
    ResearchNotStartedError,
    UnansweredQuestionsError,
)
from ..ports.repositories.research_repo import ResearchRepository


class AnswerValidator:
    """Validates answer batches against the research they target."""

    def __init__(self, research_repository: ResearchRepository, clock: Optional[Clock] = None):
        self._research_repository = research_repository
        self._clock = clock or utc_now

    async def validate(self, research_id: str, answers: List[AnswerItem]) -> None:
        """Raise the error of the first rule the batch breaks."""
        research = await self._research_repository.find_research_by_id(research_id)
        if not research:
            raise ResearchNotFoundError(research_id)

        now = self._clock()
        if not research.is_started(now):
            raise ResearchNotStartedError(research_id)
        if research.is_finalized(now):
            raise ResearchFinalizedError(research_id)

        if not answers:
            raise InvalidAnswerError("At least one answer must be informed")

        questions = await self._research_repository.find_questions_by_research(
            research.research_id
        )
        self._check_completeness(questions, answers)

        questions_by_id = {question.question_id: question for question in questions}
        for answer in answers:
            if answer.question_id not in questions_by_id:
                raise QuestionNotFoundError(answer.question_id)

        await self._check_options(answers)
        self._check_multiplicity(questions, answers)

    def _check_completeness(self, questions: List[Question], answers: List[AnswerItem]) -> None:
        required: Set[str] = {question.question_id for question in questions}
        answered: Set[str] = {answer.question_id for answer in answers}
        missing = required - answered
        if missing:
            # Report in question sequence order
            raise UnansweredQuestionsError(
                question.question_id
                for question in sorted(questions, key=lambda q: q.sequence)
                if question.question_id in missing
            )

    async def _check_options(self, answers: List[AnswerItem]) -> None:
        options: Dict[str, Optional[Option]] = {}
        for answer in answers:
            if answer.option_id not in options:
                options[answer.option_id] = await self._research_repository.find_option_by_id(
                    answer.option_id
                )
            option = options[answer.option_id]
            if option is None or option.question_id != answer.question_id:
                raise OptionNotFoundError(answer.option_id)

    def _check_multiplicity(self, questions: List[Question], answers: List[AnswerItem]) -> None:
        selections: Dict[str, List[str]] = {}
        for answer in answers:
            selections.setdefault(answer.question_id, []).append(answer.option_id)

        for question in sorted(questions, key=lambda q: q.sequence):
            chosen = selections.get(question.question_id, [])
            if not question.multi_select and len(chosen) > 1:
                raise MultipleOptionsNotAllowedError(question.question_id)

            seen: Set[str] = set()
            for option_id in chosen:
                if option_id in seen:
                    raise RepeatedOptionError(question.question_id, option_id)
                seen.add(option_id)
