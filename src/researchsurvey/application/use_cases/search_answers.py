"""Search Answers use case: summarized vote counts of a research."""

from typing import List

from ...domain.entities.answer import (
    AnswerSearchCriteria,
    AnswerSummary,
    OptionSummary,
    QuestionSummary,
)
from ...domain.entities.research import Question
from ...domain.errors import ResearchNotFoundError
from ..dto.answer_dto import SearchAnswersRequest
from ..ports.repositories.answer_repo import AnswerRepository
from ..ports.repositories.research_repo import ResearchRepository


class SearchAnswersUseCase:
    """Use case for the answer report of a research.

    Every question and option in scope is reported, with a zero amount when
    nothing matched. Order comes from the stored sequence numbers only.
    """

    def __init__(
        self,
        research_repository: ResearchRepository,
        answer_repository: AnswerRepository,
    ):
        self._research_repository = research_repository
        self._answer_repository = answer_repository

    async def execute(self, request: SearchAnswersRequest) -> AnswerSummary:
        """Execute the search answers use case."""
        research_id = request.research_id
        research = await self._research_repository.find_research_by_id(research_id)
        if not research:
            raise ResearchNotFoundError(request.research_id)

        criteria = AnswerSearchCriteria(
            date_from=request.date_from,
            date_to=request.date_to,
            question_id=request.question_id,
        )

        questions = await self._resolve_questions(research_id, criteria)
        counts = await self._answer_repository.count_answers_grouped_by_option(
            research_id, criteria
        )

        summaries = []
        for question in questions:
            options = await self._research_repository.find_options_by_question(
                question.question_id
            )
            summaries.append(
                QuestionSummary(
                    question_id=question.question_id,
                    sequence=question.sequence,
                    description=question.description,
                    multi_select=question.multi_select,
                    options=[
                        OptionSummary(
                            option_id=option.option_id,
                            sequence=option.sequence,
                            description=option.description,
                            amount=counts.get((question.question_id, option.option_id), 0),
                        )
                        for option in sorted(options, key=lambda o: o.sequence)
                    ],
                )
            )

        return AnswerSummary(
            research_id=research.research_id,
            title=research.title,
            criteria=criteria,
            questions=summaries,
        )

    async def _resolve_questions(
        self, research_id: str, criteria: AnswerSearchCriteria
    ) -> List[Question]:
        questions = await self._research_repository.find_questions_by_research(research_id)
        if criteria.question_id is not None:
            selected = [q for q in questions if q.question_id == criteria.question_id]
            # A question id outside the research keeps the full shape; its
            # counts are all zero because the filter matches no answer.
            if selected:
                questions = selected
        return sorted(questions, key=lambda q: q.sequence)
