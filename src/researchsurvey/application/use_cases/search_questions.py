"""Search Questions use case."""

from typing import List

from ...domain.entities.research import Question, QuestionCriteria
from ...domain.errors import ResearchNotFoundError
from ..dto.research_dto import SearchQuestionsRequest
from ..ports.repositories.research_repo import ResearchRepository


class SearchQuestionsUseCase:
    """Use case for listing the questions of a research."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, request: SearchQuestionsRequest) -> List[Question]:
        """Execute the search questions use case."""
        if not await self._research_repository.find_research_by_id(request.research_id):
            raise ResearchNotFoundError(request.research_id)

        criteria = QuestionCriteria(
            description=request.description, multi_select=request.multi_select
        )
        questions = await self._research_repository.search_questions(
            request.research_id, criteria
        )
        return sorted(questions, key=lambda q: q.sequence)
