"""Search Options use case."""

from typing import List

from ...domain.entities.research import Option, OptionCriteria
from ..dto.research_dto import SearchOptionsRequest
from ..ports.repositories.research_repo import ResearchRepository
from .get_question import find_question_of_research


class SearchOptionsUseCase:
    """Use case for listing the options of a question."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, request: SearchOptionsRequest) -> List[Option]:
        """Execute the search options use case."""
        await find_question_of_research(
            self._research_repository, request.research_id, request.question_id
        )
        options = await self._research_repository.search_options(
            request.question_id, OptionCriteria(description=request.description)
        )
        return sorted(options, key=lambda o: o.sequence)
