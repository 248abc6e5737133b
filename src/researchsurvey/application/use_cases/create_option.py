"""Create Option use case."""

import uuid

from ...domain.entities.research import Option
from ..dto.research_dto import CreateOptionRequest
from ..ports.repositories.research_repo import ResearchRepository
from .get_question import find_question_of_research


class CreateOptionUseCase:
    """Use case for appending an option to a question."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, request: CreateOptionRequest) -> Option:
        """Execute the create option use case."""
        question = await find_question_of_research(
            self._research_repository, request.research_id, request.question_id
        )

        last_sequence = await self._research_repository.get_last_option_sequence(
            question.question_id
        )

        option = Option(
            option_id=str(uuid.uuid4()),
            question_id=question.question_id,
            sequence=(last_sequence or 0) + 1,
            description=request.description,
        )
        return await self._research_repository.save_option(option)
