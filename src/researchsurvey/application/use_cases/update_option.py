"""Update Option use case."""

from ...domain.entities.research import Option
from ..dto.research_dto import UpdateOptionRequest
from ..ports.repositories.research_repo import ResearchRepository
from .get_option import find_option_of_question


class UpdateOptionUseCase:
    """Use case for changing the text of an option."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, request: UpdateOptionRequest) -> Option:
        """Execute the update option use case."""
        option = await find_option_of_question(
            self._research_repository,
            request.research_id,
            request.question_id,
            request.option_id,
        )
        option.description = request.description
        return await self._research_repository.save_option(option)
