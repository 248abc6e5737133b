"""Get Option use case."""

from ...domain.entities.research import Option
from ...domain.errors import OptionNotFoundInQuestionError
from ..ports.repositories.research_repo import ResearchRepository
from .get_question import find_question_of_research


async def find_option_of_question(
    research_repository: ResearchRepository,
    research_id: str,
    question_id: str,
    option_id: str,
) -> Option:
    """Load an option, failing unless research, question and option are linked."""
    await find_question_of_research(research_repository, research_id, question_id)
    option = await research_repository.find_option_by_id(option_id)
    if not option or option.question_id != question_id:
        raise OptionNotFoundInQuestionError(question_id, option_id)
    return option


class GetOptionUseCase:
    """Use case for reading one option of a question."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, research_id: str, question_id: str, option_id: str) -> Option:
        """Execute the get option use case."""
        return await find_option_of_question(
            self._research_repository, research_id, question_id, option_id
        )
