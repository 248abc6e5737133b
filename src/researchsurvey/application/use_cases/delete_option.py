"""Delete Option use case."""

import logging

from ..ports.repositories.research_repo import ResearchRepository
from .get_option import find_option_of_question

logger = logging.getLogger(__name__)


class DeleteOptionUseCase:
    """Use case for removing an option from a question."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, research_id: str, question_id: str, option_id: str) -> None:
        """Execute the delete option use case."""
        option = await find_option_of_question(
            self._research_repository, research_id, question_id, option_id
        )
        await self._research_repository.delete_option(option.option_id)
        logger.info("Deleted option %s of question %s", option_id, question_id)
