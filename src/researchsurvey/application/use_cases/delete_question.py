"""Delete Question use case."""

import logging

from ..ports.repositories.research_repo import ResearchRepository
from .get_question import find_question_of_research

logger = logging.getLogger(__name__)


class DeleteQuestionUseCase:
    """Use case for removing a question and its options from a research.

    Answers already stored for the question stay in place; reports no longer
    show them because they are built from the current questions.
    """

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, research_id: str, question_id: str) -> None:
        """Execute the delete question use case."""
        question = await find_question_of_research(
            self._research_repository, research_id, question_id
        )
        await self._research_repository.delete_question(question.question_id)
        logger.info("Deleted question %s of research %s", question_id, research_id)
