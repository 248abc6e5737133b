"""Update Question use case."""

import logging

from ...domain.entities.research import Question
from ..dto.research_dto import UpdateQuestionRequest
from ..ports.repositories.research_repo import ResearchRepository
from .get_question import find_question_of_research

logger = logging.getLogger(__name__)


class UpdateQuestionUseCase:
    """Use case for changing the text or multiplicity of a question."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, request: UpdateQuestionRequest) -> Question:
        """Execute the update question use case."""
        question = await find_question_of_research(
            self._research_repository, request.research_id, request.question_id
        )
        question.description = request.description
        question.multi_select = request.multi_select

        saved = await self._research_repository.save_question(question)
        logger.info("Updated question %s of research %s", saved.question_id, saved.research_id)
        return saved
