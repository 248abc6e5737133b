"""Create Question use case."""

import uuid

from ...domain.entities.research import Question
from ...domain.errors import ResearchNotFoundError
from ..dto.research_dto import CreateQuestionRequest
from ..ports.repositories.research_repo import ResearchRepository


class CreateQuestionUseCase:
    """Use case for appending a question to a research."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, request: CreateQuestionRequest) -> Question:
        """Execute the create question use case.

        The question goes after the last one of the research; sequences
        start at 1.
        """
        research_id = request.research_id
        if not await self._research_repository.find_research_by_id(research_id):
            raise ResearchNotFoundError(request.research_id)

        last_sequence = await self._research_repository.get_last_question_sequence(research_id)

        question = Question(
            question_id=str(uuid.uuid4()),
            research_id=research_id,
            sequence=(last_sequence or 0) + 1,
            description=request.description,
            multi_select=request.multi_select,
        )
        return await self._research_repository.save_question(question)
