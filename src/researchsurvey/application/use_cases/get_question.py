"""Get Question use case."""

from ...domain.entities.research import Question
from ...domain.errors import QuestionNotFoundInResearchError
from ..ports.repositories.research_repo import ResearchRepository


async def find_question_of_research(
    research_repository: ResearchRepository, research_id: str, question_id: str
) -> Question:
    """Load a question, failing unless it belongs to the given research."""
    question = await research_repository.find_question_by_id(question_id)
    if not question or question.research_id != research_id:
        raise QuestionNotFoundInResearchError(research_id, question_id)
    return question


class GetQuestionUseCase:
    """Use case for reading one question of a research."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(
        self, research_id: str, question_id: str, fill_options: bool = False
    ) -> Question:
        """Execute the get question use case.

        Options are loaded, in sequence order, only when ``fill_options`` is set.
        """
        question = await find_question_of_research(
            self._research_repository, research_id, question_id
        )
        if fill_options:
            question.options = await self._research_repository.find_options_by_question(
                question.question_id
            )
        return question
