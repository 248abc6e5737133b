"""Get Research use case."""

from ...domain.entities.research import Research
from ...domain.errors import ResearchNotFoundError
from ..ports.repositories.research_repo import ResearchRepository


class GetResearchUseCase:
    """Use case for reading a research with its questions and options."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, research_id: str) -> Research:
        """Execute the get research use case."""
        research = await self._research_repository.find_research_by_id(research_id)
        if not research:
            raise ResearchNotFoundError(research_id)

        questions = await self._research_repository.find_questions_by_research(
            research.research_id
        )
        for question in questions:
            question.options = await self._research_repository.find_options_by_question(
                question.question_id
            )
        research.questions = sorted(questions, key=lambda q: q.sequence)
        return research
