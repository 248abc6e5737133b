"""Create Research use case."""

import logging
import uuid

from ...domain.entities.research import Research
from ...domain.errors import InvalidResearchPeriodError
from ..dto.research_dto import CreateResearchRequest
from ..ports.repositories.research_repo import ResearchRepository

logger = logging.getLogger(__name__)


class CreateResearchUseCase:
    """Use case for creating a research."""

    def __init__(self, research_repository: ResearchRepository):
        self._research_repository = research_repository

    async def execute(self, request: CreateResearchRequest) -> Research:
        """Execute the create research use case."""
        if not request.title or not request.title.strip():
            raise ValueError("Title cannot be empty")

        research = Research(
            research_id=str(uuid.uuid4()),
            title=request.title.strip(),
            description=request.description,
            starts_on=request.starts_on,
            ends_on=request.ends_on,
        )
        if not research.has_valid_period():
            raise InvalidResearchPeriodError()

        saved = await self._research_repository.save_research(research)
        logger.info("Created research %s", saved.research_id)
        return saved
