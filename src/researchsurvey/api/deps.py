"""FastAPI dependency providers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from researchsurvey.adapters.db.mongo.repositories.answer_repository import (
    MongoAnswerRepository,
)
from researchsurvey.adapters.db.mongo.repositories.research_repository import (
    MongoResearchRepository,
)
from researchsurvey.application.ports.repositories.answer_repo import AnswerRepository
from researchsurvey.application.ports.repositories.research_repo import (
    ResearchRepository,
)
from researchsurvey.domain.clock import Clock, utc_now


@lru_cache()
def get_research_repository() -> ResearchRepository:
    """Get research repository instance."""
    return MongoResearchRepository()


@lru_cache()
def get_answer_repository() -> AnswerRepository:
    """Get answer repository instance."""
    return MongoAnswerRepository()


def get_clock() -> Clock:
    """Source of the current instant; overridden in tests."""
    return utc_now


# Dependency annotations for FastAPI
ResearchRepositoryDep = Annotated[ResearchRepository, Depends(get_research_repository)]
AnswerRepositoryDep = Annotated[AnswerRepository, Depends(get_answer_repository)]
ClockDep = Annotated[Clock, Depends(get_clock)]
