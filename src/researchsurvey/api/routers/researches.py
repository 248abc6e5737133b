"""Research endpoints: create a research and read its whole shape."""

from uuid import UUID

from fastapi import APIRouter, status

from researchsurvey.application.dto.research_dto import (
    CreateResearchRequest as CreateResearchRequestDTO,
)
from researchsurvey.application.use_cases.create_research import CreateResearchUseCase
from researchsurvey.application.use_cases.get_research import GetResearchUseCase
from researchsurvey.domain.entities.research import Research

from ..deps import ResearchRepositoryDep
from ..schemas.error import ErrorResponse
from ..schemas.research import CreateResearchRequest, ResearchResponse
from .questions import question_response

router = APIRouter(prefix="/researches", tags=["researches"])


def _research_response(research: Research) -> ResearchResponse:
    return ResearchResponse(
        id=research.research_id,
        title=research.title,
        description=research.description,
        starts_on=research.starts_on,
        ends_on=research.ends_on,
        questions=[
            question_response(question, with_options=True) for question in research.questions
        ],
    )


@router.post(
    "",
    response_model=ResearchResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Validation error"}},
)
async def create_research(
    request: CreateResearchRequest,
    research_repo: ResearchRepositoryDep,
):
    """Create a research with its answering window."""
    use_case = CreateResearchUseCase(research_repo)
    result = await use_case.execute(
        CreateResearchRequestDTO(
            title=request.title,
            description=request.description,
            starts_on=request.starts_on,
            ends_on=request.ends_on,
        )
    )
    return _research_response(result)


@router.get(
    "/{research_id}",
    response_model=ResearchResponse,
    responses={404: {"model": ErrorResponse, "description": "Research not found"}},
)
async def get_research(research_id: UUID, research_repo: ResearchRepositoryDep):
    """Get a research with its questions and options in sequence order."""
    use_case = GetResearchUseCase(research_repo)
    result = await use_case.execute(str(research_id))
    return _research_response(result)
