"""Question and option management endpoints of a research."""

from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from researchsurvey.application.dto.research_dto import (
    CreateOptionRequest,
    CreateQuestionRequest,
    SearchOptionsRequest,
    SearchQuestionsRequest,
    UpdateOptionRequest,
    UpdateQuestionRequest,
)
from researchsurvey.application.use_cases.create_option import CreateOptionUseCase
from researchsurvey.application.use_cases.create_question import CreateQuestionUseCase
from researchsurvey.application.use_cases.delete_option import DeleteOptionUseCase
from researchsurvey.application.use_cases.delete_question import DeleteQuestionUseCase
from researchsurvey.application.use_cases.get_option import GetOptionUseCase
from researchsurvey.application.use_cases.get_question import GetQuestionUseCase
from researchsurvey.application.use_cases.search_options import SearchOptionsUseCase
from researchsurvey.application.use_cases.search_questions import SearchQuestionsUseCase
from researchsurvey.application.use_cases.update_option import UpdateOptionUseCase
from researchsurvey.application.use_cases.update_question import UpdateQuestionUseCase
from researchsurvey.domain.entities.research import Option, Question

from ..deps import ResearchRepositoryDep
from ..schemas.error import ErrorResponse
from ..schemas.research import OptionInput, OptionResponse, QuestionInput, QuestionResponse

router = APIRouter(prefix="/researches/{research_id}/questions", tags=["questions"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Research or question not found"}}


def option_response(option: Option) -> OptionResponse:
    return OptionResponse(
        id=option.option_id, sequence=option.sequence, description=option.description
    )


def question_response(question: Question, with_options: bool = False) -> QuestionResponse:
    return QuestionResponse(
        id=question.question_id,
        sequence=question.sequence,
        description=question.description,
        multi_select=question.multi_select,
        options=(
            [option_response(option) for option in question.sorted_options()]
            if with_options
            else None
        ),
    )


@router.get(
    "",
    response_model=List[QuestionResponse],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def search_questions(
    research_id: UUID,
    research_repo: ResearchRepositoryDep,
    description: Annotated[Optional[str], Query()] = None,
    multi_select: Annotated[Optional[bool], Query(alias="multiSelect")] = None,
):
    """
    List the questions of a research in sequence order.

    ``description`` matches case-insensitively anywhere in the question text.
    """
    use_case = SearchQuestionsUseCase(research_repo)
    result = await use_case.execute(
        SearchQuestionsRequest(
            research_id=str(research_id),
            description=description,
            multi_select=multi_select,
        )
    )
    return [question_response(question) for question in result]


@router.post(
    "",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def create_question(
    research_id: UUID,
    request: QuestionInput,
    research_repo: ResearchRepositoryDep,
):
    """Append a question to a research."""
    use_case = CreateQuestionUseCase(research_repo)
    result = await use_case.execute(
        CreateQuestionRequest(
            research_id=str(research_id),
            description=request.description,
            multi_select=request.multi_select,
        )
    )
    return question_response(result)


@router.get(
    "/{question_id}",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def get_question(
    research_id: UUID,
    question_id: UUID,
    research_repo: ResearchRepositoryDep,
    fill_options: Annotated[bool, Query(alias="fillOptions")] = False,
):
    """Get a question; its options are included when ``fillOptions`` is true."""
    use_case = GetQuestionUseCase(research_repo)
    result = await use_case.execute(str(research_id), str(question_id), fill_options)
    return question_response(result, with_options=fill_options)


@router.put(
    "/{question_id}",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def update_question(
    research_id: UUID,
    question_id: UUID,
    request: QuestionInput,
    research_repo: ResearchRepositoryDep,
):
    """Change the text or multiplicity of a question; its sequence is kept."""
    use_case = UpdateQuestionUseCase(research_repo)
    result = await use_case.execute(
        UpdateQuestionRequest(
            research_id=str(research_id),
            question_id=str(question_id),
            description=request.description,
            multi_select=request.multi_select,
        )
    )
    return question_response(result)


@router.delete(
    "/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_question(
    research_id: UUID,
    question_id: UUID,
    research_repo: ResearchRepositoryDep,
):
    """Delete a question and its options."""
    use_case = DeleteQuestionUseCase(research_repo)
    await use_case.execute(str(research_id), str(question_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{question_id}/options",
    response_model=List[OptionResponse],
    responses=NOT_FOUND,
)
async def search_options(
    research_id: UUID,
    question_id: UUID,
    research_repo: ResearchRepositoryDep,
    description: Annotated[Optional[str], Query()] = None,
):
    """List the options of a question in sequence order."""
    use_case = SearchOptionsUseCase(research_repo)
    result = await use_case.execute(
        SearchOptionsRequest(
            research_id=str(research_id),
            question_id=str(question_id),
            description=description,
        )
    )
    return [option_response(option) for option in result]


@router.post(
    "/{question_id}/options",
    response_model=OptionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def create_option(
    research_id: UUID,
    question_id: UUID,
    request: OptionInput,
    research_repo: ResearchRepositoryDep,
):
    """Append an option to a question."""
    use_case = CreateOptionUseCase(research_repo)
    result = await use_case.execute(
        CreateOptionRequest(
            research_id=str(research_id),
            question_id=str(question_id),
            description=request.description,
        )
    )
    return option_response(result)


@router.get(
    "/{question_id}/options/{option_id}",
    response_model=OptionResponse,
    responses=NOT_FOUND,
)
async def get_option(
    research_id: UUID,
    question_id: UUID,
    option_id: UUID,
    research_repo: ResearchRepositoryDep,
):
    """Get an option of a question."""
    use_case = GetOptionUseCase(research_repo)
    result = await use_case.execute(str(research_id), str(question_id), str(option_id))
    return option_response(result)


@router.put(
    "/{question_id}/options/{option_id}",
    response_model=OptionResponse,
    responses=NOT_FOUND,
)
async def update_option(
    research_id: UUID,
    question_id: UUID,
    option_id: UUID,
    request: OptionInput,
    research_repo: ResearchRepositoryDep,
):
    """Change the text of an option; its sequence is kept."""
    use_case = UpdateOptionUseCase(research_repo)
    result = await use_case.execute(
        UpdateOptionRequest(
            research_id=str(research_id),
            question_id=str(question_id),
            option_id=str(option_id),
            description=request.description,
        )
    )
    return option_response(result)


@router.delete(
    "/{question_id}/options/{option_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_option(
    research_id: UUID,
    question_id: UUID,
    option_id: UUID,
    research_repo: ResearchRepositoryDep,
):
    """Delete an option of a question."""
    use_case = DeleteOptionUseCase(research_repo)
    await use_case.execute(str(research_id), str(question_id), str(option_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
