"""Answer submission and answer report endpoints."""

from datetime import datetime
from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Query, Response, status

from researchsurvey.application.dto.answer_dto import (
    CreateAnswersRequest,
    SearchAnswersRequest,
)
from researchsurvey.application.use_cases.create_answers import CreateAnswersUseCase
from researchsurvey.application.use_cases.search_answers import SearchAnswersUseCase
from researchsurvey.application.use_cases.validate_answers import AnswerValidator
from researchsurvey.domain.entities.answer import AnswerItem

from ..deps import AnswerRepositoryDep, ClockDep, ResearchRepositoryDep
from ..schemas.answer import (
    AnswerCriteriaSchema,
    AnswerItemRequest,
    AnswerSummaryResponse,
    OptionSummarySchema,
    QuestionSummarySchema,
)
from ..schemas.error import ErrorResponse

router = APIRouter(prefix="/researches/{research_id}/answers", tags=["answers"])


@router.post(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "Answers rejected"},
        404: {"model": ErrorResponse, "description": "Research not found"},
    },
)
async def create_answers(
    research_id: UUID,
    answers: Annotated[List[AnswerItemRequest], Body(min_length=1)],
    research_repo: ResearchRepositoryDep,
    answer_repo: AnswerRepositoryDep,
    clock: ClockDep,
):
    """
    Submit the answers of one respondent.

    All research questions must be answered in the same request. Nothing is
    stored unless the whole batch is valid.
    """
    dto_request = CreateAnswersRequest(
        research_id=str(research_id),
        answers=[
            AnswerItem(question_id=str(item.question_id), option_id=str(item.option_id))
            for item in answers
        ],
    )

    use_case = CreateAnswersUseCase(
        answer_repo, AnswerValidator(research_repo, clock=clock), clock=clock
    )
    await use_case.execute(dto_request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=AnswerSummaryResponse,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"model": ErrorResponse, "description": "Research not found"},
    },
)
async def search_answers(
    research_id: UUID,
    research_repo: ResearchRepositoryDep,
    answer_repo: AnswerRepositoryDep,
    date_from: Annotated[Optional[datetime], Query(alias="dateFrom")] = None,
    date_to: Annotated[Optional[datetime], Query(alias="dateTo")] = None,
    question_id: Annotated[Optional[UUID], Query(alias="questionId")] = None,
):
    """
    Summarize the answers of a research.

    Every question and option is listed in sequence order, including those
    without answers. ``questionId`` restricts the report to that question.
    """
    dto_request = SearchAnswersRequest(
        research_id=str(research_id),
        date_from=date_from,
        date_to=date_to,
        question_id=str(question_id) if question_id else None,
    )

    use_case = SearchAnswersUseCase(research_repo, answer_repo)
    result = await use_case.execute(dto_request)

    return AnswerSummaryResponse(
        id=result.research_id,
        title=result.title,
        criteria=AnswerCriteriaSchema(
            date_from=result.criteria.date_from,
            date_to=result.criteria.date_to,
            question_id=result.criteria.question_id,
        ),
        questions=[
            QuestionSummarySchema(
                id=question.question_id,
                sequence=question.sequence,
                description=question.description,
                multi_select=question.multi_select,
                options=[
                    OptionSummarySchema(
                        id=option.option_id,
                        sequence=option.sequence,
                        description=option.description,
                        amount=option.amount,
                    )
                    for option in question.options
                ],
            )
            for question in result.questions
        ],
    )
