"""Create Answers use case: validate a batch and store it."""

import logging
from typing import Optional

from ...domain.clock import Clock, utc_now
from ...domain.entities.answer import Answer
from ...domain.errors import InvalidAnswerError
from ..dto.answer_dto import CreateAnswersRequest
from ..ports.repositories.answer_repo import AnswerRepository
from .validate_answers import AnswerValidator

logger = logging.getLogger(__name__)


class CreateAnswersUseCase:
    """Use case for submitting an answer batch to a research."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        validator: AnswerValidator,
        clock: Optional[Clock] = None,
    ):
        self._answer_repository = answer_repository
        self._validator = validator
        self._clock = clock or utc_now

    async def execute(self, request: CreateAnswersRequest) -> None:
        """Execute the create answers use case.

        Validation errors reach the caller exactly as the validator raised
        them. Every answer of the batch shares one timestamp.
        """
        try:
            await self._validator.validate(request.research_id, request.answers)
        except InvalidAnswerError as e:
            logger.info(
                "Rejected answer batch for research %s: %s", request.research_id, e.message
            )
            raise

        answered_at = self._clock()
        answers = [
            Answer(
                research_id=request.research_id,
                question_id=item.question_id,
                option_id=item.option_id,
                answered_at=answered_at,
            )
            for item in request.answers
        ]

        await self._answer_repository.save_answers(answers)
        logger.info(
            "Stored %d answers for research %s", len(answers), request.research_id
        )
