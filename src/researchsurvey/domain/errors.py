"""Domain errors for research and answer handling.

Every rule the answer validator enforces has its own error class so callers
can tell exactly which rule rejected a batch.
"""

from typing import Any, Dict, Iterable, Optional


class DomainError(Exception):
    """Base class for all domain errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class NotFoundError(DomainError):
    """A referenced resource does not exist."""


class ResearchNotFoundError(NotFoundError):
    def __init__(self, research_id: str):
        super().__init__(
            f"Research not found: {research_id}",
            error_code="RESEARCH_NOT_FOUND",
            details={"research_id": research_id},
        )


class QuestionNotFoundInResearchError(NotFoundError):
    def __init__(self, research_id: str, question_id: str):
        super().__init__(
            f"Question not found: {question_id}",
            error_code="QUESTION_NOT_FOUND",
            details={"research_id": research_id, "question_id": question_id},
        )


class OptionNotFoundInQuestionError(NotFoundError):
    def __init__(self, question_id: str, option_id: str):
        super().__init__(
            f"Option not found: {option_id}",
            error_code="OPTION_NOT_FOUND",
            details={"question_id": question_id, "option_id": option_id},
        )


class InvalidResearchPeriodError(DomainError):
    def __init__(self, message: str = "The end date must not be before the start date"):
        super().__init__(message, error_code="INVALID_RESEARCH_PERIOD")


class InvalidAnswerError(DomainError):
    """An answer batch broke one of the submission rules."""

    def __init__(
        self,
        message: str,
        error_code: str = "INVALID_ANSWER",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code=error_code, details=details)


class ResearchNotStartedError(InvalidAnswerError):
    def __init__(self, research_id: str):
        super().__init__(
            "Research is not started",
            error_code="RESEARCH_NOT_STARTED",
            details={"research_id": research_id},
        )


class ResearchFinalizedError(InvalidAnswerError):
    def __init__(self, research_id: str):
        super().__init__(
            "Research is finalized",
            error_code="RESEARCH_FINALIZED",
            details={"research_id": research_id},
        )


class UnansweredQuestionsError(InvalidAnswerError):
    def __init__(self, question_ids: Iterable[str]):
        question_ids = list(question_ids)
        super().__init__(
            "The follow questions have not been answered: " + ", ".join(question_ids),
            error_code="UNANSWERED_QUESTIONS",
            details={"question_ids": question_ids},
        )
        self.question_ids = question_ids


class QuestionNotFoundError(InvalidAnswerError):
    def __init__(self, question_id: str):
        super().__init__(
            f"Question not found: {question_id}",
            error_code="QUESTION_NOT_FOUND",
            details={"question_id": question_id},
        )
        self.question_id = question_id


class OptionNotFoundError(InvalidAnswerError):
    def __init__(self, option_id: str):
        super().__init__(
            f"Option not found: {option_id}",
            error_code="OPTION_NOT_FOUND",
            details={"option_id": option_id},
        )
        self.option_id = option_id


class MultipleOptionsNotAllowedError(InvalidAnswerError):
    def __init__(self, question_id: str):
        super().__init__(
            "The question does not allow the selection of various options: "
            + question_id,
            error_code="MULTIPLE_OPTIONS_NOT_ALLOWED",
            details={"question_id": question_id},
        )
        self.question_id = question_id


class RepeatedOptionError(InvalidAnswerError):
    def __init__(self, question_id: str, option_id: str):
        super().__init__(
            f"The option was selected more than once: {option_id}",
            error_code="REPEATED_OPTION",
            details={"question_id": question_id, "option_id": option_id},
        )
        self.question_id = question_id
        self.option_id = option_id
