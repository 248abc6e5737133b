"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from ....domain.entities.answer import Answer, AnswerSearchCriteria

OptionCountKey = Tuple[str, str]


class AnswerRepository(ABC):
    """Abstract repository for answer persistence and counting."""

    @abstractmethod
    async def save_answers(self, answers: List[Answer]) -> None:
        """Persist a batch of accepted answers."""
        pass

    @abstractmethod
    async def count_answers_grouped_by_option(
        self, research_id: str, criteria: AnswerSearchCriteria
    ) -> Dict[OptionCountKey, int]:
        """
        Count the answers of a research matching the criteria.

        Returns:
            Mapping of (question_id, option_id) to the number of answers.
            Pairs without answers are absent.
        """
        pass
