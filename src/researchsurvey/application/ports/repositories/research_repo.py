"""Research repository interface.

Covers the research shape: researches, their questions and their options.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.research import (
    Option,
    OptionCriteria,
    Question,
    QuestionCriteria,
    Research,
)


class ResearchRepository(ABC):
    """Abstract repository for research, question and option data access."""

    @abstractmethod
    async def save_research(self, research: Research) -> Research:
        """Save a research."""
        pass

    @abstractmethod
    async def find_research_by_id(self, research_id: str) -> Optional[Research]:
        """Find a research by ID, without its questions."""
        pass

    @abstractmethod
    async def find_questions_by_research(self, research_id: str) -> List[Question]:
        """Get the questions of a research ordered by sequence, without options."""
        pass

    @abstractmethod
    async def search_questions(
        self, research_id: str, criteria: QuestionCriteria
    ) -> List[Question]:
        """Get the questions of a research matching the criteria, ordered by sequence."""
        pass

    @abstractmethod
    async def find_question_by_id(self, question_id: str) -> Optional[Question]:
        """Find a question by ID."""
        pass

    @abstractmethod
    async def save_question(self, question: Question) -> Question:
        """Insert a question, or update the one with the same ID."""
        pass

    @abstractmethod
    async def delete_question(self, question_id: str) -> None:
        """Delete a question together with its options."""
        pass

    @abstractmethod
    async def get_last_question_sequence(self, research_id: str) -> Optional[int]:
        """Highest question sequence of a research, None when it has none."""
        pass

    @abstractmethod
    async def find_options_by_question(self, question_id: str) -> List[Option]:
        """Get the options of a question ordered by sequence."""
        pass

    @abstractmethod
    async def search_options(self, question_id: str, criteria: OptionCriteria) -> List[Option]:
        """Get the options of a question matching the criteria, ordered by sequence."""
        pass

    @abstractmethod
    async def find_option_by_id(self, option_id: str) -> Optional[Option]:
        """Find an option by ID."""
        pass

    @abstractmethod
    async def save_option(self, option: Option) -> Option:
        """Insert an option, or update the one with the same ID."""
        pass

    @abstractmethod
    async def delete_option(self, option_id: str) -> None:
        """Delete an option."""
        pass

    @abstractmethod
    async def get_last_option_sequence(self, question_id: str) -> Optional[int]:
        """Highest option sequence of a question, None when it has none."""
        pass
