"""
MongoDB implementation of ResearchRepository.
"""

import re
from typing import Any, Dict, List, Optional

from researchsurvey.application.ports.repositories.research_repo import (
    ResearchRepository,
)
from researchsurvey.domain.entities.research import (
    Option,
    OptionCriteria,
    Question,
    QuestionCriteria,
    Research,
)

from ..models.research_m import OptionMongo, QuestionMongo, ResearchMongo


def _description_filter(fragment: str) -> Dict[str, Any]:
    """Case-insensitive substring match."""
    return {"$regex": re.escape(fragment), "$options": "i"}


class MongoResearchRepository(ResearchRepository):
    """MongoDB implementation of ResearchRepository."""

    async def save_research(self, research: Research) -> Research:
        """Save a research to MongoDB."""
        research_mongo = await ResearchMongo.find_one(
            ResearchMongo.research_id == research.research_id
        )
        if research_mongo:
            research_mongo.title = research.title
            research_mongo.description = research.description
            research_mongo.starts_on = research.starts_on
            research_mongo.ends_on = research.ends_on
        else:
            research_mongo = ResearchMongo(
                research_id=research.research_id,
                title=research.title,
                description=research.description,
                starts_on=research.starts_on,
                ends_on=research.ends_on,
                created_at=research.created_at,
            )

        await research_mongo.save()
        return self._research_to_domain(research_mongo)

    async def find_research_by_id(self, research_id: str) -> Optional[Research]:
        """Find a research by ID."""
        research_mongo = await ResearchMongo.find_one(
            ResearchMongo.research_id == research_id
        )
        if not research_mongo:
            return None

        return self._research_to_domain(research_mongo)

    async def find_questions_by_research(self, research_id: str) -> List[Question]:
        """Get research questions ordered by sequence."""
        return await self.search_questions(research_id, QuestionCriteria())

    async def search_questions(
        self, research_id: str, criteria: QuestionCriteria
    ) -> List[Question]:
        """Get research questions matching the criteria, ordered by sequence."""
        query: Dict[str, Any] = {"research_id": research_id}
        if criteria.description is not None:
            query["description"] = _description_filter(criteria.description)
        if criteria.multi_select is not None:
            query["multi_select"] = criteria.multi_select

        questions_mongo = await QuestionMongo.find(query).sort("+sequence").to_list()
        return [self._question_to_domain(q) for q in questions_mongo]

    async def find_question_by_id(self, question_id: str) -> Optional[Question]:
        """Find a question by ID."""
        question_mongo = await QuestionMongo.find_one(
            QuestionMongo.question_id == question_id
        )
        if not question_mongo:
            return None

        return self._question_to_domain(question_mongo)

    async def save_question(self, question: Question) -> Question:
        """Save a question to MongoDB."""
        question_mongo = await QuestionMongo.find_one(
            QuestionMongo.question_id == question.question_id
        )
        if question_mongo:
            question_mongo.sequence = question.sequence
            question_mongo.description = question.description
            question_mongo.multi_select = question.multi_select
        else:
            question_mongo = QuestionMongo(
                question_id=question.question_id,
                research_id=question.research_id,
                sequence=question.sequence,
                description=question.description,
                multi_select=question.multi_select,
            )

        await question_mongo.save()
        return self._question_to_domain(question_mongo)

    async def delete_question(self, question_id: str) -> None:
        """Delete a question and its options."""
        await OptionMongo.find(OptionMongo.question_id == question_id).delete()
        await QuestionMongo.find(QuestionMongo.question_id == question_id).delete()

    async def get_last_question_sequence(self, research_id: str) -> Optional[int]:
        """Highest question sequence of a research."""
        last = (
            await QuestionMongo.find(QuestionMongo.research_id == research_id)
            .sort("-sequence")
            .first_or_none()
        )
        return last.sequence if last else None

    async def find_options_by_question(self, question_id: str) -> List[Option]:
        """Get question options ordered by sequence."""
        return await self.search_options(question_id, OptionCriteria())

    async def search_options(self, question_id: str, criteria: OptionCriteria) -> List[Option]:
        """Get question options matching the criteria, ordered by sequence."""
        query: Dict[str, Any] = {"question_id": question_id}
        if criteria.description is not None:
            query["description"] = _description_filter(criteria.description)

        options_mongo = await OptionMongo.find(query).sort("+sequence").to_list()
        return [self._option_to_domain(o) for o in options_mongo]

    async def find_option_by_id(self, option_id: str) -> Optional[Option]:
        """Find an option by ID."""
        option_mongo = await OptionMongo.find_one(OptionMongo.option_id == option_id)
        if not option_mongo:
            return None

        return self._option_to_domain(option_mongo)

    async def save_option(self, option: Option) -> Option:
        """Save an option to MongoDB."""
        option_mongo = await OptionMongo.find_one(OptionMongo.option_id == option.option_id)
        if option_mongo:
            option_mongo.sequence = option.sequence
            option_mongo.description = option.description
        else:
            option_mongo = OptionMongo(
                option_id=option.option_id,
                question_id=option.question_id,
                sequence=option.sequence,
                description=option.description,
            )

        await option_mongo.save()
        return self._option_to_domain(option_mongo)

    async def delete_option(self, option_id: str) -> None:
        """Delete an option."""
        await OptionMongo.find(OptionMongo.option_id == option_id).delete()

    async def get_last_option_sequence(self, question_id: str) -> Optional[int]:
        """Highest option sequence of a question."""
        last = (
            await OptionMongo.find(OptionMongo.question_id == question_id)
            .sort("-sequence")
            .first_or_none()
        )
        return last.sequence if last else None

    def _research_to_domain(self, research_mongo: ResearchMongo) -> Research:
        """Convert MongoDB model to domain entity."""
        return Research(
            research_id=research_mongo.research_id,
            title=research_mongo.title,
            description=research_mongo.description,
            starts_on=research_mongo.starts_on,
            ends_on=research_mongo.ends_on,
            created_at=research_mongo.created_at,
        )

    def _question_to_domain(self, question_mongo: QuestionMongo) -> Question:
        return Question(
            question_id=question_mongo.question_id,
            research_id=question_mongo.research_id,
            sequence=question_mongo.sequence,
            description=question_mongo.description,
            multi_select=question_mongo.multi_select,
        )

    def _option_to_domain(self, option_mongo: OptionMongo) -> Option:
        return Option(
            option_id=option_mongo.option_id,
            question_id=option_mongo.question_id,
            sequence=option_mongo.sequence,
            description=option_mongo.description,
        )
