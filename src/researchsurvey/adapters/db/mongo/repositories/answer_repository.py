"""
MongoDB implementation of AnswerRepository.
"""

from typing import Any, Dict, List

from researchsurvey.application.ports.repositories.answer_repo import (
    AnswerRepository,
    OptionCountKey,
)
from researchsurvey.domain.entities.answer import Answer, AnswerSearchCriteria

from ..models.research_m import AnswerMongo


class MongoAnswerRepository(AnswerRepository):
    """MongoDB implementation of AnswerRepository."""

    async def save_answers(self, answers: List[Answer]) -> None:
        """Insert a whole batch of answers."""
        if not answers:
            return

        await AnswerMongo.insert_many(
            [
                AnswerMongo(
                    research_id=answer.research_id,
                    question_id=answer.question_id,
                    option_id=answer.option_id,
                    answered_at=answer.answered_at,
                )
                for answer in answers
            ]
        )

    async def count_answers_grouped_by_option(
        self, research_id: str, criteria: AnswerSearchCriteria
    ) -> Dict[OptionCountKey, int]:
        """Count matching answers with a $group aggregation."""
        pipeline = [
            {"$match": self._build_match(research_id, criteria)},
            {
                "$group": {
                    "_id": {"question_id": "$question_id", "option_id": "$option_id"},
                    "amount": {"$sum": 1},
                }
            },
        ]
        rows = await AnswerMongo.aggregate(pipeline).to_list()

        return {
            (row["_id"]["question_id"], row["_id"]["option_id"]): int(row["amount"])
            for row in rows
        }

    def _build_match(
        self, research_id: str, criteria: AnswerSearchCriteria
    ) -> Dict[str, Any]:
        match: Dict[str, Any] = {"research_id": research_id}

        if criteria.question_id is not None:
            match["question_id"] = criteria.question_id

        # Both bounds inclusive
        answered_at: Dict[str, Any] = {}
        if criteria.date_from is not None:
            answered_at["$gte"] = criteria.date_from
        if criteria.date_to is not None:
            answered_at["$lte"] = criteria.date_to
        if answered_at:
            match["answered_at"] = answered_at

        return match
