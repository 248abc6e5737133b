from __future__ import annotations

import uuid
from datetime import timedelta

import pytest

from researchsurvey.application.dto.research_dto import (
    CreateOptionRequest,
    CreateQuestionRequest,
    CreateResearchRequest,
    SearchOptionsRequest,
    SearchQuestionsRequest,
    UpdateOptionRequest,
    UpdateQuestionRequest,
)
from researchsurvey.application.use_cases.create_option import CreateOptionUseCase
from researchsurvey.application.use_cases.create_question import CreateQuestionUseCase
from researchsurvey.application.use_cases.create_research import CreateResearchUseCase
from researchsurvey.application.use_cases.delete_option import DeleteOptionUseCase
from researchsurvey.application.use_cases.delete_question import DeleteQuestionUseCase
from researchsurvey.application.use_cases.get_option import GetOptionUseCase
from researchsurvey.application.use_cases.get_question import GetQuestionUseCase
from researchsurvey.application.use_cases.get_research import GetResearchUseCase
from researchsurvey.application.use_cases.search_options import SearchOptionsUseCase
from researchsurvey.application.use_cases.search_questions import SearchQuestionsUseCase
from researchsurvey.application.use_cases.update_option import UpdateOptionUseCase
from researchsurvey.application.use_cases.update_question import UpdateQuestionUseCase
from researchsurvey.domain.errors import (
    InvalidResearchPeriodError,
    OptionNotFoundInQuestionError,
    QuestionNotFoundInResearchError,
    ResearchNotFoundError,
)
from tests.conftest import NOW, add_question, add_research, run


def test_create_research(research_repo):
    research = run(
        CreateResearchUseCase(research_repo).execute(
            CreateResearchRequest(title="  Satisfaction  ", starts_on=NOW)
        )
    )

    assert research.title == "Satisfaction"
    assert research.ends_on is None
    assert research.research_id in research_repo.researches


def test_create_research_rejects_end_before_start(research_repo):
    with pytest.raises(InvalidResearchPeriodError):
        run(
            CreateResearchUseCase(research_repo).execute(
                CreateResearchRequest(
                    title="Satisfaction", starts_on=NOW, ends_on=NOW - timedelta(seconds=1)
                )
            )
        )


def test_create_research_rejects_blank_title(research_repo):
    with pytest.raises(ValueError):
        run(
            CreateResearchUseCase(research_repo).execute(
                CreateResearchRequest(title="   ", starts_on=NOW)
            )
        )


def test_question_and_option_sequences_start_at_one(research_repo):
    research = add_research(research_repo)
    research_id = research.research_id
    create_question = CreateQuestionUseCase(research_repo)

    first = run(create_question.execute(CreateQuestionRequest(research_id, "First")))
    second = run(create_question.execute(CreateQuestionRequest(research_id, "Second", True)))

    create_option = CreateOptionUseCase(research_repo)
    options = [
        run(create_option.execute(CreateOptionRequest(research_id, second.question_id, text)))
        for text in ("Yes", "No", "Maybe")
    ]

    assert (first.sequence, second.sequence) == (1, 2)
    assert second.multi_select is True
    assert [option.sequence for option in options] == [1, 2, 3]


def test_create_question_for_unknown_research(research_repo):
    with pytest.raises(ResearchNotFoundError):
        run(
            CreateQuestionUseCase(research_repo).execute(
                CreateQuestionRequest(str(uuid.uuid4()), "Question")
            )
        )


def test_create_option_for_question_of_another_research(research_repo):
    research = add_research(research_repo)
    other = add_research(research_repo, title="Other")
    question = run(
        CreateQuestionUseCase(research_repo).execute(
            CreateQuestionRequest(research.research_id, "Question")
        )
    )

    with pytest.raises(QuestionNotFoundInResearchError):
        run(
            CreateOptionUseCase(research_repo).execute(
                CreateOptionRequest(other.research_id, question.question_id, "Yes")
            )
        )


def test_get_research_returns_ordered_shape(research_repo, survey):
    research = run(GetResearchUseCase(research_repo).execute(survey.research_id))

    assert [q.question_id for q in research.questions] == [survey.q("A"), survey.q("B")]
    assert [o.option_id for o in research.questions[1].options] == [
        survey.o("B1"),
        survey.o("B2"),
    ]


def test_get_unknown_research(research_repo):
    with pytest.raises(ResearchNotFoundError):
        run(GetResearchUseCase(research_repo).execute(str(uuid.uuid4())))


def test_create_research_generates_distinct_uuid_ids(research_repo):
    create = CreateResearchUseCase(research_repo)
    first = run(create.execute(CreateResearchRequest(title="One", starts_on=NOW)))
    second = run(create.execute(CreateResearchRequest(title="Two", starts_on=NOW)))

    assert first.research_id != second.research_id
    assert str(uuid.UUID(first.research_id)) == first.research_id


def test_get_question_fills_options_on_request(research_repo, survey):
    use_case = GetQuestionUseCase(research_repo)

    bare = run(use_case.execute(survey.research_id, survey.q("B")))
    filled = run(use_case.execute(survey.research_id, survey.q("B"), fill_options=True))

    assert bare.options == []
    assert [o.option_id for o in filled.options] == [survey.o("B1"), survey.o("B2")]


def test_get_question_of_another_research(research_repo, survey):
    other = add_research(research_repo, title="Other")

    with pytest.raises(QuestionNotFoundInResearchError):
        run(GetQuestionUseCase(research_repo).execute(other.research_id, survey.q("A")))


def test_search_questions_by_description_and_multi_select(research_repo):
    research = add_research(research_repo)
    add_question(research_repo, research, 1, description="Favourite colour")
    wanted = add_question(research_repo, research, 2, True, description="Favourite FOODS")
    add_question(research_repo, research, 3, True, description="Visited countries")
    search = SearchQuestionsUseCase(research_repo)

    everything = run(search.execute(SearchQuestionsRequest(research.research_id)))
    by_text = run(search.execute(SearchQuestionsRequest(research.research_id, "favourite")))
    both = run(
        search.execute(SearchQuestionsRequest(research.research_id, "foods", multi_select=True))
    )

    assert [q.sequence for q in everything] == [1, 2, 3]
    assert [q.sequence for q in by_text] == [1, 2]
    assert [q.question_id for q in both] == [wanted.question_id]


def test_search_questions_of_unknown_research(research_repo):
    with pytest.raises(ResearchNotFoundError):
        run(
            SearchQuestionsUseCase(research_repo).execute(
                SearchQuestionsRequest(str(uuid.uuid4()))
            )
        )


def test_update_question_keeps_sequence(research_repo, survey):
    updated = run(
        UpdateQuestionUseCase(research_repo).execute(
            UpdateQuestionRequest(survey.research_id, survey.q("A"), "Renamed", True)
        )
    )

    stored = research_repo.questions[survey.q("A")]
    assert (stored.description, stored.multi_select, stored.sequence) == ("Renamed", True, 1)
    assert updated.question_id == survey.q("A")


def test_delete_question_removes_its_options(research_repo, survey):
    run(DeleteQuestionUseCase(research_repo).execute(survey.research_id, survey.q("A")))

    assert survey.q("A") not in research_repo.questions
    assert survey.o("A1") not in research_repo.options
    assert survey.o("B1") in research_repo.options


def test_delete_unknown_question(research_repo, survey):
    with pytest.raises(QuestionNotFoundInResearchError):
        run(DeleteQuestionUseCase(research_repo).execute(survey.research_id, str(uuid.uuid4())))


def test_get_option_checks_its_question(research_repo, survey):
    use_case = GetOptionUseCase(research_repo)

    option = run(use_case.execute(survey.research_id, survey.q("A"), survey.o("A2")))
    assert option.sequence == 2

    with pytest.raises(OptionNotFoundInQuestionError):
        run(use_case.execute(survey.research_id, survey.q("A"), survey.o("B1")))


def test_search_options_by_description(research_repo, survey):
    research_repo.options[survey.o("B2")].description = "Something else"
    search = SearchOptionsUseCase(research_repo)

    all_options = run(search.execute(SearchOptionsRequest(survey.research_id, survey.q("B"))))
    filtered = run(
        search.execute(SearchOptionsRequest(survey.research_id, survey.q("B"), "else"))
    )

    assert [o.option_id for o in all_options] == [survey.o("B1"), survey.o("B2")]
    assert [o.option_id for o in filtered] == [survey.o("B2")]


def test_update_and_delete_option(research_repo, survey):
    updated = run(
        UpdateOptionUseCase(research_repo).execute(
            UpdateOptionRequest(survey.research_id, survey.q("A"), survey.o("A1"), "Yes")
        )
    )
    assert (updated.description, updated.sequence) == ("Yes", 1)

    run(
        DeleteOptionUseCase(research_repo).execute(
            survey.research_id, survey.q("A"), survey.o("A1")
        )
    )
    assert survey.o("A1") not in research_repo.options
    assert survey.o("A2") in research_repo.options


def test_option_of_question_in_another_research(research_repo, survey):
    other = add_research(research_repo, title="Other")

    with pytest.raises(QuestionNotFoundInResearchError):
        run(
            DeleteOptionUseCase(research_repo).execute(
                other.research_id, survey.q("A"), survey.o("A1")
            )
        )
