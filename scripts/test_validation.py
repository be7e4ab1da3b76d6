"""
Tests for result validation, shape coercion and the mock fallback flag.

Usage: pytest scripts/test_validation.py
"""

from collections import defaultdict

import pytest

from backend.ai import ContentType, GenerationRequest, GenerationResult, get_prompt, resolve, validate
from backend.ai.fallback import build_mock
from backend.ai.schemas import AnswerFeedback, InterviewQuestionSet, ResumeAnalysis
from backend.config import settings
from backend.errors import GenerationError, GenerationErrorKind


def test_failed_result_raises_its_error():
    result = GenerationResult.failed(GenerationErrorKind.NO_STRUCTURED_OUTPUT, "no json", raw="plain text")

    with pytest.raises(GenerationError) as exc:
        validate(result, AnswerFeedback)

    assert exc.value.kind == GenerationErrorKind.NO_STRUCTURED_OUTPUT
    assert exc.value.code == "no_structured_output"
    assert exc.value.status_code == 500


def test_bare_list_is_wrapped_into_the_single_list_field(valid_output):
    questions = valid_output(ContentType.INTERVIEW_QUESTIONS)["questions"]
    result = GenerationResult.ok("[...]", questions)

    output = validate(result, InterviewQuestionSet)

    assert len(output.data.questions) == 5


def test_single_key_wrapper_is_unwrapped(valid_output):
    payload = {"analysis": valid_output(ContentType.RESUME_ANALYSIS)}

    output = validate(GenerationResult.ok("{...}", payload), ResumeAnalysis)

    assert output.data.match_score == 74


def test_missing_required_field_is_schema_mismatch(valid_output):
    payload = valid_output(ContentType.ANSWER_FEEDBACK)
    del payload["improvements"]

    with pytest.raises(GenerationError) as exc:
        validate(GenerationResult.ok("{...}", payload), AnswerFeedback)

    assert exc.value.kind == GenerationErrorKind.SCHEMA_MISMATCH


def test_wrong_difficulty_is_schema_mismatch(valid_output):
    payload = valid_output(ContentType.INTERVIEW_QUESTIONS)
    payload["questions"][0]["difficulty"] = "impossible"

    with pytest.raises(GenerationError) as exc:
        validate(GenerationResult.ok("{...}", payload), InterviewQuestionSet)

    assert exc.value.kind == GenerationErrorKind.SCHEMA_MISMATCH


def test_score_out_of_range_is_schema_mismatch(valid_output):
    payload = valid_output(ContentType.ANSWER_FEEDBACK)
    payload["score"] = 140

    with pytest.raises(GenerationError):
        validate(GenerationResult.ok("{...}", payload), AnswerFeedback)


def test_resolve_raises_when_fallback_disabled(monkeypatch):
    monkeypatch.setattr(settings, "mock_fallback_enabled", False)
    request = GenerationRequest.for_content(ContentType.COMPANY_RESEARCH, {"company_name": "Acme", "industry": "Aerospace"})
    result = GenerationResult.failed(GenerationErrorKind.PROVIDER_UNAVAILABLE, "timeout")

    with pytest.raises(GenerationError) as exc:
        resolve(request, result)

    assert exc.value.kind == GenerationErrorKind.PROVIDER_UNAVAILABLE


def test_resolve_serves_mock_when_fallback_enabled(monkeypatch):
    monkeypatch.setattr(settings, "mock_fallback_enabled", True)
    variables = {"job_title": "Pilot", "company_name": "Acme", "job_description": "Fly", "resume_section": ""}
    request = GenerationRequest.for_content(ContentType.INTERVIEW_GUIDE, variables, structured=False)
    result = GenerationResult.failed(GenerationErrorKind.MALFORMED_JSON, "bad json", raw="{")

    output = resolve(request, result)

    assert output.used_fallback is True
    assert output.content_type == ContentType.INTERVIEW_GUIDE
    assert "Acme" in output.data.company_research.overview


@pytest.mark.parametrize("content_type", list(ContentType))
def test_every_mock_fits_its_schema(content_type):
    variables = defaultdict(lambda: "100000")
    schema = get_prompt(content_type).schema

    assert isinstance(schema.model_validate(build_mock(content_type, variables)), schema)
