"""Test fixtures for compliance-readiness.

Provides the built-in catalog, canonical best/worst answer sets, a fixed
clock, and a factory for ad-hoc questions.
"""

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import Any

import pytest
import structlog

from compliance_readiness.adapters.report_generator import ReportGenerator
from compliance_readiness.core.models import AnswerKind, Choice, Question, Standard
from compliance_readiness.core.questions import build_question, get_catalog
from compliance_readiness.core.scoring import AnswerValue, ComplianceScorer
from compliance_readiness.settings import Settings

FIXED_NOW = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def best_answers_for(catalog: Sequence[Question]) -> dict[str, AnswerValue]:
    """Answer every question with its maximum-credit option."""
    answers: dict[str, AnswerValue] = {}
    for question in catalog:
        if question.answer_kind is AnswerKind.YES_NO:
            answers[question.question_id] = True
        elif question.answer_kind is AnswerKind.SCALE_0_2:
            answers[question.question_id] = 2
        else:
            best = max(question.choices, key=lambda c: c.score or 0.0)
            answers[question.question_id] = best.value
    return answers


def worst_answers_for(catalog: Sequence[Question]) -> dict[str, AnswerValue]:
    """Answer every question with its minimum-credit option."""
    answers: dict[str, AnswerValue] = {}
    for question in catalog:
        if question.answer_kind is AnswerKind.YES_NO:
            answers[question.question_id] = False
        elif question.answer_kind is AnswerKind.SCALE_0_2:
            answers[question.question_id] = 0
        else:
            worst = min(question.choices, key=lambda c: c.score or 0.0)
            answers[question.question_id] = worst.value
    return answers


@pytest.fixture()
def catalog() -> Sequence[Question]:
    """The built-in question catalog."""
    return get_catalog()


@pytest.fixture()
def scorer() -> ComplianceScorer:
    """Provide a fresh ComplianceScorer instance."""
    return ComplianceScorer()


@pytest.fixture()
def settings() -> Settings:
    """Settings with library defaults, independent of the environment."""
    return Settings(
        high_readiness_threshold=80.0,
        moderate_readiness_threshold=50.0,
        strength_weight_threshold=2.5,
        max_strengths=5,
    )


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    """Deterministic clock returning FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture()
def generator(settings: Settings, fixed_clock: Callable[[], datetime]) -> ReportGenerator:
    """ReportGenerator with default settings and a fixed clock."""
    return ReportGenerator(settings=settings, clock=fixed_clock)


@pytest.fixture()
def best_answers(catalog: Sequence[Question]) -> dict[str, AnswerValue]:
    """Maximum-credit answers for the built-in catalog."""
    return best_answers_for(catalog)


@pytest.fixture()
def worst_answers(catalog: Sequence[Question]) -> dict[str, AnswerValue]:
    """Minimum-credit answers for the built-in catalog."""
    return worst_answers_for(catalog)


@pytest.fixture()
def make_question() -> Callable[..., Question]:
    """Factory for ad-hoc questions with sensible defaults."""

    def _make(**overrides: Any) -> Question:
        fields: dict[str, Any] = {
            "question_id": "q-1",
            "standard": Standard.HIPAA,
            "domain": "Technical Safeguards",
            "text": "Is access controlled?",
            "guidance": "Access must be controlled.",
            "answer_kind": AnswerKind.YES_NO,
            "weight": 3.0,
            "citation": "45 CFR 164.312(a)",
        }
        fields.update(overrides)
        return build_question(**fields)

    return _make


@pytest.fixture()
def security_choices() -> tuple[Choice, ...]:
    """Three-level choices scored 0, 0.5 and 1.0."""
    return (
        Choice(value="none", label="None", score=0.0),
        Choice(value="some", label="Some", score=0.5),
        Choice(value="full", label="Full", score=1.0),
    )
