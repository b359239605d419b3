"""Compliance readiness scoring algorithm.

Each question contributes at most its weight. The credited portion depends
on the answer kind:

    yes_no     True                        -> weight
    scale_0_2  number in [0, 2]            -> weight * (answer / 2)
    multiple   matching choice value       -> weight * choice.score

Anything else (missing, None, wrong type, out of range, unmatched choice)
earns zero credit without raising. Raw and maximum scores are summed into
overall, per-standard and per-domain buckets and converted to percentages;
a bucket with zero maximum is 100.

This module is independent of report generation so the scoring logic can be
unit-tested on its own.
"""

import math
from collections.abc import Mapping, Sequence

from compliance_readiness.core.models import (
    AnswerKind,
    Evaluation,
    Question,
    ScoredItem,
    Standard,
    percent,
)
from compliance_readiness.observability import get_logger

logger = get_logger(__name__)

AnswerValue = bool | int | float | str | None

_SCALE_MIN: float = 0.0
_SCALE_MAX: float = 2.0


def _as_scale_number(answer: AnswerValue) -> float | None:
    """Coerce a scale answer to a number, or None if it is not numeric.

    Booleans are rejected even though Python treats them as integers.
    """
    if isinstance(answer, bool) or answer is None:
        return None
    if isinstance(answer, (int, float)):
        number = float(answer)
    elif isinstance(answer, str):
        try:
            number = float(answer.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def _choice_matches(choice_value: str | int, answer: AnswerValue) -> bool:
    """Match a choice value against an answer without coercing between strings, numbers and booleans."""
    if isinstance(answer, bool):
        return False
    if isinstance(choice_value, int) and isinstance(answer, (int, float)):
        return choice_value == answer
    return type(choice_value) is type(answer) and choice_value == answer


class _Bucket:
    """Running raw/max totals for one rollup."""

    __slots__ = ("raw", "maximum")

    def __init__(self) -> None:
        self.raw = 0.0
        self.maximum = 0.0

    def add(self, raw: float, maximum: float) -> None:
        self.raw += raw
        self.maximum += maximum

    @property
    def score_percent(self) -> float:
        return percent(self.raw, self.maximum)


class ComplianceScorer:
    """Weighted scoring engine for the compliance readiness questionnaire.

    Stateless: every call works only on its arguments, so one instance can
    be shared across threads and answer sets.
    """

    def score_question(self, question: Question, answer: AnswerValue) -> float:
        """Compute the raw score a single answer earns.

        Args:
            question: The question being answered.
            answer: The respondent's raw answer, or None when unanswered.

        Returns:
            Raw score in range 0.0 to question.weight.
        """
        if answer is None:
            return 0.0

        if question.answer_kind is AnswerKind.YES_NO:
            return question.weight if answer is True else 0.0

        if question.answer_kind is AnswerKind.SCALE_0_2:
            number = _as_scale_number(answer)
            if number is None or not (_SCALE_MIN <= number <= _SCALE_MAX):
                return 0.0
            return question.weight * (number / _SCALE_MAX)

        if question.answer_kind is AnswerKind.MULTIPLE:
            for choice in question.choices:
                if _choice_matches(choice.value, answer):
                    if choice.score is None:
                        return 0.0
                    return question.weight * choice.score
            return 0.0

        return 0.0

    def evaluate(
        self,
        catalog: Sequence[Question],
        answers: Mapping[str, AnswerValue],
    ) -> Evaluation:
        """Score an answer set against a catalog.

        Args:
            catalog: Ordered questions to score. An empty catalog yields 100
                everywhere.
            answers: Sparse mapping of question id to raw answer. Keys that
                are not in the catalog are ignored.

        Returns:
            A fresh Evaluation with one ScoredItem per catalog question and
            overall, per-standard and per-domain percentages.
        """
        items: list[ScoredItem] = []
        overall = _Bucket()
        by_standard: dict[Standard, _Bucket] = {standard: _Bucket() for standard in Standard}
        by_domain: dict[str, _Bucket] = {}
        answered = 0

        for question in catalog:
            answer = answers.get(question.question_id)
            if answer is not None:
                answered += 1
            raw_score = self.score_question(question, answer)
            max_score = question.weight
            items.append(
                ScoredItem(
                    question_id=question.question_id,
                    weight=question.weight,
                    raw_score=raw_score,
                    max_score=max_score,
                )
            )
            overall.add(raw_score, max_score)
            by_standard[question.standard].add(raw_score, max_score)
            by_domain.setdefault(question.domain, _Bucket()).add(raw_score, max_score)

        evaluation = Evaluation(
            items=tuple(items),
            overall_score=overall.score_percent,
            per_standard={standard: bucket.score_percent for standard, bucket in by_standard.items()},
            per_domain={domain: bucket.score_percent for domain, bucket in by_domain.items()},
        )

        logger.debug(
            "Answers evaluated",
            question_count=len(items),
            answered_count=answered,
            overall_score=round(evaluation.overall_score, 2),
        )
        return evaluation


_DEFAULT_SCORER = ComplianceScorer()


def evaluate(
    catalog: Sequence[Question],
    answers: Mapping[str, AnswerValue],
) -> Evaluation:
    """Score ``answers`` against ``catalog`` with the default scorer.

    See ComplianceScorer.evaluate.
    """
    return _DEFAULT_SCORER.evaluate(catalog, answers)
