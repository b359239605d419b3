"""Data contracts for the compliance readiness engine.

All records are immutable Pydantic v2 models so that evaluations and reports
can be handed to any UI or CLI layer and serialised with ``model_dump`` or
``model_dump_json`` without loss.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Standard(str, Enum):
    """Regulatory frameworks covered by the questionnaire."""

    HIPAA = "HIPAA"
    GDPR = "GDPR"


class AnswerKind(str, Enum):
    """Answer format expected for a question.

    yes_no     -- boolean; True earns the full weight.
    scale_0_2  -- integer 0-2; earns weight * (answer / 2).
    multiple   -- one of the question's choice values; earns weight * choice.score.
    """

    YES_NO = "yes_no"
    SCALE_0_2 = "scale_0_2"
    MULTIPLE = "multiple"


class RemediationCategory(str, Enum):
    """Closed set of remediation templates a question can map to."""

    SAFEGUARDS = "safeguards"
    BREACH = "breach"
    RIGHTS = "rights"
    GENERAL = "general"


class EvidenceCategory(str, Enum):
    """Closed set of evidence artifact lists a question can map to."""

    ADMINISTRATIVE = "administrative"
    PHYSICAL = "physical"
    TECHNICAL = "technical"
    PRIVACY = "privacy"
    GENERAL = "general"


class Severity(str, Enum):
    """Finding severity tier. Lower rank sorts first."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort position of this tier (High=0, Medium=1, Low=2)."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.HIGH: 0,
    Severity.MEDIUM: 1,
    Severity.LOW: 2,
}


class Classification(str, Enum):
    """Overall readiness tier derived from the overall score."""

    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"


# ---------------------------------------------------------------------------
# Question catalog records
# ---------------------------------------------------------------------------


class Choice(BaseModel):
    """A selectable answer option.

    Attributes:
        value: The raw answer value a respondent submits for this option.
        label: Human-readable option text.
        score: Multiplier in [0, 1] applied to the question weight. Required
            for ``multiple`` questions; scale questions score by value instead.
    """

    model_config = ConfigDict(frozen=True)

    value: str | int
    label: str
    score: float | None = Field(default=None, ge=0.0, le=1.0)


class Question(BaseModel):
    """A single questionnaire item.

    Attributes:
        question_id: Unique identifier (e.g., 'hipaa-admin-01').
        standard: Regulatory framework the question belongs to.
        domain: Thematic area within the standard.
        text: The question text presented to respondents.
        guidance: Helper text explaining the requirement.
        answer_kind: Expected answer format.
        choices: Answer options; empty for yes_no questions.
        weight: Maximum contribution of this question to any score.
        citation: Article or section of the regulation.
        remediation_category: Template set used for remediation steps.
        evidence_category: Artifact list used for evidence suggestions.
    """

    model_config = ConfigDict(frozen=True)

    question_id: str = Field(..., min_length=1)
    standard: Standard
    domain: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    guidance: str = ""
    answer_kind: AnswerKind
    choices: tuple[Choice, ...] = ()
    weight: float = Field(..., gt=0.0)
    citation: str = Field(..., min_length=1)
    remediation_category: RemediationCategory = RemediationCategory.GENERAL
    evidence_category: EvidenceCategory = EvidenceCategory.GENERAL

    @model_validator(mode="after")
    def _check_choices(self) -> "Question":
        """Enforce the choice invariants for scale and multiple-choice questions."""
        if self.answer_kind in (AnswerKind.SCALE_0_2, AnswerKind.MULTIPLE) and not self.choices:
            raise ValueError(
                f"question {self.question_id!r} of kind {self.answer_kind.value!r} "
                "requires at least one choice"
            )
        if self.answer_kind is AnswerKind.MULTIPLE:
            unscored = [str(c.value) for c in self.choices if c.score is None]
            if unscored:
                raise ValueError(
                    f"question {self.question_id!r} has choices without a score: {unscored}"
                )
        return self


class Metadata(BaseModel):
    """Static descriptive record for the questionnaire.

    Attributes:
        app_name: Product name shown on reports.
        version: Questionnaire/engine version.
        standards: Covered standards in display order.
        domains: Domain names per standard in display order.
        disclaimer: Legal disclaimer carried on every report.
    """

    model_config = ConfigDict(frozen=True)

    app_name: str
    version: str
    standards: tuple[Standard, ...]
    domains: dict[Standard, tuple[str, ...]]
    disclaimer: str


# ---------------------------------------------------------------------------
# Scoring output
# ---------------------------------------------------------------------------


class ScoredItem(BaseModel):
    """Per-question scoring result.

    Attributes:
        question_id: Question this result belongs to.
        weight: The question's weight.
        raw_score: Credited portion of the weight, 0 <= raw_score <= weight.
        max_score: Maximum attainable score, equal to the weight.
    """

    model_config = ConfigDict(frozen=True)

    question_id: str
    weight: float
    raw_score: float = Field(..., ge=0.0)
    max_score: float = Field(..., ge=0.0)

    @property
    def score_percent(self) -> float:
        """Percentage of the maximum achieved; 100 when max_score is zero."""
        return percent(self.raw_score, self.max_score)


class Evaluation(BaseModel):
    """Aggregate scoring result for one answer set.

    Attributes:
        items: One ScoredItem per catalog question, in catalog order.
        overall_score: Percentage across all questions.
        per_standard: Percentage per standard present in the catalog.
        per_domain: Percentage per distinct domain name, in first-seen order.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[ScoredItem, ...]
    overall_score: float = Field(..., ge=0.0, le=100.0)
    per_standard: dict[Standard, float]
    per_domain: dict[str, float]


def percent(raw: float, maximum: float) -> float:
    """Convert a raw/max pair to a percentage.

    A bucket with no attainable score counts as fully satisfied (100), so
    empty catalogs and empty domains never drag a rollup down.

    Args:
        raw: Credited score.
        maximum: Attainable score.

    Returns:
        Percentage in range 0.0-100.0.
    """
    if maximum > 0:
        return raw / maximum * 100.0
    return 100.0


# ---------------------------------------------------------------------------
# Report output
# ---------------------------------------------------------------------------


class Finding(BaseModel):
    """A guidance-annotated compliance gap for one sub-maximal question.

    Attributes:
        question_id: Question the gap was found on.
        standard: Standard of the question.
        domain: Domain of the question.
        severity: Severity tier from the weight/score rule.
        requirement_summary: The requirement being assessed (question text).
        observed_status: Generated sentence describing the current state.
        remediation_steps: Ordered remediation actions.
        evidence_to_provide: Ordered list of suggested audit artifacts.
        citation: Regulatory citation.
    """

    model_config = ConfigDict(frozen=True)

    question_id: str
    standard: Standard
    domain: str
    severity: Severity
    requirement_summary: str
    observed_status: str
    remediation_steps: tuple[str, ...]
    evidence_to_provide: tuple[str, ...]
    citation: str


class DomainScore(BaseModel):
    """Per-domain score annotated with its owning standard."""

    model_config = ConfigDict(frozen=True)

    standard: Standard | Literal["Unknown"]
    domain: str
    score_percent: float


class ReportMeta(BaseModel):
    """Report header block."""

    model_config = ConfigDict(frozen=True)

    app_name: str
    version: str
    generated_at: datetime
    disclaimer: str


class Report(BaseModel):
    """User-facing readiness report.

    Attributes:
        meta: Report header (name, version, timestamp, disclaimer).
        overall_score: Overall percentage.
        classification: Readiness tier for the overall score.
        per_standard_scores: Percentage per standard.
        per_domain_scores: Percentage per domain, annotated with the standard.
        strengths: Statements for fully-met high-weight requirements (capped).
        quick_wins: Fixed list of low-effort improvements.
        findings: Findings sorted by severity, catalog order within a tier.
        recommended_next_30_days: Fixed list of next steps.
    """

    model_config = ConfigDict(frozen=True)

    meta: ReportMeta
    overall_score: float
    classification: Classification
    per_standard_scores: dict[Standard, float]
    per_domain_scores: tuple[DomainScore, ...]
    strengths: tuple[str, ...]
    quick_wins: tuple[str, ...]
    findings: tuple[Finding, ...]
    recommended_next_30_days: tuple[str, ...]
