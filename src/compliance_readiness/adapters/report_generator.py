"""Report generation for the compliance readiness engine.

Turns an Evaluation plus the catalog it was produced from into a classified,
human-actionable Report: readiness tier, strengths, severity-ranked findings
with generated guidance, and fixed advisory lists. The only impure input is
the clock used for the generation timestamp, which is injectable.
"""

from collections.abc import Sequence

from compliance_readiness.core.guidance import (
    evidence_to_provide,
    observed_status,
    remediation_steps,
)
from compliance_readiness.core.interfaces import IClock, utc_now
from compliance_readiness.core.models import (
    Classification,
    DomainScore,
    Evaluation,
    Finding,
    Metadata,
    Question,
    Report,
    ReportMeta,
    ScoredItem,
    Severity,
)
from compliance_readiness.core.questions import get_metadata
from compliance_readiness.observability import get_logger
from compliance_readiness.settings import Settings

logger = get_logger(__name__)

# Severity rule (evaluated in order):
#   weight >= 2.5 and score < 50%          -> High
#   1.5 <= weight < 2.5 and score < 70%    -> Medium
#   any other sub-100% score               -> Low
_HIGH_SEVERITY_MIN_WEIGHT: float = 2.5
_HIGH_SEVERITY_MAX_PERCENT: float = 50.0
_MEDIUM_SEVERITY_MIN_WEIGHT: float = 1.5
_MEDIUM_SEVERITY_MAX_PERCENT: float = 70.0

QUICK_WINS: tuple[str, ...] = (
    "Review and update workforce security awareness training materials.",
    "Verify that all facility access logs are being reviewed periodically.",
    "Schedule a tabletop exercise to test your breach notification procedure.",
    "Confirm that all third-party vendors handling sensitive data have a signed DPA/BAA on file.",
    "Ensure your public-facing privacy notice accurately reflects all current data processing activities.",
)

RECOMMENDED_NEXT_30_DAYS: tuple[str, ...] = (
    "Address all 'High' severity findings, starting with developing a formal project plan.",
    "Conduct a targeted risk assessment on the domains with the lowest scores.",
    "Assign owners and deadlines for each remediation step identified in the report.",
    "Review and invoke data processing agreements with key vendors to ensure compliance.",
    "Schedule a follow-up assessment to measure progress.",
)


def classify_severity(weight: float, score_percent: float) -> Severity:
    """Assign a severity tier to a sub-maximal answer.

    Args:
        weight: The question's weight.
        score_percent: Achieved percentage of the weight (below 100).

    Returns:
        Severity tier.
    """
    if weight >= _HIGH_SEVERITY_MIN_WEIGHT and score_percent < _HIGH_SEVERITY_MAX_PERCENT:
        return Severity.HIGH
    if (
        _MEDIUM_SEVERITY_MIN_WEIGHT <= weight < _HIGH_SEVERITY_MIN_WEIGHT
        and score_percent < _MEDIUM_SEVERITY_MAX_PERCENT
    ):
        return Severity.MEDIUM
    return Severity.LOW


class ReportGenerator:
    """Structured readiness report generator.

    Stateless apart from its configuration: each ``generate`` call reads the
    clock once and returns a new Report.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        clock: IClock = utc_now,
        metadata: Metadata | None = None,
    ) -> None:
        """Initialise with settings, a time source and report metadata.

        Args:
            settings: Classification thresholds and strength limits.
                Defaults to a freshly loaded Settings instance.
            clock: Callable returning the current timezone-aware datetime.
            metadata: Name, version and disclaimer for the report header.
                Defaults to the built-in questionnaire metadata.
        """
        self._settings = settings or Settings()
        self._clock = clock
        self._metadata = metadata or get_metadata()

    def generate(self, evaluation: Evaluation, catalog: Sequence[Question]) -> Report:
        """Generate a report from an evaluation.

        Args:
            evaluation: Output of scoring ``catalog`` against an answer set.
            catalog: The catalog used to produce ``evaluation``. Items whose
                question id is missing from it are skipped.

        Returns:
            A fully populated Report.
        """
        questions_by_id = {question.question_id: question for question in catalog}

        strengths: list[str] = []
        findings: list[Finding] = []

        for item in evaluation.items:
            question = questions_by_id.get(item.question_id)
            if question is None:
                logger.debug("Skipping item with unknown question", question_id=item.question_id)
                continue

            score_percent = item.score_percent
            if score_percent >= 100.0:
                if item.weight >= self._settings.strength_weight_threshold:
                    strengths.append(f"Strong controls in place for: {question.text}")
            else:
                findings.append(self._build_finding(question, item, score_percent))

        # list.sort is stable: catalog order is kept within a severity tier.
        findings.sort(key=lambda finding: finding.severity.rank)

        classification = self.classify(evaluation.overall_score)

        report = Report(
            meta=ReportMeta(
                app_name=self._metadata.app_name,
                version=self._metadata.version,
                generated_at=self._clock(),
                disclaimer=self._metadata.disclaimer,
            ),
            overall_score=evaluation.overall_score,
            classification=classification,
            per_standard_scores=dict(evaluation.per_standard),
            per_domain_scores=self._build_domain_scores(evaluation, catalog),
            strengths=tuple(strengths[: self._settings.max_strengths]),
            quick_wins=QUICK_WINS,
            findings=tuple(findings),
            recommended_next_30_days=RECOMMENDED_NEXT_30_DAYS,
        )

        logger.info(
            "Readiness report generated",
            overall_score=round(evaluation.overall_score, 2),
            classification=classification.value,
            finding_count=len(findings),
            high_severity_count=sum(1 for f in findings if f.severity is Severity.HIGH),
            strength_count=len(report.strengths),
        )
        return report

    def classify(self, overall_score: float) -> Classification:
        """Map an overall score to a readiness tier.

        Thresholds are inclusive lower bounds: with the defaults, exactly
        80.0 is High and exactly 50.0 is Moderate.

        Args:
            overall_score: Overall percentage in range 0.0-100.0.

        Returns:
            Readiness classification.
        """
        if overall_score >= self._settings.high_readiness_threshold:
            return Classification.HIGH
        if overall_score >= self._settings.moderate_readiness_threshold:
            return Classification.MODERATE
        return Classification.LOW

    def _build_finding(
        self,
        question: Question,
        item: ScoredItem,
        score_percent: float,
    ) -> Finding:
        """Build a guidance-annotated finding for a sub-maximal item.

        Args:
            question: Catalog record for the item.
            item: The scored item.
            score_percent: Achieved percentage of the item's weight.

        Returns:
            Finding with severity, observed status, remediation and evidence.
        """
        return Finding(
            question_id=question.question_id,
            standard=question.standard,
            domain=question.domain,
            severity=classify_severity(item.weight, score_percent),
            requirement_summary=question.text,
            observed_status=observed_status(question, score_percent),
            remediation_steps=remediation_steps(question),
            evidence_to_provide=evidence_to_provide(question),
            citation=question.citation,
        )

    def _build_domain_scores(
        self,
        evaluation: Evaluation,
        catalog: Sequence[Question],
    ) -> tuple[DomainScore, ...]:
        """Annotate each per-domain percentage with the standard of its first question.

        Args:
            evaluation: Evaluation carrying the per-domain rollup.
            catalog: Catalog scanned in order for each domain's standard.

        Returns:
            One DomainScore per per-domain entry, in rollup order.
        """
        domain_scores: list[DomainScore] = []
        for domain, score in evaluation.per_domain.items():
            owner = next((q for q in catalog if q.domain == domain), None)
            domain_scores.append(
                DomainScore(
                    standard=owner.standard if owner is not None else "Unknown",
                    domain=domain,
                    score_percent=score,
                )
            )
        return tuple(domain_scores)


def generate_report(
    evaluation: Evaluation,
    catalog: Sequence[Question],
    clock: IClock = utc_now,
    settings: Settings | None = None,
) -> Report:
    """Generate a report with a one-off ReportGenerator.

    See ReportGenerator.generate.
    """
    return ReportGenerator(settings=settings, clock=clock).generate(evaluation, catalog)
