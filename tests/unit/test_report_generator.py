"""Unit tests for the readiness report generator.

Tests cover:
- Classification boundaries
- Severity rule, including monotonicity in score for a fixed weight
- Stable severity ordering of findings
- Strength extraction and capping
- Per-domain annotation, catalog mismatch handling and the injectable clock
"""

from datetime import datetime, timezone

import pytest

from compliance_readiness.adapters.report_generator import (
    QUICK_WINS,
    RECOMMENDED_NEXT_30_DAYS,
    ReportGenerator,
    classify_severity,
    generate_report,
)
from compliance_readiness.core.models import (
    AnswerKind,
    Choice,
    Classification,
    Severity,
    Standard,
)
from compliance_readiness.core.questions import QUESTIONS_BY_ID
from compliance_readiness.core.scoring import evaluate
from compliance_readiness.settings import Settings


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassification:
    """Tests for ReportGenerator.classify boundary conditions."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (100.0, Classification.HIGH),
            (80.0, Classification.HIGH),
            (79.999, Classification.MODERATE),
            (50.0, Classification.MODERATE),
            (49.999, Classification.LOW),
            (0.0, Classification.LOW),
        ],
    )
    def test_boundaries(
        self, generator: ReportGenerator, score: float, expected: Classification
    ) -> None:
        """Thresholds are inclusive lower bounds."""
        assert generator.classify(score) is expected

    def test_thresholds_from_settings(self, fixed_clock) -> None:
        generator = ReportGenerator(
            settings=Settings(high_readiness_threshold=90.0, moderate_readiness_threshold=60.0),
            clock=fixed_clock,
        )
        assert generator.classify(85.0) is Classification.MODERATE
        assert generator.classify(55.0) is Classification.LOW


# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------


class TestClassifySeverity:
    """Tests for the weight/score severity rule."""

    @pytest.mark.parametrize(
        ("weight", "score_percent", "expected"),
        [
            (3.0, 0.0, Severity.HIGH),
            (2.5, 49.99, Severity.HIGH),
            (2.5, 50.0, Severity.LOW),
            (3.0, 75.0, Severity.LOW),
            (2.0, 50.0, Severity.MEDIUM),
            (1.5, 69.99, Severity.MEDIUM),
            (1.5, 70.0, Severity.LOW),
            (2.49, 0.0, Severity.MEDIUM),
            (1.49, 0.0, Severity.LOW),
            (1.0, 0.0, Severity.LOW),
        ],
    )
    def test_rule(self, weight: float, score_percent: float, expected: Severity) -> None:
        assert classify_severity(weight, score_percent) is expected

    @pytest.mark.parametrize("weight", [0.5, 1.0, 1.5, 2.0, 2.4, 2.5, 3.0])
    def test_monotonic_in_score(self, weight: float) -> None:
        """For a fixed weight, a lower score never gets a lower severity."""
        scores = [0.0, 10.0, 25.0, 49.9, 50.0, 60.0, 69.9, 70.0, 85.0, 99.9]
        ranks = [classify_severity(weight, s).rank for s in scores]
        assert ranks == sorted(ranks)

    def test_severity_ranks(self) -> None:
        assert [s.rank for s in (Severity.HIGH, Severity.MEDIUM, Severity.LOW)] == [0, 1, 2]


# ---------------------------------------------------------------------------
# Findings
# ---------------------------------------------------------------------------


class TestFindings:
    """Tests for finding extraction and ordering."""

    def test_binary_false_scenario(self, generator: ReportGenerator, make_question) -> None:
        """Weight 3.0 answered False produces one High finding."""
        catalog = [make_question(weight=3.0)]
        report = generator.generate(evaluate(catalog, {"q-1": False}), catalog)

        assert report.overall_score == 0.0
        assert report.classification is Classification.LOW
        assert len(report.findings) == 1
        finding = report.findings[0]
        assert finding.severity is Severity.HIGH
        assert finding.question_id == "q-1"
        assert finding.requirement_summary == "Is access controlled?"
        assert finding.citation == "45 CFR 164.312(a)"
        assert finding.standard is Standard.HIPAA
        assert finding.domain == "Technical Safeguards"
        assert len(finding.remediation_steps) == 4
        assert len(finding.evidence_to_provide) == 5

    def test_scale_half_credit_scenario(self, generator: ReportGenerator, make_question) -> None:
        """Weight 2.5 answered 1 of 2 is 50%, which falls through to Low."""
        catalog = [
            make_question(
                answer_kind=AnswerKind.SCALE_0_2,
                choices=(Choice(value=0, label="Never"), Choice(value=1, label="Sometimes"), Choice(value=2, label="Always")),
                weight=2.5,
            )
        ]
        report = generator.generate(evaluate(catalog, {"q-1": 1}), catalog)
        assert report.findings[0].severity is Severity.LOW
        assert "established but may lack formal documentation" in report.findings[0].observed_status

    def test_multiple_half_credit_scenario(
        self, generator: ReportGenerator, make_question, security_choices
    ) -> None:
        """Weight 2.0 answered with the 0.5 choice is 50%, which is Medium."""
        catalog = [make_question(answer_kind=AnswerKind.MULTIPLE, choices=security_choices, weight=2.0)]
        report = generator.generate(evaluate(catalog, {"q-1": "some"}), catalog)
        assert report.findings[0].severity is Severity.MEDIUM

    def test_all_best_answers_have_no_findings(
        self, generator: ReportGenerator, catalog, best_answers
    ) -> None:
        report = generator.generate(evaluate(catalog, best_answers), catalog)
        assert report.findings == ()
        assert report.overall_score == pytest.approx(100.0)
        assert report.classification is Classification.HIGH

    def test_all_worst_answers_flag_every_question(
        self, generator: ReportGenerator, catalog, worst_answers
    ) -> None:
        report = generator.generate(evaluate(catalog, worst_answers), catalog)
        assert len(report.findings) == len(catalog)
        for finding in report.findings:
            weight = QUESTIONS_BY_ID[finding.question_id].weight
            assert finding.severity is classify_severity(weight, 0.0)
        counts = {s: sum(1 for f in report.findings if f.severity is s) for s in Severity}
        assert counts == {Severity.HIGH: 24, Severity.MEDIUM: 13, Severity.LOW: 1}

    def test_findings_sorted_stably_by_severity(
        self, generator: ReportGenerator, catalog, worst_answers
    ) -> None:
        """High before Medium before Low; catalog order within each tier."""
        report = generator.generate(evaluate(catalog, worst_answers), catalog)
        ranks = [f.severity.rank for f in report.findings]
        assert ranks == sorted(ranks)

        catalog_position = {q.question_id: i for i, q in enumerate(catalog)}
        for severity in Severity:
            positions = [catalog_position[f.question_id] for f in report.findings if f.severity is severity]
            assert positions == sorted(positions)

    def test_stable_order_with_interleaved_severities(
        self, generator: ReportGenerator, make_question
    ) -> None:
        catalog = [
            make_question(question_id="low-a", weight=1.0),
            make_question(question_id="high-a", weight=3.0),
            make_question(question_id="med-a", weight=2.0),
            make_question(question_id="high-b", weight=2.5),
            make_question(question_id="low-b", weight=0.5),
            make_question(question_id="med-b", weight=1.5),
        ]
        report = generator.generate(evaluate(catalog, {}), catalog)
        assert [f.question_id for f in report.findings] == [
            "high-a",
            "high-b",
            "med-a",
            "med-b",
            "low-a",
            "low-b",
        ]

    def test_unanswered_questions_become_findings(self, generator: ReportGenerator, catalog) -> None:
        report = generator.generate(evaluate(catalog, {}), catalog)
        assert len(report.findings) == len(catalog)


# ---------------------------------------------------------------------------
# Strengths
# ---------------------------------------------------------------------------


class TestStrengths:
    """Tests for strength extraction."""

    def test_first_five_in_catalog_order(
        self, generator: ReportGenerator, catalog, best_answers
    ) -> None:
        report = generator.generate(evaluate(catalog, best_answers), catalog)
        expected_ids = ["hipaa-admin-01", "hipaa-admin-02", "hipaa-admin-03", "hipaa-phys-01", "hipaa-tech-01"]
        assert report.strengths == tuple(
            f"Strong controls in place for: {QUESTIONS_BY_ID[qid].text}" for qid in expected_ids
        )

    def test_low_weight_full_score_is_not_a_strength(
        self, generator: ReportGenerator, make_question
    ) -> None:
        catalog = [make_question(weight=2.4)]
        report = generator.generate(evaluate(catalog, {"q-1": True}), catalog)
        assert report.strengths == ()
        assert report.findings == ()

    def test_partial_score_is_not_a_strength(self, generator: ReportGenerator, catalog) -> None:
        report = generator.generate(evaluate(catalog, {"hipaa-admin-02": 1}), catalog)
        assert report.strengths == ()

    def test_cap_from_settings(self, fixed_clock, catalog, best_answers) -> None:
        generator = ReportGenerator(settings=Settings(max_strengths=2), clock=fixed_clock)
        report = generator.generate(evaluate(catalog, best_answers), catalog)
        assert len(report.strengths) == 2


# ---------------------------------------------------------------------------
# Report structure
# ---------------------------------------------------------------------------


class TestReportStructure:
    """Tests for metadata, score breakdowns and fixed lists."""

    def test_meta_uses_injected_clock(self, generator: ReportGenerator, catalog, fixed_clock) -> None:
        report = generator.generate(evaluate(catalog, {}), catalog)
        assert report.meta.generated_at == fixed_clock()
        assert report.meta.app_name == "Compliance Readiness Checker"
        assert report.meta.version == "1.0.0"
        assert "not legal advice" in report.meta.disclaimer

    def test_clock_read_once(self, settings: Settings, catalog) -> None:
        calls: list[datetime] = []

        def clock() -> datetime:
            now = datetime(2025, 6, 1, tzinfo=timezone.utc)
            calls.append(now)
            return now

        ReportGenerator(settings=settings, clock=clock).generate(evaluate(catalog, {}), catalog)
        assert len(calls) == 1

    def test_per_domain_scores_annotated_with_first_standard(
        self, generator: ReportGenerator, catalog
    ) -> None:
        report = generator.generate(evaluate(catalog, {}), catalog)
        by_domain = {d.domain: d for d in report.per_domain_scores}
        assert len(report.per_domain_scores) == 10
        assert by_domain["Breach Notification"].standard is Standard.HIPAA
        assert by_domain["International Transfers"].standard is Standard.GDPR
        assert [d.domain for d in report.per_domain_scores][0] == "Administrative Safeguards"

    def test_per_standard_scores_copied(self, generator: ReportGenerator, catalog, best_answers) -> None:
        evaluation = evaluate(catalog, best_answers)
        report = generator.generate(evaluation, catalog)
        assert report.per_standard_scores == evaluation.per_standard

    def test_fixed_lists(self, generator: ReportGenerator, catalog) -> None:
        report = generator.generate(evaluate(catalog, {}), catalog)
        assert report.quick_wins == QUICK_WINS
        assert report.recommended_next_30_days == RECOMMENDED_NEXT_30_DAYS
        assert len(report.quick_wins) == 5
        assert len(report.recommended_next_30_days) == 5

    def test_empty_catalog(self, generator: ReportGenerator) -> None:
        """Vacuous full credit: overall 100, no findings, no strengths."""
        report = generator.generate(evaluate([], {}), [])
        assert report.overall_score == 100.0
        assert report.classification is Classification.HIGH
        assert report.findings == ()
        assert report.strengths == ()
        assert report.per_domain_scores == ()

    def test_report_serialises_to_json_tree(self, generator: ReportGenerator, catalog, worst_answers) -> None:
        report = generator.generate(evaluate(catalog, worst_answers), catalog)
        dumped = report.model_dump(mode="json")
        assert dumped["classification"] == "Low"
        assert dumped["findings"][0]["severity"] == "High"
        assert set(dumped["per_standard_scores"]) == {"HIPAA", "GDPR"}
        generated_at = datetime.fromisoformat(dumped["meta"]["generated_at"].replace("Z", "+00:00"))
        assert generated_at == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


class TestCatalogMismatch:
    """Items whose question is missing from the catalog are skipped."""

    def test_missing_questions_skipped(self, generator: ReportGenerator, catalog) -> None:
        evaluation = evaluate(catalog, {})
        partial = [q for q in catalog if q.standard is Standard.GDPR]
        report = generator.generate(evaluation, partial)

        assert len(report.findings) == len(partial)
        assert all(f.standard is Standard.GDPR for f in report.findings)
        assert report.overall_score == evaluation.overall_score

    def test_unknown_domain_annotation(self, generator: ReportGenerator, catalog) -> None:
        evaluation = evaluate(catalog, {})
        partial = [q for q in catalog if q.standard is Standard.GDPR]
        report = generator.generate(evaluation, partial)
        by_domain = {d.domain: d for d in report.per_domain_scores}
        assert by_domain["Physical Safeguards"].standard == "Unknown"
        assert by_domain["Breach Notification"].standard is Standard.GDPR


class TestGenerateReportFunction:
    """Tests for the module-level convenience function."""

    def test_matches_generator(self, settings: Settings, fixed_clock, catalog, worst_answers) -> None:
        evaluation = evaluate(catalog, worst_answers)
        direct = ReportGenerator(settings=settings, clock=fixed_clock).generate(evaluation, catalog)
        via_function = generate_report(evaluation, catalog, clock=fixed_clock, settings=settings)
        assert direct == via_function

    def test_pure_apart_from_clock(self, fixed_clock, catalog, worst_answers) -> None:
        evaluation = evaluate(catalog, worst_answers)
        snapshot = evaluation.model_copy(deep=True)
        first = generate_report(evaluation, catalog, clock=fixed_clock)
        second = generate_report(evaluation, catalog, clock=fixed_clock)
        assert first == second
        assert evaluation == snapshot
