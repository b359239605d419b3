"""Unit tests for the demonstration entry point."""

import json

import pytest

from compliance_readiness.core.models import AnswerKind
from compliance_readiness.core.scoring import evaluate
from compliance_readiness.main import build_sample_answers, main


class TestBuildSampleAnswers:
    """Tests for the synthetic answer set."""

    def test_every_question_answered(self, catalog) -> None:
        answers = build_sample_answers(catalog)
        assert set(answers) == {q.question_id for q in catalog}

    def test_answer_pattern(self, catalog) -> None:
        answers = build_sample_answers(catalog)
        for index, question in enumerate(catalog):
            answer = answers[question.question_id]
            if question.answer_kind is AnswerKind.YES_NO:
                assert answer is (index % 2 == 0)
            elif question.answer_kind is AnswerKind.SCALE_0_2:
                assert answer == index % 3
            else:
                assert answer == question.choices[0].value

    def test_sample_scores(self, catalog) -> None:
        """The sample set earns 47.75 of 91 weight points with 19 gaps."""
        evaluation = evaluate(catalog, build_sample_answers(catalog))
        assert evaluation.overall_score == pytest.approx(47.75 / 91.0 * 100)
        assert sum(1 for item in evaluation.items if item.score_percent < 100) == 19


class TestMain:
    """Tests for the command-line entry point."""

    def test_prints_report_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--indent", "0"])
        assert exit_code == 0

        report = json.loads(capsys.readouterr().out)
        assert report["meta"]["app_name"] == "Compliance Readiness Checker"
        assert report["classification"] == "Moderate"
        assert len(report["findings"]) == 19
        assert report["findings"][0]["severity"] == "High"

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out
