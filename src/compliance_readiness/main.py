"""Compliance readiness demonstration entry point.

Scores a synthetic answer set against the built-in catalog and prints the
resulting report as JSON. The synthetic answers mix good, bad and partial
responses: yes/no answers alternate, scale answers cycle through 0-2, and
multiple-choice answers take the first (usually worst) option.
"""

import argparse
import sys
from collections.abc import Sequence

from compliance_readiness import __version__
from compliance_readiness.adapters.report_generator import ReportGenerator
from compliance_readiness.core.models import AnswerKind, Question
from compliance_readiness.core.questions import get_catalog
from compliance_readiness.core.scoring import AnswerValue, evaluate
from compliance_readiness.observability import configure_logging, get_logger
from compliance_readiness.settings import Settings

logger = get_logger(__name__)


def build_sample_answers(catalog: Sequence[Question]) -> dict[str, AnswerValue]:
    """Build a deterministic mixed answer set for a catalog.

    Args:
        catalog: Questions to answer.

    Returns:
        Mapping of question id to a synthetic answer.
    """
    answers: dict[str, AnswerValue] = {}
    for index, question in enumerate(catalog):
        if question.answer_kind is AnswerKind.YES_NO:
            answers[question.question_id] = index % 2 == 0
        elif question.answer_kind is AnswerKind.SCALE_0_2:
            answers[question.question_id] = index % 3
        elif question.answer_kind is AnswerKind.MULTIPLE:
            answers[question.question_id] = question.choices[0].value
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print the report to stdout.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Process exit code.
    """
    parser = argparse.ArgumentParser(
        prog="compliance-readiness-demo",
        description="Score a sample answer set and print the readiness report as JSON.",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings)

    catalog = get_catalog()
    answers = build_sample_answers(catalog)
    evaluation = evaluate(catalog, answers)
    report = ReportGenerator(settings=settings).generate(evaluation, catalog)

    logger.info(
        "Demonstration complete",
        overall_score=round(report.overall_score, 2),
        classification=report.classification.value,
    )
    sys.stdout.write(report.model_dump_json(indent=args.indent))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
