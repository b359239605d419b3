"""Exception hierarchy for the compliance readiness engine.

Scoring and report generation never raise for malformed answers; these
errors cover catalog contract violations only.
"""


class ComplianceReadinessError(Exception):
    """Base class for all compliance readiness errors."""


class CatalogValidationError(ComplianceReadinessError, ValueError):
    """Raised when a question catalog breaks its structural contract.

    Attributes:
        question_ids: Identifiers of the offending questions.
    """

    def __init__(self, message: str, question_ids: list[str] | None = None) -> None:
        """Initialise a CatalogValidationError.

        Args:
            message: Human-readable description of the violation.
            question_ids: Optional identifiers of the offending questions.
        """
        super().__init__(message)
        self.question_ids = question_ids or []
