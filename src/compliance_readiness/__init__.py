"""Compliance Readiness Checker.

Self-contained HIPAA and GDPR readiness assessment engine. Scores a sparse
answer map against a weighted question catalog and derives a classified,
severity-ranked findings report with remediation guidance.
"""

__version__ = "1.0.0"

from compliance_readiness.adapters.report_generator import ReportGenerator, generate_report
from compliance_readiness.core.questions import get_catalog, get_metadata
from compliance_readiness.core.scoring import ComplianceScorer, evaluate

__all__ = [
    "ComplianceScorer",
    "ReportGenerator",
    "__version__",
    "evaluate",
    "generate_report",
    "get_catalog",
    "get_metadata",
]
