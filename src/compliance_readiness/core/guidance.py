"""Remediation guidance templates for compliance findings.

Each question carries a RemediationCategory and an EvidenceCategory assigned
when the catalog is built. The ``derive_*`` functions map textual domain names
onto those categories and are only used during catalog construction; report
generation dispatches on the stored categories.

All functions here are pure functions of the question record.
"""

from compliance_readiness.core.models import (
    AnswerKind,
    EvidenceCategory,
    Question,
    RemediationCategory,
)

# Domain-name keywords, evaluated in order; first match wins.
_REMEDIATION_KEYWORDS: list[tuple[tuple[str, ...], RemediationCategory]] = [
    (("Safeguards", "Security"), RemediationCategory.SAFEGUARDS),
    (("Breach",), RemediationCategory.BREACH),
    (("Rights",), RemediationCategory.RIGHTS),
]

_EVIDENCE_KEYWORDS: list[tuple[tuple[str, ...], EvidenceCategory]] = [
    (("Administrative", "DPIA"), EvidenceCategory.ADMINISTRATIVE),
    (("Physical",), EvidenceCategory.PHYSICAL),
    (("Technical",), EvidenceCategory.TECHNICAL),
    (("Rights", "Lawful"), EvidenceCategory.PRIVACY),
]

_EVIDENCE: dict[EvidenceCategory, tuple[str, ...]] = {
    EvidenceCategory.ADMINISTRATIVE: (
        "Documented Risk Analysis Report",
        "Information Security Policies and Procedures Manual",
        "Workforce Training Records & Materials",
        "Sanction Policy Document",
        "Contingency Plan and Test Results",
    ),
    EvidenceCategory.PHYSICAL: (
        "Facility Access Control Logs",
        "Visitor Sign-in Sheets",
        "Photos of physical security measures (e.g., locked doors, server cages)",
        "Media Disposal Records/Certificates of Destruction",
        "Workstation security policy",
    ),
    EvidenceCategory.TECHNICAL: (
        "System Audit Logs (e.g., access, modification)",
        "User Access Review Reports",
        "Proof of Encryption Implementation (e.g., screenshots of configuration)",
        "Password Policy Document",
        "Intrusion Detection System Reports",
    ),
    EvidenceCategory.PRIVACY: (
        "Public-facing Privacy Notice",
        "Record of Processing Activities (RoPA)",
        "Sample Data Subject Access Request response",
        "Consent capture mechanism screenshots and records",
        "Data Protection Impact Assessment (DPIA) reports",
    ),
    EvidenceCategory.GENERAL: (
        "Relevant policy documents",
        "Procedural runbooks or flowcharts",
        "System configuration screenshots",
        "Training completion reports",
        "Meeting minutes where topic was discussed and approved",
    ),
}


def derive_remediation_category(domain: str) -> RemediationCategory:
    """Map a textual domain name to its remediation template set.

    Args:
        domain: Domain name, e.g. 'Technical Safeguards'.

    Returns:
        The first matching RemediationCategory, or GENERAL.
    """
    for keywords, category in _REMEDIATION_KEYWORDS:
        if any(keyword in domain for keyword in keywords):
            return category
    return RemediationCategory.GENERAL


def derive_evidence_category(domain: str) -> EvidenceCategory:
    """Map a textual domain name to its evidence artifact list.

    Args:
        domain: Domain name, e.g. 'DPIA and Records'.

    Returns:
        The first matching EvidenceCategory, or GENERAL.
    """
    for keywords, category in _EVIDENCE_KEYWORDS:
        if any(keyword in domain for keyword in keywords):
            return category
    return EvidenceCategory.GENERAL


def observed_status(question: Question, score_percent: float) -> str:
    """Describe the observed state of a sub-maximal answer.

    Args:
        question: The question the finding is about.
        score_percent: Achieved percentage of the question's weight.

    Returns:
        A single templated sentence.
    """
    if question.answer_kind is AnswerKind.YES_NO:
        return (
            f"The required control or policy ('{question.text}') "
            "is not in place or not fully implemented."
        )
    if question.answer_kind is AnswerKind.SCALE_0_2:
        if score_percent < 50:
            return f"The process for '{question.text}' is ad-hoc or not formally established."
        return (
            f"The process for '{question.text}' is established but may lack "
            "formal documentation or consistent execution."
        )
    if question.answer_kind is AnswerKind.MULTIPLE:
        return (
            f"The current implementation for '{question.text}' "
            "does not meet the requirements for full compliance."
        )
    return "A compliance gap was identified."


def remediation_steps(question: Question) -> tuple[str, ...]:
    """Return the ordered remediation actions for a question.

    Args:
        question: The question the finding is about.

    Returns:
        Three or four remediation steps.
    """
    category = question.remediation_category
    if category is RemediationCategory.SAFEGUARDS:
        return (
            f"Develop and approve a formal policy addressing '{question.citation}'.",
            "Implement technical or procedural controls to enforce the new policy.",
            "Provide training to all affected workforce members on the new policy and procedures.",
            "Schedule a periodic review (e.g., annually) to ensure the control remains effective.",
        )
    if category is RemediationCategory.BREACH:
        return (
            "Draft a formal Breach Notification Policy and Incident Response Plan.",
            "Define roles and responsibilities for the incident response team.",
            "Conduct a tabletop exercise to simulate a data breach and test the plan.",
            "Prepare templates for internal and external breach communications.",
        )
    if category is RemediationCategory.RIGHTS:
        return (
            "Create a public-facing intake form for data subject requests.",
            "Develop an internal runbook for locating, retrieving, and packaging personal data.",
            "Train customer support and operations teams on the DSAR response procedure and deadlines.",
            "Implement a tracking system to monitor the status of all incoming requests.",
        )
    return (
        f"Consult the requirement under '{question.citation}' to understand the specific obligations.",
        "Perform a detailed gap analysis against the requirement.",
        "Develop a corrective action plan with timelines and responsible parties.",
    )


def evidence_to_provide(question: Question) -> tuple[str, ...]:
    """Return the suggested audit artifacts for a question."""
    return _EVIDENCE[question.evidence_category]
