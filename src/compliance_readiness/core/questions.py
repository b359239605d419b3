"""HIPAA and GDPR compliance readiness question bank.

Contains 38 questions across the two standards. Each question has an ID,
standard, domain, text, guidance, answer kind, weight (0.5 low impact to
3.0 critical) and a regulatory citation.

Domains:
    HIPAA  - Administrative, Physical and Technical Safeguards, Breach Notification
    GDPR   - Lawful Basis and Transparency, Data Subject Rights, DPIA and Records,
             Security of Processing, Processors and DPAs, Breach Notification,
             International Transfers

'Breach Notification' is shared by both standards. Per-domain rollups key on
the domain name, so both standards' breach questions land in one bucket.

The catalog is a tuple of frozen models and is handed out as-is; callers
cannot mutate it. Scoring and reporting take the catalog as a parameter, so
alternative catalogs can be built with ``build_question`` and checked with
``validate_catalog``.
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from compliance_readiness.core.guidance import (
    derive_evidence_category,
    derive_remediation_category,
)
from compliance_readiness.core.models import (
    AnswerKind,
    Choice,
    Metadata,
    Question,
    Standard,
)
from compliance_readiness.errors import CatalogValidationError


def build_question(**fields: Any) -> Question:
    """Construct a Question, deriving its guidance categories from the domain.

    Explicit ``remediation_category`` / ``evidence_category`` values win over
    the derived ones.

    Args:
        **fields: Question fields as accepted by the Question model.

    Returns:
        A validated, immutable Question.

    Raises:
        pydantic.ValidationError: If the record breaks a Question invariant.
    """
    domain = str(fields.get("domain", ""))
    fields.setdefault("remediation_category", derive_remediation_category(domain))
    fields.setdefault("evidence_category", derive_evidence_category(domain))
    return Question(**fields)


def validate_catalog(catalog: Iterable[Question]) -> None:
    """Check catalog-level invariants that a single Question cannot enforce.

    Args:
        catalog: Questions to check.

    Raises:
        CatalogValidationError: If any question id appears more than once.
    """
    counts = Counter(question.question_id for question in catalog)
    duplicates = sorted(question_id for question_id, count in counts.items() if count > 1)
    if duplicates:
        raise CatalogValidationError(
            f"duplicate question ids in catalog: {duplicates}",
            question_ids=duplicates,
        )


METADATA = Metadata(
    app_name="Compliance Readiness Checker",
    version="1.0.0",
    standards=(Standard.HIPAA, Standard.GDPR),
    domains={
        Standard.HIPAA: (
            "Administrative Safeguards",
            "Physical Safeguards",
            "Technical Safeguards",
            "Breach Notification",
        ),
        Standard.GDPR: (
            "Lawful Basis and Transparency",
            "Data Subject Rights",
            "DPIA and Records",
            "Security of Processing",
            "Processors and DPAs",
            "Breach Notification",
            "International Transfers",
        ),
    },
    disclaimer=(
        "This tool provides general readiness guidance and is not legal advice. "
        "Consult with qualified legal counsel for compliance advice."
    ),
)


QUESTION_BANK: tuple[Question, ...] = (
    # -----------------------------------------------------------------------
    # HIPAA: Administrative Safeguards
    # -----------------------------------------------------------------------
    build_question(
        question_id="hipaa-admin-01",
        standard=Standard.HIPAA,
        domain="Administrative Safeguards",
        text=(
            "Have you designated a Security Official responsible for developing "
            "and implementing security policies?"
        ),
        guidance="A specific individual must be assigned to oversee the organization's security program.",
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="45 CFR 164.308(a)(2)",
    ),
    build_question(
        question_id="hipaa-admin-02",
        standard=Standard.HIPAA,
        domain="Administrative Safeguards",
        text="How frequently is workforce security awareness and training conducted?",
        guidance="Regular training is required for all workforce members who handle ePHI.",
        answer_kind=AnswerKind.SCALE_0_2,
        choices=(
            Choice(value=0, label="Never or Ad-hoc"),
            Choice(value=1, label="Periodically"),
            Choice(value=2, label="At least Annually & Onboarding"),
        ),
        weight=2.5,
        citation="45 CFR 164.308(a)(5)",
    ),
    build_question(
        question_id="hipaa-admin-03",
        standard=Standard.HIPAA,
        domain="Administrative Safeguards",
        text="Do you have a formal, documented risk analysis and risk management process?",
        guidance=(
            "You must conduct an accurate and thorough assessment of potential "
            "risks and vulnerabilities to ePHI."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="45 CFR 164.308(a)(1)(ii)(A)",
    ),
    build_question(
        question_id="hipaa-admin-04",
        standard=Standard.HIPAA,
        domain="Administrative Safeguards",
        text=(
            "Do you have a documented sanctions policy for workforce members "
            "who fail to comply with security policies?"
        ),
        guidance="There must be consequences for policy violations.",
        answer_kind=AnswerKind.YES_NO,
        weight=1.5,
        citation="45 CFR 164.308(a)(1)(ii)(C)",
    ),
    # -----------------------------------------------------------------------
    # HIPAA: Physical Safeguards
    # -----------------------------------------------------------------------
    build_question(
        question_id="hipaa-phys-01",
        standard=Standard.HIPAA,
        domain="Physical Safeguards",
        text="Are your facilities that house ePHI systems physically secured against unauthorized entry?",
        guidance="This includes door locks, alarms, and visitor sign-in procedures for sensitive areas.",
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="45 CFR 164.310(a)(1)",
    ),
    build_question(
        question_id="hipaa-phys-02",
        standard=Standard.HIPAA,
        domain="Physical Safeguards",
        text=(
            "Do you have policies for controlling and validating a person's access "
            "to facilities based on their role?"
        ),
        guidance="Access should be granted on a need-to-know basis.",
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="45 CFR 164.310(a)(2)(i)",
    ),
    build_question(
        question_id="hipaa-phys-03",
        standard=Standard.HIPAA,
        domain="Physical Safeguards",
        text="Are policies in place for the secure disposal and re-use of electronic media containing ePHI?",
        guidance="Media must be rendered unreadable or indecipherable before being discarded or reused.",
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="45 CFR 164.310(d)(1)",
    ),
    # -----------------------------------------------------------------------
    # HIPAA: Technical Safeguards
    # -----------------------------------------------------------------------
    build_question(
        question_id="hipaa-tech-01",
        standard=Standard.HIPAA,
        domain="Technical Safeguards",
        text="Is access to systems containing ePHI controlled via unique user identification?",
        guidance="Shared or generic user accounts are not permitted for accessing ePHI.",
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="45 CFR 164.312(a)(2)(i)",
    ),
    build_question(
        question_id="hipaa-tech-02",
        standard=Standard.HIPAA,
        domain="Technical Safeguards",
        text="Do you have mechanisms to encrypt and decrypt ePHI when it is appropriate?",
        guidance=(
            "Encryption is an addressable safeguard that must be implemented "
            "if reasonable and appropriate."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="45 CFR 164.312(a)(2)(iv)",
    ),
    build_question(
        question_id="hipaa-tech-03",
        standard=Standard.HIPAA,
        domain="Technical Safeguards",
        text=(
            "Are audit controls (logs) implemented to record and examine activity "
            "in information systems with ePHI?"
        ),
        guidance="System activity logs are crucial for detecting and responding to security incidents.",
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="45 CFR 164.312(b)",
    ),
    build_question(
        question_id="hipaa-tech-04",
        standard=Standard.HIPAA,
        domain="Technical Safeguards",
        text="Is ePHI protected from improper alteration or destruction?",
        guidance=(
            "Implement measures to ensure the integrity of ePHI, such as "
            "checksums or digital signatures."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="45 CFR 164.312(c)(1)",
    ),
    # -----------------------------------------------------------------------
    # HIPAA: Breach Notification
    # -----------------------------------------------------------------------
    build_question(
        question_id="hipaa-breach-01",
        standard=Standard.HIPAA,
        domain="Breach Notification",
        text="Do you have a documented breach notification policy and procedure?",
        guidance=(
            "This policy must outline steps to identify, assess, and report "
            "breaches to affected individuals and HHS."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="45 CFR 164.404",
    ),
    build_question(
        question_id="hipaa-breach-02",
        standard=Standard.HIPAA,
        domain="Breach Notification",
        text=(
            "Does your breach assessment process include the four-factor analysis "
            "for determining risk of compromise?"
        ),
        guidance=(
            "The assessment must consider the nature of the PHI, the unauthorized "
            "person, if PHI was viewed, and mitigation extent."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="45 CFR 164.402",
    ),
    # -----------------------------------------------------------------------
    # GDPR: Lawful Basis and Transparency
    # -----------------------------------------------------------------------
    build_question(
        question_id="gdpr-lawful-01",
        standard=Standard.GDPR,
        domain="Lawful Basis and Transparency",
        text=(
            "For each data processing activity, have you identified and documented "
            "a valid lawful basis under Article 6?"
        ),
        guidance=(
            "The six lawful bases are consent, contract, legal obligation, vital "
            "interests, public task, and legitimate interests."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="Art. 6 Lawful basis",
    ),
    build_question(
        question_id="gdpr-lawful-02",
        standard=Standard.GDPR,
        domain="Lawful Basis and Transparency",
        text=(
            "Is your privacy notice easily accessible, and does it clearly explain "
            "processing activities to data subjects?"
        ),
        guidance=(
            "The notice must be concise, transparent, intelligible, and provided "
            "in clear and plain language."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="Art. 13 & 14 Information to be provided",
    ),
    build_question(
        question_id="gdpr-lawful-03",
        standard=Standard.GDPR,
        domain="Lawful Basis and Transparency",
        text=(
            "When relying on consent, is it freely given, specific, informed, and "
            "unambiguous, with a clear affirmative action?"
        ),
        guidance=(
            "Pre-ticked boxes are not valid consent. It must be as easy to "
            "withdraw consent as to give it."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="Art. 7 Conditions for consent",
    ),
    # -----------------------------------------------------------------------
    # GDPR: Data Subject Rights
    # -----------------------------------------------------------------------
    build_question(
        question_id="gdpr-rights-01",
        standard=Standard.GDPR,
        domain="Data Subject Rights",
        text="Do you have a clear process to respond to Data Subject Access Requests (DSARs) within one month?",
        guidance=(
            'This includes requests for access, rectification, erasure ("right to '
            'be forgotten"), and data portability.'
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="Art. 15 Right of access",
    ),
    build_question(
        question_id="gdpr-rights-02",
        standard=Standard.GDPR,
        domain="Data Subject Rights",
        text="Can you effectively locate, modify, and erase an individual's personal data across all your systems?",
        guidance=(
            "This is a technical and procedural challenge. You must be able to "
            "honor the right to rectification and erasure."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="Art. 16 & 17 Rectification and erasure",
    ),
    # -----------------------------------------------------------------------
    # GDPR: DPIA and Records
    # -----------------------------------------------------------------------
    build_question(
        question_id="gdpr-dpia-01",
        standard=Standard.GDPR,
        domain="DPIA and Records",
        text="Do you maintain a detailed Record of Processing Activities (RoPA) as required under Article 30?",
        guidance=(
            "This internal record must detail what data you process, why, for "
            "how long, and who it is shared with."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="Art. 30 Records of processing activities",
    ),
    build_question(
        question_id="gdpr-dpia-02",
        standard=Standard.GDPR,
        domain="DPIA and Records",
        text=(
            "Do you have a process to conduct Data Protection Impact Assessments "
            "(DPIAs) for high-risk processing activities?"
        ),
        guidance=(
            "A DPIA is required before starting new projects or using new "
            "technologies that are likely to result in a high risk to individuals."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="Art. 35 DPIA",
    ),
    # -----------------------------------------------------------------------
    # GDPR: Security of Processing
    # -----------------------------------------------------------------------
    build_question(
        question_id="gdpr-security-01",
        standard=Standard.GDPR,
        domain="Security of Processing",
        text=(
            "Have you implemented technical and organizational measures to ensure "
            "a level of security appropriate to the risk?"
        ),
        guidance=(
            "This includes pseudonymization, encryption, regular testing, and "
            "ensuring confidentiality, integrity, availability, and resilience."
        ),
        answer_kind=AnswerKind.MULTIPLE,
        choices=(
            Choice(value="none", label="No measures defined", score=0.0),
            Choice(value="some", label="Some measures implemented", score=0.5),
            Choice(value="full", label="Comprehensive, risk-based measures in place", score=1.0),
        ),
        weight=3.0,
        citation="Art. 32 Security of processing",
    ),
    build_question(
        question_id="gdpr-security-02",
        standard=Standard.GDPR,
        domain="Security of Processing",
        text=(
            "Do you have a process for regularly testing, assessing, and evaluating "
            "the effectiveness of your security measures?"
        ),
        guidance="Security is not a one-time project; it requires ongoing validation.",
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="Art. 32(1)(d)",
    ),
    # -----------------------------------------------------------------------
    # GDPR: Processors and DPAs
    # -----------------------------------------------------------------------
    build_question(
        question_id="gdpr-processors-01",
        standard=Standard.GDPR,
        domain="Processors and DPAs",
        text=(
            "Do you have legally binding Data Processing Agreements (DPAs) in place "
            "with all third-party processors?"
        ),
        guidance="A DPA is mandatory when a third party processes personal data on your behalf.",
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="Art. 28 Processor",
    ),
    build_question(
        question_id="gdpr-processors-02",
        standard=Standard.GDPR,
        domain="Processors and DPAs",
        text=(
            "Do your DPAs explicitly state the processor's obligations, including "
            "security and breach notification requirements?"
        ),
        guidance="The DPA must contain specific clauses outlined in Article 28(3).",
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="Art. 28(3)",
    ),
    # -----------------------------------------------------------------------
    # GDPR: Breach Notification
    # -----------------------------------------------------------------------
    build_question(
        question_id="gdpr-breach-01",
        standard=Standard.GDPR,
        domain="Breach Notification",
        text=(
            "Do you have a documented process to detect, investigate, and report "
            "personal data breaches to the supervisory authority?"
        ),
        guidance=(
            "Breaches posing a risk must be reported without undue delay, and "
            "where feasible, within 72 hours."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="Art. 33 Notification of a breach",
    ),
    build_question(
        question_id="gdpr-breach-02",
        standard=Standard.GDPR,
        domain="Breach Notification",
        text=(
            "Do you have a process for communicating breaches to affected data "
            "subjects if it poses a high risk to their rights?"
        ),
        guidance="This communication must happen without undue delay.",
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="Art. 34 Communication of a breach",
    ),
    # -----------------------------------------------------------------------
    # GDPR: International Transfers
    # -----------------------------------------------------------------------
    build_question(
        question_id="gdpr-transfer-01",
        standard=Standard.GDPR,
        domain="International Transfers",
        text=(
            "For any personal data transfers outside the EU/EEA, have you "
            "implemented a valid transfer mechanism?"
        ),
        guidance=(
            "Mechanisms include adequacy decisions, Standard Contractual Clauses "
            "(SCCs), or Binding Corporate Rules (BCRs)."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="Art. 44 General principle for transfers",
    ),
    build_question(
        question_id="gdpr-transfer-02",
        standard=Standard.GDPR,
        domain="International Transfers",
        text=(
            "If using SCCs, have you conducted a Transfer Impact Assessment (TIA) "
            "to ensure data is protected in the destination country?"
        ),
        guidance=(
            "A TIA is required to assess whether the SCCs can be complied with "
            "in practice in the third country."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="Art. 46 Transfers subject to safeguards",
    ),
    # -----------------------------------------------------------------------
    # Supplementary questions (both standards)
    # -----------------------------------------------------------------------
    build_question(
        question_id="hipaa-admin-05",
        standard=Standard.HIPAA,
        domain="Administrative Safeguards",
        text=(
            "Do you have a contingency plan, including data backup and disaster "
            "recovery, to ensure ePHI availability?"
        ),
        guidance="You must be able to restore access to ePHI in the event of an emergency.",
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="45 CFR 164.308(a)(7)",
    ),
    build_question(
        question_id="hipaa-admin-06",
        standard=Standard.HIPAA,
        domain="Administrative Safeguards",
        text=(
            "Are Business Associate Agreements (BAAs) in place with all vendors "
            "who create, receive, maintain, or transmit ePHI?"
        ),
        guidance="BAAs are required to ensure your vendors protect PHI to the same standards you do.",
        answer_kind=AnswerKind.YES_NO,
        weight=3.0,
        citation="45 CFR 164.308(b)(1)",
    ),
    build_question(
        question_id="hipaa-phys-04",
        standard=Standard.HIPAA,
        domain="Physical Safeguards",
        text=(
            "Are workstations that access ePHI positioned to prevent unauthorized "
            "viewing (e.g., away from high-traffic areas)?"
        ),
        guidance='This is a simple but effective safeguard against "shoulder surfing".',
        answer_kind=AnswerKind.YES_NO,
        weight=1.0,
        citation="45 CFR 164.310(b)",
    ),
    build_question(
        question_id="hipaa-tech-05",
        standard=Standard.HIPAA,
        domain="Technical Safeguards",
        text=(
            "Is there an automatic logoff mechanism that terminates electronic "
            "sessions after a predetermined period of inactivity?"
        ),
        guidance="This prevents unauthorized access from unattended workstations.",
        answer_kind=AnswerKind.YES_NO,
        weight=1.5,
        citation="45 CFR 164.312(a)(2)(iii)",
    ),
    build_question(
        question_id="hipaa-tech-06",
        standard=Standard.HIPAA,
        domain="Technical Safeguards",
        text=(
            "Do you have procedures to verify that a person or entity seeking "
            "access to ePHI is the one claimed?"
        ),
        guidance=(
            "This can be through passwords, two-factor authentication, or other "
            "identity verification methods."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.5,
        citation="45 CFR 164.312(d)",
    ),
    build_question(
        question_id="gdpr-lawful-04",
        standard=Standard.GDPR,
        domain="Lawful Basis and Transparency",
        text="Do you adhere to the principles of data minimization and purpose limitation?",
        guidance=(
            "Only collect and process personal data that is adequate, relevant, "
            "and limited to what is necessary for the specified purpose."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="Art. 5(1)(b) & (c)",
    ),
    build_question(
        question_id="gdpr-rights-03",
        standard=Standard.GDPR,
        domain="Data Subject Rights",
        text=(
            "Do you have a process to handle requests for restriction of processing "
            "and objections to processing?"
        ),
        guidance=(
            "Individuals have the right to block or suppress processing of their "
            "personal data in certain circumstances."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="Art. 18 & 21",
    ),
    build_question(
        question_id="gdpr-security-03",
        standard=Standard.GDPR,
        domain="Security of Processing",
        text="Have you appointed a Data Protection Officer (DPO), if required by Article 37?",
        guidance=(
            "A DPO is mandatory for public authorities, or organizations whose core "
            "activities involve large-scale, regular monitoring or processing of "
            "sensitive data."
        ),
        answer_kind=AnswerKind.MULTIPLE,
        choices=(
            Choice(value="not_req", label="Not Required for our organization", score=1.0),
            Choice(value="yes", label="Yes, DPO appointed", score=1.0),
            Choice(value="no", label="No, DPO not appointed but may be required", score=0.0),
        ),
        weight=2.5,
        citation="Art. 37 Designation of DPO",
    ),
    build_question(
        question_id="gdpr-processors-03",
        standard=Standard.GDPR,
        domain="Processors and DPAs",
        text=(
            "Do you conduct due diligence on your data processors to ensure they "
            "have adequate security measures?"
        ),
        guidance=(
            "You are responsible for the actions of your processors. You must "
            "verify their ability to protect the data you share."
        ),
        answer_kind=AnswerKind.YES_NO,
        weight=2.0,
        citation="Art. 28(1)",
    ),
    build_question(
        question_id="gdpr-transfer-03",
        standard=Standard.GDPR,
        domain="International Transfers",
        text=(
            "Are you aware of and do you document the specific data being "
            "transferred, the purpose, and the recipient country?"
        ),
        guidance="Maintaining a clear inventory of international data flows is essential for compliance.",
        answer_kind=AnswerKind.YES_NO,
        weight=1.5,
        citation="Art. 44-50 International Transfers",
    ),
)

validate_catalog(QUESTION_BANK)

# Read-only lookups
QUESTIONS_BY_ID: Mapping[str, Question] = MappingProxyType(
    {q.question_id: q for q in QUESTION_BANK}
)

_by_domain: dict[str, list[Question]] = {}
for _question in QUESTION_BANK:
    _by_domain.setdefault(_question.domain, []).append(_question)

QUESTIONS_BY_DOMAIN: Mapping[str, tuple[Question, ...]] = MappingProxyType(
    {domain: tuple(questions) for domain, questions in _by_domain.items()}
)

ALL_DOMAINS: tuple[str, ...] = tuple(QUESTIONS_BY_DOMAIN)


def get_catalog() -> Sequence[Question]:
    """Return the built-in question catalog.

    Returns:
        The shared, immutable tuple of questions in display order.
    """
    return QUESTION_BANK


def get_metadata() -> Metadata:
    """Return the static questionnaire metadata.

    Metadata.domains is a plain dict, so each caller gets its own deep copy
    and the module-level record stays untouched.
    """
    return METADATA.model_copy(deep=True)
