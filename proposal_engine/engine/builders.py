"""Per-category content builders for the generic proposal path."""

from functools import partial
from typing import Callable, Dict, List

from proposal_engine.engine.currency import format_amount
from proposal_engine.models.content import ProcessStep, ServiceContent, ServiceSection
from proposal_engine.models.enums import ServiceCategory
from proposal_engine.models.fields import FieldRecord

ContentBuilder = Callable[[FieldRecord], ServiceContent]


# ===========================================
# Real Estate
# ===========================================

def build_real_estate(fields: FieldRecord) -> ServiceContent:
    desc = fields.property_description or "the property"
    return ServiceContent(
        scope_paragraph=(
            f"Provision of full legal assistance for the purchase of {desc} in Albania — ensuring full "
            "legal compliance of the transaction, protection of the Client's interests as buyer, and "
            "proper transfer and registration of ownership."
        ),
        sections=[
            ServiceSection(
                heading="Legal Due Diligence (Real Estate)",
                bullets=[
                    "Verification of ownership title with the Albanian State Cadastre (ASHK)",
                    "Confirmation that the property is properly registered",
                    "Verification of encumbrances (mortgages, liens, seizures, restrictions)",
                    "Review of ownership history and seller's legal authority",
                    "Consistency check between legal documentation and factual status",
                ],
            ),
            ServiceSection(
                heading="Contractual Documentation (Real Estate)",
                bullets=[
                    "Review and/or drafting of the final Sale & Purchase Agreement",
                    "Inclusion of buyer-protective clauses",
                    "Coordination with the seller, real estate agent, and notary",
                ],
            ),
            ServiceSection(
                heading="Notarial Transaction Assistance (Real Estate)",
                bullets=[
                    "Legal assistance during notarial execution of the transaction",
                    "Verification of seller identity and disposal rights",
                    "Review of the notarial deed prior to execution",
                ],
            ),
            ServiceSection(
                heading="Post-Transaction Registration (Real Estate)",
                bullets=[
                    "Follow-up and registration of ownership with ASHK",
                    "Submission of required documentation",
                    "Monitoring until issuance of the new ownership certificate in the Client's name",
                ],
            ),
        ],
        required_docs=[
            "Valid identification document (ID / Passport)",
            "Available property-related documentation (if any)",
            "Payment method details",
            "Power of Attorney (if required for real estate)",
        ],
        timeline=[
            "Real Estate — Legal due diligence & document verification: approx. 3–5 business days",
            "Real Estate — Contract review / finalization: approx. 3–7 business days",
            "Real Estate — Notarial execution: subject to parties' availability",
            "Real Estate — Registration with ASHK: approx. 15–30 business days",
        ],
        next_steps=[
            "Collection and review of property-related documents",
            "Legal due diligence on the property",
            "Review and finalization of the Sale & Purchase Agreement",
            "Assistance during notarial signing and payment coordination",
            "Follow-up and monitoring of ownership registration with ASHK",
        ],
        fee_description=(
            "For real estate transactions, DAFKU Law Firm applies either a fixed legal service fee or a "
            "percentage-based fee typically ranging from 1% to 3% of the transaction value, depending on "
            "the complexity of the transaction, the nature of the property, and the level of legal "
            "assistance required. For this specific engagement, the fee is set out in Section 4.2 below."
        ),
    )


# ===========================================
# Visa C / Visa D
# ===========================================

VISA_LABELS = {
    ServiceCategory.VISA_C: "Visa C (Short-Stay)",
    ServiceCategory.VISA_D: "Visa D (Long-Stay)",
}


def build_visa(category: ServiceCategory, fields: FieldRecord) -> ServiceContent:
    label = VISA_LABELS[category]
    applicants = fields.number_of_applicants or 0
    purpose_part = f" for the purpose of {fields.purpose_of_stay}" if fields.purpose_of_stay else ""
    applicants_part = f" for {applicants} applicant(s)" if applicants > 1 else ""
    nationality_part = f" — Nationality: {fields.nationality}" if fields.nationality else ""

    required_docs = [
        f"Valid passport (minimum 6 months validity){nationality_part}",
        "Proof of purpose of stay (employment contract, invitation letter, etc.)",
        "Proof of financial means (bank statements)",
        "Proof of accommodation in Albania",
        "Passport-size photographs",
    ]
    if applicants > 1:
        required_docs.append(f"Documentation for all {applicants} applicants")
    if fields.previous_refusal:
        required_docs.append(f"Explanation letter regarding previous refusal: {fields.previous_refusal}")

    return ServiceContent(
        scope_paragraph=(
            f"Provision of full legal assistance for obtaining a {label}{applicants_part}{purpose_part} "
            "in Albania — ensuring full compliance with Albanian immigration requirements and timely "
            "submission to the competent authorities."
        ),
        sections=[
            ServiceSection(
                heading=f"Eligibility Assessment ({label})",
                bullets=[
                    "Review of the Client's personal and professional situation",
                    f"Confirmation that a {label} is the correct type for: {fields.purpose_of_stay}"
                    if fields.purpose_of_stay
                    else "Confirmation of visa category and sub-category applicable",
                    "Assessment of supporting documentation requirements",
                ],
            ),
            ServiceSection(
                heading=f"Document Preparation & Submission ({label})",
                bullets=[
                    "Review and verification of all required supporting documents",
                    "Assistance with translation and notarisation of foreign-language documents",
                    "Preparation of the visa application form and cover letter",
                    "Submission of the complete application package to the competent Albanian authority",
                    "Ongoing follow-up with the immigration authority",
                ],
            ),
        ],
        required_docs=required_docs,
        timeline=[
            f"{label} — Document review and preparation: approx. 3–5 business days",
            f"{label} — Application submission: approx. 1–2 business days after document completion",
            f"{label} — Authority processing time: approx. 15–30 business days",
        ],
        next_steps=[
            f"Collection and review of required documents for {label}",
            f"Submission of the {label} application to the competent Albanian authority",
            "Follow-up with the immigration authority on application status",
        ],
        fee_description=(
            f"For {label} applications, DAFKU Law Firm applies a fixed legal service fee per "
            "application/applicant, depending on the visa category, number of applicants, and complexity "
            "of the case. For this specific engagement, the fee is set out in Section 4.2 below."
        ),
    )


# ===========================================
# Residency Permit
# ===========================================

def build_residency(fields: FieldRecord) -> ServiceContent:
    applicants = fields.number_of_applicants or 0
    family = fields.number_of_family_members or 0
    purpose_part = f" for the purpose of {fields.purpose_of_stay}" if fields.purpose_of_stay else ""
    employment_part = (
        f" The client's current status is: {fields.employment_type}." if fields.employment_type else ""
    )
    applicants_note = ""
    if applicants:
        family_part = f", of whom {family} are family member(s)/dependant(s)" if family > 0 else ""
        applicants_note = f" This application covers {applicants} applicant(s){family_part}."

    assessment = (
        f"Assessment of the Client's status as: {fields.employment_type} — and the appropriate permit category"
        if fields.employment_type
        else "Determination of the most suitable residence permit category"
    )
    nationality_part = f" — Nationality: {fields.nationality}" if fields.nationality else ""
    country_part = f" ({fields.country})" if fields.country else ""

    required_docs = [
        f"Valid passport (minimum 12 months validity){nationality_part}",
        "Lease agreement or property ownership deed",
        f"Proof of {fields.employment_type} status (employment contract, self-employment registration, etc.)"
        if fields.employment_type
        else "Proof of financial means or employment / self-employment",
        "Health insurance valid for Albania",
        f"Certificate of no criminal record from country of origin{country_part} (apostilled / legalised)",
        "Passport-size photographs",
    ]
    if family > 0:
        required_docs.append(f"Documents for {family} family member(s)/dependant(s)")
    if fields.previous_refusal:
        required_docs.append(f"Explanation letter regarding previous refusal: {fields.previous_refusal}")
    required_docs.append("Power of Attorney (if the Client appoints a representative for residency)")

    processing = "Residency — Authority processing time: approx. 30–60 business days"
    if applicants > 1:
        processing += f" — {applicants} applicant(s)"

    return ServiceContent(
        scope_paragraph=(
            f"Provision of full legal assistance for obtaining a Residence Permit in Albania{purpose_part}."
            f"{employment_part}{applicants_note} Ensuring full compliance with Albanian immigration law and "
            "successful registration of residence status."
        ),
        sections=[
            ServiceSection(
                heading="Eligibility & Category Assessment (Residency)",
                bullets=[
                    "Review of the Client's personal, professional, and financial situation",
                    assessment,
                    "Legal advice on residency rights and obligations under Albanian law",
                ],
            ),
            ServiceSection(
                heading="Document Preparation & Submission (Residency)",
                bullets=[
                    "Review and verification of all required supporting documents",
                    "Assistance with translation and notarisation of foreign-language documents",
                    "Preparation of the residence permit application and supporting documentation",
                    "Submission to the National Registration Centre (QKR) or competent body",
                    "Ongoing monitoring and communication with authorities",
                ],
            ),
        ],
        required_docs=required_docs,
        timeline=[
            "Residency — Document review and preparation: approx. 5–10 business days",
            "Residency — Application submission: approx. 1–2 business days after document completion",
            processing,
        ],
        next_steps=[
            "Collection and review of required documents for the Residence Permit",
            "Submission of the residence permit application",
            "Ongoing monitoring and follow-up with authorities",
            "Notification to the Client upon approval and permit collection",
        ],
        fee_description=(
            "For residence permit applications, DAFKU Law Firm applies a fixed legal service fee per "
            "applicant, depending on the permit category, duration, and complexity of the application. "
            "For this specific engagement, the fee is set out in Section 4.2 below."
        ),
    )


# ===========================================
# Residency Permit - Pensioner
# ===========================================

def build_pensioner(fields: FieldRecord) -> ServiceContent:
    has_dependent = fields.has_dependent
    reunification = (
        ", including Family Reunification for a dependent family member" if has_dependent else ""
    )

    process_steps = [
        ProcessStep(
            step="STEP 1: Residency Permit for the Main Applicant – Pensioner",
            bullets=[
                "Documents collection and preparation (see below)",
                "Government Fees payment by us",
                "Residency Permit Application Submission at the Local Directorate for Border and Migration in Durrës",
                "Receiving Provisional Residency Permit",
                "Final Decision on Residency Permit",
                "Address Registration at Civil Registry Office",
                "Application for biometric Residency Permit Card",
                "Obtaining the biometric residence card",
            ],
        ),
    ]
    required_docs = [
        "— For the Main Applicant (Pensioner) —",
        "Photocopy of valid travel document (valid at least 3 months beyond permit period, with at least 2 blank pages)",
        "Individual declarations for reason of staying in Albania — We prepare in Albanian & English, you sign",
        "Proof of insurance in Albania — We arrange at our associate insurance company",
        "Evidence from a bank in Albania for transfer of pension income — We support with bank account opening",
        "Legalized criminal record from country of origin (issued within last 6 months, translated & notarized) — We handle",
        "Evidence of annual pension income exceeding 1,200,000 ALL — We handle legal translation and notary",
        "Proof of Residency Permit Government Fee Payment — We pay at the bank and provide the mandate",
        "Passport-size photograph (47mm × 36mm, taken within last 6 months, white background, neutral expression)",
        "Proof of accommodation in Albania (residential rental contract in accordance with Albanian standards)",
    ]
    if has_dependent:
        process_steps.append(
            ProcessStep(
                step="STEP 2: Residency Permit for Dependent – Family Reunification",
                bullets=[
                    "Same procedure as Step 1",
                    "Submission after main applicant's Residency Permit is granted",
                ],
            )
        )
        required_docs.extend([
            "— For the Dependent (Family Reunification) —",
            "Photocopy of dependent's valid travel document",
            "Marriage certificate (apostilled/legalized, translated and notarized if not issued in Albania) — We handle",
            "Proof of insurance in Albania for dependent — We arrange",
            "Copy of main applicant's residence permit in Albania",
            "Proof of Government Fee Payment for dependent — We pay and provide the mandate",
            "Passport-size photograph of dependent (47mm × 36mm)",
            "Proof of accommodation in Albania",
            "Evidence of sufficient financial resources during the stay in Albania",
        ])

    return ServiceContent(
        scope_paragraph=(
            f"Provision of full legal assistance for obtaining a Residence Permit in Albania as a Pensioner"
            f"{reunification}. This covers the complete procedure from document collection through to the "
            "final biometric residence permit card."
        ),
        sections=[
            ServiceSection(
                heading="Services – Residency Permit Procedure",
                bullets=[
                    "Full legal guidance during the entire application process",
                    "Pre-check and verification of all documents",
                    "Assistance with translations, notarization, and legalization if required",
                    "Preparing all declarations required by the authorities",
                    "Completing the residence permit applications",
                    "Scheduling appointments with institutions",
                    "Submission of applications at Migration Office",
                    "Follow-up with authorities until final approval",
                    "Assistance with Civil Registry address registration",
                    "Accompanying the applicant for biometric fingerprints",
                    "Guidance until the applicant receives the final residence permit card",
                    "Payment of government or third-party fees",
                    "Documents translation, apostille/legalization, or notary",
                ],
            ),
        ],
        process_steps=process_steps,
        required_docs=required_docs,
        timeline=[
            "Preparation and application submission: 3–5 business days",
            "Provisional Residency Permit: approx. 10–15 business days",
            "Final Decision on Residency Permit: approx. 30–45 business days",
            "Residency Permit Card issuance: approx. 2 calendar weeks",
        ],
        next_steps=[
            "Documents collection and preparation",
            "Residency Permit application submission at the Migration Office",
            "Follow-up with authorities until final decision",
            "Biometric fingerprints appointment and Residency Permit Card collection",
        ],
        fee_description=(
            "For Residency Permit applications as Pensioner, DAFKU Law Firm applies a fixed legal service "
            "fee per applicant, covering all procedural steps from document preparation through to the "
            "final permit card. For the specific fees applied to this engagement, see Section 4.2 below."
        ),
    )


# ===========================================
# Company Formation
# ===========================================

def build_company(fields: FieldRecord) -> ServiceContent:
    shareholders = fields.number_of_shareholders
    capital = fields.share_capital
    company_type_part = f" — {fields.company_type}" if fields.company_type else ""
    activity_part = f" engaged in {fields.business_activity}" if fields.business_activity else ""
    shareholders_part = f" with {shareholders} shareholder(s)" if shareholders else ""
    capital_part = f" Proposed registered capital: {format_amount(capital, 0)} ALL." if capital else ""

    advisory: List[str] = [
        f"Legal advisory on the chosen entity type: {fields.company_type} — confirmation of suitability"
        if fields.company_type
        else "Legal advice on the most suitable company type (SH.P.K., SH.A., branch, etc.)",
        f"Advice on the shareholder structure ({shareholders} shareholder(s)), registered capital, and governance"
        if shareholders
        else "Advice on shareholder structure, registered capital, and governance",
        "Company name availability check with the National Registration Centre (QKR)",
    ]
    activity_suffix = f" — business activity: {fields.business_activity}" if fields.business_activity else ""
    capital_doc = f": {format_amount(capital, 0)} ALL" if capital else ""
    activity_doc = f": {fields.business_activity}" if fields.business_activity else ""
    shareholders_doc = f" ({shareholders} shareholders)" if shareholders else ""
    type_fee = f" ({fields.company_type})" if fields.company_type else ""

    return ServiceContent(
        scope_paragraph=(
            f"Provision of full legal assistance for the formation and registration of a company in Albania"
            f"{company_type_part}{activity_part}{shareholders_part}.{capital_part} Ensuring full legal "
            "compliance with Albanian commercial law and successful registration with QKR."
        ),
        sections=[
            ServiceSection(heading="Legal & Structural Advisory (Company Formation)", bullets=advisory),
            ServiceSection(
                heading="Document Preparation & Registration (Company Formation)",
                bullets=[
                    f"Drafting of the Articles of Association{activity_suffix}",
                    "Preparation of all registration documents required by QKR",
                    "Submission to QKR and coordination with the tax authority for NIPT",
                    "Post-registration guidance (bank account opening, initial compliance)",
                ],
            ),
        ],
        required_docs=[
            f"Valid ID / Passport for all shareholders and directors{shareholders_doc}",
            "Proposed company name (at least two options)",
            "Shareholder structure and ownership percentages",
            f"Registered capital{capital_doc} and business activity{activity_doc}",
            "Registered office address in Albania",
            "Power of Attorney (if the Client appoints a representative for company registration)",
        ],
        timeline=[
            "Company Formation — Advisory and document preparation: approx. 3–5 business days",
            "Company Formation — Notarisation and submission to QKR: approx. 1–2 business days",
            "Company Formation — QKR registration processing: approx. 1–3 business days",
            "Company Formation — Tax registration (NIPT): approx. 2–5 business days",
        ],
        next_steps=[
            "Collection of required documents and information for company formation",
            "Drafting of Articles of Association and preparation of registration documents",
            "Notarisation and submission to QKR",
            "Tax registration and issuance of NIPT",
            "Post-registration guidance and account opening support",
        ],
        fee_description=(
            f"For company registration and formation services, DAFKU Law Firm applies a fixed legal service "
            f"fee depending on the entity type{type_fee}, number of shareholders, and scope of "
            "post-registration assistance required. For this specific engagement, the fee is set out in "
            "Section 4.2 below."
        ),
    )


# ===========================================
# Tax Consulting / Compliance
# ===========================================

ADVISORY_LABELS = {
    ServiceCategory.TAX_CONSULTING: "Tax Consulting",
    ServiceCategory.COMPLIANCE: "Compliance Advisory",
}


def build_advisory(category: ServiceCategory, fields: FieldRecord) -> ServiceContent:
    label = ADVISORY_LABELS[category]
    situation_part = (
        f" The client requires assistance with: {fields.situation_description}."
        if fields.situation_description
        else ""
    )
    entity_part = f" Acting as: {fields.employment_type}." if fields.employment_type else ""
    return ServiceContent(
        scope_paragraph=(
            f"Provision of professional legal and {label.lower()} services.{situation_part}{entity_part} "
            "Ensuring full compliance with applicable Albanian law and expert guidance throughout the engagement."
        ),
        sections=[
            ServiceSection(
                heading=f"Initial Assessment ({label})",
                bullets=[
                    "Review of the Client's situation, documentation, and objectives",
                    "Identification of applicable legal and regulatory requirements",
                    "Legal advice on available courses of action",
                ],
            ),
            ServiceSection(
                heading=f"Advisory & Documentation ({label})",
                bullets=[
                    "Provision of legal opinions and written advisory notes",
                    "Preparation and review of relevant documentation",
                    "Representation before competent authorities where required",
                    "Provision of a completion report upon conclusion",
                ],
            ),
        ],
        required_docs=[
            "Valid identification document (ID / Passport)",
            "Relevant documentation specific to the matter (to be confirmed upon engagement)",
            "Power of Attorney (if the Client appoints a representative)",
        ],
        timeline=[
            f"{label} — Initial review and assessment: approx. 3–7 business days",
            f"{label} — Advisory and documentation phase: approx. 5–15 business days",
            f"{label} — Authority interaction: subject to authority processing times",
        ],
        next_steps=[
            f"Collection of required documents for {label}",
            "Commencement of legal review and advisory work",
            "Ongoing communication and monitoring",
        ],
        fee_description=(
            f"For {label.lower()} services, DAFKU Law Firm applies a fixed fee or an hourly/engagement-based "
            "fee depending on the scope, complexity, and duration of the work required. For this specific "
            "engagement, the fee is set out in Section 4.2 below."
        ),
    )


# ===========================================
# Builder Registry
# ===========================================

CONTENT_BUILDERS: Dict[ServiceCategory, ContentBuilder] = {
    ServiceCategory.REAL_ESTATE: build_real_estate,
    ServiceCategory.VISA_C: partial(build_visa, ServiceCategory.VISA_C),
    ServiceCategory.VISA_D: partial(build_visa, ServiceCategory.VISA_D),
    ServiceCategory.RESIDENCY_PERMIT: build_residency,
    ServiceCategory.RESIDENCY_PENSIONER: build_pensioner,
    ServiceCategory.COMPANY_FORMATION: build_company,
    ServiceCategory.TAX_CONSULTING: partial(build_advisory, ServiceCategory.TAX_CONSULTING),
    ServiceCategory.COMPLIANCE: partial(build_advisory, ServiceCategory.COMPLIANCE),
}
