"""
Verbatim proposal text.

Each document variant has a TemplateText entry holding the fixed wording
of its sections. Template builders pick the groups they need and add the
computed parts (case overview, fee tables, interpolated sentences).
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from proposal_engine.core.exceptions import UnknownTemplateError
from proposal_engine.models.document import FooterEntry, Office
from proposal_engine.models.enums import ContactBrand, ProposalTemplate


class TextGroup(BaseModel):
    """A captioned list of fixed sentences."""
    caption: Optional[str] = None
    intro: Optional[str] = None
    items: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class TemplateText(BaseModel):
    """Fixed wording of one document variant."""
    template: ProposalTemplate
    contact_brand: ContactBrand = ContactBrand.RELOCATE
    scope: List[TextGroup] = Field(default_factory=list)
    process: List[TextGroup] = Field(default_factory=list)
    dependent_process: List[TextGroup] = Field(default_factory=list)
    documents: List[TextGroup] = Field(default_factory=list)
    dependent_documents: List[TextGroup] = Field(default_factory=list)
    fee_intro: str = ""
    exclusions: Optional[TextGroup] = None
    payment_terms: TextGroup = Field(default_factory=TextGroup)
    timeline: TextGroup = Field(default_factory=TextGroup)
    notes: List[TextGroup] = Field(default_factory=list)
    next_steps: TextGroup = Field(default_factory=TextGroup)

    class Config:
        frozen = True


# ===========================================
# Shared Text
# ===========================================

OFFICES = [
    Office(city="Tirana", address="Gjergj Fishta Blvd, F.G.P Bld. Ent. nr. 2, Office 5, 1001, Tirana, Albania."),
    Office(city="Durrës", address="Rruga Aleksandër Goga, Lagja 11, 2001, Durrës, Albania."),
]

CONTACT_BARS: Dict[ContactBrand, List[str]] = {
    ContactBrand.RELOCATE: [
        "+355 69 69 52 989",
        "info@relocatetoalbania.com",
        "www.relocatetoalbania.com",
    ],
    ContactBrand.DAFKU: [
        "+355 69 69 52 989",
        "info@dafkulawfirm.al",
        "www.dafkulawfirm.al",
    ],
}

BUSINESS_GROUP_TITLE = "Part of Business Group"
BUSINESS_GROUP = [
    FooterEntry(name="DAFKU Law Firm", tagline="Legal services in Albania", website="www.dafkulawfirm.al"),
    FooterEntry(
        name="Relocate to Albania",
        tagline="Immigration & Residency services",
        website="www.relocatetoalbania.com",
    ),
    FooterEntry(
        name="Albania Real Estate",
        tagline="Property investment services",
        website="www.albaniaproperties.al",
    ),
]
FALLBACK_FOOTER_LINE = "DAFKU Law Firm · Tirana & Durrës, Albania · info@dafkulawfirm.al · www.dafkulawfirm.al"

NOTES_INTRO = "It is important for the Client to be aware of the following:"
NEXT_STEPS_INTRO = "Upon your approval of this proposal, the following steps will be taken:"

STANDARD_EXCLUSIONS = TextGroup(
    caption="Costs Not Included",
    intro="The legal fee does not include:",
    items=[
        "Government fees and taxes.",
        "Notary fees related to the execution of agreements and notarization of documents.",
        "Translation and sworn translation costs, if documents are issued in a foreign language.",
        "Apostille or legalization costs, where required for foreign documents.",
        "Bank charges related to payment transfers (domestic or international).",
        "Courier or administrative expenses, including document delivery or official filings.",
        "Any third-party professional fees, if required.",
    ],
)

STANDARD_NOTES = [
    "All legal services are provided based on the documentation and information made available by the Client "
    "and third parties.",
    "Processing times are estimates and may vary due to institutional workload or additional requirements.",
    "Public authorities may request additional documents or clarifications at any stage of the process.",
]

TRAVEL_DOCUMENT = (
    "Photocopy of the valid travel document, which must be valid for at least 3 months longer than the "
    "requested visa period and have at least 2 blank pages, on which the visa stamp will be placed, as well "
    "as the photocopy of the pages with notes of interest for the trip."
)
PERMIT_PHOTOGRAPH = (
    "Photograph of the applicant, which must be taken not before 6 (six) months from the date of application, "
    "measuring 47 mm x 36 mm, taken on a plane with a white background, visibly and clearly focused. The photo "
    "should show the person front, with a neutral expression and eyes open and visible."
)
VISA_PHOTOGRAPH = (
    "Photograph of the applicant, which should have been taken no earlier than 6 (six) months before the "
    "application date, measuring 47 mm x 36 mm, taken in a frontal view with a white background, clearly and "
    "distinctly focused. The photograph should show the person facing the camera, with a neutral expression "
    "and the eyes open and visible."
)
VISA_TRAVEL_DOCUMENT = (
    "Photocopy of the valid travel document which must be valid for at least 3 months longer than the "
    "requested visa period and have at least 2 blank pages, on which the visa stamp will be placed, as well "
    "as a photocopy of the pages with notes of interest for the trip."
)
ACCOMMODATION_PROOF = (
    "Proof of accommodation made in Albania, certificate, residential rental contract in accordance with the "
    "standards in Albania."
)
EMPLOYMENT_CONTRACT = (
    "The employment contract with the employer, drawn up according to the Labor Code of the Republic of "
    "Albania. – We will prepare the contract."
)

PERMIT_PROCEDURE = [
    "Full legal guidance during the entire application process",
    "Pre-check and verification of all documents before submission",
    "Assistance with translations, notarization, and legalization if required",
    "Preparing all declarations required by the authorities",
]
PERMIT_FOLLOW_UP = [
    "Follow-up with the authorities until the final approval",
    "Assistance with the Civil Registry address registration",
    "Accompanying the applicant for biometric fingerprints",
    "Guidance until the applicant receives the final residence permit card",
]
PERMIT_CARD_STEPS = [
    "Receiving Provisional Residency Permit",
    "Final Decision on Residency Permit",
    "Address Registration at Civil Registry Office",
    "Application for biometric Residency Permit Card",
    "Obtaining the biometric residence card",
]


# ===========================================
# Residence Permit for Pensioner
# ===========================================

PENSIONER_TEXT = TemplateText(
    template=ProposalTemplate.PENSIONER,
    scope=[
        TextGroup(items=[
            *PERMIT_PROCEDURE,
            "Completing the residence permit applications",
            "Scheduling all appointments with the relevant institutions",
            "Submission of the applications at the Local Directorate for Border and Migration",
            *PERMIT_FOLLOW_UP,
            "Payment of government or third-party fees on behalf of the applicant",
            "Documents translation, apostille/legalization, or notary (if needed)",
        ]),
    ],
    process=[
        TextGroup(
            caption="STEP 1: Residency Permit for the Main Applicant – Pensioner",
            items=[
                "Documents collection and preparation (see below)",
                "Government Fees payment by us",
                "Residency Permit Application Submission at the Local Directorate for Border and Migration in Durrës",
                *PERMIT_CARD_STEPS,
            ],
        ),
    ],
    dependent_process=[
        TextGroup(
            caption="STEP 2: Residency Permit for Dependent – Family Reunification",
            items=["Same procedure as in first step"],
        ),
    ],
    documents=[
        TextGroup(
            caption="For the Main Applicant (Pensioner):",
            items=[
                f"{TRAVEL_DOCUMENT} – Provided by the Applicant.",
                "Individual declarations for reason of staying in Albania – We prepare both in Albanian and "
                "English; you sign.",
                "Proof of insurance in Albania – We purchase for you at our associate insurance company.",
                "Evidence from a bank in Albania for the transfer of pension income – We support with bank "
                "account opening.",
                "Legalized criminal record from the country of origin (issued within the last 6 months, "
                "translated and notarized) – We do the legal translation and notary at our associated partners.",
                "Evidence of an annual pension income exceeding 1,200,000 ALL – We do the legal translation and "
                "notary at our associated partners.",
                "Proof of Residency Permit Government Fee Payment – We pay for you at the bank and provide the "
                "payment mandate.",
                PERMIT_PHOTOGRAPH,
                ACCOMMODATION_PROOF,
            ],
        ),
    ],
    dependent_documents=[
        TextGroup(
            caption="For Your Family (Family Reunification), after your permit is granted:",
            items=[
                TRAVEL_DOCUMENT,
                "Marriage certificate (issued within the last 6 months, legalized, translated, notarized, if it "
                "is not issued in Albania) – We do the legal translation and notary at our associated partners.",
                "Proof of insurance in Albania – We purchase for you at our associate insurance company.",
                "Copy of the identity document of the invitee and the residence permit in Albania.",
                "Proof of Payment of Residency Permit Government Fee – We pay for you at the bank and provide the "
                "payment mandate.",
                f"{PERMIT_PHOTOGRAPH} – Two printed copies and a digital copy emailed to us.",
                ACCOMMODATION_PROOF,
                "Evidence of sufficient resources to live during the stay in Albania for the required period – "
                "We do the legal translation and notary at our associated partners.",
            ],
        ),
    ],
    fee_intro=(
        "For Residency Permit applications as Pensioner with Family Reunification, DAFKU Law Firm applies a "
        "fixed legal service fee per applicant, covering all procedural steps from document preparation "
        "through to the final permit card."
    ),
    exclusions=STANDARD_EXCLUSIONS,
    payment_terms=TextGroup(
        intro="Our office, applies the following payment terms:",
        items=[
            "50% of the service fee is payable upon contract signing / file opening.",
            "50% is payable before submission of the residency permit application for family reunification "
            "for the dependent.",
            "Government fees are paid upfront before application submission.",
            "All payments are non-refundable once the application has been submitted to the authorities.",
            "Payments can be made in cash, card, bank transaction, PayPal, etc.",
        ],
    ),
    timeline=TextGroup(items=[
        "Preparation and application submission – 3 – 5 business days",
        "Provisional Residency Permit ~10 – 15 business days",
        "Final Decision ~30 – 45 business days",
        "Card issue ~ 2 calendar weeks",
    ]),
    notes=[
        TextGroup(
            intro=NOTES_INTRO,
            items=[
                *STANDARD_NOTES,
                "The Firm cannot guarantee timelines or decisions made by public authorities.",
            ],
        ),
    ],
    next_steps=TextGroup(
        intro=NEXT_STEPS_INTRO,
        items=[
            "Preparation and signing of the service agreement.",
            "Payment of the initial agreed fee.",
            "Documents collection and preparation.",
            "Residency Permit Application Submission at the Local Directorate for Border and Migration.",
            "Follow-up with the authorities until the final decision.",
            "Biometric fingerprints appointment and Residency Permit Card collection.",
        ],
    ),
)


# ===========================================
# Type D Visa & Residence Permit for Employment
# ===========================================

EMPLOYMENT_VISA_TEXT = TemplateText(
    template=ProposalTemplate.EMPLOYMENT_VISA,
    scope=[
        TextGroup(items=[
            *PERMIT_PROCEDURE,
            "Payment of government or third-party fees on behalf of the applicant",
            "Completing the visa and residence permit applications",
            "Scheduling all appointments with the relevant institutions",
            "Submission of the applications at the competent authorities",
            *PERMIT_FOLLOW_UP,
        ]),
    ],
    process=[
        TextGroup(
            caption="STEP 1: Type D Visa",
            items=[
                "Issuing Power of Attorney (if needed)",
                "Preparation of employment contract",
                "Preparation of Accommodation proof (contract or declaration)",
                "Documents collection and preparation (see below)",
                "Visa and Residency Permit Government Fees payment by us",
                "Visa application submission",
                "Decision on the visa approval",
            ],
        ),
        TextGroup(
            caption="STEP 2: Residency Permit",
            items=[
                "As soon as the visa is approved and you enter the Albanian border, the Residency Permit "
                "procedure starts automatically",
                "Delivering the original documents and the Residency Permit application at the Local Directorate "
                "for Border and Migration",
                *PERMIT_CARD_STEPS,
            ],
        ),
    ],
    documents=[
        TextGroup(
            caption="For the Type D Visa Application for Employee:",
            items=[
                f"{VISA_PHOTOGRAPH} – Provided by the applicant.",
                f"{VISA_TRAVEL_DOCUMENT} – Provided by the applicant.",
                "Document certifying accommodation in the territory of the Republic of Albania. – A notarized "
                "rental contract or a hosting declaration prepared before the application submission.",
                "Document proving the activity or professional, commercial ability in the applicant's country, "
                "which is related to the motives of the applicant's visa application, in the case of Type D visa "
                "applications. – Provided by the applicant.",
                "Residence Permit more than 12 months, issued from the country of residence, with a validity "
                "period of at least 3 additional months than the duration period of the required visa (if you are "
                "residing in another country, rather than your nationality).",
                "Document proving the legal status of the inviting entity. – We get them from the accountant.",
                "Invitation signed by the host. – We prepare it, you sign it.",
                EMPLOYMENT_CONTRACT,
            ],
        ),
        TextGroup(
            caption="For the Residency Permit Application for Employee:",
            items=[
                TRAVEL_DOCUMENT,
                "Proof of Residency Permit Government Fee Payment – We pay it for you at the bank and provide the "
                "payment mandate.",
                f"{PERMIT_PHOTOGRAPH} – Two printed pieces and a digital copy sent to us via email.",
                f"{ACCOMMODATION_PROOF} – A notarised rental contract prepared before the application submission.",
                EMPLOYMENT_CONTRACT,
                "Proof of professional qualification (diploma/professional certificate/reference) or "
                "self-declaration from the subject, or self-declaration from the foreigner in the form of a "
                "curriculum vitae (CV), which proves the foreigner's previous professional skills/experience, in "
                "relation to the profession defined in the employment contract work, in the Albanian language. – "
                "Provided by the applicant.",
            ],
        ),
    ],
    fee_intro=(
        "For Type D Visa and Residency Permit applications for employment, DAFKU Law Firm applies a fixed legal "
        "service fee per applicant, covering all procedural steps from visa application through to the final "
        "permit card."
    ),
    exclusions=STANDARD_EXCLUSIONS,
    payment_terms=TextGroup(items=[
        "50% upon contract signing.",
        "30% after visa issuing and before residency permit application.",
        "20% upon approval of residency permit and before fingerprint setting.",
    ]),
    timeline=TextGroup(items=[
        "Documents preparation – 3 – 5 business days",
        "Visa processing – 15 – 30 business days",
        "Residency Permit – 30 – 45 business days",
        "Residency Permit ID Card – ~ 2 calendar weeks",
    ]),
    notes=[
        TextGroup(
            intro=NOTES_INTRO,
            items=[
                *STANDARD_NOTES,
                "The applicant can start working at the company legally after the visa is issued despite the "
                "fact that the residency permit is still pending.",
            ],
        ),
    ],
    next_steps=TextGroup(
        intro=NEXT_STEPS_INTRO,
        items=[
            "Preparation and signing of the service agreement.",
            "Payment of the initial agreed fee.",
            "Documents collection and preparation.",
            "Visa application submission.",
            "Residency Permit application submission after visa approval.",
            "Follow-up with the authorities until the final decision.",
        ],
    ),
)


# ===========================================
# Company Formation + Type D Visa (Self-Employed)
# ===========================================

COMPANY_FORMATION_TEXT = TemplateText(
    template=ProposalTemplate.COMPANY_FORMATION,
    scope=[
        TextGroup(
            caption="Services – Company Formation in Albania",
            items=[
                "Legal consultation and structuring of the company",
                "Selection and reservation of the company name",
                "Drafting of the Founding Act and Company Statute",
                "Registration of the company with the National Business Center (QKB)",
                "Issuance of the company registration certificate and NUIS (tax number)",
                "Registration with the tax authorities (VAT and contributions if applicable)",
                "Assistance with opening a corporate bank account",
                "Preparation of company documentation required for residency permit purposes",
            ],
        ),
        TextGroup(
            caption="Services – Visa and Residency Permit Procedure",
            items=[
                *PERMIT_PROCEDURE,
                "Completing the visa and residence permit applications",
                "Scheduling all appointments with the relevant institutions",
                "Submission of the applications at the competent authorities",
                *PERMIT_FOLLOW_UP,
                "Payment of government or third-party fees on behalf of the applicant",
                "Documents translation, apostille/legalization, or notary (if needed)",
            ],
        ),
    ],
    process=[
        TextGroup(
            caption="STEP 1: Company Formation",
            items=[
                "Issuing Power of Attorney",
                "Registration documents preparation",
                "Company registration submission",
                "Obtaining TAX ID / NIPT",
                "Obtaining Registration Certificate by QKB",
                "Employee declaration",
            ],
        ),
        TextGroup(
            caption="STEP 2: Visa and Residency Permit",
            items=[
                "Documents collection and preparation (see below)",
                "Visa and Residency Permit Application and Government Fees payment by us",
                "Decision on the visa approval",
                "As soon as the visa is approved and you enter the Albanian border, the Residency Permit "
                "procedure starts automatically",
                "Residency Permit application at the Local Directorate for Border and Migration in the city where "
                "you will be based",
                *PERMIT_CARD_STEPS,
            ],
        ),
    ],
    documents=[
        TextGroup(
            caption="For Company Registration – For the Shareholder(s) and Administrator(s):",
            items=[
                "Valid passport copy",
                "Contact details and residential address (foreign address)",
            ],
        ),
        TextGroup(
            caption="For Company Registration – Corporate & Legal Documentation:",
            items=[
                "Company name proposal",
                "Description of business activity",
                "Appointment details of the company administrator",
                "Shareholding structure details",
                "Company address",
            ],
        ),
        TextGroup(
            caption="For Company Registration – If Registration Is Done Remotely:",
            items=["Power of Attorney (notarized and legalized/apostilled)"],
        ),
        TextGroup(
            caption="For Visa for self-employed people (Type D):",
            items=[
                VISA_PHOTOGRAPH,
                VISA_TRAVEL_DOCUMENT,
                "Certification of professional capacity related to the approval of self-employment (diploma, "
                "certificate, training, various qualifications).",
                "The document of the legal status of the entity (Business Registration Certificate). – We provide it.",
                "Document certifying accommodation in the territory of the Republic of Albania. (Rental contract "
                "or accommodation reservation declaration). – We can make it for you as an extra service through "
                "a power of attorney.",
                "Residence permit more than 12 months, issued from the country of residence, with a validity "
                "period of at least 3 additional months than the duration period of the required visa (if you are "
                "resident in another country rather than your nationality).",
                "The full bank statement showing the money going in and money leaving your account for the last "
                "12 months.",
            ],
        ),
        TextGroup(
            caption="For Residency Permit Application as Self-Employed/Business Owner:",
            items=[
                TRAVEL_DOCUMENT,
                "Project idea for the business/activity (reflecting the minimum elements recommended by the "
                "National Employment and Labor Agency). – We prepare it for you.",
                "The document proving that there are sufficient financial means, not less than 500,000 (five "
                "hundred thousand) ALL or the equivalent value of one dollar or euro. – We open the bank account "
                "for you and you have to make the deposit.",
                "Document proving the necessary skills (certificate/diploma or equivalent document).",
                "Proof of registration of the activity in the QKB. – We provide it upon company registration.",
                "Payment Mandate of Government fee. – We pay and provide the document.",
                PERMIT_PHOTOGRAPH,
                f"{ACCOMMODATION_PROOF} – We can rent a place for you upon your request as an extra service "
                "through a power of attorney.",
            ],
        ),
    ],
    fee_intro=(
        "For Company Formation combined with Type D Visa and Residency Permit, DAFKU Law Firm applies a fixed "
        "service fee covering both the company registration process and the complete immigration procedure."
    ),
    exclusions=STANDARD_EXCLUSIONS,
    payment_terms=TextGroup(items=[
        "50% upon contract signing / file opening.",
        "50% before submission of the visa and residency permit application.",
    ]),
    timeline=TextGroup(items=[
        "Company Registration – 3 – 5 business days",
        "Visa processing – 15 – 30 business days",
        "Residency Permit – 30 – 45 business days",
    ]),
    notes=[
        TextGroup(
            caption="For Company Management & Ongoing Requirements – Key Points:",
            items=[
                "The company must have a registered business address in Albania which can be provided by our "
                "office through a virtual office or by renting physical premises.",
                "A licensed accountant is mandatory.",
                "The company must pay applicable taxes, depending on activity and turnover, such as: Corporate "
                "income tax, VAT (if applicable), Local municipal taxes.",
                "Social and health contributions must be paid for each employee.",
                "Employment contracts and payroll declarations must comply with Albanian law.",
                "The company must operate through an Albanian corporate bank account.",
                "Monthly and annual tax declarations are mandatory.",
                "Annual financial statements must be submitted.",
                "Any changes to company details (address, administrator, activity) must be officially registered.",
                "The company must remain active and compliant to support residence permit validity and renewals.",
                "Non-compliance may result in penalties and may affect residency permit status.",
            ],
        ),
        TextGroup(
            caption="For Visa and Residency Permit procedure:",
            items=[
                "The Applicant should be outside the Albanian territory when the visa application is submitted.",
                "As soon as the visa is approved, the applicant should enter the Albanian territory in order for "
                "the Residency permit procedure to start processing.",
                "All visa and residency decisions are made exclusively by Albanian authorities; our office cannot "
                "influence the outcome.",
                "Processing times are estimated and may vary based on internal procedures or workload.",
                "Authorities may request additional documents or clarifications at any stage.",
                "Our office is not responsible for delays or decisions made by the authorities.",
            ],
        ),
    ],
    next_steps=TextGroup(
        intro=NEXT_STEPS_INTRO,
        items=[
            "Preparation and signing of the service agreement.",
            "Payment of the initial agreed fee.",
            "Documents collection and preparation.",
            "Company Registration.",
            "Visa and Residency Permit application submission.",
            "Follow-up with the authorities until the final decision.",
        ],
    ),
)


# ===========================================
# Real Estate
# ===========================================

REAL_ESTATE_OBJECTIVES = TextGroup(
    intro="The objectives of this engagement are:",
    items=[
        "To ensure full legal compliance of the transaction at all stages",
        "To mitigate legal and contractual risks associated with off-plan property purchases",
        "To protect the Client's interests as buyer throughout the construction period",
        "To ensure proper handover, ownership transfer, and registration of the property",
    ],
)

REAL_ESTATE_OFF_PLAN_PARAGRAPH = (
    "The property forms part of a residential development currently under construction. Given the off-plan "
    "nature of the investment and the extended construction period, this engagement is structured to provide "
    "not only transactional legal support, but also ongoing legal monitoring and safeguarding of the Client's "
    "interests until final handover and ownership registration."
)

REAL_ESTATE_SERVICES_INTRO = (
    "The Firm's services are divided into transactional assistance and post-contract monitoring, reflecting the "
    "lifecycle of an off-plan real estate investment."
)

REAL_ESTATE_GENERAL_FEE = (
    "For real estate transactions, particularly off-plan purchases, DAFKU Law Firm applies either a fixed fee or "
    "a percentage-based fee, depending on complexity, duration, and risk exposure. For this specific "
    "transaction, a hybrid structure is applied, consisting of a fixed transactional fee and a monthly "
    "monitoring retainer."
)

REAL_ESTATE_PHASE_ONE = (
    "This phase covers all legal services from engagement commencement until completion of notarial signing. "
    "This includes all services described below:"
)

REAL_ESTATE_TEXT = TemplateText(
    template=ProposalTemplate.REAL_ESTATE,
    contact_brand=ContactBrand.DAFKU,
    scope=[
        TextGroup(
            caption="Legal Due Diligence & Project Verification",
            intro="The Firm shall conduct a comprehensive legal due diligence process aimed at verifying the "
                  "legality, validity, and risk profile of the project and the transaction. This includes, but "
                  "is not limited to:",
            items=[
                "Verification of the ownership title of the land on which the project is being developed, "
                "through the Albanian State Cadastre (ASHK)",
                "Review and verification of the construction permit (Leje Ndërtimi) and approved project "
                "documentation",
                "Examination of the legal status, registration, and authority of the developer / construction "
                "company",
                "Verification of the developer's right to pre-sell residential units under Albanian law",
                "Confirmation of the allocation of the specific apartment intended for purchase",
                "Verification of any encumbrances or restrictions affecting the land or the project (mortgages, "
                "liens, seizures, or other legal burdens)",
                "Consistency check between contractual documentation, cadastral records, and factual project status",
                "Legal risk assessment related to construction timelines, delivery obligations, and buyer safeguards",
            ],
        ),
        TextGroup(
            caption="Contractual Documentation & Legal Structuring",
            intro="The Firm shall provide full legal assistance in relation to the contractual framework "
                  "governing the off-plan purchase. This includes:",
            items=[
                "Legal review and, where required, drafting or amendment of: Reservation agreements; Preliminary "
                "Sale and Purchase Agreements",
                "Detailed review of contractual clauses related to: Construction deadlines and delivery timelines; "
                "Penalties and remedies in case of delay or non-performance; Payment schedules and legal "
                "safeguards; Termination rights and refund mechanisms",
                "Ensuring that contractual obligations are balanced and aligned with Albanian law",
                "Legal coordination and negotiation support with the developer, real estate agency, and notary public",
            ],
        ),
        TextGroup(
            caption="Representation & Communication with Third Parties",
            intro="Throughout the transaction, the Firm shall act as the Client's legal point of contact with all "
                  "relevant parties involved in the investment process. This includes communication and "
                  "coordination with:",
            items=[
                "The real estate agency and agent involved in the transaction",
                "The construction company / developer",
                "The notary public",
                "Relevant public authorities, where necessary",
            ],
        ),
        TextGroup(
            caption="Notarial Transaction Assistance",
            intro="The Firm shall provide legal assistance during the execution of contractual documentation "
                  "before the notary public. This includes:",
            items=[
                "Legal review of notarial deeds prior to execution",
                "Verification of the identity and legal authority of the selling party",
                "Ensuring that the notarial act reflects the agreed contractual terms",
                "Legal presence during signing to address issues that may arise in real time",
            ],
        ),
        TextGroup(
            caption="Payment Coordination & Legal Guidance",
            intro="The Firm shall provide legal guidance related to the execution of payments associated with "
                  "the transaction, including:",
            items=[
                "Advice on secure and legally compliant payment methods (bank transfers)",
                "Coordination of payment timing in line with contractual obligations",
                "Ensuring legal linkage between payments and contractual milestones",
            ],
        ),
        TextGroup(
            caption="Long-Term Legal Monitoring Until Project Completion",
            intro="Given the off-plan nature of the investment, the Firm shall remain legally engaged on an "
                  "ongoing basis following contract execution. The monitoring service includes:",
            items=[
                "Ongoing legal availability for advisory support related to the contractual relationship",
                "Review of communications, notices, or updates issued by the developer",
                "Legal advice and basic intervention in cases of: construction delays; non-compliance with "
                "contractual obligations; proposed changes affecting the Client's rights",
                "Assistance and coordination until: final handover of the apartment; delivery of keys; "
                "registration of ownership with ASHK; issuance of ownership documentation in the Client's name",
            ],
        ),
    ],
    documents=[
        TextGroup(
            intro="Required Documentation from the Client:",
            items=[
                "Valid identification document (ID / Passport)",
                "Available project-related documentation (reservation or preliminary contracts, if any)",
                "Payment method details",
                "Power of Attorney (if representation is required)",
            ],
        ),
    ],
    fee_intro=REAL_ESTATE_GENERAL_FEE,
    exclusions=TextGroup(
        caption="Costs Not Included",
        intro="The legal fee does not include:",
        items=[
            "Notary fees",
            "Government taxes and registration fees",
            "Real estate agency commissions",
            "Bank transfer fees",
            "Translation, sworn translation, apostille, or legalization costs",
            "Power of Attorney preparation and notarization fees",
            "Courier or administrative expenses",
            "Any third-party professional fees (engineers, surveyors, experts)",
        ],
    ),
    payment_terms=TextGroup(
        intro="Our office applies the following payment terms for the provision of legal services related to "
              "real estate purchase transactions:",
        items=[
            "50% payable upon signing of the engagement agreement",
            "50% payable prior to notarial execution of contractual documentation",
            "Third-party and government costs payable separately and in advance",
            "Legal fees are non-refundable once services have commenced",
            "Payments accepted via bank transfer, cash, card, PayPal, or other agreed methods.",
        ],
    ),
    timeline=TextGroup(
        intro="Based on our experience, and taking into consideration that there will be no delays by the client "
              "and third parties, the approximate timeline for each service component will be:",
        items=[
            "Legal due diligence & document verification: approx. 5–10 business days",
            "Contract review & coordination: approx. 5–10 business days",
            "Notarial execution: subject to parties' availability",
        ],
    ),
    notes=[
        TextGroup(
            intro=NOTES_INTRO,
            items=[
                "Services are based on documentation provided by the Client and third parties",
                "The Firm does not guarantee construction timelines or third-party performance",
                "Public authorities may request additional documentation at any stage",
                "Legal fees exclude government, notary, and third-party costs unless explicitly stated.",
            ],
        ),
    ],
    next_steps=TextGroup(
        intro="Upon approval of this proposal:",
        items=[
            "Execution of the legal services engagement agreement",
            "Payment of the initial legal fee",
            "Commencement of legal due diligence",
            "Contract review and coordination",
            "Notarial assistance and payment coordination",
            "Ongoing legal monitoring until project completion",
            "Completion upon issuance of ownership documentation in the Client's name",
        ],
    ),
)

REAL_ESTATE_TIMELINE_NOTE = "Timelines are indicative and subject to third-party and institutional responsiveness."


# ===========================================
# Fallback (composed content)
# ===========================================

FALLBACK_TEXT = TemplateText(
    template=ProposalTemplate.FALLBACK,
    contact_brand=ContactBrand.DAFKU,
    exclusions=STANDARD_EXCLUSIONS,
    payment_terms=TextGroup(items=[
        "50% of the agreed legal service fee is payable upon signing of the engagement agreement.",
        "50% of the agreed legal service fee is payable prior to completion of the engagement.",
        "Government fees, notary fees, and any third-party costs are payable separately and in advance.",
        "Payments may be made via bank transfer, cash, card payment, PayPal, or other agreed payment methods.",
    ]),
    notes=[
        TextGroup(items=[
            *STANDARD_NOTES,
            "The Firm cannot guarantee timelines or decisions made by notaries, banks, or public authorities.",
        ]),
    ],
    next_steps=TextGroup(intro=NEXT_STEPS_INTRO),
)


TEMPLATE_TEXTS: Dict[ProposalTemplate, TemplateText] = {
    ProposalTemplate.PENSIONER: PENSIONER_TEXT,
    ProposalTemplate.EMPLOYMENT_VISA: EMPLOYMENT_VISA_TEXT,
    ProposalTemplate.COMPANY_FORMATION: COMPANY_FORMATION_TEXT,
    ProposalTemplate.REAL_ESTATE: REAL_ESTATE_TEXT,
    ProposalTemplate.FALLBACK: FALLBACK_TEXT,
}


def get_template_text(template: ProposalTemplate) -> TemplateText:
    """Look up the fixed wording of a document variant."""
    try:
        return TEMPLATE_TEXTS[template]
    except KeyError:
        raise UnknownTemplateError(f"No text registered for template: {template}")
