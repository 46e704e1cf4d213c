"""Document-variant builders, one per ProposalTemplate."""

from typing import Dict

from proposal_engine.core.exceptions import UnknownTemplateError
from proposal_engine.engine.templates.base import ProposalTemplateBuilder
from proposal_engine.engine.templates.pensioner import PensionerTemplate
from proposal_engine.engine.templates.employment_visa import EmploymentVisaTemplate
from proposal_engine.engine.templates.company_formation import CompanyFormationTemplate
from proposal_engine.engine.templates.real_estate import RealEstateTemplate
from proposal_engine.engine.templates.fallback import FallbackTemplate, compute_fee_breakdown
from proposal_engine.models.enums import ProposalTemplate

TEMPLATES: Dict[ProposalTemplate, ProposalTemplateBuilder] = {
    ProposalTemplate.PENSIONER: PensionerTemplate(),
    ProposalTemplate.EMPLOYMENT_VISA: EmploymentVisaTemplate(),
    ProposalTemplate.COMPANY_FORMATION: CompanyFormationTemplate(),
    ProposalTemplate.REAL_ESTATE: RealEstateTemplate(),
    ProposalTemplate.FALLBACK: FallbackTemplate(),
}


def get_template_builder(template: ProposalTemplate) -> ProposalTemplateBuilder:
    """Builder registered for a document variant."""
    builder = TEMPLATES.get(template)
    if builder is None:
        raise UnknownTemplateError(f"No builder registered for template: {template}")
    return builder


__all__ = [
    "ProposalTemplateBuilder",
    "PensionerTemplate",
    "EmploymentVisaTemplate",
    "CompanyFormationTemplate",
    "RealEstateTemplate",
    "FallbackTemplate",
    "TEMPLATES",
    "get_template_builder",
    "compute_fee_breakdown",
]
