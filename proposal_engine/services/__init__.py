"""Services package - proposal lifecycle orchestration."""

from proposal_engine.services.proposal_service import ProposalService, proposal_service

__all__ = [
    "ProposalService",
    "proposal_service",
]
