"""Integrations package - document export."""

from proposal_engine.integrations.export import ProposalExporter, proposal_exporter

__all__ = [
    "ProposalExporter",
    "proposal_exporter",
]
