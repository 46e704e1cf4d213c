"""Engine package - fee presets, content composition, templates and rendering."""

from proposal_engine.engine.presets import FEE_PRESETS, compute_preset_fees
from proposal_engine.engine.currency import (
    RATES,
    convert,
    convert_all,
    format_amount,
    format_lek,
    build_totals,
)
from proposal_engine.engine.composer import compose_content, dedupe_documents
from proposal_engine.engine.selector import select_template, default_proposal_title
from proposal_engine.engine.templates import TEMPLATES, get_template_builder, compute_fee_breakdown
from proposal_engine.engine.renderer import render_proposal, number_sections

__all__ = [
    # Fee presets
    "FEE_PRESETS",
    "compute_preset_fees",
    # Currency
    "RATES",
    "convert",
    "convert_all",
    "format_amount",
    "format_lek",
    "build_totals",
    # Content
    "compose_content",
    "dedupe_documents",
    # Templates
    "select_template",
    "default_proposal_title",
    "TEMPLATES",
    "get_template_builder",
    "compute_fee_breakdown",
    # Rendering
    "render_proposal",
    "number_sections",
]
