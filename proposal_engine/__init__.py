"""Dafku Proposal Engine - fee proposal assembly for legal-service customers."""

__version__ = "1.0.0"
