"""Core module - Configuration, errors and the customer store."""

from proposal_engine.core.config import get_settings, Settings
from proposal_engine.core.exceptions import (
    ProposalEngineError,
    UnsupportedCategoryError,
    UnknownTemplateError,
    CustomerNotFoundError,
    ProposalPersistenceError,
)
from proposal_engine.core.database import CustomerStore, customer_store

__all__ = [
    "get_settings",
    "Settings",
    # Errors
    "ProposalEngineError",
    "UnsupportedCategoryError",
    "UnknownTemplateError",
    "CustomerNotFoundError",
    "ProposalPersistenceError",
    # Persistence
    "CustomerStore",
    "customer_store",
]
