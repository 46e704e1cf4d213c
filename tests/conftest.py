"""Pytest fixtures and configuration for Dafku Proposal Engine tests."""

import os
import pytest
from datetime import date, datetime, timezone
from typing import Dict, Any, Generator
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")
os.environ.setdefault("CUSTOMERS_TABLE", "customers")
os.environ.setdefault("PROPOSAL_VALIDITY_DAYS", "14")
os.environ.setdefault("DEBUG", "true")

from proposal_engine.models import CustomerRecord, FieldRecord


# ===========================================
# Sample Data Fixtures
# ===========================================

@pytest.fixture
def pensioner_fields() -> FieldRecord:
    """Pensioner intake answers without a dependent."""
    return FieldRecord(
        proposal_date=date(2025, 3, 1),
        nationality="British",
        country="United Kingdom",
        employment_type="Retired",
    )


@pytest.fixture
def pensioner_fields_with_dependent(pensioner_fields) -> FieldRecord:
    """Pensioner intake answers with a spouse as dependent."""
    return pensioner_fields.with_updates(
        dependent_name="Jane Smith",
        dependent_nationality="British",
        dependent_occupation="Retired",
    )


@pytest.fixture
def generic_fields() -> FieldRecord:
    """Editable fee fields for a generic proposal."""
    return FieldRecord(
        proposal_title="Legal Assistance — Residency Permit",
        proposal_date=date(2025, 3, 1),
        consultation_fee=20000,
        service_fee=120000,
        poa_fee=15000,
        translation_fee=15000,
        other_fees=0,
    )


@pytest.fixture
def stored_customer_data() -> Dict[str, Any]:
    """Customer row as the store returns it (camelCase keys)."""
    return {
        "customerId": "cust_test_001",
        "name": "John Smith",
        "email": "john@example.com",
        "services": ["residency_permit"],
        "proposalFields": {
            "proposalDate": "2025-03-01",
            "nationality": "British",
            "serviceFeeALL": "",
        },
    }


@pytest.fixture
def draft_customer(stored_customer_data) -> CustomerRecord:
    """Customer with a draft proposal."""
    return CustomerRecord.model_validate(stored_customer_data)


@pytest.fixture
def sent_customer(stored_customer_data, generic_fields) -> CustomerRecord:
    """Customer whose proposal was sent on 2025-03-01."""
    sent_at = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)
    data = dict(stored_customer_data)
    data.update({
        "proposalFields": generic_fields.to_store(),
        "proposalSentAt": sent_at.isoformat(),
        "proposalExpiresAt": datetime(2025, 3, 15, 10, 0, tzinfo=timezone.utc).isoformat(),
        "proposalSnapshot": {
            "fields": generic_fields.to_store(),
            "services": ["residency_permit"],
            "template": "fallback",
            "sentAt": sent_at.isoformat(),
        },
    })
    return CustomerRecord.model_validate(data)


# ===========================================
# Mock Fixtures
# ===========================================

@pytest.fixture
def mock_customer_store(draft_customer):
    """Mock the customer store used by the proposal service."""
    with patch("proposal_engine.services.proposal_service.customer_store") as mock:
        mock.get_customer = AsyncMock(return_value=draft_customer)
        mock.update_customer = AsyncMock(return_value=draft_customer)
        mock.health_check = AsyncMock(return_value=True)
        yield mock


@pytest.fixture
def mock_health_store():
    """Mock the customer store used by the health endpoint."""
    with patch("proposal_engine.api.proposals.customer_store") as mock:
        mock.health_check = AsyncMock(return_value=True)
        yield mock


# ===========================================
# Client Fixtures
# ===========================================

@pytest.fixture
def client(mock_customer_store, mock_health_store) -> Generator[TestClient, None, None]:
    """Test client with the customer store mocked."""
    from proposal_engine.main import app
    with TestClient(app) as test_client:
        yield test_client


# ===========================================
# Pytest Configuration
# ===========================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
