"""Tests for the proposal lifecycle service."""

import asyncio
from datetime import date, datetime, timedelta, timezone

import pytest
from unittest.mock import MagicMock

from proposal_engine.core.database import CustomerStore
from proposal_engine.core.exceptions import CustomerNotFoundError, ProposalPersistenceError
from proposal_engine.engine.selector import EMPLOYMENT_VISA_TITLE
from proposal_engine.models import (
    CustomerRecord,
    DraftProposal,
    FieldRecord,
    ProposalSnapshot,
    ProposalStatus,
    ProposalTemplate,
    SentProposal,
)
from proposal_engine.services.proposal_service import ProposalService


@pytest.fixture
def service() -> ProposalService:
    return ProposalService()


class TestPrepareFields:
    """Tests for seeding the editable field record."""

    def test_defaults_and_presets(self, service):
        customer = CustomerRecord(customer_id="c1", services=["visa_d"])
        fields = service.prepare_fields(customer, today=date(2025, 5, 2))

        assert fields.proposal_title == EMPLOYMENT_VISA_TITLE
        assert fields.proposal_date == date(2025, 5, 2)
        assert fields.consultation_fee == 15000
        assert fields.service_fee == 100000
        assert fields.poa_fee == 15000
        assert fields.other_fees == 0

    def test_stored_values_win(self, service):
        stored = FieldRecord(proposal_title="Custom", consultation_fee=5000)
        customer = CustomerRecord(customer_id="c1", services=["visa_d"], proposal_fields=stored)
        fields = service.prepare_fields(customer)

        assert fields.proposal_title == "Custom"
        assert fields.consultation_fee == 5000
        assert fields.service_fee == 100000

    def test_no_presets_when_service_fee_set(self, service):
        stored = FieldRecord(service_fee=70000, proposal_date=date(2025, 1, 1), proposal_title="T")
        customer = CustomerRecord(customer_id="c1", services=["real_estate"], proposal_fields=stored)
        fields = service.prepare_fields(customer)

        assert fields == stored
        assert fields.poa_fee is None

    def test_zero_service_fee_gets_presets(self, service):
        stored = FieldRecord(service_fee=0)
        customer = CustomerRecord(customer_id="c1", services=["real_estate"], proposal_fields=stored)

        assert service.prepare_fields(customer).service_fee == 0
        assert service.prepare_fields(customer).poa_fee == 15000


class TestSnapshot:
    """Tests for snapshots and sent rendering."""

    def test_build_snapshot(self, service, generic_fields):
        sent_at = datetime(2025, 3, 1, tzinfo=timezone.utc)
        snapshot = service.build_snapshot(["residency_permit"], generic_fields, sent_at)

        assert snapshot.template == ProposalTemplate.FALLBACK
        assert snapshot.totals.total_minor_units == 170000
        assert snapshot.fields == generic_fields
        assert snapshot.sent_at == sent_at

    def test_sent_proposal_renders_snapshot(self, service, sent_customer):
        """Editing live fields after sending does not change the render."""
        before = service.render_customer(sent_customer)

        edited = sent_customer.model_copy(update={
            "proposal_fields": FieldRecord(service_fee=999999, consultation_fee=1),
        })
        after = service.render_customer(edited)

        assert isinstance(edited.proposal_state(), SentProposal)
        assert after.fee_table == before.fee_table
        assert after.fee_table.total == 170000

    def test_draft_renders_live_fields(self, service, draft_customer):
        assert isinstance(draft_customer.proposal_state(), DraftProposal)

        document = service.render_customer(draft_customer)

        assert document.cover.client_name == "John Smith"
        assert document.fee_table.totals.service_subtotal == 140000

    def test_legacy_snapshot_accepted(self):
        snapshot = ProposalSnapshot.model_validate({"serviceFeeALL": "45000"})

        assert snapshot.fields.service_fee == 45000
        assert snapshot.totals is None


class TestExpiry:
    """Tests for proposal expiry."""

    def test_not_expired_before_deadline(self, sent_customer):
        assert not sent_customer.is_proposal_expired(datetime(2025, 3, 10, tzinfo=timezone.utc))

    def test_expired_after_deadline(self, sent_customer):
        assert sent_customer.is_proposal_expired(datetime(2025, 3, 16, tzinfo=timezone.utc))

    def test_draft_never_expires(self, draft_customer):
        assert not draft_customer.is_proposal_expired()


class TestStoreOperations:
    """Tests for save, send and load against a mocked store."""

    def test_save_fields(self, service, mock_customer_store, generic_fields):
        asyncio.run(service.save_fields("cust_test_001", generic_fields))

        mock_customer_store.update_customer.assert_awaited_once_with(
            "cust_test_001", {"proposalFields": generic_fields.to_store()}
        )

    def test_save_unknown_customer(self, service, mock_customer_store, generic_fields):
        mock_customer_store.get_customer.return_value = None

        with pytest.raises(CustomerNotFoundError):
            asyncio.run(service.save_fields("missing", generic_fields))
        mock_customer_store.update_customer.assert_not_awaited()

    def test_save_rejected(self, service, mock_customer_store, generic_fields):
        mock_customer_store.update_customer.return_value = None

        with pytest.raises(ProposalPersistenceError):
            asyncio.run(service.save_fields("cust_test_001", generic_fields))

    def test_send_persists_snapshot_and_expiry(self, service, mock_customer_store, generic_fields):
        now = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)
        asyncio.run(service.send_proposal("cust_test_001", fields=generic_fields, now=now))

        customer_id, payload = mock_customer_store.update_customer.await_args.args
        assert customer_id == "cust_test_001"
        assert payload["proposalFields"] == generic_fields.to_store()
        assert payload["proposalSentAt"] == now.isoformat()
        assert payload["proposalExpiresAt"] == (now + timedelta(days=14)).isoformat()

        snapshot = ProposalSnapshot.model_validate(payload["proposalSnapshot"])
        assert snapshot.fields == generic_fields
        assert snapshot.totals.total_minor_units == 170000

    def test_send_uses_prepared_fields(self, service, mock_customer_store):
        now = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)
        asyncio.run(service.send_proposal("cust_test_001", now=now))

        payload = mock_customer_store.update_customer.await_args.args[1]
        assert payload["proposalFields"]["serviceFeeALL"] == 120000
        assert payload["proposalFields"]["proposalDate"] == "2025-03-01"

    def test_get_draft_proposal(self, service, mock_customer_store):
        proposal = asyncio.run(service.get_customer_proposal("cust_test_001"))

        assert proposal.status == ProposalStatus.DRAFT
        assert proposal.expired is False
        assert proposal.sent_at is None
        assert proposal.document.template == ProposalTemplate.FALLBACK

    def test_get_sent_proposal(self, service, mock_customer_store, sent_customer):
        mock_customer_store.get_customer.return_value = sent_customer
        now = datetime(2025, 4, 1, tzinfo=timezone.utc)

        proposal = asyncio.run(service.get_customer_proposal("cust_test_001", now=now))

        assert proposal.status == ProposalStatus.SENT
        assert proposal.expired is True
        assert proposal.expires_at == datetime(2025, 3, 15, 10, 0, tzinfo=timezone.utc)


class TestNullableCustomerRows:
    """Tests for customer rows saved before a service bundle is chosen."""

    def test_null_name_and_services(self):
        customer = CustomerRecord.model_validate({"customerId": "c1", "name": None, "services": None})

        assert customer.name == ""
        assert customer.services == []
        assert customer.service_categories == []

    def test_renders_without_services(self, service):
        customer = CustomerRecord.model_validate({"customerId": "c1", "name": "Jane", "services": None})
        document = service.render_customer(customer)

        assert document.template == ProposalTemplate.FALLBACK
        assert document.cover.client_name == "Jane"

    def test_store_returns_null_service_row(self):
        store = CustomerStore()
        store._client = MagicMock()
        query = store._client.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value = MagicMock(data=[{"customerId": "c1", "name": "Jane", "services": None}])

        customer = asyncio.run(store.get_customer("c1"))

        assert customer is not None
        assert customer.customer_id == "c1"
        assert customer.services == []
