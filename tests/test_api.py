"""Tests for the proposal API endpoints."""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from proposal_engine.core.exceptions import ProposalEngineError
from proposal_engine.models import CustomerRecord


class TestPresetEndpoint:
    """Tests for POST /proposals/presets."""

    def test_presets(self, client: TestClient):
        response = client.post("/proposals/presets", json={"services": ["real_estate", "company_formation"]})

        assert response.status_code == 200
        data = response.json()
        assert data["service_fee"] == 250000
        assert data["consultation_fee"] == 20000
        assert data["total_minor_units"] == 305000

    def test_presets_empty(self, client: TestClient):
        response = client.post("/proposals/presets", json={})

        assert response.status_code == 200
        assert response.json()["total_minor_units"] == 0


class TestPreviewEndpoints:
    """Tests for the stateless preview endpoints."""

    def test_preview(self, client: TestClient):
        response = client.post("/proposals/preview", json={
            "services": ["residency_pensioner"],
            "fields": {"dependentName": "Jane Smith", "nationality": "British"},
            "client_name": "John Smith",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["template"] == "pensioner"
        assert data["fee_table"]["totals"]["total_minor_units"] == 121600
        assert data["cover"]["client_name"] == "John Smith"
        assert [s["number"] for s in data["sections"]] == [str(i) for i in range(1, 9)]

    def test_preview_markdown(self, client: TestClient):
        response = client.post("/proposals/preview/markdown", json={
            "services": ["visa_d"],
            "fields": {"numberOfApplicants": "3"},
        })

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert "214,200 ALL" in response.text


class TestCustomerProposalEndpoints:
    """Tests for the customer proposal lifecycle endpoints."""

    def test_get_proposal(self, client: TestClient):
        response = client.get("/proposals/cust_test_001")

        assert response.status_code == 200
        data = response.json()
        assert data["customer_id"] == "cust_test_001"
        assert data["status"] == "draft"
        assert data["expired"] is False
        assert data["document"]["template"] == "fallback"

    def test_get_unknown_customer(self, client: TestClient, mock_customer_store):
        mock_customer_store.get_customer.return_value = None

        response = client.get("/proposals/missing")

        assert response.status_code == 404

    def test_save_fields(self, client: TestClient, mock_customer_store):
        response = client.put("/proposals/cust_test_001/fields", json={"serviceFeeALL": "90000"})

        assert response.status_code == 200
        assert response.json()["status"] == "saved"
        payload = mock_customer_store.update_customer.await_args.args[1]
        assert payload["proposalFields"]["serviceFeeALL"] == 90000

    def test_save_fields_store_failure(self, client: TestClient, mock_customer_store):
        mock_customer_store.update_customer.return_value = None

        response = client.put("/proposals/cust_test_001/fields", json={})

        assert response.status_code == 502

    def test_send(self, client: TestClient, mock_customer_store, sent_customer):
        mock_customer_store.update_customer.return_value = sent_customer

        response = client.post("/proposals/cust_test_001/send")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "sent"
        assert data["sent_at"].startswith("2025-03-01")
        assert data["expires_at"].startswith("2025-03-15")
        payload = mock_customer_store.update_customer.await_args.args[1]
        assert set(payload) == {"proposalFields", "proposalSentAt", "proposalExpiresAt", "proposalSnapshot"}

    def test_send_with_fields(self, client: TestClient, mock_customer_store):
        response = client.post("/proposals/cust_test_001/send", json={"fields": {"serviceFeeALL": 50000}})

        assert response.status_code == 200
        payload = mock_customer_store.update_customer.await_args.args[1]
        assert payload["proposalSnapshot"]["fields"]["serviceFeeALL"] == 50000

    def test_send_unknown_customer(self, client: TestClient, mock_customer_store):
        mock_customer_store.get_customer.return_value = None

        response = client.post("/proposals/missing/send")

        assert response.status_code == 404

    def test_markdown(self, client: TestClient):
        response = client.get("/proposals/cust_test_001/markdown")

        assert response.status_code == 200
        assert "**Client:** John Smith (ID cust_test_001)" in response.text

    def test_pdf(self, client: TestClient):
        with patch(
            "proposal_engine.api.proposals.proposal_exporter.render_pdf",
            return_value=b"%PDF-1.7 test"
        ) as render_pdf:
            response = client.get("/proposals/cust_test_001/pdf")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="proposal_cust_test_001.pdf"' in response.headers["content-disposition"]
        assert response.content == b"%PDF-1.7 test"
        assert render_pdf.call_args.args[0].cover.client_name == "John Smith"

    def test_pdf_unavailable(self, client: TestClient):
        with patch("proposal_engine.api.proposals.proposal_exporter.render_pdf", return_value=None):
            response = client.get("/proposals/cust_test_001/pdf")

        assert response.status_code == 503

    def test_pdf_unknown_customer(self, client: TestClient, mock_customer_store):
        mock_customer_store.get_customer.return_value = None

        response = client.get("/proposals/missing/pdf")

        assert response.status_code == 404

    def test_customer_without_services(self, client: TestClient, mock_customer_store):
        mock_customer_store.get_customer.return_value = CustomerRecord.model_validate(
            {"customerId": "cust_new", "name": None, "services": None}
        )

        response = client.get("/proposals/cust_new")

        assert response.status_code == 200
        assert response.json()["document"]["template"] == "fallback"

    def test_engine_error_is_422(self, client: TestClient):
        with patch(
            "proposal_engine.services.proposal_service.ProposalService.render_customer",
            side_effect=ProposalEngineError("bad template")
        ):
            response = client.get("/proposals/cust_test_001")

        assert response.status_code == 422
        assert response.json()["detail"] == "bad template"

    def test_render_error(self, client: TestClient):
        with patch(
            "proposal_engine.services.proposal_service.ProposalService.render_customer",
            side_effect=Exception("boom")
        ):
            response = client.get("/proposals/cust_test_001")

        assert response.status_code == 500
        assert "Failed to render" in response.json()["detail"]


class TestTestEndpoints:
    """Tests for root and health endpoints."""

    def test_health(self, client: TestClient):
        response = client.get("/test/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_degraded(self, client: TestClient, mock_health_store):
        mock_health_store.health_check.return_value = False

        response = client.get("/test/health")

        assert response.json()["status"] == "degraded"

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "Dafku Proposal Engine"
