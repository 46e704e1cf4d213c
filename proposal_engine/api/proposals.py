"""Proposal API Routes - presets, previews and the customer proposal lifecycle."""

import logging
from datetime import datetime
from typing import Dict, List, Optional
from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, Field

from proposal_engine.core.database import customer_store
from proposal_engine.core.exceptions import (
    CustomerNotFoundError,
    ProposalEngineError,
    ProposalPersistenceError,
)
from proposal_engine.engine.presets import compute_preset_fees
from proposal_engine.integrations.export import proposal_exporter
from proposal_engine.models import (
    ClientInfo,
    CustomerProposal,
    FeeBreakdown,
    FeeTotals,
    FieldRecord,
    ProposalDocument,
)
from proposal_engine.services.proposal_service import proposal_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/proposals", tags=["proposals"])


class PresetRequest(BaseModel):
    """Request for fee presets."""
    services: List[str] = Field(default_factory=list)


class PreviewRequest(BaseModel):
    """Request for an unsaved proposal preview."""
    services: List[str] = Field(default_factory=list)
    fields: FieldRecord = Field(default_factory=FieldRecord)
    client_name: Optional[str] = None
    client_id: Optional[str] = None


class SendRequest(BaseModel):
    """Request to send a proposal; stored fields are used when omitted."""
    fields: Optional[FieldRecord] = None


class SaveFieldsResponse(BaseModel):
    """Response after saving proposal fields."""
    status: str
    customer_id: str
    message: str


class SendResponse(BaseModel):
    """Response after sending a proposal."""
    status: str
    customer_id: str
    sent_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    totals: Optional[FeeTotals] = None


MARKDOWN_MEDIA_TYPE = "text/markdown"
PDF_MEDIA_TYPE = "application/pdf"


def _preview_client(request: PreviewRequest) -> ClientInfo:
    return ClientInfo(name=request.client_name or "", customer_id=request.client_id or "")


# ===========================================
# Stateless Endpoints
# ===========================================

@router.post("/presets", response_model=FeeBreakdown, summary="Fee Presets For A Service Set")
async def get_presets(request: PresetRequest) -> FeeBreakdown:
    """Aggregate the catalog fee presets for the selected services."""
    return compute_preset_fees(request.services)


@router.post("/preview", response_model=ProposalDocument, summary="Preview Proposal")
async def preview_proposal(request: PreviewRequest) -> ProposalDocument:
    """Render a proposal from unsaved fields."""
    try:
        return proposal_service.preview(request.services, request.fields, _preview_client(request))
    except ProposalEngineError as e:
        logger.error(f"Preview failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/preview/markdown", response_class=PlainTextResponse, summary="Preview Proposal As Markdown")
async def preview_proposal_markdown(request: PreviewRequest) -> PlainTextResponse:
    """Render a proposal from unsaved fields as Markdown."""
    try:
        document = proposal_service.preview(request.services, request.fields, _preview_client(request))
        return PlainTextResponse(
            proposal_exporter.render_markdown(document),
            media_type=MARKDOWN_MEDIA_TYPE
        )
    except ProposalEngineError as e:
        logger.error(f"Markdown preview failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))


# ===========================================
# Customer Proposal Lifecycle
# ===========================================

@router.get("/{customer_id}", response_model=CustomerProposal, summary="Get Customer Proposal")
async def get_customer_proposal(customer_id: str) -> CustomerProposal:
    """
    Render a customer's proposal.

    Draft proposals render from the live fields; sent proposals render
    from their snapshot and report whether they have expired.
    """
    try:
        return await proposal_service.get_customer_proposal(customer_id)

    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProposalEngineError as e:
        logger.error(f"Invalid proposal for {customer_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to render proposal for {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to render: {str(e)}")


@router.put("/{customer_id}/fields", response_model=SaveFieldsResponse, summary="Save Proposal Fields")
async def save_proposal_fields(customer_id: str, fields: FieldRecord) -> SaveFieldsResponse:
    """Persist the live field record for a customer."""
    try:
        await proposal_service.save_fields(customer_id, fields)
        return SaveFieldsResponse(
            status="saved",
            customer_id=customer_id,
            message="Proposal fields saved"
        )

    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProposalPersistenceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to save fields for {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to save: {str(e)}")


@router.post("/{customer_id}/send", response_model=SendResponse, summary="Send Proposal")
async def send_proposal(customer_id: str, request: Optional[SendRequest] = None) -> SendResponse:
    """Snapshot the fields, stamp the send time and start the validity window."""
    try:
        fields = request.fields if request else None
        customer = await proposal_service.send_proposal(customer_id, fields=fields)
        snapshot = customer.proposal_snapshot

        return SendResponse(
            status="sent",
            customer_id=customer_id,
            sent_at=customer.proposal_sent_at,
            expires_at=customer.proposal_expires_at,
            totals=snapshot.totals if snapshot else None
        )

    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProposalPersistenceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except ProposalEngineError as e:
        logger.error(f"Invalid proposal for {customer_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to send proposal for {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to send: {str(e)}")


@router.get("/{customer_id}/markdown", response_class=PlainTextResponse, summary="Customer Proposal As Markdown")
async def get_customer_proposal_markdown(customer_id: str) -> PlainTextResponse:
    """Render a customer's proposal as Markdown."""
    try:
        proposal = await proposal_service.get_customer_proposal(customer_id)
        return PlainTextResponse(
            proposal_exporter.render_markdown(proposal.document),
            media_type=MARKDOWN_MEDIA_TYPE
        )

    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProposalEngineError as e:
        logger.error(f"Invalid proposal for {customer_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to export proposal for {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to export: {str(e)}")


@router.get("/{customer_id}/pdf", response_class=Response, summary="Customer Proposal As PDF")
async def get_customer_proposal_pdf(customer_id: str) -> Response:
    """Render a customer's proposal as a PDF download."""
    try:
        proposal = await proposal_service.get_customer_proposal(customer_id)
        pdf = proposal_exporter.render_pdf(proposal.document)
        if pdf is None:
            raise HTTPException(status_code=503, detail="PDF generation unavailable")

        filename = proposal_exporter.pdf_filename(proposal.document)
        return Response(
            content=pdf,
            media_type=PDF_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'}
        )

    except HTTPException:
        raise
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProposalEngineError as e:
        logger.error(f"Invalid proposal for {customer_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to export PDF for {customer_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to export: {str(e)}")


# ===========================================
# Test Endpoints
# ===========================================

test_router = APIRouter(prefix="/test", tags=["testing"])


@test_router.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    database_ok = await customer_store.health_check()
    return {
        "status": "healthy" if database_ok else "degraded",
        "service": "dafku-proposal-engine",
        "database": "connected" if database_ok else "unavailable",
    }
