"""Proposal Service - seeds, renders, saves and sends customer proposals."""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, List, Optional

from proposal_engine.core.config import get_settings
from proposal_engine.core.database import customer_store
from proposal_engine.core.exceptions import CustomerNotFoundError, ProposalPersistenceError
from proposal_engine.engine.presets import compute_preset_fees
from proposal_engine.engine.renderer import render_proposal
from proposal_engine.engine.selector import default_proposal_title, select_template
from proposal_engine.engine.templates import get_template_builder
from proposal_engine.models import (
    ClientInfo,
    CustomerProposal,
    CustomerRecord,
    FieldRecord,
    ProposalDocument,
    ProposalSnapshot,
    ProposalStatus,
    SentProposal,
    ServiceCategory,
    parse_services,
)

logger = logging.getLogger(__name__)

PRESET_FEE_FIELDS = ("consultation_fee", "service_fee", "poa_fee", "translation_fee", "other_fees")


class ProposalService:
    """
    Orchestrates the proposal lifecycle for one customer.

    Draft proposals render from the live field record. Sending freezes a
    snapshot of the fields; every later render of a sent proposal uses it.
    The engine calls are synchronous; only store access is awaited.
    """

    def __init__(self):
        """Initialize service with lazy-loaded settings."""
        self._settings = None

    @property
    def settings(self):
        """Lazy load settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    # ===========================================
    # Field Preparation
    # ===========================================

    def prepare_fields(self, customer: CustomerRecord, today: Optional[date] = None) -> FieldRecord:
        """
        Build the editable starting record for a customer.

        Stored values always win. Missing title and date get defaults, and
        fee presets fill unset fee fields unless a positive service fee is
        already stored.

        Args:
            customer: Customer record from the store
            today: Date used for a missing proposal date

        Returns:
            FieldRecord ready for editing or rendering
        """
        fields = customer.proposal_fields or FieldRecord()
        services = customer.service_categories
        updates = {}

        if not fields.proposal_title:
            updates["proposal_title"] = default_proposal_title(services)
        if fields.proposal_date is None:
            updates["proposal_date"] = today or date.today()

        if not (fields.service_fee and fields.service_fee > 0):
            presets = compute_preset_fees(services)
            for name in PRESET_FEE_FIELDS:
                if getattr(fields, name) is None:
                    updates[name] = getattr(presets, name)

        if not updates:
            return fields
        return fields.with_updates(**updates)

    # ===========================================
    # Rendering
    # ===========================================

    def preview(
        self,
        services: Iterable[Any],
        fields: FieldRecord,
        client: Optional[ClientInfo] = None
    ) -> ProposalDocument:
        """Render a proposal without touching the store."""
        return render_proposal(services, fields, client)

    def render_customer(self, customer: CustomerRecord) -> ProposalDocument:
        """Render a customer's proposal: live fields for drafts, the snapshot once sent."""
        client = ClientInfo(name=customer.name, customer_id=customer.customer_id)
        state = customer.proposal_state()

        if isinstance(state, SentProposal):
            services: List[ServiceCategory] = state.snapshot.services or customer.service_categories
            return render_proposal(services, state.render_fields, client)

        return render_proposal(customer.service_categories, self.prepare_fields(customer), client)

    def build_snapshot(
        self,
        services: Iterable[Any],
        fields: FieldRecord,
        sent_at: datetime
    ) -> ProposalSnapshot:
        """Freeze a copy of the fields with the template and totals they produce."""
        categories = parse_services(services)
        template = select_template(categories)
        fee_table = get_template_builder(template).calculate_fees(fields)
        return ProposalSnapshot(
            fields=fields.model_copy(deep=True),
            services=categories,
            template=template,
            totals=fee_table.totals,
            sent_at=sent_at,
        )

    # ===========================================
    # Store Operations
    # ===========================================

    async def _load_customer(self, customer_id: str) -> CustomerRecord:
        customer = await customer_store.get_customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError(f"Customer not found: {customer_id}")
        return customer

    async def save_fields(self, customer_id: str, fields: FieldRecord) -> CustomerRecord:
        """Persist the live field record. Does not affect a sent snapshot."""
        await self._load_customer(customer_id)

        updated = await customer_store.update_customer(customer_id, {"proposalFields": fields.to_store()})
        if updated is None:
            raise ProposalPersistenceError(f"Could not save proposal fields for {customer_id}")

        logger.info(f"Saved proposal fields for {customer_id}")
        return updated

    async def send_proposal(
        self,
        customer_id: str,
        fields: Optional[FieldRecord] = None,
        now: Optional[datetime] = None
    ) -> CustomerRecord:
        """
        Mark a proposal as sent.

        Persists the fields, the send and expiry timestamps and the
        snapshot in one update.

        Args:
            customer_id: Customer to send for
            fields: Fields to send; defaults to the prepared stored fields
            now: Send time; defaults to the current UTC time

        Returns:
            Updated customer record
        """
        customer = await self._load_customer(customer_id)
        now = now or datetime.now(timezone.utc)
        fields = fields or self.prepare_fields(customer, today=now.date())

        snapshot = self.build_snapshot(customer.service_categories, fields, now)
        expires_at = now + timedelta(days=self.settings.PROPOSAL_VALIDITY_DAYS)

        updated = await customer_store.update_customer(customer_id, {
            "proposalFields": fields.to_store(),
            "proposalSentAt": now.isoformat(),
            "proposalExpiresAt": expires_at.isoformat(),
            "proposalSnapshot": snapshot.to_store(),
        })
        if updated is None:
            raise ProposalPersistenceError(f"Could not send proposal for {customer_id}")

        total = snapshot.totals.total_minor_units if snapshot.totals else 0
        logger.info(f"Sent {snapshot.template.value} proposal for {customer_id} ({total} ALL)")
        return updated

    async def get_customer_proposal(
        self,
        customer_id: str,
        now: Optional[datetime] = None
    ) -> CustomerProposal:
        """Load a customer and render their proposal with its status."""
        customer = await self._load_customer(customer_id)
        state = customer.proposal_state()

        sent = isinstance(state, SentProposal)
        return CustomerProposal(
            customer_id=customer.customer_id,
            status=ProposalStatus.SENT if sent else ProposalStatus.DRAFT,
            expired=customer.is_proposal_expired(now) if sent else False,
            sent_at=state.sent_at if sent else None,
            expires_at=state.expires_at if sent else None,
            document=self.render_customer(customer),
        )


# Singleton instance
proposal_service = ProposalService()
