"""Supabase customer store for the Dafku Proposal Engine."""

import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions
from pydantic import ValidationError

from proposal_engine.core.config import get_settings

logger = logging.getLogger(__name__)


class CustomerStore:
    """
    Reads and writes the proposal columns of customer records.

    Uses the sync Supabase client behind an async interface, like the rest
    of the service layer. Failures are logged and reported as None/False;
    callers decide whether that is an error.
    """

    ID_COLUMN = "customerId"

    def __init__(self):
        """Initialize with a lazily created Supabase client."""
        self._client: Optional[Client] = None
        self._settings = None

    @property
    def settings(self):
        """Lazy load settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def table_name(self) -> str:
        return self.settings.CUSTOMERS_TABLE

    @property
    def client(self) -> Client:
        """Lazy initialization of Supabase client."""
        if self._client is None:
            settings = self.settings
            if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
                raise ValueError("Supabase credentials not configured")

            self._client = create_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_KEY,
                options=ClientOptions(
                    postgrest_client_timeout=30,
                    storage_client_timeout=30
                )
            )
            logger.info("Supabase client initialized")
        return self._client

    # ===========================================
    # Read Operations
    # ===========================================

    async def get_customer(self, customer_id: str) -> Optional["CustomerRecord"]:
        """Fetch a customer by ID."""
        try:
            from proposal_engine.models import CustomerRecord

            response = (
                self.client.table(self.table_name)
                .select("*")
                .eq(self.ID_COLUMN, customer_id)
                .limit(1)
                .execute()
            )

            if response.data:
                return CustomerRecord.model_validate(response.data[0])

            logger.warning(f"Customer not found: {customer_id}")
            return None

        except ValidationError as e:
            logger.error(f"Customer {customer_id} has an unreadable record: {e}")
            return None
        except Exception as e:
            logger.error(f"Failed to get customer {customer_id}: {e}")
            return None

    # ===========================================
    # Update Operations
    # ===========================================

    async def update_customer(
        self,
        customer_id: str,
        updates: Dict[str, Any]
    ) -> Optional["CustomerRecord"]:
        """Apply a partial update and return the stored record."""
        try:
            from proposal_engine.models import CustomerRecord

            payload = dict(updates)
            payload["updatedAt"] = datetime.now(timezone.utc).isoformat()

            response = (
                self.client.table(self.table_name)
                .update(payload)
                .eq(self.ID_COLUMN, customer_id)
                .execute()
            )

            if response.data:
                logger.info(f"Updated customer {customer_id}: {list(updates.keys())}")
                return CustomerRecord.model_validate(response.data[0])

            logger.warning(f"Update returned no data for {customer_id}")
            return None

        except Exception as e:
            logger.error(f"Failed to update customer {customer_id}: {e}")
            return None

    # ===========================================
    # Health Check
    # ===========================================

    async def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            self.client.table(self.table_name).select(self.ID_COLUMN).limit(1).execute()
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False


# Forward reference imports
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from proposal_engine.models import CustomerRecord

# Singleton instance
customer_store = CustomerStore()
