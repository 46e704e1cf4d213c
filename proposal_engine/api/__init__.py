"""API package - FastAPI routers."""

from proposal_engine.api.proposals import router, test_router

__all__ = ["router", "test_router"]
