"""API routers."""

from .assistant import router as assistant_router

__all__ = ["assistant_router"]
