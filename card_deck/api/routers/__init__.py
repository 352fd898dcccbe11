"""API routers."""

from .cards import router as cards_router

__all__ = ["cards_router"]
