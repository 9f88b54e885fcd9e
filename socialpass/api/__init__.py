"""API routers."""

from socialpass.api.router import api_router

__all__ = ["api_router"]
