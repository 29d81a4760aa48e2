"""API routers."""

from server.routers.toc import router

__all__ = ["router"]
