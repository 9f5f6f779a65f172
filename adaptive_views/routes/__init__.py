"""Routes."""
from adaptive_views.routes.home import router

__all__ = ["router"]
