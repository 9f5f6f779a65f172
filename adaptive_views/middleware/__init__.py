"""Backend middleware."""
from adaptive_views.middleware.domain import DomainMiddleware, annotate

__all__ = ["DomainMiddleware", "annotate"]
