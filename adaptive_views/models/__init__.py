"""View models."""
from adaptive_views.models.error import ErrorViewModel

__all__ = ["ErrorViewModel"]
