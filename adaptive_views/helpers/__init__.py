"""View location helpers."""
from adaptive_views.helpers.view_locations import (
    DomainViewLocationExpander,
    ViewLocationExpanderContext,
    resolve_view_locations,
)

__all__ = ["DomainViewLocationExpander", "ViewLocationExpanderContext", "resolve_view_locations"]
