"""
Domain View Location Expander for adaptive-views

Maps the addressed hostname to a domain segment and expands it into the
ordered list of view search paths. Each path uses ``{0}`` for the view name
and ``{1}`` for the controller name.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

logger = logging.getLogger(__name__)

DEFAULT_VIEW_EXTENSION = ".html"
FALLBACK_SEGMENT = "default"
FEATURE_VALUE_KEY = "Feature"

DOMAIN_SEGMENTS: Mapping[str, str] = MappingProxyType({
    "abc.com": "abc_com",
    "abc.net": "abc_net",
    "xyz.com": "xyz_com",
})


@dataclass
class ViewLocationExpanderContext:
    """State for a single view lookup, handed to every expander."""
    host: str
    view_name: str
    controller_name: str
    query_params: Mapping[str, str] = field(default_factory=dict)
    values: Dict[str, str] = field(default_factory=dict)


def domain_segment(host: str) -> str:
    """Folder segment for a hostname; unknown hosts get the fallback."""
    return DOMAIN_SEGMENTS.get(host, FALLBACK_SEGMENT)


def resolve_view_locations(
    host: str,
    feature: str = "",
    base_locations: Iterable[str] = (),
    extension: str = DEFAULT_VIEW_EXTENSION,
) -> List[str]:
    """
    Build the view search paths for a host, most specific first.

    ``base_locations`` are replaced, not extended. ``feature`` is accepted
    but does not take part in the paths.
    """
    segment = domain_segment(host)
    locations = [
        f"/Views/{segment}/{{1}}/{{0}}{extension}",
        f"/Views/{segment}/Shared/{{0}}{extension}",
        f"/Views/Shared/{{0}}{extension}",
    ]
    logger.debug("Host %r resolved to segment %r", host, segment)
    return locations


class DomainViewLocationExpander:
    """Replaces the default view locations with domain-specific ones."""

    def __init__(self, extension: str = DEFAULT_VIEW_EXTENSION, feature_param: str = "feature"):
        self.extension = extension
        self.feature_param = feature_param

    def populate_values(self, context: ViewLocationExpanderContext) -> None:
        context.values[FEATURE_VALUE_KEY] = context.query_params.get(self.feature_param, "")

    def expand_view_locations(
        self,
        context: ViewLocationExpanderContext,
        view_locations: Iterable[str],
    ) -> List[str]:
        return resolve_view_locations(
            context.host,
            context.values.get(FEATURE_VALUE_KEY, ""),
            view_locations,
            self.extension,
        )
