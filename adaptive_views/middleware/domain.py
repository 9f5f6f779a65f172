"""
Domain Middleware for adaptive-views

Labels each request with its domain based on the Host header.
"""
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from adaptive_views.config import get_settings
from adaptive_views.utils.hosts import request_host

logger = logging.getLogger(__name__)

DOMAIN_FEATURE_KEY = "DomainFeature"


class DomainAnnotation(NamedTuple):
    """Header value and optional context entry for a domain."""
    header_value: str
    context_entry: Optional[Tuple[str, str]] = None


DEFAULT_ANNOTATION = DomainAnnotation("Default Domain")

# abc.net has a view segment but no annotation of its own
DOMAIN_ANNOTATIONS: Mapping[str, DomainAnnotation] = MappingProxyType({
    "abc.com": DomainAnnotation("ABC Domain", (DOMAIN_FEATURE_KEY, "FeatureForAbc")),
    "xyz.com": DomainAnnotation("XYZ Domain", (DOMAIN_FEATURE_KEY, "FeatureForXyz")),
})


def annotate(host: str) -> DomainAnnotation:
    """Look up the annotation for a host, falling back to the default."""
    return DOMAIN_ANNOTATIONS.get(host, DEFAULT_ANNOTATION)


class DomainMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches domain context to each request."""

    async def dispatch(self, request: Request, call_next):
        host = request_host(request)
        annotation = annotate(host)
        logger.debug("Host %r annotated as %r", host, annotation.header_value)

        # Attach to request state
        request.state.domain = annotation
        request.state.context_items = {}
        if annotation.context_entry is not None:
            key, value = annotation.context_entry
            request.state.context_items[key] = value

        response = await call_next(request)
        # Written after the handler runs, replacing any value set downstream
        response.headers[get_settings().domain_header_name] = annotation.header_value
        return response
