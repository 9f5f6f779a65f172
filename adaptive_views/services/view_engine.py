"""
View Engine for adaptive-views

Finds views on disk by asking location expanders for search paths and
rendering the first template that exists.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Protocol

from fastapi.templating import Jinja2Templates
from jinja2 import Template, TemplatesNotFound
from starlette.requests import Request

from adaptive_views.config import get_settings
from adaptive_views.helpers.view_locations import (
    DEFAULT_VIEW_EXTENSION,
    DomainViewLocationExpander,
    ViewLocationExpanderContext,
)
from adaptive_views.utils.hosts import request_host

logger = logging.getLogger(__name__)

LAYOUT_VIEW = "_Layout"


def default_view_locations(extension: str = DEFAULT_VIEW_EXTENSION) -> List[str]:
    """Search paths used when no expander changes them."""
    return [
        f"/Views/{{1}}/{{0}}{extension}",
        f"/Views/Shared/{{0}}{extension}",
    ]


class ViewLocationExpander(Protocol):
    def populate_values(self, context: ViewLocationExpanderContext) -> None: ...

    def expand_view_locations(
        self, context: ViewLocationExpanderContext, view_locations: Iterable[str]
    ) -> Iterable[str]: ...


class ViewNotFoundError(Exception):
    """Raised when none of the candidate locations holds the view."""

    def __init__(self, view_name: str, searched_locations: List[str]):
        self.view_name = view_name
        self.searched_locations = searched_locations
        super().__init__(
            f"The view '{view_name}' was not found. The following locations were searched:\n"
            + "\n".join(searched_locations)
        )


@dataclass
class ViewLookup:
    """Outcome of a successful view lookup."""
    template: Template
    searched_locations: List[str]
    values: Dict[str, str]

    @property
    def name(self) -> str:
        return self.template.name


@dataclass
class ViewLookupPlan:
    """Candidate template names for one lookup and the values expanders populated."""
    names: List[str]
    values: Dict[str, str]


class ViewEngine:
    """Resolves and renders views through a chain of location expanders."""

    def __init__(
        self,
        templates: Jinja2Templates,
        expanders: Optional[List[ViewLocationExpander]] = None,
        extension: str = DEFAULT_VIEW_EXTENSION,
    ):
        self.templates = templates
        self.expanders: List[ViewLocationExpander] = list(expanders or [])
        self.extension = extension

    def add_expander(self, expander: ViewLocationExpander) -> None:
        self.expanders.append(expander)

    def candidate_locations(self, request: Request, view_name: str, controller_name: str) -> ViewLookupPlan:
        """Run the expanders for one lookup and format the resulting paths."""
        context = ViewLocationExpanderContext(
            host=request_host(request),
            view_name=view_name,
            controller_name=controller_name,
            query_params=request.query_params,
        )
        for expander in self.expanders:
            expander.populate_values(context)

        locations: Iterable[str] = default_view_locations(self.extension)
        for expander in self.expanders:
            locations = expander.expand_view_locations(context, locations)

        names = [location.format(view_name, controller_name) for location in locations]
        return ViewLookupPlan(names=names, values=context.values)

    def find_view(self, request: Request, view_name: str, controller_name: str) -> ViewLookup:
        """
        Return the first existing template among the candidate locations.

        Raises:
            ViewNotFoundError: if no candidate exists.
        """
        plan = self.candidate_locations(request, view_name, controller_name)
        logger.debug("Searching %s for view %r", plan.names, view_name)
        try:
            template = self.templates.env.select_template(plan.names)
        except TemplatesNotFound:
            raise ViewNotFoundError(view_name, plan.names) from None
        return ViewLookup(template=template, searched_locations=plan.names, values=plan.values)

    def render(
        self,
        request: Request,
        view_name: str,
        controller_name: str,
        context: Optional[Dict[str, Any]] = None,
        **response_kwargs: Any,
    ):
        """Render a view inside the layout resolved for the same request."""
        view = self.find_view(request, view_name, controller_name)
        layout = self.find_view(request, LAYOUT_VIEW, controller_name)

        view_context: Dict[str, Any] = {
            "layout": layout.name,
            "view_data": getattr(request.state, "context_items", {}),
            "domain": getattr(request.state, "domain", None),
        }
        view_context.update(context or {})

        return self.templates.TemplateResponse(request, view.name, view_context, **response_kwargs)


@lru_cache
def get_view_engine() -> ViewEngine:
    """Get the process-wide view engine with the domain expander registered."""
    settings = get_settings()
    engine = ViewEngine(
        Jinja2Templates(directory=str(settings.views_root)),
        extension=settings.view_extension,
    )
    engine.add_expander(
        DomainViewLocationExpander(
            extension=settings.view_extension,
            feature_param=settings.feature_query_param,
        )
    )
    return engine
