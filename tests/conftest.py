"""Pytest configuration for adaptive_views tests."""
import sys
from pathlib import Path

# Allow running the tests without installing the package
_PROJECT_ROOT = Path(__file__).parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

import pytest
from fastapi.templating import Jinja2Templates
from fastapi.testclient import TestClient
from starlette.requests import Request

from adaptive_views.helpers.view_locations import DomainViewLocationExpander
from adaptive_views.main import app
from adaptive_views.services.view_engine import ViewEngine, get_view_engine

LAYOUT = '<html><body data-layout="{name}">{{% block content %}}{{% endblock %}}</body></html>'


def write_view(root: Path, relative: str, text: str) -> Path:
    path = root / relative.lstrip("/")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def view_body(marker: str) -> str:
    return '{% extends layout %}{% block content %}' + marker + '{% endblock %}'


def make_request(host: str = "", query: str = "") -> Request:
    headers = [(b"host", host.encode())] if host else []
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": headers,
        "query_string": query.encode(),
    })


@pytest.fixture
def views_root(tmp_path):
    """Temporary project root with only the shared layout in place."""
    root = tmp_path / "site"
    write_view(root, "Views/Shared/_Layout.html", LAYOUT.format(name="shared"))
    return root


@pytest.fixture
def view_engine(views_root):
    engine = ViewEngine(Jinja2Templates(directory=str(views_root)))
    engine.add_expander(DomainViewLocationExpander())
    return engine


@pytest.fixture
def client_for(view_engine):
    """Factory for test clients addressing a given host."""
    app.dependency_overrides[get_view_engine] = lambda: view_engine

    def _client(host: str) -> TestClient:
        return TestClient(app, base_url=f"http://{host}")

    yield _client
    app.dependency_overrides.clear()
