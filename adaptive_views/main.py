"""
adaptive-views - Main Application

Serves one set of controllers to several domains, picking views and
response headers from the host each request addressed.
"""
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
import uuid

from adaptive_views.config import Settings, get_settings
from adaptive_views.helpers.view_locations import DOMAIN_SEGMENTS, FALLBACK_SEGMENT
from adaptive_views.middleware import DomainMiddleware, annotate
from adaptive_views.routes import router
from adaptive_views.routes.home import render_error
from adaptive_views.services.view_engine import ViewNotFoundError, get_view_engine
from adaptive_views.utils.hosts import request_host


def create_app(settings: Settings) -> FastAPI:
    """Build the application for the given settings."""
    app = FastAPI(
        title=settings.app_name,
        description="Domain-aware view resolution",
        version="0.1.0",
        debug=settings.debug
    )

    # Middleware stack (order matters - last added runs first)
    app.add_middleware(DomainMiddleware)  # Labels requests by domain

    # Include routes
    app.include_router(router)

    @app.exception_handler(ViewNotFoundError)
    async def view_not_found_handler(request: Request, exc: ViewNotFoundError):
        """Report every location that was searched for the missing view."""
        return PlainTextResponse(str(exc), status_code=500)

    if not settings.debug:
        @app.exception_handler(Exception)
        async def error_page_handler(request: Request, exc: Exception):
            """Render the Error view instead of a traceback."""
            response = render_error(get_view_engine(), request, str(uuid.uuid4()), status_code=500)
            # Runs outside DomainMiddleware, so the header is added here
            annotation = getattr(request.state, "domain", None) or annotate(request_host(request))
            response.headers[settings.domain_header_name] = annotation.header_value
            return response

    @app.on_event("startup")
    async def startup_event():
        """Announce configuration on startup."""
        print("⇄ Adaptive View Engine starting...")
        print(f"📁 Views root: {settings.views_root}")
        print(f"🌐 Domains configured: {len(DOMAIN_SEGMENTS)}")
        for host, segment in DOMAIN_SEGMENTS.items():
            print(f"   • {host} → Views/{segment} ({annotate(host).header_value})")
        print(f"   • anything else → Views/{FALLBACK_SEGMENT} ({annotate('').header_value})")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on shutdown."""
        print("⇄ Adaptive View Engine shutting down...")

    return app


settings = get_settings()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "adaptive_views.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
