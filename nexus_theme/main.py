"""
Main Application Entry Point for the NexusCloud theme service.

This module publishes the theme to frontends over a small read-only API:
- Theme snapshot (names, URLs, colors, metadata)
- Rendered short/long footer HTML
- OpenGraph metadata, CSS class tokens and CSS variables
- Documentation links
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from .config import get_settings
from .services import available_languages
from .theme import get_theme
from .utils import get_logger, setup_logging

logger = get_logger(__name__)

APP_VERSION = "2024.1.0"


# =============================================================================
# Application Lifecycle
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and report the active theme."""
    settings = get_settings()
    setup_logging(level=settings.log_level, json_output=settings.json_logs)

    theme = get_theme()
    logger.info("theme_loaded", theme=theme.get_name(), environment=settings.environment)

    yield

    logger.info("Theme service stopped")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="NexusCloud Theme",
    description="Branding and theme configuration for NexusCloud",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


# =============================================================================
# REST API Endpoints
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/api/theme")
async def get_theme_snapshot(lang: Optional[str] = Query(None, description="Language for footer labels (e.g. de, fr)")):
    """Get the full theme snapshot."""
    return get_theme(lang).to_dict()


@app.get("/api/theme/languages")
async def get_languages():
    """List languages with footer translations."""
    return {"languages": available_languages()}


@app.get("/api/theme/footer/short", response_class=HTMLResponse)
async def get_short_footer(lang: Optional[str] = Query(None, description="Language for footer labels (e.g. de, fr)")):
    """Get the compact footer HTML."""
    return get_theme(lang).get_short_footer()


@app.get("/api/theme/footer/long", response_class=HTMLResponse)
async def get_long_footer(lang: Optional[str] = Query(None, description="Language for footer labels (e.g. de, fr)")):
    """Get the expanded footer HTML."""
    return get_theme(lang).get_long_footer()


@app.get("/api/theme/opengraph")
async def get_open_graph():
    """Get OpenGraph/Twitter metadata."""
    return get_theme().get_open_graph_data()


@app.get("/api/theme/classes")
async def get_theme_classes():
    """Get CSS class tokens."""
    return get_theme().get_theme_classes()


@app.get("/api/theme/css")
async def get_theme_css():
    """Get the theme colors as a CSS :root block."""
    return PlainTextResponse(get_theme().to_css_string(), media_type="text/css")


@app.get("/api/theme/docs/{key}")
async def get_doc_link(key: str):
    """Get the documentation URL for a topic."""
    return {"key": key, "url": get_theme().build_doc_link_to_key(key)}


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Run the application using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "nexus_theme.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
