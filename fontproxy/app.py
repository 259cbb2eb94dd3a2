"""
FastAPI application for the font-face CSS proxy.

Forwards css2 requests to the upstream font API and rewrites the returned
@font-face rules according to the per-family options of the request.

License: MIT
"""

import time
import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from fontproxy.config import ProxySettings
from fontproxy.exceptions import (
    MalformedCssError,
    MissingParameterError,
    UnicodeRangeError,
    UpstreamError,
)
from fontproxy.families import parse_families
from fontproxy.transformer import rewrite_css
from fontproxy.upstream import build_upstream_url, fetch_css

settings = ProxySettings.from_env()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[ProxySettings] = None) -> FastAPI:
    """
    Create the proxy application.

    Args:
        settings: Proxy settings (default: read from the environment)

    Returns:
        Configured FastAPI application
    """
    settings = settings or ProxySettings.from_env()

    app = FastAPI(
        title="Font Face CSS Proxy",
        version="1.0.0",
        description="Rewrites @font-face stylesheets of the Google Fonts css2 API",
    )
    app.state.settings = settings

    if settings.cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing information."""
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} "
            f"completed in {duration:.3f}s with status {response.status_code}"
        )

        return response

    @app.get("/health")
    async def health_check() -> Dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/")
    @app.get("/css2")
    async def proxy_css(request: Request) -> Response:
        """
        Proxy a css2 stylesheet request and rewrite its @font-face rules.

        Each ``family`` parameter accepts ``name[:axis][:key@value]...`` with
        the keys ``rename``, ``exclude`` and ``include``.

        Raises:
            MissingParameterError: If no family parameter is given
            UpstreamError: If upstream does not answer with HTTP 200
            MalformedCssError: If the upstream stylesheet cannot be parsed
        """
        raw_families = request.query_params.getlist("family")
        if not raw_families:
            raise MissingParameterError("Missing font family")

        families = parse_families(raw_families)
        url = build_upstream_url(request.query_params.multi_items(), families, settings)

        upstream = await run_in_threadpool(
            fetch_css, url, request.headers.get("user-agent"), settings.timeout
        )
        content = rewrite_css(upstream.text, families)

        return Response(
            content=content,
            media_type="text/css",
            headers={"Cache-Control": settings.cache_control},
        )

    @app.exception_handler(MissingParameterError)
    async def missing_parameter_handler(request: Request, exc: MissingParameterError):
        """Reject requests without a family parameter."""
        return PlainTextResponse(f"400 Bad Request: {exc}", status_code=400)

    @app.exception_handler(UnicodeRangeError)
    async def unicode_range_handler(request: Request, exc: UnicodeRangeError):
        """Reject exclude options that are not valid unicode ranges."""
        logger.warning(f"Invalid range option: {exc}")
        return PlainTextResponse(f"400 Bad Request: {exc}", status_code=400)

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        """Pass non-200 upstream answers through unchanged."""
        return Response(
            content=exc.body,
            status_code=exc.status_code,
            media_type=exc.content_type,
        )

    @app.exception_handler(MalformedCssError)
    async def malformed_css_handler(request: Request, exc: MalformedCssError):
        """Fail the request when the upstream stylesheet breaks the expected layout."""
        logger.error(f"Malformed upstream CSS: {exc}")
        return PlainTextResponse(f"502 Bad Gateway: {exc}", status_code=502)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors."""
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)}
        )

    return app


# Create FastAPI app
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
