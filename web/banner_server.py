#!/usr/bin/env python3
"""
bannerart — Banner Art Server

FastAPI service (default port 8080) that:
- Loads every configured font once at startup and refuses to start if any
  of them is malformed
- Renders text into block-letter art on POST /generate
- Reports health and available styles for the frontend

Usage:
    python web/banner_server.py
    python web/banner_server.py --port 9000 --debug
    uvicorn --factory web.banner_server:create_app
"""

import argparse
import logging
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

# Ensure project root is on path
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from src.banner.errors import RequestError
from src.banner.registry import FontRegistry
from src.banner.service import generate_art
from src.config.banner_config import BannerConfig
from src.utils.logging_config import setup_logging

logger = logging.getLogger("bannerart.server")

INVALID_REQUEST_MESSAGE = "Invalid request format"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class GenerateRequest(BaseModel):
    text: str = ""
    style: str = ""


class GenerateResponse(BaseModel):
    art: str


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------

def _error(message: str, status_code: int, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


async def _request_error_handler(request: Request, exc: RequestError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return _error(exc.message, 400)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
    return _error(INVALID_REQUEST_MESSAGE, 400)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    headers = getattr(exc, "headers", None)
    if exc.status_code == 405:
        return _error(METHOD_NOT_ALLOWED_MESSAGE, 405, headers)
    return _error(str(exc.detail), exc.status_code, headers)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app(config: Optional[BannerConfig] = None, registry: Optional[FontRegistry] = None) -> FastAPI:
    """Build the FastAPI app.

    Fonts are loaded in the lifespan handler unless a ready *registry* is
    passed in. A FontLoadError raised there aborts startup.
    """
    config = config or BannerConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.started_at = time.time()
        app.state.registry = registry if registry is not None else FontRegistry.load(config.font_paths())
        logger.info(
            "Banner Art Server ready on %s:%d with styles: %s",
            config.host, config.port, ", ".join(app.state.registry.styles),
        )
        yield
        logger.info("Banner Art Server stopped")

    app = FastAPI(title="bannerart", lifespan=lifespan)
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(RequestError, _request_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    # -----------------------------------------------------------------------
    # Endpoints
    # -----------------------------------------------------------------------

    @app.post("/generate", response_model=GenerateResponse)
    def generate(req: GenerateRequest, request: Request):
        """Render text into banner art with the requested style."""
        art = generate_art(
            request.app.state.registry,
            req.text,
            req.style,
            max_length=request.app.state.config.max_text_length,
        )
        return GenerateResponse(art=art)

    @app.get("/api/banner/styles")
    async def get_styles(request: Request):
        """List the styles this server can render."""
        return {"styles": request.app.state.registry.styles}

    @app.get("/api/banner/status")
    async def get_status(request: Request):
        """Health/status endpoint for heartbeat checks."""
        uptime = time.time() - request.app.state.started_at
        return {
            "service": "banner_server",
            "status": "ok",
            "port": config.port,
            "uptime_seconds": round(uptime, 1),
            "styles": request.app.state.registry.styles,
            "max_text_length": config.max_text_length,
        }

    return app


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

parser = argparse.ArgumentParser(description="bannerart — Banner Art Server")
parser.add_argument("--host", default=None, help="Bind host (default: BANNER_HOST or 0.0.0.0)")
parser.add_argument("--port", type=int, default=None, help="Bind port (default: BANNER_PORT or 8080)")
parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
parser.add_argument("--log-dir", type=str, default=None, help="Custom log directory")


def main(argv: Optional[list[str]] = None) -> None:
    args = parser.parse_args(argv)
    setup_logging(server_name="banner", debug=args.debug, log_dir=args.log_dir)

    config = BannerConfig.from_env()
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port

    # Fonts load before the socket binds
    registry = FontRegistry.load(config.font_paths())
    uvicorn.run(
        create_app(config, registry),
        host=config.host,
        port=config.port,
        log_level="debug" if args.debug else "info",
    )


if __name__ == "__main__":
    main()
