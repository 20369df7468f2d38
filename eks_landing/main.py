"""
FastAPI application proving a containerized web workload runs on Kubernetes (EKS).

Features
--------
- Landing page (`/`) rendered once as static HTML with links to the health
  endpoint and the infrastructure repository.
- Liveness/readiness endpoint (`/api/health`) returning `{"status":"ok"}`,
  safe to poll at any frequency.
- Prometheus metrics at (`/metrics`) via `prometheus-fastapi-instrumentator`,
  unless `METRICS_ENABLED=false`.
- `X-Content-Type-Options`, `X-Frame-Options` and `X-XSS-Protection` headers
  on every response.

Intended Use
------------
Packaged as a container image and run behind a Service/Ingress. Kubernetes
liveness and readiness probes point at `/api/health`; the only failure signal
is the process not answering.

Notes
-----
- No persistent state. Configuration comes from environment variables
  (ConfigMaps/Secrets) and only affects logging, metrics and binding, never
  the content served.
- `/docs`, `/redoc` and `/openapi.json` are disabled.

"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator

from eks_landing import __version__
from eks_landing.config import Settings, get_settings
from eks_landing.errors import install_error_handlers
from eks_landing.health import router as health_router
from eks_landing.logging_utils import configure_logging
from eks_landing.pages import router as pages_router
from eks_landing.security import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)

METRICS_PATH = "/metrics"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "starting %s %s (app_env=%s, metrics_enabled=%s)",
            app.title,
            app.version,
            settings.app_env,
            settings.metrics_enabled,
        )
        yield
        logger.info("shutting down %s", app.title)

    app = FastAPI(
        title="EKS Landing",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.include_router(pages_router)
    app.include_router(health_router, prefix="/api", tags=["health"])
    install_error_handlers(app)

    if settings.metrics_enabled:
        # per-app registry so several apps can live in one process
        instrumentator = Instrumentator(
            excluded_handlers=[METRICS_PATH],
            registry=CollectorRegistry(),
        )
        instrumentator.instrument(app).expose(app, endpoint=METRICS_PATH, include_in_schema=False)

    app.add_middleware(SecurityHeadersMiddleware)
    return app


app = create_app()
