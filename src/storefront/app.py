"""Storefront FastAPI application.

The domain is initialised in the lifespan, so its providers live exactly as
long as the server process. Every request runs inside a domain context
pushed by middleware.

Usage:
    uvicorn storefront.app:app --host 0.0.0.0 --port 8080 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.domain import Domain
from starlette.middleware.sessions import SessionMiddleware

from storefront.api import auth_router, order_router, product_router
from storefront.api.errors import register_error_handlers
from storefront.domain import storefront
from storefront.utils import settings
from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def _lifespan(domain: Domain, seed_catalogue: bool):
    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        domain.init()
        logger.info("app.started", domain=domain.name)
        if seed_catalogue:
            from storefront.catalogue.seeding import seed_catalogue as seed

            with domain.domain_context():
                seed(source="startup")
        yield
        logger.info("app.stopped", domain=domain.name)

    return lifespan


def create_app(domain: Domain = storefront, seed_catalogue: bool | None = None, init_domain: bool = True) -> FastAPI:
    """Build the API around ``domain``.

    With ``init_domain=False`` the caller owns the domain's lifecycle (tests
    initialise it through their fixture).
    """
    if seed_catalogue is None:
        seed_catalogue = settings.SEED_CATALOGUE_ON_STARTUP

    app = FastAPI(
        title="Storefront API",
        description="Catalog, session auth and order placement",
        lifespan=_lifespan(domain, seed_catalogue) if init_domain else None,
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Bind request log context and push the storefront domain context."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        with domain.domain_context():
            return await call_next(request)

    # Added last so it wraps the domain middleware; sessions decode first.
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": {"name": domain.name}})

    return app


app = create_app()
