"""FastAPI application factory.

Each request runs inside the storefront domain context with its method and
path bound into the structlog context. An app-level dependency resolves the
caller from the ``Authorization`` header for every route.
"""

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_request_context
from storefront.api.errors import register_exception_handlers
from storefront.api.routes import auth_router, order_router, product_router, user_router
from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Catalogue browsing, order placement and token sign-in",
        dependencies=[Depends(get_request_context)],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        add_context(method=request.method, path=request.url.path)
        try:
            with storefront.domain_context():
                return await call_next(request)
        finally:
            clear_context()

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(user_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
