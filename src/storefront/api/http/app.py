"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from storefront.api.http.app_data import ApplicationDependencies
from storefront.api.http.routers.health import router as health_router
from storefront.api.http.routers.service.carbon import router as carbon_router
from storefront.api.http.routers.service.product import router as product_router
from storefront.api.http.routers.service.search import router as search_router
from storefront.api.utils.app_startup import configure_logging
from storefront.core.errors import INTERNAL_ERROR_MESSAGE, StorefrontError
from storefront.core.services import MongoConnectionService, StripeClientService
from storefront.runtime.context import get_config
from storefront.runtime.settings import EnvironmentVariables

configure_logging()


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="Storefront API",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

app.add_middleware(SecurityHeadersMiddleware)

__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
if get_config().app.environment == "production" and (
    "*" in get_config().app.cors.origins
):
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)


# --- Error serialisation ---
@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"error": INTERNAL_ERROR_MESSAGE},
                headers={"X-Request-ID": request_id},
            )


# --- Router registration ---
app.include_router(product_router, prefix="/api", tags=["products"])
app.include_router(search_router, prefix="/api", tags=["search"])
app.include_router(carbon_router, prefix="/api", tags=["carbon"])
app.include_router(health_router)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    env = EnvironmentVariables()
    logger.info("Starting up application in {} environment", config.app.environment)

    if not env.stripe_publishable_key:
        logger.warning("STRIPE_PUBLISHABLE_KEY not set; payment client unavailable")

    app.state.app_dependencies = ApplicationDependencies(
        database_service=MongoConnectionService(config.database),
        payment_service=StripeClientService(env.stripe_publishable_key),
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.close()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # request logging middleware covers this
    )
