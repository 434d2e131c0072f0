import logging
import time
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.error import ClientError
from src.api.routes import services, payments, invoices, settings

logger = logging.getLogger(__name__)


def error_response(config, status_code: int, code: str, message: str, reason=None) -> JSONResponse:
    body = {"code": code, "message": message}
    if reason and config.ENVIRONMENT != "production":
        body["reason"] = reason
    return JSONResponse(status_code=status_code, content={"error": body})


def init_sentry(config):
    import sentry_sdk

    sentry_sdk.init(
        dsn=config.DSN_SENTRY,
        environment=config.SENTRY_ENVIRONMENT,
        traces_sample_rate=0.1,
    )
    logger.info("Sentry initialized")


def create_app(config) -> FastAPI:
    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        init_sentry(config)

    app = FastAPI(
        title="ISP Billing Service",
        description="Recurring invoicing, payment allocation and service provisioning",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.time()
            response = await call_next(request)
            duration_ms = int((time.time() - started) * 1000)
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms}ms)"
            )
            return response

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        if exc.status_code >= 500:
            logger.error(f"{exc.error.code} on {request.url.path}: {exc.error.reason}")
        return error_response(
            config, exc.status_code, exc.error.code, exc.error.message, exc.error.reason
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else "Invalid request parameters"
        return error_response(
            config, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", message, str(exc.errors())
        )

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    app.include_router(services.router, prefix=config.API_PREFIX)
    app.include_router(payments.router, prefix=config.API_PREFIX)
    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(settings.router, prefix=config.API_PREFIX)

    return app
