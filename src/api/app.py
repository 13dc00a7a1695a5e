import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapter.services.resend_email_sender import ResendEmailSender
from src.adapter.services.websocket_hub import WebSocketHub

from .error import ClientError, ServerError
from .response import failure

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(
        f"Client error on {request.method} {request.url.path}: "
        f"{exc.base_error.code} {exc.base_error.message}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(exc.base_error.message, exc.base_error.code),
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"Server error on {request.method} {request.url.path}: "
        f"{exc.base_error.code} {exc.base_error.message}"
    )
    message = exc.base_error.message
    if exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = "Internal server error"
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(message, exc.base_error.code),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ())[1:])
        message = f"{location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    logger.warning(f"Validation error on {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=failure(message, "VALIDATION_ERROR"),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure("Internal server error"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import init_models

    await init_models()
    yield


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="TaskFlow API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.email_sender = ResendEmailSender(
        api_key=ApplicationConfig.RESEND_API_KEY,
        api_url=ApplicationConfig.RESEND_API_URL,
        sender=ApplicationConfig.EMAIL_FROM,
        timeout=ApplicationConfig.EMAIL_TIMEOUT_SECONDS,
    )
    app.state.realtime_hub = WebSocketHub()

    from src.api.routes import (
        account,
        admin,
        health_check,
        notifications,
        realtime,
        tasks,
        teams,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(tasks.router, prefix=prefix, tags=["Tasks"])
    app.include_router(teams.router, prefix=prefix, tags=["Teams"])
    app.include_router(notifications.router, prefix=prefix, tags=["Notifications"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])
    app.include_router(account.router, prefix=prefix, tags=["Account"])
    app.include_router(realtime.router, tags=["Realtime"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
