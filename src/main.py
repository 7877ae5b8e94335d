from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.schemas import ErrorResponse
from src.api.routes import PLAIN_TEXT_ERROR_PATHS, router
from src.core.config import get_settings
from src.core.constants import ErrorMessages

import logging

# Basic console logging configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = get_settings()

    logger.info(
        "Starting | env=%s | model=%s | max_tokens=%d | openai=%s | convertapi=%s | timeout=%.1fs",
        settings.ENVIRONMENT,
        settings.COMPLETION_MODEL.value,
        settings.COMPLETION_MAX_TOKENS,
        settings.OPENAI_BASE_URL,
        settings.CONVERTAPI_BASE_URL,
        settings.UPSTREAM_TIMEOUT,
    )

    try:
        yield
    finally:
        logger.info("Shutting down")


# Fails fast when credentials are missing
settings = get_settings()

app = FastAPI(
    title="Proxy API",
    description="Completion and PDF-to-DOCX conversion proxy endpoints",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url=None,
)

app.include_router(router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "Invalid request body | path=%s | errors=%s",
        request.url.path,
        exc.errors(),
    )
    if request.url.path in PLAIN_TEXT_ERROR_PATHS:
        return PlainTextResponse(
            ErrorMessages.INVALID_BODY,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=ErrorMessages.INVALID_BODY).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=ErrorMessages.INTERNAL).model_dump(),
    )


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
