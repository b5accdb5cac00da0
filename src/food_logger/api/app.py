"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from food_logger.api.models import ApiError, TextLogRequest
from food_logger.app_logging import configure_logging
from food_logger.config import parse_csv_setting
from food_logger.containers import AppContainer
from food_logger.domain.errors import (
    ExtractionCause,
    ExtractionFailure,
    TranscriptionFailure,
)
from food_logger.domain.nutrition import NutritionLog

_UNPROCESSABLE = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    allowed_extensions = parse_csv_setting(
        container.settings.allowed_audio_extensions
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(TranscriptionFailure)
    async def transcription_failed(
        request: Request, exc: TranscriptionFailure
    ) -> JSONResponse:
        logger.error("Transcription failed: %s", exc)
        return _error_response(
            _UNPROCESSABLE,
            "Processing failed",
            "Could not understand the audio. Please ensure it is clear and "
            "in a supported format.",
        )

    @app.exception_handler(ExtractionFailure)
    async def extraction_failed(
        request: Request, exc: ExtractionFailure
    ) -> JSONResponse:
        if exc.cause is ExtractionCause.INVALID_INPUT:
            return _error_response(
                status.HTTP_400_BAD_REQUEST,
                "No text provided",
                "Please provide text describing the food you ate",
            )
        logger.error("Nutrition parsing failed (%s): %s", exc.cause.value, exc)
        return _error_response(
            _UNPROCESSABLE,
            "Processing failed",
            "Could not parse food information from the description.",
        )

    @app.exception_handler(RequestValidationError)
    async def request_invalid(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected request body: %s", exc.errors())
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "No text provided",
            "Please provide text describing the food you ate",
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/brands")
    async def list_brands(request: Request) -> dict[str, object]:
        """Return the brands recognised in item context."""
        state_container: AppContainer = request.app.state.container
        brands = state_container.brand_matcher.all_brands()
        return {"brands": [brand.model_dump() for brand in brands]}

    @app.post(
        "/api/log/text",
        response_model=NutritionLog,
        responses={400: {"model": ApiError}, 422: {"model": ApiError}},
    )
    async def log_text(body: TextLogRequest, request: Request) -> NutritionLog:
        """Log a meal from a typed description."""
        state_container: AppContainer = request.app.state.container
        return await state_container.food_log_service.log_text(body.text or "")

    @app.post(
        "/api/log/voice",
        response_model=NutritionLog,
        responses={400: {"model": ApiError}, 422: {"model": ApiError}},
    )
    async def log_voice(
        request: Request, audio: UploadFile | None = File(default=None)
    ) -> NutritionLog | JSONResponse:
        """Log a meal from an uploaded audio recording."""
        state_container: AppContainer = request.app.state.container
        if audio is None or not audio.filename:
            return _error_response(
                status.HTTP_400_BAD_REQUEST,
                "No audio file provided",
                "Please provide an audio file in the request",
            )
        if not _has_allowed_extension(audio.filename, allowed_extensions):
            return _error_response(
                status.HTTP_400_BAD_REQUEST,
                "Invalid file type",
                "Only audio files are allowed.",
            )
        content = await audio.read()
        if len(content) > state_container.settings.max_audio_bytes:
            return _error_response(
                status.HTTP_400_BAD_REQUEST,
                "File too large",
                "Audio file exceeds maximum size limit",
            )
        logger.info(
            "Processing audio file %s (%s bytes)", audio.filename, len(content)
        )
        return await state_container.food_log_service.log_voice(
            content, audio.filename
        )

    return app


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    payload = ApiError(error=error, message=message, status_code=status_code)
    return JSONResponse(
        status_code=status_code, content=payload.model_dump(by_alias=True)
    )


def _has_allowed_extension(filename: str, allowed: tuple[str, ...]) -> bool:
    """Return True when the filename ends with one of the allowed extensions."""
    if not allowed:
        return True
    return filename.lower().endswith(allowed)
