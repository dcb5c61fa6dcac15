"""HTTP API for rubyglot."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TypeVar

from fastapi import FastAPI, HTTPException

from rubyglot import __version__
from rubyglot.config import load_config
from rubyglot.core import detect_language, run_localization
from rubyglot.errors import ValidationError
from rubyglot.helper import get_instance
from rubyglot.log import configure_logging
from rubyglot.models import DetectionResponse, HealthResponse, TextValue

T = TypeVar("T")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="rubyglot",
        version=__version__,
        description="Language identification and ruby-annotated transliteration API.",
    )
    config = load_config()
    configure_logging(config.log_level)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/detect", response_model=DetectionResponse, tags=["localization"])
    async def detect(value: TextValue) -> DetectionResponse:
        return await _guard(detect_language(value))

    @app.post("/v1/language", response_model=TextValue, tags=["localization"])
    async def language(value: TextValue) -> TextValue:
        helper = await get_instance()
        return await _guard(helper.set_language(value))

    @app.post("/v1/rich-text", response_model=TextValue, tags=["localization"])
    async def rich_text(value: TextValue) -> TextValue:
        helper = await get_instance()
        return await _guard(helper.set_rich_text(value))

    @app.post("/v1/localize", response_model=TextValue, tags=["localization"])
    async def localize(value: TextValue) -> TextValue:
        return await _guard(run_localization(value))

    return app


async def _guard(operation: Awaitable[T]) -> T:
    try:
        return await operation
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.issues) from exc


app = create_app()
