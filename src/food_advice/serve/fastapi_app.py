"""FastAPI front for the advice handler.

Endpoints (all on /):
- OPTIONS  CORS preflight, empty body
- GET      health
- POST     { "food": "..." }
- any other method  405
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from food_advice.common.config import Settings
from food_advice.common.logging_setup import setup_logging
from food_advice.common.schema import AdviceIn, HealthOut
from food_advice.serve.handler import AdviceHandler

LOGGER = logging.getLogger("food_advice.serve.app")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS, GET",
    "Access-Control-Allow-Headers": "Content-Type",
}

def create_app(settings: Settings, handler: AdviceHandler | None = None) -> FastAPI:
    """
    Build the application around one handler configured from ``settings``.

    Args:
        settings: Runtime settings.
        handler: Pre-built handler; built from ``settings`` when omitted.
    """
    if handler is None:
        handler = AdviceHandler(settings)

    app = FastAPI(title="Food Advice")
    app.state.settings = settings
    app.state.handler = handler

    @app.on_event("startup")
    def _log_configuration() -> None:
        LOGGER.info(
            "Serving model %s (prompt=%s, cleanup=%s, trace=%s)",
            settings.model_id,
            settings.prompt_strategy,
            settings.cleanup,
            settings.debug_trace,
        )
        if not settings.api_token:
            LOGGER.warning("HF_TOKEN is not set; advice requests will fail with 500")

    @app.middleware("http")
    async def _cors_headers(request: Request, call_next):  # noqa: ANN001
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response

    @app.options("/")
    def preflight() -> Response:
        return Response(status_code=200)

    @app.get("/", response_model=HealthOut)
    def health() -> HealthOut:
        return HealthOut(
            status="Online",
            message="Servidor listo (HF Router API)",
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    @app.post("/")
    def advise(body: AdviceIn | None = None) -> JSONResponse:
        result = handler.advise(body.food if body is not None else None)
        return JSONResponse(status_code=result.status_code, content=result.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 405:
            return JSONResponse(status_code=405, content={"error": "Método no permitido"}, headers=exc.headers)
        return await http_exception_handler(request, exc)

    return app

SETTINGS = Settings.from_env()
setup_logging(SETTINGS.log_level)
app = create_app(SETTINGS)
