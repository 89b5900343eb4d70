"""Advice handler: validate the food name, ask the chat-completion model, shape the reply.

One outbound call per request, no timeout and no retry. Failures coming from
the model layer are returned as HTTP 200 payloads; see ``common.errors``.
"""
from __future__ import annotations
import json
import logging
import time
import traceback
from typing import Any

import httpx

from food_advice.common.cleanup import CLEANUPS
from food_advice.common.config import Settings
from food_advice.common.errors import (
    AdviceError,
    ConfigurationError,
    EmptyResultError,
    ExtractionError,
    InputError,
    UpstreamModelError,
    UpstreamParseError,
)
from food_advice.common.schema import AdviceOut, ErrorOut, HandlerResult, LoadingOut
from food_advice.common.templates import PromptTemplate, build_messages, load_templates
from food_advice.common.trace import RequestTrace

LOGGER = logging.getLogger("food_advice.serve.handler")

LOADING_MESSAGE = "⏳ El modelo se está cargando. Espera 20-30 segundos y reintenta."
RAW_PREVIEW_CHARS = 500


class AdviceHandler:
    """Turns a food name into three short tips from the configured model."""

    def __init__(self, settings: Settings, templates: dict[str, PromptTemplate] | None = None) -> None:
        self.settings = settings
        if templates is None:
            templates = load_templates(settings.prompts_path)
        self.template = templates[settings.prompt_strategy]
        self.cleanup = CLEANUPS[settings.cleanup]

    def build_payload(self, food: str) -> dict[str, Any]:
        return {
            "model": self.settings.model_id,
            "messages": build_messages(self.template, food),
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
        }

    def advise(self, food: str | None) -> HandlerResult:
        """
        Run one request through validation, the upstream call and parsing.

        Never raises: every outcome, including unexpected exceptions, becomes a result.
        """
        trace = RequestTrace(enabled=self.settings.debug_trace)
        try:
            return self._advise(food, trace)
        except AdviceError as e:
            trace.log(f"Finished with error: {e.detail}")
            LOGGER.warning("%s: %s", type(e).__name__, e.detail)
            return HandlerResult(e.status_code, e.to_payload(trace.entries()))
        except Exception as e:
            trace.log(f"Unhandled error: {e}")
            LOGGER.exception("Advice request failed")
            return HandlerResult(
                500,
                ErrorOut(
                    error_detail=f"Error del servidor: {e}",
                    error_type=type(e).__name__,
                    stack=traceback.format_exc() if self.settings.debug_trace else None,
                    debug=trace.entries(),
                ),
            )

    def _advise(self, food: str | None, trace: RequestTrace) -> HandlerResult:
        trace.log(f'Food received: "{food}"')
        if not food:
            raise InputError("No se recibió alimento")
        if not self.settings.api_token:
            raise ConfigurationError("HF_TOKEN is not set")

        payload = self.build_payload(food)
        trace.log(f"Model: {self.settings.model_id}")
        trace.log(f"Endpoint: {self.settings.api_url}")
        trace.log(f"Request body: {json.dumps(payload, ensure_ascii=False)[:200]}")

        data, latency_ms = self._call_upstream(payload, trace)

        loading = self._check_error(data, trace)
        if loading is not None:
            return HandlerResult(200, loading)

        text = self._extract_text(data, trace).strip()
        text = self.cleanup(text)
        trace.log(f"Final text ({len(text)} chars): {text}")
        if not text:
            raise EmptyResultError("El modelo no generó texto")

        LOGGER.info("Advice generated in %sms", latency_ms)
        return HandlerResult(
            200,
            AdviceOut(
                generated_text=text,
                model_used=self.settings.model_id,
                processing_time=f"{latency_ms}ms",
                debug=trace.entries(),
            ),
        )

    def _call_upstream(self, payload: dict[str, Any], trace: RequestTrace) -> tuple[Any, int]:
        headers = {"Authorization": f"Bearer {self.settings.api_token}"}
        start = time.time()
        with httpx.Client(timeout=None) as client:
            r = client.post(self.settings.api_url, headers=headers, json=payload)
        latency_ms = int((time.time() - start) * 1000)
        trace.log(f"Request finished in {latency_ms}ms")
        trace.log(f"Status: {r.status_code} {r.reason_phrase}")

        body = r.text
        trace.log(f"Raw response ({RAW_PREVIEW_CHARS} chars): {body[:RAW_PREVIEW_CHARS]}")
        trace.log(f"Response length: {len(body)} chars")
        try:
            data = json.loads(body)
        except ValueError as e:
            raise UpstreamParseError(
                "Respuesta no válida del modelo",
                raw_response=body[:RAW_PREVIEW_CHARS],
                parse_error=str(e),
            ) from e
        trace.log("JSON parsed")
        return data, latency_ms

    def _check_error(self, data: Any, trace: RequestTrace) -> LoadingOut | None:
        """Map an ``error`` field to a loading notice or an UpstreamModelError."""
        if not isinstance(data, dict):
            return None
        error = data.get("error")
        if not error:
            return None
        trace.log(f"Model error: {json.dumps(error, ensure_ascii=False)}")
        if isinstance(error, str) and "loading" in error:
            return LoadingOut(generated_text=LOADING_MESSAGE, debug=trace.entries())
        if isinstance(error, dict) and error.get("message"):
            raise UpstreamModelError(f"Error del modelo: {error['message']}", full_error=error)
        raise UpstreamModelError(f"Error: {json.dumps(error, ensure_ascii=False)}")

    def _extract_text(self, data: Any, trace: RequestTrace) -> str:
        """``choices[0].message.content``, falling back to ``choices[0].text``."""
        choices = data.get("choices") if isinstance(data, dict) else None
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            choice = choices[0]
            message = choice.get("message")
            content = message.get("content") if isinstance(message, dict) else None
            if isinstance(content, str) and content:
                trace.log(f"Text taken from message.content: {content[:100]}")
                return content
            if isinstance(choice.get("text"), str) and choice["text"]:
                trace.log(f"Text taken from text: {choice['text'][:100]}")
                return choice["text"]

        keys = list(data) if isinstance(data, dict) else []
        trace.log(f"No generated text found; keys: {', '.join(keys)}")
        raise ExtractionError(
            "Formato de respuesta inesperado",
            available_keys=keys,
            raw_data=data,
        )
