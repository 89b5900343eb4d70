"""Failures raised while producing advice and the payloads they map to.

Everything that originates from the model layer is a soft error: HTTP 200
with an ``error_detail`` payload, so clients branch on the payload shape.
Only a missing input is reported with an error status.
"""
from __future__ import annotations
from typing import Any

from food_advice.common.schema import ErrorOut


class ConfigurationError(RuntimeError):
    """Settings needed to reach the model are missing."""


class AdviceError(Exception):
    """Base class for failures that have a defined response payload."""

    status_code = 200

    def __init__(self, detail: str, **fields: Any) -> None:
        super().__init__(detail)
        self.detail = detail
        self.fields = fields

    def to_payload(self, debug: list[str] | None = None) -> ErrorOut:
        return ErrorOut(error_detail=self.detail, debug=debug, **self.fields)


class InputError(AdviceError):
    """The request did not carry a food name."""

    status_code = 400


class UpstreamParseError(AdviceError):
    """The model endpoint returned a body that is not JSON."""


class UpstreamModelError(AdviceError):
    """The model endpoint answered with an ``error`` field."""


class ExtractionError(AdviceError):
    """The body parsed but holds no generated text where it is expected."""


class EmptyResultError(AdviceError):
    """Generated text was empty after trimming and cleanup."""
