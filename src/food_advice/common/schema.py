"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

class AdviceIn(BaseModel):
    food: str | None = None

class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str

class AdviceOut(BaseModel):
    generated_text: str
    model_used: str
    processing_time: str
    success: bool = True
    debug: list[str] | None = None

class LoadingOut(BaseModel):
    generated_text: str
    is_loading: bool = True
    debug: list[str] | None = None

class ErrorOut(BaseModel):
    """Error payload; only the fields relevant to the failure are set."""
    error_detail: str
    raw_response: str | None = None
    parse_error: str | None = None
    full_error: Any = None
    available_keys: list[str] | None = None
    raw_data: Any = None
    error_type: str | None = None
    stack: str | None = None
    debug: list[str] | None = None

@dataclass
class HandlerResult:
    """HTTP status plus the payload returned to the caller."""
    status_code: int
    body: AdviceOut | LoadingOut | ErrorOut

    def to_dict(self) -> dict[str, Any]:
        return self.body.model_dump(exclude_none=True)
