"""Runtime settings read from the environment."""
from __future__ import annotations
import os
from dataclasses import dataclass

PROMPT_STRATEGIES = ("inline", "system")
CLEANUP_STRATEGIES = ("none", "strip_preamble")

DEFAULT_API_URL = "https://router.huggingface.co/v1/chat/completions"
DEFAULT_MODEL_ID = "HuggingFaceTB/SmolLM3-3B:hf-inference"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Settings injected into the app and the advice handler."""
    api_url: str = DEFAULT_API_URL
    api_token: str = ""
    model_id: str = DEFAULT_MODEL_ID
    max_tokens: int = 200
    temperature: float = 0.7
    prompt_strategy: str = "inline"
    cleanup: str = "none"
    debug_trace: bool = True
    prompts_path: str = "configs/prompts.yaml"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def __post_init__(self) -> None:
        if self.prompt_strategy not in PROMPT_STRATEGIES:
            raise ValueError(
                f"Unknown prompt strategy {self.prompt_strategy!r}; expected one of {PROMPT_STRATEGIES}"
            )
        if self.cleanup not in CLEANUP_STRATEGIES:
            raise ValueError(
                f"Unknown cleanup {self.cleanup!r}; expected one of {CLEANUP_STRATEGIES}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        The API token is only ever read from HF_TOKEN; there is no built-in fallback.
        """
        return cls(
            api_url=os.getenv("ADVICE_API_URL", DEFAULT_API_URL),
            api_token=os.getenv("HF_TOKEN", "").strip(),
            model_id=os.getenv("ADVICE_MODEL_ID", DEFAULT_MODEL_ID),
            max_tokens=int(os.getenv("ADVICE_MAX_TOKENS", "200")),
            temperature=float(os.getenv("ADVICE_TEMPERATURE", "0.7")),
            prompt_strategy=os.getenv("ADVICE_PROMPT_STRATEGY", "inline"),
            cleanup=os.getenv("ADVICE_CLEANUP", "none"),
            debug_trace=_env_bool("ADVICE_DEBUG_TRACE", True),
            prompts_path=os.getenv("ADVICE_PROMPTS_PATH", "configs/prompts.yaml"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("ADVICE_HOST", "0.0.0.0"),
            port=int(os.getenv("ADVICE_PORT", "8000")),
        )
