"""Launch the advice API under uvicorn."""
from __future__ import annotations

import uvicorn

from food_advice.common.config import Settings
from food_advice.common.logging_setup import setup_logging

def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(
        "food_advice.serve.fastapi_app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()
