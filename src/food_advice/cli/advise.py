"""Ask for advice about one food from the command line, without starting the server."""
from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import sys

from food_advice.common.config import CLEANUP_STRATEGIES, PROMPT_STRATEGIES, Settings
from food_advice.common.logging_setup import setup_logging
from food_advice.common.schema import AdviceOut, LoadingOut
from food_advice.serve.handler import AdviceHandler

LOGGER = logging.getLogger("food_advice.cli")

def main(argv: list[str] | None = None) -> int:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    ap = argparse.ArgumentParser(description="Get three short cooking tips for a food")
    ap.add_argument("--food", required=True, help="Food name")
    ap.add_argument("--strategy", choices=PROMPT_STRATEGIES, default=settings.prompt_strategy)
    ap.add_argument("--cleanup", choices=CLEANUP_STRATEGIES, default=settings.cleanup)
    ap.add_argument("--model", default=settings.model_id, help="Model identifier")
    args = ap.parse_args(argv)

    settings = dataclasses.replace(
        settings,
        prompt_strategy=args.strategy,
        cleanup=args.cleanup,
        model_id=args.model,
        debug_trace=False,
    )
    result = AdviceHandler(settings).advise(args.food)
    if isinstance(result.body, AdviceOut):
        LOGGER.info("Latency: %s", result.body.processing_time)
        print(result.body.generated_text)
        return 0
    if isinstance(result.body, LoadingOut):
        print(result.body.generated_text, file=sys.stderr)
        return 1
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), file=sys.stderr)
    return 1

if __name__ == "__main__":
    sys.exit(main())
