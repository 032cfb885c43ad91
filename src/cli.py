"""Command-line entry point: parse order utterances and print the results as JSON.

Examples:
    python -m src.cli "oka kg tomatolu" "2 kg bendakayalu"
    echo "do dozen eggs" | python -m src.cli --batch --indent 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.order_parser.parser import parse_multiple, parse_utterance
from src.order_parser.schema import ParseResult

logger = logging.getLogger(__name__)


def run(utterances: Sequence[str], *, batch: bool) -> list[ParseResult]:
    """Parse utterances one by one, or as a single combined batch."""

    if batch:
        return [parse_multiple(utterances)]
    return [parse_utterance(text) for text in utterances]


def _read_stdin() -> list[str]:
    return [line.strip() for line in sys.stdin if line.strip()]


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for parsing free-text grocery orders."""

    parser = argparse.ArgumentParser(description="Parse free-text grocery orders into JSON.")
    parser.add_argument(
        "utterances",
        nargs="*",
        help="Utterances to parse. Read from stdin (one per line) when omitted.",
    )
    parser.add_argument(
        "--batch",
        action="store_true",
        help="Combine all utterances into a single result.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (overrides OUTPUT_INDENT).",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (overrides LOG_LEVEL).")
    args = parser.parse_args(argv)

    load_dotenv(".env")
    try:
        settings = load_settings()
    except RuntimeError as exc:
        configure_logging(args.log_level or "INFO")
        logger.error("%s", exc)
        return 1

    configure_logging(args.log_level or settings.log_level)
    indent = args.indent if args.indent is not None else settings.output_indent

    utterances = args.utterances or _read_stdin()
    results = run(utterances, batch=args.batch)
    for result in results:
        print(result.model_dump_json(by_alias=True, indent=indent))

    logger.debug("printed results=%d batch=%s", len(results), args.batch)
    return 0


if __name__ == "__main__":
    sys.exit(main())
