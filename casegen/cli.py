from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from .config import GenerationConfig
from .runner import generate_and_store
from .storage import CsvSheetStore


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casegen",
        description="Generate structured test cases from free-text test scenarios",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_cmd = subparsers.add_parser("generate", help="Generate test cases into a CSV sheet")
    generate_cmd.add_argument(
        "--scenario",
        dest="scenarios",
        action="append",
        default=[],
        help="Scenario text. Repeat the flag for several scenarios.",
    )
    generate_cmd.add_argument(
        "--scenarios-file",
        default=None,
        help="Text file with one scenario per line.",
    )
    generate_cmd.add_argument("--output", default="test_cases.csv", help="CSV file to write")
    generate_cmd.add_argument("--provider", default="gemini")
    generate_cmd.add_argument("--model", default="gemini-1.5-flash")
    generate_cmd.add_argument("--api-key", default=os.getenv("API_KEY"))
    generate_cmd.add_argument("--base-url", default=None)
    generate_cmd.add_argument("--temperature", type=float, default=0.2)
    generate_cmd.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_cli()
    args = parser.parse_args(argv)

    if args.command == "generate":
        return _run_generate(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_generate(args: argparse.Namespace) -> int:
    setup_logging(args.verbose)

    try:
        config = GenerationConfig(
            provider=args.provider,
            model=args.model,
            api_key=args.api_key,
            base_url=args.base_url,
            temperature=args.temperature,
        )
        scenarios = _collect_scenarios(args.scenarios, args.scenarios_file)
    except (OSError, ValueError, PydanticValidationError) as exc:
        print(f"casegen error: {exc}", file=sys.stderr)
        return 2

    report = generate_and_store(
        scenarios,
        config,
        CsvSheetStore(args.output),
        progress=_print_progress,
    )
    print(report.message)
    return 2 if report.status == "error" else 0


def _collect_scenarios(inline: list[str], scenarios_file: str | None) -> list[str]:
    scenarios = list(inline)
    if scenarios_file:
        text = Path(scenarios_file).read_text(encoding="utf-8")
        scenarios.extend(text.splitlines())
    return scenarios


def _print_progress(percent: int) -> None:
    print(f"Progress: {percent}%", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
