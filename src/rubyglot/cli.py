"""CLI entrypoint for rubyglot."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from rubyglot.config import load_config
from rubyglot.core import detect_language, run_localization
from rubyglot.errors import ValidationError
from rubyglot.io import to_json, write_json
from rubyglot.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="rubyglot",
        description="Language identification and ruby-annotated transliteration.",
    )
    subparsers = parser.add_subparsers(dest="command")

    detect = subparsers.add_parser("detect", help="Detect the language of a text")
    detect.add_argument("text", help="Text to classify")

    annotate = subparsers.add_parser("annotate", help="Detect language and add ruby annotations")
    annotate.add_argument("text", help="Text to annotate")
    annotate.add_argument(
        "--language",
        default=None,
        help="ISO 639-1 code to use instead of detecting the language",
    )
    annotate.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )

    serve = subparsers.add_parser("serve", help="Run the rubyglot HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    configure_logging(config.log_level)

    if args.command == "detect":
        try:
            detection = asyncio.run(detect_language(args.text))
        except ValidationError as exc:
            print(str(exc), file=sys.stderr)
            return 2
        print(to_json(detection))
        return 0

    if args.command == "annotate":
        try:
            value = asyncio.run(run_localization(args.text, language_code=args.language))
        except ValidationError as exc:
            print(str(exc), file=sys.stderr)
            return 2
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        if args.output:
            write_json(value, args.output)
            print(f"Wrote localized text JSON to {args.output}")
            return 0
        print(to_json(value))
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`rubyglot serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "rubyglot.api:app",
            host=host,
            port=port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
