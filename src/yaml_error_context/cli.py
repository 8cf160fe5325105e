from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .errors import Location, RawError
from .extract import extract


logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.WARNING) -> None:
    pkg_logger = logging.getLogger("yaml_error_context")
    pkg_logger.setLevel(level)
    pkg_logger.handlers = []

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)


def _to_jsonable(obj):
    if is_dataclass(obj):
        return {k: _to_jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, (tuple, list)):
        return [_to_jsonable(x) for x in obj]
    return obj


def _parse_location(text: str) -> Location:
    parts = text.split(":")
    try:
        index, line, column = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected INDEX:LINE:COLUMN, got {text!r}") from None
    if min(index, line, column) < 0:
        raise argparse.ArgumentTypeError(f"location values must be non-negative, got {text!r}")
    return Location(index=index, line=line, column=column)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="yaml-error-context",
        description="Recover error and context locations from a YAML deserialization error",
    )
    ap.add_argument("file", help="YAML file the error was reported for")
    ap.add_argument("-m", "--message", required=True, help="Error display string")
    ap.add_argument(
        "-l",
        "--location",
        type=_parse_location,
        default=None,
        help="Structured error location as INDEX:LINE:COLUMN",
    )
    ap.add_argument("--json", action="store_true", help="Print the result as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    ap.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    if args.debug:
        setup_logging(logging.DEBUG)
    elif args.verbose:
        setup_logging(logging.INFO)
    else:
        setup_logging(logging.WARNING)

    path = Path(args.file)
    try:
        src = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {path}: {e}", file=sys.stderr)
        return 1
    logger.info("read %d characters from %s", len(src), path)

    res = extract(src, RawError(message=args.message, location=args.location))
    if args.json:
        print(json.dumps(_to_jsonable(res), indent=2, sort_keys=True))
        return 0

    if res.error_span is None:
        print(f"{path}: error: {res.error_message}")
    else:
        print(f"{path}:{res.error_span.line}:{res.error_span.column}: error: {res.error_message}")
    if res.context_span is not None:
        print(f"{path}:{res.context_span.line}:{res.context_span.column}: note: enclosing context")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
