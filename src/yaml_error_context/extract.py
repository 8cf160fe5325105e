from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import Location, RawError
from .spans import Position, offset_from_location


logger = logging.getLogger(__name__)

# The deserializer reports this triple for errors whose real location it lost.
SENTINEL_LOCATION = Location(index=0, line=1, column=1)

LINE_DELIMITER = " at line "
COLUMN_DELIMITER = " column "
MESSAGE_DELIMITER = " at "

_INDEX_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Error and context positions recovered from a deserialization error.

    `context_span` is only ever set together with `error_span`.
    """

    error_span: Position | None
    # Text before the first " at "; the positional suffixes after it are noise,
    # e.g. "at line 2 column 11 at line 2 column 11 at line 2 column 3".
    error_message: str
    context_span: Position | None = None


def is_sentinel_location(location: Location) -> bool:
    return location == SENTINEL_LOCATION


def clean_message(message: str) -> str:
    return message.partition(MESSAGE_DELIMITER)[0]


def _parse_index(text: str) -> int | None:
    if _INDEX_RE.fullmatch(text) is None:
        return None
    value = int(text)
    # Out-of-range indexes are malformed, not positions past the end of the file.
    if value > sys.maxsize:
        return None
    return value


def _line_column_pairs(message: str) -> Iterator[tuple[int, int]]:
    # Rightmost suffix first: each enclosing layer appends its own location.
    for fragment in reversed(message.rsplit(LINE_DELIMITER)):
        parts = fragment.split(COLUMN_DELIMITER)
        if len(parts) < 2:
            continue
        line = _parse_index(parts[0])
        column = _parse_index(parts[1])
        if line is not None and column is not None:
            yield line, column


def extract(file_contents: str, error: RawError) -> ExtractionResult:
    """Return the error location and clean message for `error`.

    A structured location equal to the sentinel is not the true location, so
    the positions are recovered from the `" at line L column C"` suffixes of
    the message instead. Example messages (truncated at the start):

        missing field `path` at line 2 column 12 at line 2 column 3
        unknown variant `~`, expected one of `a`, `b` at line 2 column 11 at line 2 column 11 at line 2 column 3

    The rightmost mark is the enclosing context and the one before it is the
    error itself; with a single mark, that mark is the error.
    """
    loc = error.location
    error_span: Position | None = None
    context_span: Position | None = None

    if loc is None:
        logger.debug("no structured location on error")
    elif not is_sentinel_location(loc):
        error_span = offset_from_location(file_contents, loc.line, loc.column)
    else:
        # TODO: messages may also end in "at position N"; not handled yet.
        pairs = _line_column_pairs(error.message)
        last_mark = next(pairs, None)
        second_to_last_mark = next(pairs, None)
        logger.debug(
            "sentinel location, recovered marks from message: last=%s second_to_last=%s",
            last_mark,
            second_to_last_mark,
        )
        if last_mark is not None:
            last_span = offset_from_location(file_contents, *last_mark)
            if second_to_last_mark is not None:
                error_span = offset_from_location(file_contents, *second_to_last_mark)
                context_span = last_span
            else:
                error_span = last_span

    return ExtractionResult(
        error_span=error_span,
        error_message=clean_message(error.message),
        context_span=context_span,
    )


def extract_from_exception(file_contents: str, exc: BaseException) -> ExtractionResult:
    return extract(file_contents, RawError.from_exception(exc))
