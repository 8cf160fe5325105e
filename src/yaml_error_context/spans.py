from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based character indexes; line/column are 1-based.
    """

    offset: int
    line: int
    column: int


def offset_from_location(src: str, line: int, column: int) -> Position:
    """Resolve a 1-based (line, column) pair to a position within `src`.

    Columns past the end of a line stop on that line's newline, and lines past
    the end of the text stop at the end of the text.
    """
    offset = 0
    cur_line = 1
    cur_col = 1
    for ch in src:
        if cur_line > line or (cur_line == line and cur_col >= column):
            break
        if ch == "\n":
            if cur_line == line:
                break
            cur_line += 1
            cur_col = 1
        else:
            cur_col += 1
        offset += 1
    return Position(offset=offset, line=cur_line, column=cur_col)
