from __future__ import annotations

from .errors import Location, RawError
from .extract import (
    SENTINEL_LOCATION,
    ExtractionResult,
    clean_message,
    extract,
    extract_from_exception,
    is_sentinel_location,
)
from .spans import Position, offset_from_location

__all__ = [
    "SENTINEL_LOCATION",
    "ExtractionResult",
    "Location",
    "Position",
    "RawError",
    "clean_message",
    "extract",
    "extract_from_exception",
    "is_sentinel_location",
    "offset_from_location",
]
