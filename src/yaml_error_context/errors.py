from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Structured error location as reported by the deserializer.

    `index` is 0-based; `line` and `column` are 1-based.
    """

    index: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class RawError:
    message: str
    location: Location | None = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_exception(cls, exc: BaseException) -> RawError:
        """Wrap an arbitrary exception, probing it for a `location`."""
        return cls(message=str(exc), location=_location_of(exc))


def _read(obj: object, name: str) -> object:
    # Attributes may also be zero-argument accessor methods.
    v = getattr(obj, name, None)
    if callable(v):
        try:
            return v()
        except Exception:
            return None
    return v


def _location_of(exc: BaseException) -> Location | None:
    return _coerce_location(_read(exc, "location"))


def _coerce_location(loc: object) -> Location | None:
    if loc is None or isinstance(loc, Location):
        return loc
    if isinstance(loc, tuple):
        if len(loc) == 3 and all(_is_index(v) for v in loc):
            return Location(index=loc[0], line=loc[1], column=loc[2])
        return None
    vals = tuple(_read(loc, name) for name in ("index", "line", "column"))
    if all(_is_index(v) for v in vals):
        return Location(index=vals[0], line=vals[1], column=vals[2])
    return None


def _is_index(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v >= 0
