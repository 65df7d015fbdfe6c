"""Stadiums that can be booked, and their one-line text form."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_FIELD_COUNT = 6


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _leading_float(text: str) -> float:
    """Read the number at the start of ``text``, ignoring what follows it."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def _format_number(value: float) -> str:
    """Render a number the way a default-formatted stream does (6 significant digits)."""
    return f"{value:g}"


@dataclass
class Stadium(ABC):
    """A bookable venue; concrete kinds define ``kind``."""

    stadium_id: int = 0
    name: str = ""
    location: str = ""
    price_per_hour: float = 0.0
    rating: float = 0.0

    @property
    @abstractmethod
    def kind(self) -> str:
        """The stadium's type name, as written in its record."""

    def describe(self) -> str:
        """One line of human-readable information about the stadium."""
        return (
            f"[{self.kind}] ID: {self.stadium_id}, Name: {self.name}, "
            f"Location: {self.location}, Price: {_format_number(self.price_per_hour)}, "
            f"Rating: {_format_number(self.rating)}"
        )

    def serialize(self) -> str:
        """The stadium as a comma-separated record line, newline included."""
        return (
            f"{self.kind},{self.stadium_id},{self.name},{self.location},"
            f"{_format_number(self.price_per_hour)},{_format_number(self.rating)}\n"
        )

    @classmethod
    def deserialize(cls, data: str) -> Stadium:
        """Build a stadium of this class from a record line; the type field is skipped."""
        fields = data.split(",")
        fields += [""] * (_FIELD_COUNT - len(fields))
        _, ident, name, location, price, rating = fields[:_FIELD_COUNT]
        return cls(
            _leading_int(ident),
            name,
            location,
            _leading_float(price),
            _leading_float(rating),
        )


class FootballStadium(Stadium):
    """A football pitch."""

    kind = "Football"


class BasketballStadium(Stadium):
    """A basketball court."""

    kind = "Basketball"


_BY_KIND: dict[str, type[Stadium]] = {
    cls.kind: cls for cls in (FootballStadium, BasketballStadium)
}

_ACCEPTED_KINDS: dict[str, type[Stadium]] = {
    name: cls
    for kind, cls in _BY_KIND.items()
    for name in (kind, kind.lower())
}


def parse_stadium(line: str) -> Stadium | None:
    """Parse a record line into a stadium, or return None if its type is unknown."""
    kind = line.split(",", 1)[0]
    cls = _BY_KIND.get(kind)
    if cls is None:
        return None
    return cls.deserialize(line)


def make_stadium(
    kind: str,
    stadium_id: int,
    name: str,
    location: str,
    price_per_hour: float,
    rating: float,
) -> Stadium:
    """Create a stadium from a type name such as ``Football`` or ``basketball``."""
    cls = _ACCEPTED_KINDS.get(kind)
    if cls is None:
        raise ValueError(f"Invalid type: {kind!r}")
    return cls(stadium_id, name, location, price_per_hour, rating)