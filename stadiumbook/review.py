"""User reviews of stadiums."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Review:
    """A user's comment and rating for a stadium."""

    username: str = ""
    stadium_name: str = ""
    comment: str = ""
    rating: int = 0

    def serialize(self) -> str:
        """The review as a semicolon-separated record line, newline included."""
        return f"{self.username};{self.stadium_name};{self.comment};{self.rating}\n"

    @classmethod
    def deserialize(cls, data: str) -> Review:
        """Build a review from a record line."""
        parts = data.split(";", 3)
        if len(parts) < 4:
            raise ValueError(f"malformed review record: {data!r}")
        username, stadium_name, comment, rating = parts
        match = _LEADING_INT.match(rating)
        if match is None:
            raise ValueError(f"invalid rating: {rating!r}")
        return cls(username, stadium_name, comment, int(match.group(1)))

    def describe(self) -> str:
        """Several lines describing the review."""
        return (
            f"User: {self.username}\n"
            f"Stadium: {self.stadium_name}\n"
            f"Comment: {self.comment}\n"
            f"Rating: {self.rating}/5"
        )