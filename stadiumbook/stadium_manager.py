"""A collection of stadiums with lookup, search and file storage."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .stadium import Stadium, parse_stadium


def _read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a text file without their newline characters."""
    with open(path, encoding="utf-8", newline="\n") as handle:
        for line in handle:
            yield line.removesuffix("\n")


class StadiumManager:
    """Holds stadiums in the order they were added."""

    def __init__(self) -> None:
        self._stadiums: list[Stadium] = []

    def __iter__(self) -> Iterator[Stadium]:
        return iter(self._stadiums)

    def __len__(self) -> int:
        return len(self._stadiums)

    def add(self, stadium: Stadium) -> None:
        """Append a stadium."""
        self._stadiums.append(stadium)

    def get(self, stadium_id: int) -> Stadium | None:
        """The first stadium with this ID, or None."""
        return next((s for s in self._stadiums if s.stadium_id == stadium_id), None)

    def remove(self, stadium_id: int) -> bool:
        """Remove the first stadium with this ID; return whether one was found."""
        for index, stadium in enumerate(self._stadiums):
            if stadium.stadium_id == stadium_id:
                del self._stadiums[index]
                return True
        return False

    def describe_all(self) -> str:
        """One line of information per stadium."""
        return "\n".join(stadium.describe() for stadium in self._stadiums)

    def describe(self, stadium_id: int) -> str:
        """Information about one stadium, or a not-found message."""
        stadium = self.get(stadium_id)
        if stadium is None:
            return f"Stadium with ID {stadium_id} not found."
        return stadium.describe()

    def by_type(self, kind: str) -> list[Stadium]:
        """Stadiums whose type name is exactly ``kind``."""
        return [s for s in self._stadiums if s.kind == kind]

    def by_location(self, location: str) -> list[Stadium]:
        """Stadiums at exactly this location."""
        return [s for s in self._stadiums if s.location == location]

    def by_rating(self, rating: float) -> list[Stadium]:
        """Stadiums rated at least ``rating``."""
        return [s for s in self._stadiums if s.rating >= rating]

    def load(self, path: str | os.PathLike[str]) -> None:
        """Append the stadiums stored in a file, skipping lines of unknown type."""
        for line in _read_lines(path):
            stadium = parse_stadium(line)
            if stadium is not None:
                self._stadiums.append(stadium)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write every stadium to a file, one record per line."""
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.writelines(stadium.serialize() for stadium in self._stadiums)