"""Plain-text storage of user and review lists."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from .review import Review
from .user import User

_PLACEHOLDER_MARK = "placeholder_password"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _lines(path: str | os.PathLike[str]) -> list[str]:
    with open(path, encoding="utf-8", newline="\n") as handle:
        return [line.removesuffix("\n") for line in handle]


def save_users(users: Iterable[User], path: str | os.PathLike[str]) -> None:
    """Write user names to a file; passwords are replaced by a placeholder."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.writelines(f"{user.username},{_PLACEHOLDER_MARK}\n" for user in users)


def load_users(path: str | os.PathLike[str]) -> list[User]:
    """Read users from a file of ``name,password`` lines."""
    users = []
    for line in _lines(path):
        fields = line.split(",")
        users.append(User(fields[0], fields[1] if len(fields) > 1 else ""))
    return users


def save_reviews(reviews: Iterable[Review], path: str | os.PathLike[str]) -> None:
    """Write reviews as ``user,stadium,rating,comment`` lines."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.writelines(
            f"{r.username},{r.stadium_name},{r.rating},{r.comment}\n" for r in reviews
        )


def load_reviews(path: str | os.PathLike[str]) -> list[Review]:
    """Read reviews from a file; the comment is the rest of each line."""
    reviews = []
    for line in _lines(path):
        parts = line.split(",", 3)
        parts += [""] * (4 - len(parts))
        username, stadium_name, rating, comment = parts
        match = _LEADING_INT.match(rating)
        if match is None:
            raise ValueError(f"invalid rating: {rating!r}")
        reviews.append(Review(username, stadium_name, comment, int(match.group(1))))
    return reviews