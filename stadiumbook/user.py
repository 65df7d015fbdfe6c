"""Users, their credentials and the logged-in session."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_HIDDEN_MARK = "password_hidden"


@dataclass
class User:
    """An account with a name, a password and a booking history."""

    username: str = ""
    password: str = field(default="", repr=False)
    booking_history: list[str] = field(default_factory=list)

    def check_password(self, candidate: str) -> bool:
        """True if ``candidate`` is this user's password."""
        return candidate == self.password

    def add_booking_to_history(self, info: str) -> None:
        """Record a description of a booking."""
        self.booking_history.append(info)

    def describe_history(self) -> str:
        """The booking history as text."""
        if not self.booking_history:
            return "No booking records."
        return "\n".join(["Booking history:", *(f"- {b}" for b in self.booking_history)])


class UserManager:
    """Registered users and the name of the one currently logged in."""

    def __init__(self, session_path: str | os.PathLike[str] = "session.txt") -> None:
        self.session_path = session_path
        self.users: list[User] = []
        self.current_username = ""

    def register(self, username: str, password: str) -> bool:
        """Add a user and log them in; False if the name is taken."""
        if any(user.username == username for user in self.users):
            return False
        self.users.append(User(username, password))
        self.current_username = username
        return True

    def login(self, username: str, password: str) -> bool:
        """Log a user in if the name and password match."""
        for user in self.users:
            if user.username == username and user.check_password(password):
                self.current_username = username
                return True
        return False

    def load(self, path: str | os.PathLike[str]) -> None:
        """Append users stored in a file; a missing file adds nothing."""
        try:
            handle = open(path, encoding="utf-8", newline="\n")
        except FileNotFoundError:
            return
        with handle:
            for line in handle:
                fields = line.removesuffix("\n").split(",")
                name = fields[0]
                secret = fields[1] if len(fields) > 1 else ""
                self.users.append(User(name, secret))

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write user names to a file; passwords are written masked."""
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.writelines(f"{user.username},{_HIDDEN_MARK}\n" for user in self.users)

    def save_session(self) -> None:
        """Store the current user's name in the session file."""
        with open(self.session_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(self.current_username)

    def load_session(self) -> None:
        """Restore the current user's name from the session file, if it has one."""
        try:
            with open(self.session_path, encoding="utf-8", newline="\n") as handle:
                first = handle.readline()
        except FileNotFoundError:
            return
        if first:
            self.current_username = first.removesuffix("\n")

    def logout(self) -> None:
        """Forget the current user and empty the session file."""
        self.current_username = ""
        with open(self.session_path, "w", encoding="utf-8"):
            pass