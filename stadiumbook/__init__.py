"""Stadiums, users, login sessions and reviews, stored in plain text files."""

__version__ = "0.1.0"