"""User account creation and removal."""

from __future__ import annotations

from .storage import Storage


def add_user(storage: Storage, name: str) -> int | None:
    """Add a user with zero balance; return 0, or None if it already exists."""
    return storage.add_user(name)


def remove_user(storage: Storage, name: str) -> int | None:
    """Remove a user; return its final balance, or None if not found."""
    return storage.remove_user(name)