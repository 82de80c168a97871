"""Balance queries, deposits and withdrawals."""

from __future__ import annotations

from .storage import Storage


def get_balance(storage: Storage, name: str) -> int | None:
    """Return the user's balance, or None if the user does not exist."""
    return storage.get_balance(name)


def deposit(storage: Storage, name: str, amount: int) -> None:
    """Deposit amount; raises UserNotFoundError for an unknown user."""
    storage.deposit(name, amount)


def withdraw(storage: Storage, name: str, amount: int) -> None:
    """Withdraw amount; raises UserNotFoundError or InsufficientFundsError."""
    storage.withdraw(name, amount)