"""In-memory account storage with CSV persistence."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

DEFAULT_USERS = ("John", "Alice", "Bob", "Vasya")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


class AccountError(Exception):
    """Base class for account operation failures."""


class UserNotFoundError(AccountError):
    """Raised when an operation refers to an unknown user."""

    def __init__(self, name: str) -> None:
        super().__init__("Пользователь не найден")
        self.name = name


class InsufficientFundsError(AccountError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, name: str, balance: int, amount: int) -> None:
        super().__init__("Недостаточно средств")
        self.name = name
        self.balance = balance
        self.amount = amount


def _parse_balance(text: str) -> int:
    """Parse a 64-bit signed integer; anything unparsable yields 0."""
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        return 0
    return value


def _decoded_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield UTF-8 lines, stopping at the first one that does not decode."""
    for raw in stream:
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            return


class Storage:
    """A bank: a mapping from user name to balance."""

    def __init__(self) -> None:
        self.accounts: dict[str, int] = {}

    def add_user(self, name: str) -> int | None:
        """Create a user with zero balance; return 0, or None if it exists."""
        if name in self.accounts:
            return None
        self.accounts[name] = 0
        return 0

    def remove_user(self, name: str) -> int | None:
        """Remove a user and return its final balance, or None if unknown."""
        return self.accounts.pop(name, None)

    def get_balance(self, name: str) -> int | None:
        """Return the user's balance, or None if unknown."""
        return self.accounts.get(name)

    def deposit(self, name: str, amount: int) -> None:
        """Add amount to the user's balance."""
        if name not in self.accounts:
            raise UserNotFoundError(name)
        self.accounts[name] += amount

    def withdraw(self, name: str, amount: int) -> None:
        """Take amount from the user's balance if it is large enough."""
        if name not in self.accounts:
            raise UserNotFoundError(name)
        balance = self.accounts[name]
        if balance < amount:
            raise InsufficientFundsError(name, balance, amount)
        self.accounts[name] = balance - amount

    def get_all(self) -> Iterator[tuple[str, int]]:
        """Iterate over (name, balance) pairs."""
        return iter(list(self.accounts.items()))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Storage:
        """Build a storage from "Name,Balance" lines; malformed lines are skipped."""
        storage = cls()
        for line in lines:
            parts = line.strip().split(",")
            if len(parts) != 2:
                continue
            name, balance_text = parts
            storage.add_user(name)
            storage.deposit(name, _parse_balance(balance_text))
        return storage

    def to_lines(self) -> list[str]:
        """Return the storage as "Name,Balance" lines without line endings."""
        return [f"{name},{balance}" for name, balance in self.get_all()]

    @classmethod
    def load_data(cls, path: str | Path) -> Storage:
        """Load a storage from a CSV file, or create the default users if absent."""
        path = Path(path)
        if path.exists():
            with path.open("rb") as stream:
                return cls.from_lines(_decoded_lines(stream))
        storage = cls()
        for name in DEFAULT_USERS:
            storage.add_user(name)
        return storage

    def save(self, path: str | Path) -> None:
        """Write the storage to a CSV file, replacing its content."""
        data = "".join(f"{line}\n" for line in self.to_lines())
        Path(path).write_text(data, encoding="utf-8", newline="")