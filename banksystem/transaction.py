"""Transactions that act on a storage, creating accounts as needed."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .storage import Storage


class TxError(enum.Enum):
    """Kinds of transaction failure."""

    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INVALID_ACCOUNT = "InvalidAccount"


class TransactionError(Exception):
    """Raised when a transaction cannot be applied."""

    def __init__(self, kind: TxError) -> None:
        super().__init__(kind.value)
        self.kind = kind


class Transaction(ABC):
    """An operation that can be applied to a storage."""

    @abstractmethod
    def apply(self, storage: Storage) -> None:
        """Apply the transaction, raising TransactionError on failure."""


@dataclass(frozen=True)
class Deposit(Transaction):
    """Credit an account, opening it if it does not exist."""

    account: str
    amount: int

    def apply(self, storage: Storage) -> None:
        accounts = storage.accounts
        accounts[self.account] = accounts.get(self.account, 0) + self.amount


@dataclass(frozen=True)
class Transfer(Transaction):
    """Move money between accounts, opening them if they do not exist."""

    source: str
    target: str
    amount: int

    def apply(self, storage: Storage) -> None:
        accounts = storage.accounts
        balance = accounts.setdefault(self.source, 0)
        if balance < self.amount:
            raise TransactionError(TxError.INSUFFICIENT_FUNDS)
        accounts[self.source] = balance - self.amount
        accounts[self.target] = accounts.get(self.target, 0) + self.amount