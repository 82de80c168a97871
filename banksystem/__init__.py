"""A small bank ledger with CSV-backed storage, transactions and command-line tools."""

__version__ = "0.1.0"
__all__ = ["balance_manager", "cli", "shell", "storage", "transaction", "user_manager"]