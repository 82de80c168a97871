"""One-shot command line: deposit, withdraw or show a balance."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from .storage import AccountError, Storage

FILE_NAME = "balance.csv"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_USAGE = (
    "Использование:",
    "  deposit <name> <amount>",
    "  withdraw <name> <amount>",
    "  balance <name>",
)


def _parse_amount(text: str) -> int:
    """Parse a 64-bit signed integer, raising ValueError otherwise."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(text)
    return value


def _err(message: str) -> None:
    print(message, file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one bank command against the CSV file in the current directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    storage = Storage.load_data(FILE_NAME)

    if not args:
        for line in _USAGE:
            _err(line)
        return 0

    command = args[0]
    if command in ("deposit", "withdraw"):
        if len(args) != 3:
            _err("Пример: add John 200" if command == "deposit" else "Пример: withdraw John 100")
            return 0
        name = args[1]
        try:
            amount = _parse_amount(args[2])
        except ValueError:
            _err("Сумма должна быть числом")
            return 1
        try:
            if command == "deposit":
                storage.deposit(name, amount)
                print(f"Пополнено: {name} на {amount}")
            else:
                storage.withdraw(name, amount)
                print(f"Снято: {name} на {amount}")
        except AccountError as exc:
            print(f"Ошибка: {exc}")
            return 0
        storage.save(FILE_NAME)
        return 0

    if command == "balance":
        if len(args) != 2:
            _err("Пример: balance John")
            return 0
        name = args[1]
        balance = storage.get_balance(name)
        if balance is None:
            print(f"Пользователь {name} не найден")
        else:
            print(f"Баланс {name}: {balance}")
        return 0

    _err("Неизвестная команда")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())