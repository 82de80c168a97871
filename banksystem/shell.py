"""Interactive shell for managing users, balances and transactions."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .storage import AccountError, Storage
from .transaction import Deposit, TransactionError, Transfer

FILE_NAME = "balance.csv"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_BANNER = (
    "=== Bank CLI Utils ===",
    "Команды:",
    "  add <name> <balance>      - добавить пользователя",
    "  remove <name>             - удалить пользователя",
    "  list                      - показать всех пользователей",
    "  deposit <name> <amount>   - пополнить баланс",
    "  withdraw <name> <amount>  - снять со счёта",
    "  balance <name>            - показать баланс",
    "  transfer <from> <to> <amount> - перевести деньги",
    "  exit                      - выйти",
)

_EXAMPLES = {
    "add": (3, "Пример: add John 100"),
    "remove": (2, "Пример: remove John"),
    "list": (1, "Пример: list"),
    "deposit": (3, "Пример: deposit John 100"),
    "withdraw": (3, "Пример: withdraw John 100"),
    "balance": (2, "Пример: balance John"),
    "transfer": (4, "Пример: tx_transfer Alice Bob 50"),
}


def _parse_amount(text: str) -> int | None:
    """Parse a 64-bit signed integer, or return None."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


class BankShell:
    """Reads commands line by line and applies them to a storage."""

    def __init__(
        self,
        storage: Storage,
        path: str | Path,
        stdin: TextIO,
        stdout: TextIO,
    ) -> None:
        self.storage = storage
        self.path = Path(path)
        self.stdin = stdin
        self.stdout = stdout

    def _say(self, message: str) -> None:
        self.stdout.write(f"{message}\n")

    def _amount(self, text: str) -> int | None:
        amount = _parse_amount(text)
        if amount is None:
            self._say("Сумма должна быть числом")
        return amount

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        args = line.split()
        if not args:
            return True
        command = args[0]
        if command == "exit":
            return False
        if command not in _EXAMPLES:
            self._say("Неизвестная команда")
            return True
        arity, example = _EXAMPLES[command]
        if len(args) != arity:
            self._say(example)
            return True
        getattr(self, f"_cmd_{command}")(*args[1:])
        return True

    def _cmd_add(self, name: str, balance_text: str) -> None:
        balance = self._amount(balance_text)
        if balance is None:
            return
        if self.storage.add_user(name) is None:
            self._say(f"Пользователь {name} уже существует")
            return
        self.storage.deposit(name, balance)
        self._say(f"Пользователь {name} добавлен с балансом {balance}")
        self.storage.save(self.path)

    def _cmd_remove(self, name: str) -> None:
        if self.storage.remove_user(name) is None:
            self._say(f"Пользователь {name} не найден")
            return
        self._say(f"Пользователь {name} удалён")
        self.storage.save(self.path)

    def _cmd_list(self) -> None:
        for name, balance in self.storage.get_all():
            self._say(f"{name}: {balance}")

    def _cmd_deposit(self, name: str, amount_text: str) -> None:
        amount = self._amount(amount_text)
        if amount is None:
            return
        try:
            Deposit(name, amount).apply(self.storage)
        except TransactionError as exc:
            self._say(f"Ошибка транзакции: {exc.kind.value}")
            return
        self._say(f"Транзакция: депозит {name} на {amount}")
        self.storage.save(self.path)

    def _cmd_withdraw(self, name: str, amount_text: str) -> None:
        amount = self._amount(amount_text)
        if amount is None:
            return
        try:
            self.storage.withdraw(name, amount)
        except AccountError as exc:
            self._say(f"Ошибка: {exc}")
            return
        self._say(f"С баланса пользователя {name} снято {amount}")
        self.storage.save(self.path)

    def _cmd_balance(self, name: str) -> None:
        balance = self.storage.get_balance(name)
        if balance is None:
            self._say(f"Пользователь {name} не найден")
        else:
            self._say(f"Баланс пользователя {name}: {balance}")

    def _cmd_transfer(self, source: str, target: str, amount_text: str) -> None:
        amount = self._amount(amount_text)
        if amount is None:
            return
        try:
            Transfer(source, target, amount).apply(self.storage)
        except TransactionError as exc:
            self._say(f"Ошибка транзакции: {exc.kind.value}")
            return
        self._say(f"Транзакция: перевод {source} на {target}")
        self.storage.save(self.path)

    def run(self) -> None:
        """Print the help banner and process commands until exit or end of input."""
        for line in _BANNER:
            self._say(line)
        while True:
            self.stdout.write("> ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line or not self.execute(line):
                break
        self._say("Выход из CLI, все изменения сохранены.")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell on the CSV file in the current directory."""
    parser = argparse.ArgumentParser(description="Interactive bank shell.")
    parser.parse_args(argv)
    storage = Storage.load_data(FILE_NAME)
    BankShell(storage, FILE_NAME, sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())