# banksystem

A small bank ledger. It keeps named accounts with integer balances. You can
deposit, withdraw and transfer money between accounts, and the state is kept
in a plain CSV file. The file is `balance.csv` in the current directory, with
one `Name,Balance` line per account.

If `balance.csv` does not exist yet, the bank starts with the accounts `John`,
`Alice`, `Bob` and `Vasya`, each with a zero balance. When the file is read,
any line that is not exactly two comma-separated fields is skipped. A balance
that is not a valid 64-bit integer is read as 0.

The command-line tools print their messages in Russian.

## Installation

```
pip install .
```

## One-shot commands

```
bank deposit John 200
bank withdraw John 50
bank balance John
```

- Each successful deposit or withdrawal is written back to `balance.csv`.
- A withdrawal larger than the current balance is refused.
- Deposits and withdrawals on a user who is not in the file are refused.
- `balance` on an unknown user reports that the user was not found.
- An amount that is not a whole number ends the command with exit status 1.
- Run without arguments, `bank` prints its usage.

The same command can also be run as `python -m banksystem.cli`.

## Interactive shell

```
bank-shell
```

The shell prints a list of commands. It then reads commands one per line until
`exit` or end of input:

| Command                         | Effect                                                   |
|---------------------------------|----------------------------------------------------------|
| `add <name> <balance>`          | create a user with a starting balance (refused if the user exists) |
| `remove <name>`                 | delete a user                                            |
| `list`                          | show all users and balances                              |
| `deposit <name> <amount>`       | add money, opening the account if it is new              |
| `withdraw <name> <amount>`      | take money out of an existing account                    |
| `balance <name>`                | show one balance                                         |
| `transfer <from> <to> <amount>` | move money, opening either account if it is new          |
| `exit`                          | leave the shell                                          |

- A transfer is refused if the sending account holds less than the amount.
- Every successful `add`, `remove`, `deposit`, `withdraw` and `transfer` is saved to `balance.csv` straight away.

The shell can also be run as `python -m banksystem.shell`. The `BankShell`
class takes a `Storage`, a file path and the input and output streams.
`BankShell.execute(line)` runs a single command. `BankShell.run()` runs the
whole loop.

## Library use

```python
from banksystem.storage import Storage, InsufficientFundsError
from banksystem import user_manager, balance_manager
from banksystem.transaction import Transfer, TransactionError

storage = Storage()
user_manager.add_user(storage, "Alice")
balance_manager.deposit(storage, "Alice", 200)

try:
    balance_manager.withdraw(storage, "Alice", 500)
except InsufficientFundsError:
    print("not enough money")

try:
    Transfer("Alice", "Bob", 50).apply(storage)
except TransactionError as exc:
    print(exc.kind)

print(balance_manager.get_balance(storage, "Bob"))  # 50
storage.save("balance.csv")
```

### Storage

`Storage` supports these methods:

- `add_user`: returns `0`, or `None` if the user already exists.
- `remove_user`: returns the final balance, or `None`.
- `get_balance`
- `deposit`
- `withdraw`
- `get_all`

Failed deposits and withdrawals raise `UserNotFoundError` or
`InsufficientFundsError`. Both are subclasses of `AccountError`.

`Storage.load_data(path)` reads a CSV file. `Storage.from_lines` and
`Storage.to_lines` do the same work on any iterable of lines, so no file is
needed.

### Transactions

`Deposit` and `Transfer` in `banksystem.transaction` open accounts as needed.
A transfer that cannot be covered raises `TransactionError`, whose `kind` is a
`TxError` member.

## Running the tests

```
pip install ".[test]"
pytest
```