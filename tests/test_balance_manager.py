import pytest

from banksystem.balance_manager import deposit, get_balance, withdraw
from banksystem.storage import InsufficientFundsError, Storage, UserNotFoundError
from banksystem.user_manager import add_user


def test_get_balance():
    storage = Storage()
    add_user(storage, "Alice")
    assert get_balance(storage, "Alice") == 0
    assert get_balance(storage, "Nobody") is None


def test_deposit_and_withdraw():
    storage = Storage()
    add_user(storage, "Charlie")

    deposit(storage, "Charlie", 200)
    assert get_balance(storage, "Charlie") == 200

    withdraw(storage, "Charlie", 150)
    assert get_balance(storage, "Charlie") == 50

    with pytest.raises(InsufficientFundsError):
        withdraw(storage, "Charlie", 100)
    assert get_balance(storage, "Charlie") == 50


def test_nonexistent_user():
    storage = Storage()
    with pytest.raises(UserNotFoundError):
        deposit(storage, "Dana", 100)
    with pytest.raises(UserNotFoundError):
        withdraw(storage, "Dana", 50)
    assert get_balance(storage, "Dana") is None