import io

import pytest

from banksystem.shell import BankShell
from banksystem.storage import Storage


@pytest.fixture
def csv_path(tmp_path):
    return tmp_path / "balance.csv"


def make_shell(csv_path, stdin_text="", users=None):
    storage = Storage()
    for name, balance in (users or {}).items():
        storage.add_user(name)
        storage.deposit(name, balance)
    out = io.StringIO()
    shell = BankShell(storage, csv_path, io.StringIO(stdin_text), out)
    return shell, storage, out


def test_add_user_saves(csv_path):
    shell, storage, out = make_shell(csv_path)
    assert shell.execute("add Ann 100") is True
    assert storage.get_balance("Ann") == 100
    assert Storage.load_data(csv_path).get_balance("Ann") == 100
    assert "Ann" in out.getvalue()


def test_add_existing_user(csv_path):
    shell, storage, out = make_shell(csv_path, users={"Ann": 5})
    shell.execute("add Ann 100")
    assert "уже существует" in out.getvalue()
    assert storage.get_balance("Ann") == 5
    assert not csv_path.exists()


def test_add_non_numeric(csv_path):
    shell, storage, out = make_shell(csv_path)
    shell.execute("add Ann lots")
    assert out.getvalue().strip() == "Сумма должна быть числом"
    assert storage.get_balance("Ann") is None


def test_remove_user(csv_path):
    shell, storage, out = make_shell(csv_path, users={"Bob": 7})
    shell.execute("remove Bob")
    assert storage.get_balance("Bob") is None
    shell.execute("remove Bob")
    assert "не найден" in out.getvalue().splitlines()[-1]


def test_list_shows_all(csv_path):
    shell, _, out = make_shell(csv_path, users={"Ann": 1, "Bob": 2})
    shell.execute("list")
    assert sorted(out.getvalue().splitlines()) == ["Ann: 1", "Bob: 2"]


def test_deposit_creates_account(csv_path):
    shell, storage, _ = make_shell(csv_path)
    shell.execute("deposit Carl 30")
    assert storage.get_balance("Carl") == 30
    assert Storage.load_data(csv_path).get_balance("Carl") == 30


def test_withdraw_insufficient(csv_path):
    shell, storage, out = make_shell(csv_path, users={"Ann": 10})
    shell.execute("withdraw Ann 50")
    assert "Недостаточно средств" in out.getvalue()
    assert storage.get_balance("Ann") == 10


def test_withdraw_success(csv_path):
    shell, storage, _ = make_shell(csv_path, users={"Ann": 10})
    shell.execute("withdraw Ann 4")
    assert storage.get_balance("Ann") == 6
    assert Storage.load_data(csv_path).get_balance("Ann") == 6


def test_transfer_moves_money(csv_path):
    shell, storage, _ = make_shell(csv_path, users={"Alice": 100, "Bob": 0})
    shell.execute("transfer Alice Bob 50")
    assert storage.get_balance("Alice") == 50
    assert storage.get_balance("Bob") == 50


def test_transfer_insufficient(csv_path):
    shell, storage, out = make_shell(csv_path, users={"Alice": 10})
    shell.execute("transfer Alice Bob 50")
    assert "InsufficientFunds" in out.getvalue()
    assert storage.get_balance("Alice") == 10


def test_wrong_arity_shows_example(csv_path):
    shell, _, out = make_shell(csv_path)
    shell.execute("transfer Alice Bob")
    assert out.getvalue().strip() == "Пример: tx_transfer Alice Bob 50"


def test_exit_and_blank(csv_path):
    shell, _, out = make_shell(csv_path)
    assert shell.execute("   ") is True
    assert shell.execute("exit") is False
    assert out.getvalue() == ""


def test_unknown_command(csv_path):
    shell, _, out = make_shell(csv_path)
    assert shell.execute("fly") is True
    assert out.getvalue().strip() == "Неизвестная команда"


def test_run_stops_at_exit(csv_path):
    shell, storage, out = make_shell(
        csv_path, "deposit Ann 5\nexit\ndeposit Ann 5\n"
    )
    shell.run()
    text = out.getvalue()
    assert text.startswith("=== Bank CLI Utils ===")
    assert text.rstrip().endswith("Выход из CLI, все изменения сохранены.")
    assert storage.get_balance("Ann") == 5