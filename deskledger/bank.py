"""Bank accounts kept in a pipe-delimited text file, with a transaction log."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

DEFAULT_DATA_FILE = "bank_data.txt"
DEFAULT_LOG_FILE = "transactions.txt"


class BankError(Exception):
    """Base class for banking errors."""


class AccountNotFoundError(BankError, LookupError):
    """No account with the requested number exists."""

    def __init__(self, number: int) -> None:
        super().__init__(f"account {number} not found")
        self.number = number


class DuplicateAccountError(BankError):
    """An account with the requested number already exists."""

    def __init__(self, number: int) -> None:
        super().__init__(f"account {number} already exists")
        self.number = number


class InvalidAmountError(BankError, ValueError):
    """An amount is negative, zero where it must be positive, or not a number."""


class InsufficientFundsError(BankError):
    """A withdrawal exceeds the available balance."""


@dataclass
class BankAccount:
    """A single account: number, holder name and balance."""

    number: int
    holder: str = ""
    balance: float = 0.0

    def deposit(self, amount: float) -> None:
        """Add a positive amount to the balance."""
        if not amount > 0:
            raise InvalidAmountError(f"deposit must be positive, got {amount}")
        self.balance += amount

    def withdraw(self, amount: float) -> None:
        """Take a positive amount not exceeding the balance."""
        if not amount > 0:
            raise InvalidAmountError(f"withdrawal must be positive, got {amount}")
        if amount > self.balance:
            raise InsufficientFundsError(
                f"cannot withdraw {amount} from a balance of {self.balance}"
            )
        self.balance -= amount

    def to_record(self) -> str:
        """Return the account as one line of the data file, without newline."""
        return f"{self.number}|{self.holder}|{self.balance:.6f}"

    @classmethod
    def from_record(cls, line: str) -> "BankAccount":
        """Parse one line of the data file."""
        try:
            number, rest = line.rstrip("\n").split("|", 1)
            holder, balance = rest.split("|", 1)
            return cls(int(number), holder, float(balance))
        except ValueError as exc:
            raise BankError(f"malformed account record: {line!r}") from exc


class AccountManager:
    """Accounts stored in a text file, every change written to a log file."""

    def __init__(
        self,
        data_path: str | Path = DEFAULT_DATA_FILE,
        log_path: str | Path = DEFAULT_LOG_FILE,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.data_path = Path(data_path)
        self.log_path = Path(log_path)
        self.clock = clock

    def _log(self, number: int, kind: str, amount: float) -> None:
        stamp = self.clock().ctime()
        with self.log_path.open("a", encoding="utf-8") as log:
            log.write(f"[{stamp}] Acc: {number} | {kind}: ${amount:g}\n")

    def _save(self, accounts: Iterable[BankAccount]) -> None:
        self.data_path.write_text(
            "".join(f"{account.to_record()}\n" for account in accounts),
            encoding="utf-8",
        )

    def accounts(self) -> list[BankAccount]:
        """Return every stored account, in file order."""
        try:
            text = self.data_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [BankAccount.from_record(line) for line in text.splitlines() if line.strip()]

    def account_exists(self, number: int) -> bool:
        return any(account.number == number for account in self.accounts())

    def create_account(self, number: int, holder: str, initial_deposit: float) -> BankAccount:
        """Open a new account; the number must be unused and the deposit not negative."""
        if self.account_exists(number):
            raise DuplicateAccountError(number)
        if not initial_deposit >= 0:
            raise InvalidAmountError(f"initial deposit must not be negative, got {initial_deposit}")
        account = BankAccount(number, holder, float(initial_deposit))
        with self.data_path.open("a", encoding="utf-8") as data:
            data.write(f"{account.to_record()}\n")
        self._log(number, "Account Created", initial_deposit)
        return account

    def find(self, number: int) -> BankAccount:
        for account in self.accounts():
            if account.number == number:
                return account
        raise AccountNotFoundError(number)

    def _transact(
        self,
        number: int,
        amount: float,
        operation: Callable[[BankAccount, float], None],
        kind: str,
    ) -> BankAccount:
        accounts = self.accounts()
        targets = [account for account in accounts if account.number == number]
        if not targets:
            raise AccountNotFoundError(number)
        for account in targets:
            operation(account, amount)
        self._save(accounts)
        self._log(number, kind, amount)
        return targets[0]

    def deposit(self, number: int, amount: float) -> BankAccount:
        """Deposit into an account and return it with its new balance."""
        return self._transact(number, amount, BankAccount.deposit, "Deposit")

    def withdraw(self, number: int, amount: float) -> BankAccount:
        """Withdraw from an account and return it with its new balance."""
        return self._transact(number, amount, BankAccount.withdraw, "Withdrawal")

    def delete_account(self, number: int) -> None:
        accounts = self.accounts()
        remaining = [account for account in accounts if account.number != number]
        if len(remaining) == len(accounts):
            raise AccountNotFoundError(number)
        self._save(remaining)
        self._log(number, "Account Deleted", 0)


_MENU = (
    "\n--- Secure Banking System ---\n"
    "1. Open Account\n2. Deposit\n3. Withdraw\n"
    "4. Balance Inquiry\n5. Close Account\n6. Exit"
)


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _parse_float(text: str) -> Optional[float]:
    try:
        return float(text.strip())
    except ValueError:
        return None


def _open_account(manager: AccountManager) -> None:
    number = _parse_int(input("Enter Account Number: "))
    if number is None or manager.account_exists(number):
        print("Invalid or Duplicate Account Number!")
        return
    holder = input("Enter Account Holder Name: ")
    amount = _parse_float(input("Enter Initial Deposit: "))
    if amount is None or not amount >= 0:
        print("Invalid Amount!")
        return
    manager.create_account(number, holder, amount)
    print("Account created successfully!")


def _transaction(manager: AccountManager, number: int, withdrawing: bool) -> None:
    if not manager.account_exists(number):
        print("Account not found!")
        return
    prompt = "Enter Withdrawal Amount: " if withdrawing else "Enter Deposit Amount: "
    amount = _parse_float(input(prompt))
    try:
        if amount is None:
            raise InvalidAmountError("amount is not a number")
        if withdrawing:
            manager.withdraw(number, amount)
        else:
            manager.deposit(number, amount)
    except (InsufficientFundsError, InvalidAmountError):
        print("Insufficient funds!" if withdrawing else "Invalid Amount!")
        return
    print("Transaction successful.")


def _balance_inquiry(manager: AccountManager, number: int) -> None:
    try:
        account = manager.find(number)
    except AccountNotFoundError:
        print("Account not found!")
        return
    print("\n--- Account Details ---")
    print(f"Holder: {account.holder}\nBalance: ${account.balance:.2f}")


def _close_account(manager: AccountManager, number: int) -> None:
    try:
        manager.delete_account(number)
    except AccountNotFoundError:
        print("Account not found.")
        return
    print("Account closed successfully.")


def _run(manager: AccountManager) -> None:
    while True:
        print(_MENU)
        choice = _parse_int(input("Choice: "))
        if choice is None:
            continue
        if choice == 6:
            return
        if choice == 1:
            _open_account(manager)
            continue
        if not 2 <= choice <= 5:
            print("Invalid choice.")
            continue
        number = _parse_int(input("Enter Account Number: "))
        if number is None:
            print("Account not found!")
            continue
        if choice in (2, 3):
            _transaction(manager, number, withdrawing=choice == 3)
        elif choice == 4:
            _balance_inquiry(manager, number)
        else:
            _close_account(manager, number)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive banking menu."""
    parser = argparse.ArgumentParser(description="Interactive bank account manager.")
    parser.add_argument("--data", default=DEFAULT_DATA_FILE, help="account data file")
    parser.add_argument("--log", default=DEFAULT_LOG_FILE, help="transaction log file")
    args = parser.parse_args(argv)
    manager = AccountManager(args.data, args.log)
    try:
        _run(manager)
    except EOFError:
        pass
    finally:
        print("\n[System] Saving state and closing bank database safely...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())