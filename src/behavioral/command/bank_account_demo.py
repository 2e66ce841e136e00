"""
Command (Behavioral): bank account walkthrough.

Runs three scenarios and reports each balance and outcome:
    - single deposit/withdraw commands undone in call order;
    - a money transfer and its undo;
    - a transfer that the overdraft limit rejects.
"""

from __future__ import annotations

import logging
from typing import Callable

from behavioral.command.bank_account_command import (
    Action, BankAccount, BankAccountCommand, MoneyTransferCommand,
)

__all__ = ["run_demo"]


def simple_commands(report: Callable[[str], None]) -> BankAccount:
    report("Simple Bank Account Command Example:")
    account = BankAccount(balance=1000)
    withdraw = BankAccountCommand(account, Action.WITHDRAW, 200)
    withdraw.call()
    report(f"Account balance: {account.balance}")
    deposit = BankAccountCommand(account, Action.DEPOSIT, 500)
    deposit.call()
    report(f"Account balance after deposit: {account.balance}")
    # undone oldest-first on purpose: each undo acts on the current balance
    withdraw.undo()
    report(f"Account balance after undoing withdrawal: {account.balance}")
    deposit.undo()
    report(f"Account balance after undoing deposit: {account.balance}")
    return account


def money_transfer(report: Callable[[str], None]) -> tuple[BankAccount, BankAccount]:
    report("Money Transfer Command Example:")
    account_a = BankAccount(balance=1000)
    account_b = BankAccount(balance=500)
    transfer = MoneyTransferCommand(account_a, account_b, 300)
    transfer.call()
    report(f"Account A balance after transfer: {account_a.balance}")
    report(f"Account B balance after transfer: {account_b.balance}")
    report(f"Did the transfer succeed? {transfer.succeeded}")
    transfer.undo()
    report(f"Account A balance after undoing transfer: {account_a.balance}")
    report(f"Account B balance after undoing transfer: {account_b.balance}")
    return account_a, account_b


def rejected_transfer(report: Callable[[str], None], account_a: BankAccount, account_b: BankAccount) -> None:
    report("Composite Command Exceeding Overdraft Limit Example:")
    transfer = MoneyTransferCommand(account_a, account_b, 2000)
    transfer.call()
    report(f"Account A balance after large transfer attempt: {account_a.balance}")
    report(f"Account B balance after large transfer attempt: {account_b.balance}")
    report(f"Did the large transfer succeed? {transfer.succeeded}")
    transfer.undo()
    report(f"Account A balance after undoing large transfer attempt: {account_a.balance}")
    report(f"Account B balance after undoing large transfer attempt: {account_b.balance}")


def run_demo(report: Callable[[str], None] = print) -> None:
    """
    Runs all scenarios, sending every line to `report`.

    :param report: Display sink; defaults to stdout.
    """
    simple_commands(report)
    report("")
    account_a, account_b = money_transfer(report)
    report("")
    rejected_transfer(report, account_a, account_b)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_demo()
