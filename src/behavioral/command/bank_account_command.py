from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "OVERDRAFT_LIMIT",
    "BankAccount",
    "Action",
    "CommandState",
    "Command",
    "BankAccountCommand",
    "CompositeBankAccountCommand",
    "MoneyTransferCommand",
]


# ==========================
# Module: bank_account_command
# Purpose: Bank account operations as Commands with undo, composed into
#          transfers that only deposit when the withdrawal went through.
# Failures are reported through `succeeded`, never raised.
# ==========================


OVERDRAFT_LIMIT = -500.0


@dataclass(slots=True)
class BankAccount:
    """
    Simple bank account receiver.

    :param balance: Current balance (may be negative down to the overdraft limit).
    :param overdraft_limit: Lowest balance a withdrawal may leave behind.
    """
    balance: float = 0.0
    overdraft_limit: float = OVERDRAFT_LIMIT

    def withdraw(self, amount: float) -> bool:
        """
        Removes money if the overdraft limit allows it.

        :param amount: Amount to withdraw.
        :return: True if the balance was changed; False if the withdrawal was rejected.
        """
        if self.balance - amount < self.overdraft_limit:
            logger.debug("Withdrawal of %s rejected: balance %s, limit %s",
                         amount, self.balance, self.overdraft_limit)
            return False
        self.balance -= amount
        return True

    def deposit(self, amount: float) -> None:
        """
        Adds money to the account. Always succeeds.

        :param amount: Amount to deposit.
        """
        self.balance += amount


class Action(Enum):
    DEPOSIT = auto()
    WITHDRAW = auto()


class CommandState(Enum):
    """
    Outcome of a leaf command. A plain boolean cannot tell "never called" from "failed".
    """
    NOT_RUN = auto()
    SUCCEEDED = auto()
    FAILED = auto()


class Command(ABC):
    """
    Base interface for bank account commands.

    :param description: Short, human-readable description of the command.
    """

    def __init__(self, description: str) -> None:
        self._description = description

    @property
    def description(self) -> str:
        """
        :return: Command description string.
        """
        return self._description

    @abstractmethod
    def call(self) -> None:
        """
        Performs the action. The outcome is recorded in `succeeded`, not raised.
        Calling twice repeats the effect.
        """

    @abstractmethod
    def undo(self) -> None:
        """
        Reverses the effect of the last `call()`. Does nothing unless it succeeded.
        """

    @property
    @abstractmethod
    def succeeded(self) -> bool:
        """
        :return: True if the last `call()` succeeded (or was forced to succeed).
        """

    @succeeded.setter
    @abstractmethod
    def succeeded(self, value: bool) -> None:
        """
        Forces the outcome without calling, e.g. for members skipped by a transfer.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._description!r}, succeeded={self.succeeded})"


class BankAccountCommand(Command):
    """
    Deposits into or withdraws from a single account.

    Undo applies the opposite action with the same amount to the current balance;
    it does not restore a snapshot.

    :param account: Target bank account (receiver). Not owned by the command.
    :param action: Action to perform.
    :param amount: Amount to move; must be >= 0.
    """

    def __init__(self, account: BankAccount, action: Action, amount: float) -> None:
        if amount < 0:
            raise ValueError(f"Amount must be non-negative, got {amount}.")
        verb = "Deposit" if action is Action.DEPOSIT else "Withdraw"
        super().__init__(description=f"{verb} {amount}")
        self._account = account
        self._action = action
        self._amount = amount
        self._state = CommandState.NOT_RUN

    @property
    def account(self) -> BankAccount:
        return self._account

    @property
    def action(self) -> Action:
        return self._action

    @property
    def amount(self) -> float:
        return self._amount

    @property
    def state(self) -> CommandState:
        """
        :return: NOT_RUN until the first call or explicit outcome, then SUCCEEDED or FAILED.
        """
        return self._state

    @property
    def succeeded(self) -> bool:
        return self._state is CommandState.SUCCEEDED

    @succeeded.setter
    def succeeded(self, value: bool) -> None:
        self._state = CommandState.SUCCEEDED if value else CommandState.FAILED

    def call(self) -> None:
        if self._action is Action.DEPOSIT:
            self._account.deposit(self._amount)
            self.succeeded = True
        else:
            self.succeeded = self._account.withdraw(self._amount)
        logger.debug("%s -> %s, balance %s", self._description, self._state.name, self._account.balance)

    def undo(self) -> None:
        if not self.succeeded:
            return
        if self._action is Action.DEPOSIT:
            # The overdraft limit still applies; a rejected compensation is not reported.
            if not self._account.withdraw(self._amount):
                logger.warning("Undo of '%s' rejected by overdraft limit; balance stays %s",
                               self._description, self._account.balance)
        else:
            self._account.deposit(self._amount)


class CompositeBankAccountCommand(Command):
    """
    Calls every member in order and undoes them in reverse order.

    Members are called regardless of earlier failures; see MoneyTransferCommand
    for the short-circuiting variant.

    :param items: Ordered commands; insertion order is execution order.
    :param description: Short description for the composite.
    """

    def __init__(self, items: Optional[Iterable[Command]] = None, description: str = "Composite") -> None:
        super().__init__(description=description)
        self._items: List[Command] = list(items) if items else []

    def add(self, cmd: Command) -> None:
        """
        Appends a member to the composite.

        :param cmd: Command to add.
        """
        self._items.append(cmd)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def succeeded(self) -> bool:
        """
        :return: True if every member succeeded; True for an empty composite.
        """
        return all(cmd.succeeded for cmd in self._items)

    @succeeded.setter
    def succeeded(self, value: bool) -> None:
        for cmd in self._items:
            cmd.succeeded = value

    def call(self) -> None:
        for cmd in self._items:
            cmd.call()

    def undo(self) -> None:
        for cmd in reversed(self._items):
            cmd.undo()


class MoneyTransferCommand(Command):
    """
    Withdraws from the source, then deposits into the destination.

    If the withdrawal is rejected the deposit is never called and is marked failed,
    so both balances stay unchanged. Undo and outcome are delegated to the
    underlying composite.

    :param source: Account to withdraw from.
    :param destination: Account to deposit into.
    :param amount: Amount to transfer.
    """

    def __init__(self, source: BankAccount, destination: BankAccount, amount: float) -> None:
        super().__init__(description=f"Transfer {amount}")
        self._source = source
        self._destination = destination
        self._amount = amount
        self._composite = CompositeBankAccountCommand(
            [
                BankAccountCommand(source, Action.WITHDRAW, amount),
                BankAccountCommand(destination, Action.DEPOSIT, amount),
            ],
            description=self._description,
        )

    @property
    def source(self) -> BankAccount:
        return self._source

    @property
    def destination(self) -> BankAccount:
        return self._destination

    @property
    def amount(self) -> float:
        return self._amount

    @property
    def commands(self) -> List[Command]:
        """
        :return: The withdraw and deposit members, in execution order.
        """
        return list(self._composite)

    @property
    def succeeded(self) -> bool:
        return self._composite.succeeded

    @succeeded.setter
    def succeeded(self, value: bool) -> None:
        self._composite.succeeded = value

    def call(self) -> None:
        ok = True
        for cmd in self._composite:
            if ok:
                cmd.call()
                ok = cmd.succeeded
            else:
                cmd.succeeded = False
        if ok:
            logger.info("%s succeeded", self._description)
        else:
            logger.warning("%s rejected; remaining steps skipped", self._description)

    def undo(self) -> None:
        self._composite.undo()
