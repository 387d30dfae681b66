"""Undoable commands and the history that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from .repository import TransactionRepository
from .transaction import Transaction


class Command(ABC):
    """An action that can be applied and reverted."""

    @abstractmethod
    def execute(self) -> None:
        """Apply the action."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the action."""


class CommandManager:
    """Linear undo/redo history; a new command discards anything redoable."""

    def __init__(self) -> None:
        self._history: list[Command] = []
        self._index = -1

    def execute(self, command: Command) -> None:
        del self._history[self._index + 1 :]
        command.execute()
        self._history.append(command)
        self._index += 1

    def undo(self) -> None:
        if self.can_undo():
            command = self._history[self._index]
            self._index -= 1
            command.undo()

    def redo(self) -> None:
        if self.can_redo():
            self._index += 1
            self._history[self._index].execute()

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._history) - 1


@dataclass
class AddTransactionCommand(Command):
    repository: TransactionRepository
    transaction: Transaction

    def __post_init__(self) -> None:
        self.transaction = replace(self.transaction)

    def execute(self) -> None:
        self.repository.add(self.transaction)

    def undo(self) -> None:
        self.repository.remove(self.transaction.id)


@dataclass
class RemoveTransactionCommand(Command):
    repository: TransactionRepository
    transaction: Transaction

    def __post_init__(self) -> None:
        self.transaction = replace(self.transaction)

    def execute(self) -> None:
        self.repository.remove(self.transaction.id)

    def undo(self) -> None:
        self.repository.add(self.transaction)


@dataclass
class UpdateTransactionCommand(Command):
    repository: TransactionRepository
    old_transaction: Transaction
    new_transaction: Transaction

    def __post_init__(self) -> None:
        self.old_transaction = replace(self.old_transaction)
        self.new_transaction = replace(self.new_transaction)

    def execute(self) -> None:
        self.repository.update(self.new_transaction)

    def undo(self) -> None:
        self.repository.update(self.old_transaction)