"""Application logic over a repository, with undo and change notification."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from .commands import (
    AddTransactionCommand,
    CommandManager,
    RemoveTransactionCommand,
    UpdateTransactionCommand,
)
from .repository import TransactionRepository
from .transaction import Transaction


class TransactionController:
    """Runs changes as undoable commands and notifies listeners after each."""

    def __init__(self, repository: TransactionRepository) -> None:
        self.repository = repository
        self._commands = CommandManager()
        self._listeners: list[Callable[[], None]] = []

    def connect(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` with no arguments whenever data may have changed."""
        self._listeners.append(callback)

    def _data_changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def get_all_transactions(self) -> list[Transaction]:
        return self.repository.get_all()

    def filter_transactions(self, predicate: Callable[[Transaction], bool]) -> list[Transaction]:
        return [t for t in self.repository.get_all() if predicate(t)]

    def add_transaction(self, transaction: Transaction) -> None:
        self._commands.execute(AddTransactionCommand(self.repository, transaction))
        self._data_changed()

    def remove_transaction(self, transaction_id: str) -> None:
        """Remove the transaction with this id; unknown ids are ignored."""
        current = next((t for t in self.repository.get_all() if t.id == transaction_id), None)
        if current is not None:
            self._commands.execute(RemoveTransactionCommand(self.repository, current))
            self._data_changed()

    def update_transaction(self, transaction: Transaction) -> None:
        """Replace the stored transaction with the same id; unknown ids are ignored."""
        current = next((t for t in self.repository.get_all() if t.id == transaction.id), None)
        if current is not None:
            self._commands.execute(
                UpdateTransactionCommand(self.repository, current, replace(transaction))
            )
            self._data_changed()

    def undo(self) -> None:
        self._commands.undo()
        self._data_changed()

    def redo(self) -> None:
        self._commands.redo()
        self._data_changed()

    def can_undo(self) -> bool:
        return self._commands.can_undo()

    def can_redo(self) -> bool:
        return self._commands.can_redo()