"""Home budget tracking: transactions, JSON and CSV storage, filtering, undo/redo, and a command shell."""

__version__ = "0.1.0"