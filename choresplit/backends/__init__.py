"""Ledger implementations."""

from choresplit.backends.memory import InMemoryLedger

__all__ = ["InMemoryLedger"]
