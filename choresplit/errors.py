"""Errors raised by ledger operations."""


class LedgerError(Exception):
    """Base class for all ledger errors."""


class ValidationError(LedgerError, ValueError):
    """Required input is empty or malformed."""


class NotFoundError(LedgerError, LookupError):
    """An operation referenced a roommate or chore that does not exist."""


class InvalidStateError(LedgerError):
    """A chore cannot be completed in its current state."""
