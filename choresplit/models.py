"""Data models for the chore ledger."""

from dataclasses import dataclass
from datetime import datetime

from choresplit.errors import ValidationError


@dataclass(frozen=True)
class Roommate:
    """A participant who earns points by completing chores."""

    id: str
    name: str
    points: int = 0


@dataclass(frozen=True)
class Chore:
    """A point-valued task that can be assigned and completed once."""

    id: str
    title: str
    created_at: datetime
    description: str = ""
    points: int = 1
    assignee_id: str | None = None
    is_completed: bool = False
    completed_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.is_completed != (self.completed_at is not None):
            raise ValidationError(f"Chore {self.title!r} must have a completion time if and only if it is completed")

    @property
    def status(self) -> str:
        return "completed" if self.is_completed else "open"


@dataclass(frozen=True)
class Reward:
    """A reward roommates can aim for once they reach a point threshold."""

    points: int
    description: str
