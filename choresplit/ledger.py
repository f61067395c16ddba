"""Ledger interface for chore tracking."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TypeVar

from choresplit.errors import NotFoundError, ValidationError
from choresplit.models import Chore, Roommate
from choresplit.ranking import Ranking

CHORE_STATUSES = ("open", "completed")

T = TypeVar("T", Roommate, Chore)


class Ledger(ABC):
    """Abstract base class for chore ledgers.

    A ledger is the only place where roommates and chores change. Callers
    read snapshots through the query methods and request changes through the
    operations below; every operation either applies fully or raises and
    leaves the ledger untouched.
    """

    @abstractmethod
    def roommates(self) -> list[Roommate]:
        """Return all roommates in the order they joined."""
        pass

    @abstractmethod
    def chores(self) -> list[Chore]:
        """Return all chores in the order they were created."""
        pass

    @abstractmethod
    def add_roommate(self, name: str) -> Roommate:
        """Add a roommate with zero points."""
        pass

    @abstractmethod
    def remove_roommate(self, roommate_id: str) -> Roommate:
        """Remove a roommate and unassign every chore that referenced them."""
        pass

    @abstractmethod
    def add_chore(self, title: str, description: str = "", points: int | str | None = None) -> Chore:
        """Add an open, unassigned chore."""
        pass

    @abstractmethod
    def remove_chore(self, chore_id: str) -> Chore:
        """Remove a chore. Points already awarded for it are kept."""
        pass

    @abstractmethod
    def assign_chore(self, chore_id: str, roommate_id: str) -> Chore:
        """Assign a chore to a roommate, replacing any previous assignee."""
        pass

    @abstractmethod
    def complete_chore(self, chore_id: str) -> Chore:
        """Complete an assigned chore and award its points to the assignee."""
        pass

    def get_roommate(self, roommate_id: str) -> Roommate:
        """Get a roommate by ID.

        Raises:
            NotFoundError: If no roommate has the given ID
        """
        for roommate in self.roommates():
            if roommate.id == roommate_id:
                return roommate
        raise NotFoundError(f"Roommate {roommate_id} not found")

    def get_chore(self, chore_id: str) -> Chore:
        """Get a chore by ID.

        Raises:
            NotFoundError: If no chore has the given ID
        """
        for chore in self.chores():
            if chore.id == chore_id:
                return chore
        raise NotFoundError(f"Chore {chore_id} not found")

    def list_chores(self, status: str | None = None, assignee_id: str | None = None) -> list[Chore]:
        """List chores, optionally filtered by status and assignee.

        Args:
            status: "open" or "completed"
            assignee_id: Only return chores assigned to this roommate
        """
        if status is not None and status not in CHORE_STATUSES:
            raise ValidationError(f"Unknown chore status {status!r}. Expected one of: {', '.join(CHORE_STATUSES)}")

        chores = self.chores()
        if status is not None:
            chores = [c for c in chores if c.status == status]
        if assignee_id is not None:
            chores = [c for c in chores if c.assignee_id == assignee_id]
        return chores

    def chores_for(self, roommate_id: str) -> list[Chore]:
        """List the chores assigned to a roommate."""
        roommate = self.get_roommate(roommate_id)
        return self.list_chores(assignee_id=roommate.id)

    def ranking(self) -> Ranking:
        """Roommates ordered by points descending, ties in joining order."""
        return Ranking(self.roommates)

    def top_performer(self) -> Roommate | None:
        """Return the roommate ranked first, or None if there are no roommates."""
        return self.ranking().first()

    def find_roommate(self, ref: str) -> Roommate:
        """Resolve a roommate from an ID, a unique ID prefix or a name."""
        return _resolve(ref, self.roommates(), lambda r: r.name, "Roommate")

    def find_chore(self, ref: str) -> Chore:
        """Resolve a chore from an ID, a unique ID prefix or a title."""
        return _resolve(ref, self.chores(), lambda c: c.title, "Chore")


def _resolve(ref: str, items: Sequence[T], label: Callable[[T], str], kind: str) -> T:
    ref = ref.strip()
    if not ref:
        raise ValidationError(f"{kind} reference must not be empty")

    for item in items:
        if item.id == ref:
            return item

    matches = [item for item in items if item.id.startswith(ref) or label(item).casefold() == ref.casefold()]
    if not matches:
        raise NotFoundError(f"{kind} {ref!r} not found")
    if len(matches) > 1:
        raise ValidationError(f"{kind} reference {ref!r} is ambiguous ({len(matches)} matches)")
    return matches[0]
