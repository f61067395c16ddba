"""In-memory ledger implementation."""

import dataclasses
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime

import structlog

from choresplit.errors import InvalidStateError, NotFoundError, ValidationError
from choresplit.ledger import Ledger
from choresplit.models import Chore, Roommate

logger = structlog.get_logger()

DEFAULT_CHORE_POINTS = 1


class InMemoryLedger(Ledger):
    """Ledger that keeps roommates and chores in memory for one session."""

    def __init__(
        self,
        roommates: Iterable[Roommate] = (),
        chores: Iterable[Chore] = (),
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the ledger.

        Args:
            roommates: Initial roommates, in joining order
            chores: Initial chores; every assignee must be among ``roommates``
            clock: Returns the current time (defaults to ``datetime.now``)
        """
        self._clock = clock or datetime.now
        self._roommates: dict[str, Roommate] = {}
        self._chores: dict[str, Chore] = {}

        for roommate in roommates:
            if roommate.id in self._roommates:
                raise ValidationError(f"Duplicate roommate ID {roommate.id}")
            self._roommates[roommate.id] = roommate

        for chore in chores:
            if chore.id in self._chores:
                raise ValidationError(f"Duplicate chore ID {chore.id}")
            if chore.assignee_id is not None and chore.assignee_id not in self._roommates:
                raise ValidationError(f"Chore {chore.title!r} is assigned to unknown roommate {chore.assignee_id}")
            self._chores[chore.id] = chore

        logger.debug("In-memory ledger initialized", roommates=len(self._roommates), chores=len(self._chores))

    def roommates(self) -> list[Roommate]:
        return list(self._roommates.values())

    def chores(self) -> list[Chore]:
        return list(self._chores.values())

    def get_roommate(self, roommate_id: str) -> Roommate:
        try:
            return self._roommates[roommate_id]
        except KeyError:
            raise NotFoundError(f"Roommate {roommate_id} not found") from None

    def get_chore(self, chore_id: str) -> Chore:
        try:
            return self._chores[chore_id]
        except KeyError:
            raise NotFoundError(f"Chore {chore_id} not found") from None

    def add_roommate(self, name: str) -> Roommate:
        """Add a roommate with zero points.

        Raises:
            ValidationError: If the name is blank
        """
        name = name.strip()
        if not name:
            logger.warning("Rejected roommate with blank name")
            raise ValidationError("Roommate name must not be empty")

        roommate = Roommate(id=self._new_id(self._roommates), name=name)
        self._roommates[roommate.id] = roommate
        logger.info("Roommate added", roommate_id=roommate.id, name=roommate.name)
        return roommate

    def remove_roommate(self, roommate_id: str) -> Roommate:
        """Remove a roommate.

        Chores assigned to the roommate, completed or not, become unassigned.
        Their completion state and the points already awarded are unchanged.

        Raises:
            NotFoundError: If no roommate has the given ID
        """
        roommate = self.get_roommate(roommate_id)

        orphaned = [chore for chore in self._chores.values() if chore.assignee_id == roommate_id]
        for chore in orphaned:
            self._chores[chore.id] = dataclasses.replace(chore, assignee_id=None)
            logger.debug("Unassigned chore from removed roommate", chore_id=chore.id, roommate_id=roommate_id)

        del self._roommates[roommate_id]
        logger.info("Roommate removed", roommate_id=roommate_id, unassigned_chores=len(orphaned))
        return roommate

    def add_chore(self, title: str, description: str = "", points: int | str | None = None) -> Chore:
        """Add an open, unassigned chore.

        Args:
            title: Chore title
            description: Optional longer description
            points: Point value. None or text that is not an integer means 1.

        Raises:
            ValidationError: If the title is blank or the points are not a whole number of at least 1
        """
        title = title.strip()
        if not title:
            logger.warning("Rejected chore with blank title")
            raise ValidationError("Chore title must not be empty")

        value = _parse_points(points)
        chore = Chore(
            id=self._new_id(self._chores),
            title=title,
            description=(description or "").strip(),
            points=value,
            created_at=self._clock(),
        )
        self._chores[chore.id] = chore
        logger.info("Chore added", chore_id=chore.id, title=chore.title, points=chore.points)
        return chore

    def remove_chore(self, chore_id: str) -> Chore:
        """Remove a chore without taking back any points it earned.

        Raises:
            NotFoundError: If no chore has the given ID
        """
        chore = self.get_chore(chore_id)
        del self._chores[chore_id]
        logger.info("Chore removed", chore_id=chore_id, was_completed=chore.is_completed)
        return chore

    def assign_chore(self, chore_id: str, roommate_id: str) -> Chore:
        """Assign a chore to a roommate.

        Reassigning a completed chore only changes the assignee; the points
        already awarded stay with whoever completed it.

        Raises:
            NotFoundError: If the chore or the roommate does not exist
        """
        chore = self.get_chore(chore_id)
        roommate = self.get_roommate(roommate_id)

        updated = dataclasses.replace(chore, assignee_id=roommate.id)
        self._chores[chore_id] = updated
        logger.info(
            "Chore assigned",
            chore_id=chore_id,
            roommate_id=roommate.id,
            previous_assignee=chore.assignee_id,
        )
        return updated

    def complete_chore(self, chore_id: str) -> Chore:
        """Complete a chore and award its points to the assignee.

        Raises:
            NotFoundError: If no chore has the given ID
            InvalidStateError: If the chore is already completed or unassigned
        """
        chore = self.get_chore(chore_id)
        if chore.is_completed:
            logger.warning("Rejected completion of completed chore", chore_id=chore_id)
            raise InvalidStateError(f"Chore {chore.title!r} is already completed")
        if chore.assignee_id is None:
            logger.warning("Rejected completion of unassigned chore", chore_id=chore_id)
            raise InvalidStateError(f"Chore {chore.title!r} must be assigned before it can be completed")

        assignee = self.get_roommate(chore.assignee_id)
        completed = dataclasses.replace(chore, is_completed=True, completed_at=self._clock())
        awarded = dataclasses.replace(assignee, points=assignee.points + chore.points)

        self._chores[chore_id] = completed
        self._roommates[assignee.id] = awarded
        logger.info(
            "Chore completed",
            chore_id=chore_id,
            roommate_id=assignee.id,
            points_awarded=chore.points,
            balance=awarded.points,
        )
        return completed

    def _new_id(self, existing: dict) -> str:
        new_id = uuid.uuid4().hex
        while new_id in existing:
            new_id = uuid.uuid4().hex
        return new_id


def _parse_points(points: int | str | None) -> int:
    """Turn user input into a chore point value."""
    if points is None:
        return DEFAULT_CHORE_POINTS

    if isinstance(points, str):
        try:
            value = int(points.strip())
        except ValueError:
            logger.debug("Points are not an integer, using default", points=points)
            return DEFAULT_CHORE_POINTS
    elif isinstance(points, bool) or not isinstance(points, int):
        logger.warning("Rejected non-integer chore points", points=points)
        raise ValidationError(f"Chore points must be a whole number, got {points!r}")
    else:
        value = points

    if value < 1:
        logger.warning("Rejected non-positive chore points", points=value)
        raise ValidationError(f"Chore points must be at least 1, got {value}")
    return value
