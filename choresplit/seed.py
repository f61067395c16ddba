"""Sample household used to start a session."""

import uuid
from collections.abc import Callable
from datetime import datetime, timedelta

import structlog

from choresplit.backends.memory import InMemoryLedger
from choresplit.models import Chore, Roommate

logger = structlog.get_logger()


def sample_ledger(clock: Callable[[], datetime] | None = None) -> InMemoryLedger:
    """Create a ledger holding the sample household.

    The roommates start with their sample balances. The completed
    "Vacuum living room" chore is already reflected in Jordan's points, so
    seeding does not award anything.

    Args:
        clock: Returns the current time (defaults to ``datetime.now``)

    Returns:
        A new ledger with 3 roommates and 5 chores
    """
    clock = clock or datetime.now
    now = clock()

    alex = Roommate(id=_new_id(), name="Alex", points=15)
    sam = Roommate(id=_new_id(), name="Sam", points=12)
    jordan = Roommate(id=_new_id(), name="Jordan", points=8)

    chores = [
        Chore(
            id=_new_id(),
            title="Take out trash",
            description="Trash day is Tuesday",
            points=2,
            assignee_id=alex.id,
            created_at=now,
        ),
        Chore(
            id=_new_id(),
            title="Clean kitchen",
            description="Dishes, counters, stove",
            points=3,
            assignee_id=sam.id,
            created_at=now,
        ),
        Chore(
            id=_new_id(),
            title="Vacuum living room",
            points=2,
            assignee_id=jordan.id,
            is_completed=True,
            completed_at=now - timedelta(hours=2),
            created_at=now,
        ),
        Chore(id=_new_id(), title="Buy groceries", points=2, created_at=now),
        Chore(id=_new_id(), title="Clean bathroom", points=3, created_at=now),
    ]

    logger.debug("Seeding sample household", roommates=3, chores=len(chores))
    return InMemoryLedger(roommates=[alex, sam, jordan], chores=chores, clock=clock)


def _new_id() -> str:
    return uuid.uuid4().hex
