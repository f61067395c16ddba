"""Leaderboard ordering of roommates."""

from collections.abc import Callable, Iterator, Sequence

import structlog

from choresplit.errors import NotFoundError
from choresplit.models import Roommate

logger = structlog.get_logger()


class Ranking:
    """Roommates ordered by points, highest first.

    The ordering is recomputed every time the ranking is iterated, so a
    ``Ranking`` obtained before a chore is completed reflects the new balances
    on its next iteration. Roommates with equal points keep the order in which
    they joined the ledger.
    """

    def __init__(self, source: Callable[[], Sequence[Roommate]]) -> None:
        """Initialize the ranking.

        Args:
            source: Callable returning the current roommates in joining order
        """
        self._source = source

    def __iter__(self) -> Iterator[Roommate]:
        roommates = self._source()
        logger.debug("Computing ranking", count=len(roommates))
        # sorted() is stable, so ties stay in joining order
        yield from sorted(roommates, key=lambda roommate: -roommate.points)

    def __len__(self) -> int:
        return len(self._source())

    def standings(self) -> Iterator[tuple[int, Roommate]]:
        """Yield (rank, roommate) pairs with 1-based ranks."""
        yield from enumerate(self, start=1)

    def rank_of(self, roommate_id: str) -> int:
        """Return the 1-based rank of a roommate.

        Raises:
            NotFoundError: If no roommate has the given ID
        """
        for rank, roommate in self.standings():
            if roommate.id == roommate_id:
                return rank
        raise NotFoundError(f"Roommate {roommate_id} not found")

    def first(self) -> Roommate | None:
        """Return the highest ranked roommate, or None if there are none."""
        return next(iter(self), None)
