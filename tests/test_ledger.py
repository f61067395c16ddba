"""Tests for the ledger interface."""

from datetime import datetime

import pytest

from choresplit.errors import NotFoundError, ValidationError
from choresplit.ledger import Ledger
from choresplit.models import Chore, Roommate

CREATED = datetime(2024, 5, 1, 9, 0)


class MockLedger(Ledger):
    """Mock ledger serving fixed lists for testing the shared queries."""

    def __init__(self, roommates: list[Roommate], chores: list[Chore]) -> None:
        """Initialize mock ledger."""
        self._roommates = roommates
        self._chores = chores

    def roommates(self) -> list[Roommate]:
        """List roommates."""
        return list(self._roommates)

    def chores(self) -> list[Chore]:
        """List chores."""
        return list(self._chores)

    def add_roommate(self, name: str) -> Roommate:
        """Add roommate."""
        raise NotImplementedError

    def remove_roommate(self, roommate_id: str) -> Roommate:
        """Remove roommate."""
        raise NotImplementedError

    def add_chore(self, title: str, description: str = "", points: int | str | None = None) -> Chore:
        """Add chore."""
        raise NotImplementedError

    def remove_chore(self, chore_id: str) -> Chore:
        """Remove chore."""
        raise NotImplementedError

    def assign_chore(self, chore_id: str, roommate_id: str) -> Chore:
        """Assign chore."""
        raise NotImplementedError

    def complete_chore(self, chore_id: str) -> Chore:
        """Complete chore."""
        raise NotImplementedError


@pytest.fixture
def ledger() -> MockLedger:
    """Create a mock ledger with two roommates and three chores."""
    roommates = [
        Roommate(id="aa11", name="Alex", points=5),
        Roommate(id="ab22", name="Sam", points=9),
    ]
    chores = [
        Chore(id="c1", title="Dishes", assignee_id="aa11", created_at=CREATED),
        Chore(
            id="c2",
            title="Laundry",
            assignee_id="ab22",
            is_completed=True,
            completed_at=CREATED,
            created_at=CREATED,
        ),
        Chore(id="d3", title="Mop floor", created_at=CREATED),
    ]
    return MockLedger(roommates, chores)


def test_get_roommate(ledger: MockLedger) -> None:
    """Test getting a roommate by ID."""
    assert ledger.get_roommate("ab22").name == "Sam"


def test_get_missing_roommate(ledger: MockLedger) -> None:
    """Test getting an unknown roommate."""
    with pytest.raises(NotFoundError):
        ledger.get_roommate("zz99")


def test_get_missing_chore(ledger: MockLedger) -> None:
    """Test getting an unknown chore."""
    with pytest.raises(NotFoundError):
        ledger.get_chore("missing")


def test_list_chores_by_status(ledger: MockLedger) -> None:
    """Test filtering chores by status."""
    assert [c.id for c in ledger.list_chores(status="open")] == ["c1", "d3"]
    assert [c.id for c in ledger.list_chores(status="completed")] == ["c2"]


def test_list_chores_by_assignee(ledger: MockLedger) -> None:
    """Test filtering chores by assignee."""
    assert [c.id for c in ledger.list_chores(assignee_id="aa11")] == ["c1"]
    assert ledger.list_chores(status="completed", assignee_id="aa11") == []


def test_list_chores_unknown_status(ledger: MockLedger) -> None:
    """Test an unknown status is rejected."""
    with pytest.raises(ValidationError):
        ledger.list_chores(status="archived")


def test_chores_for(ledger: MockLedger) -> None:
    """Test listing chores assigned to a roommate."""
    assert [c.title for c in ledger.chores_for("ab22")] == ["Laundry"]

    with pytest.raises(NotFoundError):
        ledger.chores_for("zz99")


def test_find_by_exact_id(ledger: MockLedger) -> None:
    """Test references resolve exact IDs first."""
    assert ledger.find_roommate("aa11").name == "Alex"
    assert ledger.find_chore("c2").title == "Laundry"


def test_find_by_prefix(ledger: MockLedger) -> None:
    """Test references resolve unique ID prefixes."""
    assert ledger.find_roommate("ab").name == "Sam"
    assert ledger.find_chore("d").title == "Mop floor"


def test_find_by_name(ledger: MockLedger) -> None:
    """Test references resolve names and titles case-insensitively."""
    assert ledger.find_roommate("  alex ").id == "aa11"
    assert ledger.find_chore("MOP FLOOR").id == "d3"


def test_find_ambiguous(ledger: MockLedger) -> None:
    """Test an ambiguous prefix is rejected."""
    with pytest.raises(ValidationError, match="ambiguous"):
        ledger.find_roommate("a")


def test_find_missing(ledger: MockLedger) -> None:
    """Test an unknown reference is reported."""
    with pytest.raises(NotFoundError):
        ledger.find_chore("Vacuum")

    with pytest.raises(ValidationError):
        ledger.find_roommate("   ")


def test_top_performer(ledger: MockLedger) -> None:
    """Test the top performer has the most points."""
    assert ledger.top_performer().name == "Sam"


def test_top_performer_empty() -> None:
    """Test there is no top performer without roommates."""
    assert MockLedger([], []).top_performer() is None
