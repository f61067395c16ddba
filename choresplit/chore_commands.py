"""Chore commands for choresplit CLI."""

from typing import Literal

from cyclopts import App

chore_app = App(name="chore", help="Manage chores")


@chore_app.command
def add(title: str, description: str = "", points: str | None = None) -> None:
    """Add a chore.

    Args:
        title: Chore title
        description: Optional description
        points: Points awarded on completion (defaults to 1)
    """
    from choresplit.cli import get_ledger, report_errors, short_id

    with report_errors():
        chore = get_ledger().add_chore(title, description=description, points=points)
        print(f"Added chore {short_id(chore.id)}: {chore.title} ({chore.points} points)")


@chore_app.command(name="list")
def list_chores(
    status: Literal["open", "completed"] | None = None,
    assignee: str | None = None,
) -> None:
    """List chores.

    Args:
        status: Only show open or completed chores
        assignee: Only show chores assigned to this roommate (ID or name)
    """
    from choresplit.cli import format_chore, get_ledger, report_errors

    with report_errors():
        ledger = get_ledger()
        assignee_id = ledger.find_roommate(assignee).id if assignee else None
        chores = ledger.list_chores(status=status, assignee_id=assignee_id)

        if not chores:
            print("No chores found")
            return

        print(f"Found {len(chores)} chore(s):\n")
        for chore in chores:
            print(format_chore(chore, ledger))


@chore_app.command
def assign(chore: str, roommate: str) -> None:
    """Assign a chore to a roommate.

    Args:
        chore: Chore ID, ID prefix or title
        roommate: Roommate ID, ID prefix or name
    """
    from choresplit.cli import get_ledger, report_errors

    with report_errors():
        ledger = get_ledger()
        target = ledger.find_chore(chore)
        assignee = ledger.find_roommate(roommate)
        ledger.assign_chore(target.id, assignee.id)
        print(f"Assigned {target.title} to {assignee.name}")


@chore_app.command
def complete(chore: str) -> None:
    """Mark a chore as done and award its points.

    Args:
        chore: Chore ID, ID prefix or title
    """
    from choresplit.cli import get_ledger, report_errors

    with report_errors():
        ledger = get_ledger()
        done = ledger.complete_chore(ledger.find_chore(chore).id)
        roommate = ledger.get_roommate(done.assignee_id)
        print(f"Completed {done.title}: {roommate.name} now has {roommate.points} points")


@chore_app.command
def remove(*chores: str) -> None:
    """Remove one or more chores."""
    from choresplit.cli import get_ledger, report_errors

    with report_errors():
        ledger = get_ledger()
        found = [ledger.find_chore(ref) for ref in chores]
        targets = list({chore.id: chore for chore in found}.values())
        for target in targets:
            ledger.remove_chore(target.id)
        print(f"Removed {len(targets)} chore(s)")
