"""Roommate commands for choresplit CLI."""

from cyclopts import App

roommate_app = App(name="roommate", help="Manage roommates")


@roommate_app.command
def add(name: str) -> None:
    """Add a roommate."""
    from choresplit.cli import get_ledger, report_errors, short_id

    with report_errors():
        roommate = get_ledger().add_roommate(name)
        print(f"Added roommate {short_id(roommate.id)}: {roommate.name}")


@roommate_app.command(name="list")
def list_roommates() -> None:
    """List roommates in the order they joined."""
    from choresplit.cli import get_ledger, short_id

    roommates = get_ledger().roommates()
    if not roommates:
        print("No roommates yet")
        return

    print(f"Found {len(roommates)} roommate(s):\n")
    for roommate in roommates:
        print(f"{short_id(roommate.id)}: {roommate.name} ({roommate.points} points)")


@roommate_app.command
def remove(*roommates: str) -> None:
    """Remove one or more roommates. Their chores become unassigned."""
    from choresplit.cli import get_ledger, report_errors

    with report_errors():
        ledger = get_ledger()
        found = [ledger.find_roommate(ref) for ref in roommates]
        targets = list({roommate.id: roommate for roommate in found}.values())
        for target in targets:
            ledger.remove_roommate(target.id)
        print(f"Removed {len(targets)} roommate(s)")


@roommate_app.command
def chores(roommate: str) -> None:
    """List the chores assigned to a roommate.

    Args:
        roommate: Roommate ID, ID prefix or name
    """
    from choresplit.cli import format_chore, get_ledger, report_errors

    with report_errors():
        ledger = get_ledger()
        target = ledger.find_roommate(roommate)
        assigned = ledger.chores_for(target.id)

        if not assigned:
            print(f"No chores assigned to {target.name}")
            return

        print(f"Chores for {target.name}:\n")
        for chore in assigned:
            print(format_chore(chore, ledger))
