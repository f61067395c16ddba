"""CLI for choresplit."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from choresplit.backends import InMemoryLedger
from choresplit.chore_commands import chore_app
from choresplit.config import get_config
from choresplit.config_commands import config_app
from choresplit.errors import LedgerError
from choresplit.ledger import Ledger
from choresplit.models import Chore
from choresplit.rewards import load_rewards, rewards_reached
from choresplit.roommate_commands import roommate_app
from choresplit.seed import sample_ledger

logger = structlog.get_logger()

app = App(
    help="Choresplit - Share household chores and earn points",
)

app.command(chore_app)
app.command(roommate_app)
app.command(config_app)

_session: Ledger | None = None


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


def start_session(ledger: Ledger | None = None) -> Ledger:
    """Start the session ledger used by every command in this process.

    Without an explicit ledger, the sample household is loaded unless the
    ``seed`` config setting is false, in which case the session starts empty.
    """
    global _session

    if ledger is None:
        config = get_config()
        if config.get_bool("seed", default=True):
            ledger = sample_ledger()
        else:
            ledger = InMemoryLedger()

    _session = ledger
    logger.debug("Session started", roommates=len(ledger.roommates()), chores=len(ledger.chores()))
    return ledger


def end_session() -> None:
    """Drop the session ledger."""
    global _session
    _session = None


def get_ledger() -> Ledger:
    """Get the session ledger."""
    if _session is None:
        raise RuntimeError("No session started")
    return _session


@contextmanager
def report_errors() -> Iterator[None]:
    """Print ledger errors instead of aborting, leaving the session usable."""
    try:
        yield
    except LedgerError as e:
        logger.debug("Command failed", error_type=type(e).__name__, error=str(e))
        print(f"Error: {e}")


def short_id(item_id: str) -> str:
    return item_id[:8]


def format_chore(chore: Chore, ledger: Ledger) -> str:
    """Format a chore as a single line."""
    marker = "○" if chore.is_completed else "●"
    line = f"{marker} {short_id(chore.id)}: {chore.title} ({chore.points} points)"

    if chore.assignee_id is not None:
        line += f" - {ledger.get_roommate(chore.assignee_id).name}"
    else:
        line += " - unassigned"

    if chore.completed_at is not None:
        line += f", done {chore.completed_at:%Y-%m-%d %H:%M}"
    return line


@app.command
def leaderboard() -> None:
    """Show roommates ranked by points."""
    ledger = get_ledger()
    ranking = ledger.ranking()

    if not len(ranking):
        print("No roommates yet")
        return

    print("Leaderboard:\n")
    for rank, roommate in ranking.standings():
        print(f"#{rank} {roommate.name} - {roommate.points} points")


@app.command
def rewards() -> None:
    """Show the top performer and the rewards catalog."""
    ledger = get_ledger()
    try:
        catalog = load_rewards(get_config())
    except ValueError as e:
        logger.debug("Rewards catalog unavailable", error=str(e))
        print(f"Error: {e}")
        return

    top = ledger.top_performer()
    if top is not None:
        print(f"Top performer: {top.name} ({top.points} points)\n")

    print("Suggested rewards:\n")
    roommates = ledger.roommates()
    for reward in catalog:
        reached = [r.name for r in roommates if reward in rewards_reached(r.points, catalog)]
        line = f"{reward.points} points: {reward.description}"
        if reached:
            line += f" (reached by {', '.join(reached)})"
        print(line)


@app.command
def shell() -> None:
    """Run commands interactively against one session."""
    print("Choresplit shell. Type --help for commands and quit to leave.")
    app.interactive_shell(prompt="choresplit> ", quit=["quit", "exit"])


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    start_session()
    try:
        app(tokens)
    finally:
        end_session()


if __name__ == "__main__":
    app.meta()
