"""Rewards catalog."""

from typing import Any

import structlog

from choresplit.config import Config
from choresplit.models import Reward

logger = structlog.get_logger()

DEFAULT_REWARDS = (
    Reward(points=10, description="Choose next week's dinner"),
    Reward(points=15, description="Get out of one chore"),
    Reward(points=20, description="Movie night pick"),
    Reward(points=25, description="Breakfast in bed"),
    Reward(points=30, description="Grocery shopping paid for"),
)


def load_rewards(config: Config | None = None) -> list[Reward]:
    """Load the rewards catalog.

    A ``rewards`` config entry replaces the default catalog. It must be a list
    of mappings with ``points`` and ``description`` keys, for example::

        rewards:
          - points: 5
            description: Pick the playlist

    Args:
        config: Configuration to read from (defaults are used when None)

    Returns:
        Rewards sorted by point threshold

    Raises:
        ValueError: If the configured catalog is malformed
    """
    entries: Any = config.get("rewards") if config is not None else None
    if not entries:
        logger.debug("Using default rewards catalog", count=len(DEFAULT_REWARDS))
        return list(DEFAULT_REWARDS)

    if not isinstance(entries, list):
        raise ValueError("Config 'rewards' must be a list of {points, description} entries")

    rewards = []
    for entry in entries:
        try:
            rewards.append(Reward(points=int(entry["points"]), description=str(entry["description"]).strip()))
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Invalid reward entry", entry=entry, error=str(e))
            raise ValueError(f"Invalid reward entry in config: {entry!r}") from e

    logger.debug("Loaded rewards catalog from config", count=len(rewards))
    return sorted(rewards, key=lambda reward: reward.points)


def rewards_reached(points: int, catalog: list[Reward]) -> list[Reward]:
    """Return the rewards whose threshold a balance of ``points`` has reached."""
    return [reward for reward in catalog if reward.points <= points]
