"""Configuration commands for choresplit CLI."""

from typing import Any

import yaml
from cyclopts import App

from choresplit.config import get_config

config_app = App(name="config", help="Manage choresplit settings")


def _scope(global_: bool) -> str:
    return "global" if global_ else "local"


def _format_value(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return "\n" + yaml.safe_dump(value, default_flow_style=False, sort_keys=False).rstrip()
    return str(value)


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Store a setting.

    The value is read as YAML, so ``false`` is stored as a boolean and
    ``[a, b]`` as a list.

    Args:
        key: Setting name, e.g. seed
        value: Setting value
        global_: Store in ~/.choresplit instead of the current directory
    """
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        parsed = value
    if parsed is None:
        parsed = value
    get_config(use_global=global_).set(key, parsed)
    print(f"{key} = {_format_value(parsed)} ({_scope(global_)})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Remove a setting.

    Args:
        key: Setting name
        global_: Remove from ~/.choresplit instead of the current directory
    """
    get_config(use_global=global_).unset(key)
    print(f"Removed {key} ({_scope(global_)})")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Show one setting."""
    value = get_config(use_global=global_).get(key)
    print(f"{key} is not set" if value is None else f"{key} = {_format_value(value)}")


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """Show every setting, local values overriding global ones.

    Args:
        global_: Only show settings from ~/.choresplit
    """
    settings = get_config(use_global=global_).list()
    if not settings:
        print(f"No {_scope(global_)} settings")
        return

    print(f"Settings ({_scope(global_)}):\n")
    for key, value in settings.items():
        print(f"{key} = {_format_value(value)}")
