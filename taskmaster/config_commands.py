"""Configuration commands for the taskmaster CLI."""

import sys

from cyclopts import App

from taskmaster.config import DEFAULTS, Config, get_config

config_app = App(name="config", help="Manage configuration")


def _open(global_: bool) -> tuple[Config, str]:
    return get_config(use_global=global_), "global" if global_ else "local"


def _require_known(key: str) -> None:
    if key not in DEFAULTS:
        print(f"Error: unknown configuration key {key!r} (known: {', '.join(sorted(DEFAULTS))})")
        sys.exit(1)


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Set a configuration value.

    Args:
        key: Configuration key, e.g. data_file
        value: Configuration value
        global_: Write to ~/.taskmaster instead of ./.taskmaster
    """
    _require_known(key)
    config, scope = _open(global_)
    config.set(key, value)
    print(f"{key} -> {value} in {scope} config ({config.config_file})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Remove a configuration value, falling back to the next scope."""
    _require_known(key)
    config, scope = _open(global_)
    config.unset(key)
    print(f"{key} removed from {scope} config; now {config.get(key)}")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Show the effective value of a configuration key and where it comes from."""
    _require_known(key)
    config, _ = _open(global_)
    print(f"{key} = {config.get(key)} ({config.source(key)})")


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """List configuration values, including defaults that were not overridden."""
    config, _ = _open(global_)
    explicit = config.list()
    for key, value in {**DEFAULTS, **explicit}.items():
        marker = "" if key in explicit else " (default)"
        print(f"{key} = {value}{marker}")
