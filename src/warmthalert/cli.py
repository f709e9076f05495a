# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable

import click
import yaml
from pydantic import ValidationError

from warmthalert.constants import DEFAULT_TICK_INTERVAL_S
from warmthalert.errors import WidgetTreeError
from warmthalert.host import DesktopNotifier, SnapshotClient
from warmthalert.locator import locate
from warmthalert.logging import configure_logging, get_logger
from warmthalert.plugin import WarmthAlertPlugin
from warmthalert.settings import AlertConfig, Settings
from warmthalert.widgets import load_widget_roots

logger = get_logger(__name__)

# Anything that can go wrong reading a YAML alert config from disk
CONFIG_LOAD_ERRORS = (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError)


def _apply_overrides(base: AlertConfig, overrides: dict[str, Any]) -> AlertConfig:
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return base
    return AlertConfig.model_validate({**base.model_dump(), **updates})


def _config_provider(
    base: AlertConfig, config_path: Path | None, overrides: dict[str, Any]
) -> Callable[[], AlertConfig]:
    """Build a provider that re-reads the config file on every tick.

    The last valid configuration stays in effect while the file is broken.
    """
    current = _apply_overrides(base, overrides)

    def _provide() -> AlertConfig:
        nonlocal current
        if config_path is None:
            return current
        try:
            current = _apply_overrides(AlertConfig.from_yaml(config_path), overrides)
        except CONFIG_LOAD_ERRORS as e:
            logger.warning("alert_config_reload_failed", path=str(config_path), error=str(e))
        return current

    return _provide


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """warmthalert command line interface."""


@cli.command("scan")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def scan(path: Path) -> None:
    """Print the warmth percentage found in a widget-tree dump."""
    configure_logging(Settings())
    try:
        roots = load_widget_roots(path)
    except WidgetTreeError as e:
        raise click.BadParameter(str(e), param_hint="PATH") from e

    warmth = locate(roots)
    if warmth is None:
        click.echo("Warmth not found", err=True)
        raise SystemExit(1)
    click.echo(f"Warmth: {warmth}%")


@cli.command("watch")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML alert configuration, re-read every tick.",
)
@click.option(
    "--interval", type=float, default=DEFAULT_TICK_INTERVAL_S, show_default=True, help="Tick interval in seconds."
)
@click.option("--threshold", type=int, default=None, help="Alert at or below this warmth percentage.")
@click.option("--cooldown-ms", type=int, default=None, help="Minimum time between alerts.")
@click.option("--desktop/--no-desktop", default=None, help="Desktop notification.")
@click.option("--sound/--no-sound", default=None, help="Sound cue.")
@click.option("--chat/--no-chat", default=None, help="Chat echo.")
@click.option("--once", is_flag=True, help="Run a single tick and exit.")
def watch(
    path: Path,
    config_path: Path | None,
    interval: float,
    threshold: int | None,
    cooldown_ms: int | None,
    desktop: bool | None,
    sound: bool | None,
    chat: bool | None,
    once: bool,
) -> None:
    """Watch a widget-tree dump and alert when warmth drops low.

    The dump at PATH is re-read on every tick, so any tool that keeps it
    up to date can drive the alerts.

    Examples:
        warmthalert watch widgets.json --threshold 40
        warmthalert watch widgets.yaml --config alert.yaml --no-sound
    """
    settings = Settings()
    configure_logging(settings)

    overrides = {
        "threshold": threshold,
        "cooldown_ms": cooldown_ms,
        "desktop_notify": desktop,
        "play_sound": sound,
        "chat_echo": chat,
    }
    try:
        base = AlertConfig.from_yaml(config_path) if config_path else settings.alert
        provider = _config_provider(base, config_path, overrides)
    except CONFIG_LOAD_ERRORS as e:
        raise click.BadParameter(str(e)) from e

    plugin = WarmthAlertPlugin(SnapshotClient(path), DesktopNotifier(), provider)
    plugin.start_up()
    try:
        while True:
            plugin.on_tick()
            if once:
                break
            time.sleep(interval)
    except KeyboardInterrupt:
        pass
    finally:
        plugin.shut_down()


@cli.command("init-config")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init_config(path: Path, force: bool) -> None:
    """Write the effective alert configuration to a YAML file."""
    settings = Settings()
    configure_logging(settings)
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")
    settings.alert.to_yaml(path)
    click.echo(f"Wrote {path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
