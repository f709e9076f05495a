# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Standalone console host.

Runs the add-on outside a game client: widget roots come from a dump file
that is re-read every tick, chat goes to stdout, sound is the terminal bell
and desktop popups go through plyer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from plyer import notification

from warmthalert.errors import WidgetTreeError
from warmthalert.logging import get_logger
from warmthalert.sinks import ChatMessageType
from warmthalert.widgets import Widget, load_widget_roots

logger = get_logger(__name__)

APP_NAME = "Warmth Alert"


class SnapshotClient:
    """Game client backed by a widget-tree dump on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def widget_roots(self) -> list[Widget] | None:
        try:
            return load_widget_roots(self.path)
        except WidgetTreeError as e:
            logger.warning("widget_tree_unavailable", path=str(self.path), error=str(e))
            return None

    def play_sound_effect(self, sound_id: str) -> None:
        logger.debug("play_sound_effect", sound_id=sound_id)
        click.echo("\a", nl=False)

    def add_chat_message(self, message_type: ChatMessageType, name: str, message: str, sender: Any) -> None:
        prefix = f"{name}: " if name else ""
        color = "red" if message_type is ChatMessageType.GAMEMESSAGE else None
        click.secho(f"{prefix}{message}", fg=color)


class DesktopNotifier:
    """Desktop popup notifications via plyer."""

    def __init__(self, title: str = APP_NAME, timeout: int = 5) -> None:
        self.title = title
        self.timeout = timeout

    def notify(self, message: str) -> None:
        notification.notify(title=self.title, message=message, app_name=APP_NAME, timeout=self.timeout)
