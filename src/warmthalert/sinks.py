# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Notification sinks and the host collaborators they call into."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from warmthalert.constants import ALERT_SOUND_ID

if TYPE_CHECKING:
    from warmthalert.settings import AlertConfig
    from warmthalert.widgets import UIElement


class ChatMessageType(str, Enum):
    """Chat stream message categories understood by the host."""

    GAMEMESSAGE = "GAMEMESSAGE"


class Notifier(Protocol):
    """Host desktop notification service."""

    def notify(self, message: str) -> None: ...


class GameClient(Protocol):
    """Subset of the host client used by the add-on."""

    def widget_roots(self) -> Sequence[UIElement | None] | None: ...

    def play_sound_effect(self, sound_id: str) -> None: ...

    def add_chat_message(self, message_type: ChatMessageType, name: str, message: str, sender: Any) -> None: ...


class AlertSink(Protocol):
    """Independent notification channel invoked when an alert fires."""

    name: str

    def enabled(self, config: AlertConfig) -> bool:
        """Whether the channel's toggle is on in this config."""
        ...

    def send(self, message: str) -> None:
        """Deliver the alert message."""
        ...


class DesktopSink:
    name = "desktop"

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier

    def enabled(self, config: AlertConfig) -> bool:
        return config.desktop_notify

    def send(self, message: str) -> None:
        self._notifier.notify(message)


class SoundSink:
    """Plays a fixed cue; the message text is not used."""

    name = "sound"

    def __init__(self, client: GameClient, sound_id: str = ALERT_SOUND_ID) -> None:
        self._client = client
        self.sound_id = sound_id

    def enabled(self, config: AlertConfig) -> bool:
        return config.play_sound

    def send(self, message: str) -> None:
        self._client.play_sound_effect(self.sound_id)


class ChatSink:
    """Posts the message as a game message with no sender."""

    name = "chat"

    def __init__(self, client: GameClient) -> None:
        self._client = client

    def enabled(self, config: AlertConfig) -> bool:
        return config.chat_echo

    def send(self, message: str) -> None:
        self._client.add_chat_message(ChatMessageType.GAMEMESSAGE, "", message, None)


def default_sinks(notifier: Notifier, client: GameClient) -> list[AlertSink]:
    """Build the desktop, sound and chat sinks in dispatch order."""
    return [DesktopSink(notifier), SoundSink(client), ChatSink(client)]
