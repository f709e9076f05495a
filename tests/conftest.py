# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from warmthalert.settings import AlertConfig
from warmthalert.sinks import ChatMessageType
from warmthalert.widgets import Widget


class RecordingClient:
    """Game client double that records sound and chat requests."""

    def __init__(self, roots: list[Widget | None] | None = None) -> None:
        self.roots = roots
        self.sounds: list[str] = []
        self.chat: list[tuple[ChatMessageType, str, str, Any]] = []

    def widget_roots(self) -> list[Widget | None] | None:
        return self.roots

    def play_sound_effect(self, sound_id: str) -> None:
        self.sounds.append(sound_id)

    def add_chat_message(self, message_type: ChatMessageType, name: str, message: str, sender: Any) -> None:
        self.chat.append((message_type, name, message, sender))


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


def w(text: str | None = None, *, hidden: bool = False, dynamic=(), static=(), nested=()) -> Widget:
    """Shorthand widget builder."""
    return Widget(
        text=text,
        hidden=hidden,
        dynamic_children=list(dynamic),
        static_children=list(static),
        nested_children=list(nested),
    )


@pytest.fixture
def client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def alert_config() -> AlertConfig:
    """Threshold 30, one minute cooldown, every sink on."""
    return AlertConfig(threshold=30, cooldown_ms=60_000)

