# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the add-on tick handler."""

from __future__ import annotations

import pytest

from conftest import RecordingClient, RecordingNotifier, w
from warmthalert.plugin import WarmthAlertPlugin
from warmthalert.settings import AlertConfig


class FakeClock:
    def __init__(self, now_ms: int = 0) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def plugin(client: RecordingClient, notifier: RecordingNotifier, clock: FakeClock) -> WarmthAlertPlugin:
    config = AlertConfig(threshold=30, cooldown_ms=60_000)
    plugin = WarmthAlertPlugin(client, notifier, lambda: config, clock=clock)
    plugin.start_up()
    return plugin


def _show(client: RecordingClient, pct: int) -> None:
    client.roots = [w("Wintertodt", static=[w(f"Your Warmth: {pct}%")])]


def test_descriptor() -> None:
    assert WarmthAlertPlugin.name == "Warmth Alert"
    assert "warmth" in WarmthAlertPlugin.tags


def test_tick_without_widgets_does_nothing(plugin: WarmthAlertPlugin, notifier: RecordingNotifier) -> None:
    assert plugin.on_tick() is None
    assert plugin.last_reading is None
    assert notifier.messages == []


def test_tick_sequence_alerts_once(
    plugin: WarmthAlertPlugin, client: RecordingClient, notifier: RecordingNotifier, clock: FakeClock
) -> None:
    for pct, now in [(50, 0), (25, 1_000), (20, 2_000)]:
        _show(client, pct)
        clock.now_ms = now
        assert plugin.on_tick() == pct

    assert notifier.messages == ["Warmth LOW: 25% — move to the brazier/camp or eat!"]
    assert plugin.last_reading == 20


def test_restart_resets_cooldown(
    plugin: WarmthAlertPlugin, client: RecordingClient, notifier: RecordingNotifier, clock: FakeClock
) -> None:
    _show(client, 10)
    plugin.on_tick()
    plugin.shut_down()

    plugin.start_up()
    clock.now_ms = 1
    plugin.on_tick()
    assert len(notifier.messages) == 2


def test_config_read_every_tick(client: RecordingClient, notifier: RecordingNotifier, clock: FakeClock) -> None:
    configs = iter([AlertConfig(threshold=10), AlertConfig(threshold=40)])
    plugin = WarmthAlertPlugin(client, notifier, lambda: next(configs), clock=clock)
    plugin.start_up()
    _show(client, 35)

    plugin.on_tick()
    assert notifier.messages == []
    plugin.on_tick()
    assert len(notifier.messages) == 1


def test_sink_order_desktop_sound_chat(plugin: WarmthAlertPlugin) -> None:
    assert [sink.name for sink in plugin.dispatcher.sinks] == ["desktop", "sound", "chat"]
