# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Warmth Alert add-on: tick handler wiring locator, dispatcher and sinks."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from warmthalert.dispatcher import AlertDispatcher, wall_clock_ms
from warmthalert.locator import locate
from warmthalert.logging import get_logger
from warmthalert.sinks import default_sinks

if TYPE_CHECKING:
    from warmthalert.settings import AlertConfig
    from warmthalert.sinks import GameClient, Notifier

logger = get_logger(__name__)


class WarmthAlertPlugin:
    """Warns you when 'Your Warmth' drops below a threshold.

    The host calls :meth:`start_up` once, :meth:`on_tick` on every game tick
    and :meth:`shut_down` when the add-on is disabled. Configuration is pulled
    through ``config_provider`` on every tick so user edits apply immediately.
    """

    name = "Warmth Alert"
    description = "Warns you when 'Your Warmth' drops below a threshold"
    tags = ("wintertodt", "warmth", "notification")

    def __init__(
        self,
        client: GameClient,
        notifier: Notifier,
        config_provider: Callable[[], AlertConfig],
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._client = client
        self._config_provider = config_provider
        self._clock = clock or wall_clock_ms
        self.dispatcher = AlertDispatcher(default_sinks(notifier, client))
        self.last_reading: int | None = None

    def start_up(self) -> None:
        self.dispatcher.reset()
        self.last_reading = None
        logger.info("warmth_alert_started")

    def shut_down(self) -> None:
        logger.info("warmth_alert_stopped")

    def on_tick(self) -> int | None:
        """Scan the current widget tree and alert if warmth is low.

        Returns:
            Warmth percentage found this tick, or None
        """
        warmth = locate(self._client.widget_roots())
        self.last_reading = warmth
        if warmth is None:
            return None

        logger.debug("warmth_reading", warmth=warmth)
        self.dispatcher.maybe_alert(warmth, self._config_provider(), self._clock())
        return warmth
