# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Threshold and cooldown check plus alert fan-out to the sinks."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from warmthalert.constants import ALERT_MESSAGE_TEMPLATE, MAX_WARMTH, MIN_WARMTH
from warmthalert.logging import get_logger

if TYPE_CHECKING:
    from warmthalert.settings import AlertConfig
    from warmthalert.sinks import AlertSink

logger = get_logger(__name__)


def wall_clock_ms() -> int:
    """Current wall-clock time in milliseconds."""
    return int(time.time() * 1000)


def format_alert_message(warmth: int) -> str:
    return ALERT_MESSAGE_TEMPLATE.format(warmth=warmth)


@dataclass
class AlertState:
    """Time of the last fired alert; None until the first alert."""

    last_alert_ms: int | None = None

    def reset(self) -> None:
        self.last_alert_ms = None

    def ready(self, now_ms: int, cooldown_ms: int) -> bool:
        """True if no alert fired within the cooldown window ending at now_ms."""
        if self.last_alert_ms is None:
            return True
        return now_ms - self.last_alert_ms >= cooldown_ms

    def record(self, now_ms: int) -> None:
        # Never moves backwards
        if self.last_alert_ms is None or now_ms >= self.last_alert_ms:
            self.last_alert_ms = now_ms


class AlertDispatcher:
    """Decides whether a reading warrants an alert and notifies the sinks.

    Sinks are invoked in the order given. A failing sink is logged and
    skipped; it does not stop the others and is never retried.
    """

    def __init__(self, sinks: Iterable[AlertSink], state: AlertState | None = None) -> None:
        self._sinks = list(sinks)
        self.state = state or AlertState()

    @property
    def sinks(self) -> list[AlertSink]:
        return list(self._sinks)

    def reset(self) -> None:
        """Forget the last alert so the next low reading alerts immediately."""
        self.state.reset()

    def cooldown_remaining_ms(self, config: AlertConfig, now_ms: int) -> int:
        if self.state.last_alert_ms is None:
            return 0
        return max(0, config.cooldown_ms - (now_ms - self.state.last_alert_ms))

    def maybe_alert(self, reading: int, config: AlertConfig, now_ms: int | None = None) -> bool:
        """Fire an alert for a low reading unless the cooldown is active.

        Args:
            reading: Located warmth percentage
            config: Alert configuration for this tick
            now_ms: Wall-clock time in milliseconds (defaults to now)

        Returns:
            True if the alert fired

        Raises:
            ValueError: If reading is outside [0, 100]
        """
        if not MIN_WARMTH <= reading <= MAX_WARMTH:
            raise ValueError(f"Warmth reading out of range: {reading}")

        if reading > config.threshold:
            return False

        if now_ms is None:
            now_ms = wall_clock_ms()

        if not self.state.ready(now_ms, config.cooldown_ms):
            logger.debug(
                "warmth_alert_suppressed",
                warmth=reading,
                remaining_ms=self.cooldown_remaining_ms(config, now_ms),
            )
            return False

        self.state.record(now_ms)
        message = format_alert_message(reading)
        logger.info("warmth_alert_fired", warmth=reading, threshold=config.threshold)

        for sink in self._sinks:
            if not sink.enabled(config):
                continue
            try:
                sink.send(message)
            except Exception:
                logger.exception("alert_sink_failed", sink=sink.name)

        return True
