# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared constants for warmthalert."""

from __future__ import annotations

import re

# Substring every warmth widget text contains ("Your Warmth: 37%", "Warmth: 37%")
WARMTH_KEYWORD = "warmth"

# First digit run followed by optional whitespace and a percent sign
PCT_PATTERN = re.compile(r"(\d+)\s*%", re.ASCII)

MIN_WARMTH = 0
MAX_WARMTH = 100

ALERT_MESSAGE_TEMPLATE = "Warmth LOW: {warmth}% — move to the brazier/camp or eat!"

# Loud, distinct cue; the host maps it to its own sound effect
ALERT_SOUND_ID = "TUTORIAL_COMPLETE"

# One game tick
DEFAULT_TICK_INTERVAL_S = 0.6

# Alert configuration defaults
DEFAULT_THRESHOLD = 30
DEFAULT_COOLDOWN_MS = 60_000
