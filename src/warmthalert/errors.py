# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception types for warmthalert."""

from __future__ import annotations


class WarmthAlertError(Exception):
    """Base exception for warmthalert."""


class WidgetTreeError(WarmthAlertError):
    """A widget-tree dump could not be read or validated."""
