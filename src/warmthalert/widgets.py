# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""UI element tree model.

The host owns its widget objects; anything exposing ``text``, ``hidden`` and
the three child groups satisfies :class:`UIElement`. :class:`Widget` is the
concrete model used for widget-tree dumps and the standalone host.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from warmthalert.errors import WidgetTreeError


class UIElement(Protocol):
    """Read-only view of a host UI element."""

    text: str | None
    hidden: bool
    dynamic_children: Sequence[UIElement | None] | None
    static_children: Sequence[UIElement | None] | None
    nested_children: Sequence[UIElement | None] | None


def child_groups(element: UIElement) -> tuple[Sequence[UIElement | None], ...]:
    """Return the child groups of an element in dynamic, static, nested order."""
    return (
        element.dynamic_children or (),
        element.static_children or (),
        element.nested_children or (),
    )


class Widget(BaseModel):
    """Concrete UI element, as found in widget-tree dumps."""

    text: str | None = None
    hidden: bool = False
    dynamic_children: list[Widget | None] = Field(default_factory=list)
    static_children: list[Widget | None] = Field(default_factory=list)
    nested_children: list[Widget | None] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


_ROOTS_ADAPTER = TypeAdapter(list[Widget])


def parse_widget_roots(data: Any) -> list[Widget]:
    """Validate decoded dump data into a list of root widgets.

    Accepts a single root mapping, a list of roots, or a mapping with a
    ``roots`` key. ``None`` (an empty document) yields no roots.
    """
    if data is None:
        return []
    if isinstance(data, dict):
        data = data["roots"] if "roots" in data else [data]
    try:
        return _ROOTS_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise WidgetTreeError(f"Invalid widget tree: {e}") from e


def load_widget_roots(path: Path | str) -> list[Widget]:
    """Load a JSON or YAML widget-tree dump."""
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise WidgetTreeError(f"Cannot read widget tree {path}: {e}") from e
    return parse_widget_roots(data)
