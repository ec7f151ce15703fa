# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Defines `BoundValue`, the result of a successful bind."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from bindery.binding.value_source import ValueSource


class BoundValue(BaseModel):
    """
    A resolved value together with where it came from.

    Attributes:
        value (Any): The produced value.
        value_descriptor (Any): The descriptor the value was bound to.
        value_source (ValueSource): The source that produced the value, kept for
            diagnostics.
    """

    value: Any
    value_descriptor: Any
    value_source: ValueSource

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def __str__(self) -> str:
        name = getattr(self.value_descriptor, "value_name", "?")
        return f"{name}: {self.value!r} (from {self.value_source!r})"
