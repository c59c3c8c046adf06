"""Vectors, colours and the visual theme of UI elements."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Vec2:
    """A two-component integer vector."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass
class UIElementTheme:
    """Colours, sizes, font and texture used to draw a UI element."""

    background_color: Color = field(default_factory=Color)
    border_color: Color = field(default_factory=Color)
    radius: int = 0
    border_size: int = 0
    font_color: Color = field(default_factory=Color)
    font_size: int = 0
    font: Any = None
    texture: Any = None

    def copy(self) -> UIElementTheme:
        """Return an independent copy sharing the same font and texture."""
        return replace(self)