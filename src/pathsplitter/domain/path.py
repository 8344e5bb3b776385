"""Core lexical and geometric types for path data.

This module defines the fundamental value types used throughout pathsplitter:
- TokenKind: Enum distinguishing command letters from numeric literals
- Token: A single lexical token, kept as its original source text
- Point: A 2D point in the path's local coordinate space
- BoundingBox: An axis-aligned box that grows as coordinates are recorded
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenKind(Enum):
    """Kind of a path-data token.

    - COMMAND: A single ASCII letter (M, l, C, z, ...)
    - NUMBER: A signed decimal literal, optionally with exponent
    """

    COMMAND = auto()
    NUMBER = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token from path data.

    The original text is preserved so that numbers are re-serialized
    exactly as they were written.

    Attributes:
        kind: Whether this is a command letter or a number
        text: Original source text of the token
    """

    kind: TokenKind
    text: str

    @property
    def is_command(self) -> bool:
        """True if this token is a command letter."""
        return self.kind == TokenKind.COMMAND

    @property
    def value(self) -> float:
        """Numeric value of a NUMBER token.

        Raises:
            ValueError: If called on a COMMAND token
        """
        if self.kind != TokenKind.NUMBER:
            raise ValueError(f"Token '{self.text}' is not a number")
        return float(self.text)

    @classmethod
    def command(cls, letter: str) -> "Token":
        return cls(TokenKind.COMMAND, letter)

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(TokenKind.NUMBER, text)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the path's local coordinate space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        return cls(x=data["x"], y=data["y"])


@dataclass
class BoundingBox:
    """Axis-aligned bounding box.

    A fresh box is empty (infinite bounds) until the first coordinate is
    recorded with include().

    Attributes:
        min_x: Smallest recorded x
        min_y: Smallest recorded y
        max_x: Largest recorded x
        max_y: Largest recorded y
    """

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    @classmethod
    def from_point(cls, x: float, y: float) -> "BoundingBox":
        """Create a zero-size box at a single point."""
        return cls(min_x=x, min_y=y, max_x=x, max_y=y)

    def is_empty(self) -> bool:
        """Check if no coordinate has been recorded yet."""
        return self.min_x == math.inf

    def include(self, x: float, y: float) -> None:
        """Grow the box to cover (x, y)."""
        if x < self.min_x:
            self.min_x = x
        if x > self.max_x:
            self.max_x = x
        if y < self.min_y:
            self.min_y = y
        if y > self.max_y:
            self.max_y = y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        """Area of the box (width * height)."""
        return self.width * self.height

    def contains(self, other: "BoundingBox") -> bool:
        """Check if this box fully covers another box (inclusive on all bounds).

        Args:
            other: The box to test

        Returns:
            True if all four bounds of other lie within this box
        """
        return (
            self.min_x <= other.min_x
            and self.max_x >= other.max_x
            and self.min_y <= other.min_y
            and self.max_y >= other.max_y
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
