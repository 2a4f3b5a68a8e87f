"""Rectangle value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with a derived area.

    >>> r = Rectangle(10, 20)
    >>> r.width, r.height, r.area()
    (10, 20, 200)
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    get_area = area
