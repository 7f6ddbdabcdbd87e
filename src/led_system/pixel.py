#!/usr/bin/env python3
"""
Pixel class - Library independent color representation

A packed 24-bit RGB value that IS an int, so it can be handed straight to
rpi_ws281x while still exposing r/g/b for tests and logging.
"""


class Pixel(int):
    """RGB color packed into an integer (0xRRGGBB)

    Usage:
        lamp_on = Pixel(255, 0, 0)      # Red lamp
        lamp_on = Pixel(0xFF0000)       # Same, from packed int
        strip[0] = lamp_on              # Direct assignment
        lamp_on.is_off                  # False
    """

    def __new__(cls, r: int, g: int = None, b: int = None) -> 'Pixel':
        """Create pixel from RGB components or an already packed int

        Args:
            r: Red component (0-255) OR packed color integer
            g: Green component (0-255) OR None if r is packed color
            b: Blue component (0-255) OR None if r is packed color

        Raises:
            ValueError: If only one of g/b is provided
        """
        if g is None and b is None:
            return int.__new__(cls, r)
        if g is None or b is None:
            raise ValueError("Must provide either just int value or all three RGB values")
        return int.__new__(cls, ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))

    @property
    def r(self) -> int:
        """Red component (0-255)"""
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        """Green component (0-255)"""
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        """Blue component (0-255)"""
        return self & 0xFF

    @property
    def is_off(self) -> bool:
        """True for black (all components zero)"""
        return int(self) == 0

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"


BLACK = Pixel(0, 0, 0)
