#!/usr/bin/env python3
"""
Mock LED strip - in-memory LedStrip for development and tests without hardware
"""
from typing import Union, List

from .interfaces import LedStrip
from .pixel import Pixel, BLACK


class MockLedStrip(LedStrip):
    """
    LedStrip backed by a Python list.

    Keeps the pixel buffer and a copy of what was last "shown", and counts
    show() calls so callers can verify that unchanged frames are not pushed.
    """

    def __init__(self, led_count: int):
        if led_count <= 0:
            raise ValueError(f"LED count must be positive, got {led_count}")
        self._buffer: List[Pixel] = [BLACK] * led_count
        self.shown: List[Pixel] = [BLACK] * led_count
        self.show_count = 0

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        return self._buffer[pos]

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if isinstance(pos, slice):
            indices = range(*pos.indices(len(self._buffer)))
            if isinstance(color, list):
                if len(color) != len(indices):
                    raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
                for i, pixel in zip(indices, color):
                    self._buffer[i] = Pixel(pixel)
            else:
                for i in indices:
                    self._buffer[i] = Pixel(color)
        else:
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._buffer[pos] = Pixel(color)

    def show(self) -> None:
        self.shown = list(self._buffer)
        self.show_count += 1

    def num_pixels(self) -> int:
        return len(self._buffer)
