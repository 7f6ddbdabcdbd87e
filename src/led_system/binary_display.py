#!/usr/bin/env python3
"""
Binary LED display - renders a 5-bit value on five consecutive strip pixels
"""
from typing import List, Optional, TYPE_CHECKING

from .interfaces import DisplayDriver, LedStrip
from .pixel import Pixel, BLACK

if TYPE_CHECKING:
    from utils import ClassLogger


LAMP_COUNT = 5
MAX_DISPLAY_VALUE = (1 << LAMP_COUNT) - 1


def value_to_lamps(value: int) -> List[bool]:
    """
    Split a value into lamp states, most significant bit first.

    Example:
        value_to_lamps(8)   # [False, True, False, False, False]
    """
    return [bool((value >> bit) & 1) for bit in range(LAMP_COUNT - 1, -1, -1)]


class BinaryLedDisplay(DisplayDriver):
    """
    DisplayDriver that draws the module's value on an LedStrip.

    Lamp 0 (at first_pixel) carries the most significant bit. The strip is
    only pushed with show() when the rendered lamps actually change, which
    keeps a 50 FPS refresh loop from re-sending identical frames.
    """

    def __init__(self,
                 strip: LedStrip,
                 logger: 'ClassLogger',
                 on_color: Pixel = Pixel(255, 0, 0),
                 off_color: Pixel = BLACK,
                 first_pixel: int = 0):
        """
        Initialize the display.

        Args:
            strip: LedStrip holding the five lamps
            logger: ClassLogger for range warnings
            on_color: Color of a lit lamp
            off_color: Color of an unlit lamp
            first_pixel: Strip index of lamp 0

        Raises:
            ValueError: If the strip is too short for five lamps at first_pixel
        """
        if first_pixel < 0 or first_pixel + LAMP_COUNT > strip.num_pixels():
            raise ValueError(
                f"Strip with {strip.num_pixels()} pixels cannot hold {LAMP_COUNT} lamps at index {first_pixel}"
            )
        self.strip = strip
        self.logger = logger
        self.on_color = Pixel(on_color)
        self.off_color = Pixel(off_color)
        self.first_pixel = first_pixel
        self._rendered: Optional[List[bool]] = None

    def show(self, value: int) -> None:
        if value < 0 or value > MAX_DISPLAY_VALUE:
            self.logger.warning(f"Error, number out of range: {value}")
            value = 0
        self._render(value_to_lamps(value))

    def blank(self) -> None:
        self._render([False] * LAMP_COUNT)

    def current_lamps(self) -> Optional[List[bool]]:
        """Lamp states last pushed to the strip, None before the first frame"""
        return None if self._rendered is None else list(self._rendered)

    def _render(self, lamps: List[bool]) -> None:
        if lamps == self._rendered:
            return

        colors = [self.on_color if lit else self.off_color for lit in lamps]
        self.strip[self.first_pixel:self.first_pixel + LAMP_COUNT] = colors
        self.strip.show()
        self._rendered = lamps
