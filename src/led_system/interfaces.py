#!/usr/bin/env python3
"""
LED interfaces - Abstract base classes for LED strip control and value display

LedStrip is the hardware-facing contract (pixel buffer + show()).
DisplayDriver is what the puzzle module talks to: it only knows how to show
a 5-bit value or blank the lamps.
"""
from abc import ABC, abstractmethod
from typing import Union, List
from .pixel import Pixel


class LedStrip(ABC):
    """Abstract interface for LED strip control using Python slice notation

    Supported Operations:
        strip[5] = Pixel(255, 0, 0)                    # Single pixel
        strip[0:5] = Pixel(0, 0, 0)                    # Slice to same color
        strip[0:3] = [pixel1, pixel2, pixel3]          # Slice to different colors

        color = strip[5]                               # Get single pixel
        colors = strip[0:5]                            # Get slice of pixels

    Invalid Operations:
        strip[5] = [pixel1, pixel2]                    # Position + list (TypeError)
    """

    @abstractmethod
    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        """Get pixel color(s). Returns single Pixel or list for slice."""
        pass

    @abstractmethod
    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        """Set pixel(s) to color(s).

        Raises:
            TypeError: If trying to assign list to single position
            ValueError: If color list length doesn't match slice length
        """
        pass

    @abstractmethod
    def show(self) -> None:
        """Push the current buffer to the physical strip."""
        pass

    @abstractmethod
    def num_pixels(self) -> int:
        """Return number of pixels in the strip."""
        pass


class DisplayDriver(ABC):
    """Outbound display contract used by the puzzle module.

    Called once per refresh tick with either show() or blank().
    """

    @abstractmethod
    def show(self, value: int) -> None:
        """
        Render a 5-bit value as on/off lamps.

        Args:
            value: Integer in [0, 31]
        """
        pass

    @abstractmethod
    def blank(self) -> None:
        """Turn every lamp off."""
        pass
