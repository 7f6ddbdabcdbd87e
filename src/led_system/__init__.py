#!/usr/bin/env python3
"""
LED System - Library independent LED strip control

Components:

- Pixel: Zero-overhead color class that extends int
- LedStrip: Abstract interface for LED strip control
- DisplayDriver: show(value) / blank() contract used by the puzzle module
- PixelStripAdapter: rpi_ws281x implementation of LedStrip
- MockLedStrip: in-memory LedStrip for development and tests
- BinaryLedDisplay: DisplayDriver drawing five binary lamps on an LedStrip

Usage:
    from led_system import BinaryLedDisplay, PixelStripAdapter, Pixel

    strip = PixelStripAdapter(led_count=5, gpio_pin=18)
    display = BinaryLedDisplay(strip, logger, on_color=Pixel(255, 0, 0))
    display.show(21)     # lamps: on, off, on, off, on
    display.blank()
"""

from .pixel import Pixel, BLACK
from .interfaces import LedStrip, DisplayDriver
from .pixel_strip_adapter import PixelStripAdapter
from .mock_led_strip import MockLedStrip
from .binary_display import BinaryLedDisplay, LAMP_COUNT, MAX_DISPLAY_VALUE, value_to_lamps

__all__ = [
    'Pixel',
    'BLACK',
    'LedStrip',
    'DisplayDriver',
    'PixelStripAdapter',
    'MockLedStrip',
    'BinaryLedDisplay',
    'LAMP_COUNT',
    'MAX_DISPLAY_VALUE',
    'value_to_lamps',
]
