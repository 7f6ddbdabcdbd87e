"""
Pure keyboard wire sampler for testing without GPIO hardware
"""

import sys
import select
import termios
import tty
from typing import List

from .interfaces import IWireSampler


class KeyboardWireSampler(IWireSampler):
    """
    Keyboard sampler that cuts virtual wires.

    Digit keys 1..N cut wire slots 0..N-1 (cuts are permanent, pressing the
    key again does nothing). Works over SSH using stdin in raw mode with a
    non-blocking select.

    Example:
        sampler = KeyboardWireSampler(wire_count=3, logger=logger)
        # Pressing '2' cuts wire slot 1
    """

    def __init__(self, wire_count: int, logger):
        """
        Initialize keyboard sampler.

        Args:
            wire_count: Number of virtual wires (max 9 for digit keys 1-9)
            logger: ClassLogger instance for logging
        """
        if wire_count > 9:
            raise ValueError("KeyboardWireSampler supports max 9 wires (digit keys 1-9)")

        self._wire_count = wire_count
        self._logger = logger
        self._cut: List[bool] = [False] * wire_count
        self._original_terminal_settings = None

    def get_wire_count(self) -> int:
        return self._wire_count

    def setup(self) -> None:
        """Switch stdin to raw mode for immediate key capture"""
        if not sys.stdin.isatty():
            self._logger.error("Keyboard input not available (stdin is not a TTY)")
            raise RuntimeError("Keyboard input not available")

        try:
            self._original_terminal_settings = termios.tcgetattr(sys.stdin)
            tty.setraw(sys.stdin.fileno())
        except termios.error as e:
            self._logger.error(f"Could not enable raw terminal mode: {e}", exception=e)
            raise RuntimeError("Failed to enable raw terminal mode") from e

        self._logger.info("🎮 Keyboard wire sampler initialized (NO GPIO)")
        self._logger.info(f"   Keys 1-{self._wire_count} cut wire slots 0-{self._wire_count - 1}")

    def _check_keyboard_input(self) -> None:
        """Consume pending keys without blocking"""
        while select.select([sys.stdin], [], [], 0)[0]:
            key = sys.stdin.read(1)
            if not key.isdigit() or key == '0':
                continue

            slot = int(key) - 1
            if slot >= self._wire_count:
                self._logger.warning(f"Invalid wire key '{key}' (only 1-{self._wire_count} available)")
            elif not self._cut[slot]:
                self._cut[slot] = True
                self._logger.info(f"🎮 Wire {slot} cut (key '{key}')")

    def is_cut(self, slot: int) -> bool:
        self._check_keyboard_input()
        return self._cut[slot]

    def cleanup(self) -> None:
        """Restore terminal settings"""
        if self._original_terminal_settings is not None:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._original_terminal_settings)
            self._original_terminal_settings = None
            self._logger.info("Keyboard wire sampler cleaned up")
