"""
Mock Sound Controller - No-op implementation for testing without audio hardware
"""

from typing import List, Optional

from .sounds import ModuleSounds


class MockSoundController:
    """
    Mock implementation of SoundController that performs no audio operations.

    Records every requested sound in `played` so callers can assert on it.
    """

    def __init__(self, logger, volume: float = 1.0):
        """
        Initialize mock sound controller.

        Args:
            logger: ClassLogger instance for logging
            volume: Default effect volume (only logged)
        """
        self.logger = logger
        self.volume = volume
        self.played: List[ModuleSounds] = []

        self.logger.info("🔇 MockSoundController initialized (audio disabled)")

    def play_sound(self, sound: ModuleSounds, volume: Optional[float] = None) -> None:
        """Mock: record the sound instead of playing it"""
        self.played.append(sound)
        self.logger.debug(f"Mock: Playing sound {sound.name} at volume {self.volume if volume is None else volume}")
        return None

    def cleanup(self) -> None:
        """Mock: nothing to release"""
        self.logger.debug("Mock: SoundController cleaned up")
