"""
Sound Controller - Plays the module's sound effects through pygame
"""

import os
from typing import Dict, Optional

import pygame

from .sounds import ModuleSounds, DEFAULT_SOUNDS_FOLDER


class SoundController:
    """
    Controls all audio playback for the module.

    Loads every ModuleSounds effect up front so a cut never waits on disk.
    """

    def __init__(self, logger, sounds_folder: str = DEFAULT_SOUNDS_FOLDER, volume: float = 1.0):
        """
        Initialize sound controller with pygame mixer and validate sound files.

        Args:
            logger: ClassLogger instance for logging
            sounds_folder: Folder holding the ModuleSounds files
            volume: Default effect volume (0.0 to 1.0)

        Raises:
            FileNotFoundError: If any required sound files are missing
            pygame.error: If sound files fail to load
        """
        self.logger = logger
        self.sounds_folder = sounds_folder
        self.volume = volume

        self.mixer = pygame.mixer
        self.mixer.init()

        self._sound_objects: Dict[ModuleSounds, pygame.mixer.Sound] = {}
        self._load_and_validate_sounds()

        self.logger.info(f"SoundController initialized with {len(self._sound_objects)} sound effects")

    def _load_and_validate_sounds(self) -> None:
        """
        Load and validate all required sound files in one step.

        Raises:
            FileNotFoundError: If any sound files are missing
            pygame.error: If sound files fail to load
        """
        missing_files = [
            sound.get_sound_path(self.sounds_folder)
            for sound in ModuleSounds
            if not os.path.exists(sound.get_sound_path(self.sounds_folder))
        ]
        if missing_files:
            raise FileNotFoundError(f"Required sound files not found: {missing_files}")

        for sound in ModuleSounds:
            sound_path = sound.get_sound_path(self.sounds_folder)
            try:
                self._sound_objects[sound] = pygame.mixer.Sound(sound_path)
            except pygame.error as e:
                raise pygame.error(f"Failed to load sound {sound.name} from {sound_path}: {e}")

    def play_sound(self, sound: ModuleSounds, volume: Optional[float] = None) -> pygame.mixer.Channel:
        """
        Play a module sound.

        Args:
            sound: ModuleSounds value to play
            volume: Volume level (0.0 to 1.0), defaults to the controller volume

        Returns:
            pygame.mixer.Channel the sound is playing on
        """
        sound_obj = self._sound_objects[sound]
        sound_obj.set_volume(self.volume if volume is None else volume)
        return sound_obj.play()

    def cleanup(self) -> None:
        """Stop playback and release the audio device"""
        self.mixer.stop()
        self.mixer.quit()
        self.logger.info("SoundController cleaned up")
