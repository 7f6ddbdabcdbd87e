"""
Audio System Module

Sound effects for wire cuts, strikes and passes.

SoundController (pygame) is imported from audio_system.sound_controller
directly so the mixer is only loaded by hosts that actually play sound.
"""

from .sounds import ModuleSounds, DEFAULT_SOUNDS_FOLDER
from .mock_sound_controller import MockSoundController

__all__ = [
    'ModuleSounds',
    'DEFAULT_SOUNDS_FOLDER',
    'MockSoundController',
]
