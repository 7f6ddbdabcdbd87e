"""
Module sound effects catalogue
"""

import enum
import os


DEFAULT_SOUNDS_FOLDER = "sounds"


class ModuleSounds(enum.Enum):
    """Module sound effects - stores file names, controllers load them"""
    WIRE_SNIP = "wire_snip.wav"
    STRIKE = "strike.wav"
    PASS = "pass.wav"

    def get_sound_path(self, sounds_folder: str = DEFAULT_SOUNDS_FOLDER) -> str:
        """Get the full path to the sound file"""
        return os.path.join(sounds_folder, self.value)
