"""
Game System - Binary LEDs puzzle module and its host

The module shows a sequence of 5-bit values on five lamps, walking the
sequence back and forth over time. Each wire color has one sequence
position at which cutting it solves the module.
"""

from .sequence_table import WireColor, SEQUENCE_COUNT, SEQUENCE_LENGTH, MAX_LED_VALUE
from .binary_leds_module import BinaryLedsModule, CutOutcome, ModulePhase, WireRuntimeState, next_module_id
from .interfaces import ModuleHost
from .automation import CutCommand, CutCommandRunner, RunnerStatus, parse_cut_command
from .game_manager import GameManager
from .config import GameConfig, LedStripConfig, WireConfig, AudioConfig, ModuleConfig

__all__ = [
    # Sequence data
    "WireColor",
    "SEQUENCE_COUNT",
    "SEQUENCE_LENGTH",
    "MAX_LED_VALUE",
    # Module
    "BinaryLedsModule",
    "CutOutcome",
    "ModulePhase",
    "WireRuntimeState",
    "next_module_id",
    "ModuleHost",
    # Automation
    "CutCommand",
    "CutCommandRunner",
    "RunnerStatus",
    "parse_cut_command",
    # Host
    "GameManager",
    # Configuration
    "GameConfig",
    "LedStripConfig",
    "WireConfig",
    "AudioConfig",
    "ModuleConfig",
]
