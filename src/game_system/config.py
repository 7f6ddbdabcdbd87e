"""
Binary LEDs configuration
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from led_system.pixel import Pixel, BLACK
from led_system.binary_display import LAMP_COUNT
from wire_system.gpio_sampler import PULL_MODES
from audio_system.sounds import DEFAULT_SOUNDS_FOLDER
from .sequence_table import WireColor


WIRE_SAMPLERS = ("gpio", "keyboard")


@dataclass
class LedStripConfig:
    """Configuration for the strip carrying the five lamps"""
    gpio_pin: int
    led_count: int = LAMP_COUNT
    freq_hz: int = 800000
    dma: int = 10
    invert: bool = False
    brightness: int = 26  # 0-255
    channel: int = 0
    first_pixel: int = 0
    on_color: Pixel = Pixel(255, 0, 0)
    off_color: Pixel = BLACK


@dataclass
class WireConfig:
    """Wire sensing configuration"""
    pins: List[int]
    pull_mode: str = "up"
    sampler: str = "gpio"  # "gpio" or "keyboard"


@dataclass
class AudioConfig:
    """Sound effect configuration"""
    sounds_folder: str = DEFAULT_SOUNDS_FOLDER
    volume: float = 1.0
    use_mock: bool = False


@dataclass
class ModuleConfig:
    """Puzzle rules"""

    # Blink delay (seconds per sequence step); each wrong cut moves one level down
    blink_delay_levels: Tuple[float, ...] = (1.0, 0.66, 0.5)

    # Fraction of each step the lamps stay lit
    shown_fraction: float = 1.0

    # Force a pass after this many wrong cuts
    safety_valve_enabled: bool = True
    safety_valve_wrong_cuts: int = 3

    # Delay between start-up and arming (0 = armed on the first frame)
    activation_delay_ms: int = 0


@dataclass
class GameConfig:
    """Main system configuration"""

    # Hardware configuration
    wire_config: WireConfig
    led_strip: LedStripConfig
    audio_config: AudioConfig = field(default_factory=AudioConfig)
    module_config: ModuleConfig = field(default_factory=ModuleConfig)

    # Timing configuration
    frame_duration_ms: float = 20.0  # 50 FPS

    # Development switches
    use_mock_leds: bool = False
    command_input: bool = False

    @property
    def wire_count(self) -> int:
        """Number of wires based on pin configuration"""
        return len(self.wire_config.pins)

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.wire_count != len(WireColor):
            raise ValueError(f"Exactly {len(WireColor)} wire pins must be configured, got {self.wire_count}")

        if len(set(self.wire_config.pins)) != self.wire_count:
            raise ValueError(f"Duplicate wire pins: {self.wire_config.pins}")

        if self.wire_config.pull_mode not in PULL_MODES:
            raise ValueError(f"Wire pull mode must be one of {PULL_MODES}, got '{self.wire_config.pull_mode}'")

        if self.wire_config.sampler not in WIRE_SAMPLERS:
            raise ValueError(f"Wire sampler must be one of {WIRE_SAMPLERS}, got '{self.wire_config.sampler}'")

        if self.wire_config.sampler == "keyboard" and self.command_input:
            raise ValueError("Keyboard wire sampler and command input both need stdin")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.led_strip.gpio_pin in self.wire_config.pins:
            raise ValueError(f"GPIO pin conflict between wires and LEDs: {self.led_strip.gpio_pin}")

        for pin in self.wire_config.pins + [self.led_strip.gpio_pin]:
            if not (2 <= pin <= 27):  # Valid RPi GPIO range
                raise ValueError(f"GPIO pin {pin} out of valid range (2-27)")

        strip = self.led_strip
        if strip.first_pixel < 0 or strip.first_pixel + LAMP_COUNT > strip.led_count:
            raise ValueError(
                f"Strip of {strip.led_count} LEDs cannot hold {LAMP_COUNT} lamps from pixel {strip.first_pixel}"
            )
        if not (0 <= strip.brightness <= 255):
            raise ValueError(f"LED brightness must be 0-255, got {strip.brightness}")

        if not (0.0 <= self.audio_config.volume <= 1.0):
            raise ValueError(f"Volume must be 0.0-1.0, got {self.audio_config.volume}")

        module = self.module_config
        levels = module.blink_delay_levels
        if not levels:
            raise ValueError("At least one blink delay level must be configured")
        if any(delay <= 0 for delay in levels):
            raise ValueError(f"Blink delays must be positive: {levels}")
        if any(later > earlier for earlier, later in zip(levels, levels[1:])):
            raise ValueError(f"Blink delays must not increase: {levels}")
        if not (0.0 < module.shown_fraction <= 1.0):
            raise ValueError(f"Shown fraction must be in (0, 1], got {module.shown_fraction}")
        if module.safety_valve_wrong_cuts <= 0:
            raise ValueError("Safety valve threshold must be positive")
        if module.activation_delay_ms < 0:
            raise ValueError("Activation delay must not be negative")
