"""
GPIO-based wire continuity sampler using RPi.GPIO
"""

from typing import List

from .interfaces import IWireSampler


PULL_MODES = ("up", "down")


class GPIOWireSampler(IWireSampler):
    """
    Continuity sampling of the module's wires for production.

    Each wire closes a circuit between its GPIO pin and the opposite rail:
    - pull "up":   wire to GND, intact reads LOW, cut reads HIGH
    - pull "down": wire to 3V3, intact reads HIGH, cut reads LOW
    """

    def __init__(self,
                 wire_pins: List[int],
                 pull_mode: str,
                 logger):
        """
        Initialize GPIO sampler.

        Args:
            wire_pins: GPIO pin numbers (BCM mode), one per wire slot
            pull_mode: "up" or "down"
            logger: ClassLogger instance for logging

        Raises:
            ValueError: If pull_mode is not supported
        """
        if pull_mode not in PULL_MODES:
            raise ValueError(f"Unsupported pull mode '{pull_mode}', expected one of {PULL_MODES}")

        self._wire_pins = wire_pins.copy()
        self._pull_mode = pull_mode
        self._logger = logger
        self._gpio = None
        self._cut_level = None

    def get_wire_count(self) -> int:
        return len(self._wire_pins)

    def setup(self) -> None:
        """Initialize GPIO pins for input"""
        try:
            import RPi.GPIO as GPIO

            GPIO.setmode(GPIO.BCM)
            pull = GPIO.PUD_UP if self._pull_mode == "up" else GPIO.PUD_DOWN
            for pin in self._wire_pins:
                GPIO.setup(pin, GPIO.IN, pull_up_down=pull)

            self._gpio = GPIO
            self._cut_level = GPIO.HIGH if self._pull_mode == "up" else GPIO.LOW

            pin_mapping = ", ".join(f"Wire{i}=GPIO{pin}" for i, pin in enumerate(self._wire_pins))
            self._logger.info(f"GPIO wire sampler initialized: {len(self._wire_pins)} pins (pull-{self._pull_mode})")
            self._logger.info(f"Pin mapping: {pin_mapping}")

        except Exception as e:
            self._logger.error(f"GPIO wire sampler setup failed: {e}", exception=e)
            raise

    def is_cut(self, slot: int) -> bool:
        pin = self._wire_pins[slot]
        return self._gpio.input(pin) == self._cut_level

    def cleanup(self) -> None:
        if self._gpio is not None:
            self._gpio.cleanup(self._wire_pins)
            self._gpio = None
            self._logger.info("GPIO wire sampler cleaned up")
