"""
Main game manager - orchestrates wire input, the puzzle module and its lamps
"""

import time
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

import psutil

from utils import OnceInMs
from audio_system.sounds import ModuleSounds
from .automation import HELP_MESSAGE, CutCommandRunner, parse_cut_command
from .binary_leds_module import BinaryLedsModule, CutOutcome
from .config import ModuleConfig
from .interfaces import ModuleHost

if TYPE_CHECKING:
    from led_system.interfaces import DisplayDriver
    from utils import ClassLogger
    from wire_system.command_reader import StdinCommandReader
    from wire_system.interfaces import IWireReader


class GameManager(ModuleHost):
    """
    Host of one Binary LEDs module.

    Responsibilities:
    - Run the frame-limited game loop
    - Arm the module after the activation delay
    - Forward wire cuts (sensed or scripted) to the module
    - Perform the module's effects: sever, sounds, strike/pass bookkeeping
    """

    def __init__(self,
                 wire_reader: 'IWireReader',
                 display: 'DisplayDriver',
                 sound_controller,  # SoundController or MockSoundController
                 logger: 'ClassLogger',
                 module_config: Optional[ModuleConfig] = None,
                 frame_duration_ms: float = 20,
                 command_reader: Optional['StdinCommandReader'] = None,
                 clock: Callable[[], float] = time.time,
                 module_setup: Optional[Dict[str, Any]] = None):
        """
        Initialize the game manager and create the module.

        Args:
            wire_reader: Source of wire cut edges
            display: Lamps driven by the module
            sound_controller: Player of ModuleSounds effects
            logger: Logger for the manager (the module gets a child logger)
            module_config: Puzzle rules
            frame_duration_ms: Target frame duration in milliseconds
            command_reader: Optional source of scripted cut commands
            clock: Time source in seconds
            module_setup: Extra BinaryLedsModule keyword arguments
                (rng, module_id, sequence_index, initial_offset, wire_colors)
        """
        self.wire_reader = wire_reader
        self.display = display
        self.sound_controller = sound_controller
        self.logger = logger
        self.module_config = module_config or ModuleConfig()
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.command_reader = command_reader
        self.clock = clock
        self.running = True

        self.strikes = 0
        self.passed = False
        self.command_runner: Optional[CutCommandRunner] = None

        self._status_timer = OnceInMs(5000)
        self._usage_monitor = OnceInMs(60000)
        self._process = psutil.Process()

        self.start_time = self.clock()
        self.module = BinaryLedsModule(
            display=display,
            host=self,
            logger=logger,
            now=self.start_time,
            config=self.module_config,
            **(module_setup or {})
        )

        self.logger.info(
            f"GameManager initialized: {frame_duration_ms}ms frame duration, "
            f"{wire_reader.get_wire_count()} wires, activation after {self.module_config.activation_delay_ms}ms"
        )

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Runs until stop() is called or Ctrl+C.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                frame_start = self.clock()

                self.update(frame_start)

                sleep_time = self.target_frame_duration - (self.clock() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self, now: Optional[float] = None) -> None:
        """
        One frame: arm, read wires, run commands, refresh the lamps.

        Args:
            now: Frame time in seconds (defaults to the clock)
        """
        now = self.clock() if now is None else now

        # 1. Arm once the activation delay has passed
        if not self.module.armed and (now - self.start_time) * 1000 >= self.module_config.activation_delay_ms:
            self.module.activate()

        # 2. Sensed wire cuts
        wire_state = self.wire_reader.read_wires()
        for slot in wire_state.newly_cut:
            self.handle_wire_interaction(slot, now)

        # 3. Scripted commands
        if self.command_reader is not None:
            for text in self.command_reader.read_commands():
                self.submit_command(text, now)
        self._poll_command(now)

        # 4. Lamps
        self.module.tick(now)

        # 5. Periodic logging
        if self._status_timer.should_execute(now):
            self._log_status(now)
        if self._usage_monitor.should_execute(now):
            self._log_system_usage()

    def handle_wire_interaction(self, slot: int, now: Optional[float] = None) -> CutOutcome:
        """
        Forward a wire cut to the module.

        Args:
            slot: Wire slot that was cut
            now: Time of the cut (defaults to the clock)

        Returns:
            The module's CutOutcome
        """
        now = self.clock() if now is None else now
        outcome = self.module.cut(slot, now)
        self.logger.debug(f"Wire {slot} interaction → {outcome.name}")
        return outcome

    def submit_command(self, text: str, now: Optional[float] = None) -> Optional[CutCommandRunner]:
        """
        Start a scripted cut command ("cut red 25 26 8", "help", "cancel").

        Returns:
            The started runner, or None if nothing was started
        """
        now = self.clock() if now is None else now
        keyword = text.strip().lower()

        if keyword == "help":
            self.logger.info(HELP_MESSAGE)
            return None

        if keyword == "cancel":
            if self.command_runner is not None:
                self.command_runner.cancel()
                self.command_runner = None
            return None

        command = parse_cut_command(text)
        if command is None:
            self.logger.warning(f"Ignoring unrecognized command '{text}'")
            return None

        if self.command_runner is not None and not self.command_runner.finished:
            self.logger.warning(f"Ignoring '{text}', another command is still running")
            return None

        runner = CutCommandRunner(
            module=self.module,
            command=command,
            on_cut=self.handle_wire_interaction,
            logger=self.logger.create_class_logger("CutCommand")
        )
        runner.start(now)
        if runner.long_wait:
            self.logger.info(f"Long wait ahead: about {runner.estimated_steps * self.module.blink_delay:.0f}s")

        self.command_runner = None if runner.finished else runner
        return runner

    def _poll_command(self, now: float) -> None:
        runner = self.command_runner
        if runner is None:
            return

        if self.module.solved:
            runner.cancel()
        else:
            runner.poll(now)

        if runner.finished:
            self.command_runner = None

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        self.running = False

        if self.command_runner is not None:
            self.command_runner.cancel()
            self.command_runner = None

        self.display.blank()
        self.wire_reader.cleanup()
        self.sound_controller.cleanup()

        self.logger.info("Game stopped")

    # ------------------------------------------------------------------
    # ModuleHost effects
    # ------------------------------------------------------------------

    def sever(self, slot: int) -> None:
        self.wire_reader.mark_cut(slot)
        self.logger.info(f"Wire {slot} severed")

    def play_cut_cue(self) -> None:
        self.sound_controller.play_sound(ModuleSounds.WIRE_SNIP)

    def report_strike(self) -> None:
        self.strikes += 1
        self.sound_controller.play_sound(ModuleSounds.STRIKE)
        self.logger.warning(f"💥 Strike! ({self.strikes} total)")

    def report_pass(self) -> None:
        self.passed = True
        self.sound_controller.play_sound(ModuleSounds.PASS)
        self.logger.info("✅ Module passed")

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def _log_status(self, now: float) -> None:
        cut_slots = [slot for slot, wire in enumerate(self.module.wires) if wire.is_cut]
        self.logger.debug(
            f"Status: phase={self.module.phase.name}, position={self.module.position_at(now)}, "
            f"blink_delay={self.module.blink_delay}, cut={cut_slots}, strikes={self.strikes}"
        )

    def _log_system_usage(self) -> None:
        """Log process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            sys_mem = psutil.virtual_memory()
            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | System: {sys_mem.percent:.1f}% used | "
                f"⚙️  CPU - Process: {process_cpu_percent:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
