#!/usr/bin/env python3
"""
Binary LEDs puzzle module

Runs one Binary LEDs module on a Raspberry Pi: five lamps on a WS281x strip,
three wires sensed through GPIO continuity, and pygame sound effects.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path

# Add src to path for imports when run as a script
sys.path.insert(0, str(Path(__file__).parent))

from game_system import GameManager
from game_system import sequence_table
from game_system.config import GameConfig, WireConfig, LedStripConfig, AudioConfig, ModuleConfig
from led_system import BinaryLedDisplay, MockLedStrip, Pixel, PixelStripAdapter
from wire_system import GPIOWireSampler, KeyboardWireSampler, StdinCommandReader, WireReader
from audio_system import MockSoundController
from utils import HybridLogger


def create_default_config() -> GameConfig:
    """Create default configuration for the module box"""

    wire_config = WireConfig(
        pins=[5, 6, 13],  # One pin per wire slot
        pull_mode="up",
        sampler="gpio"
    )

    led_strip = LedStripConfig(
        gpio_pin=18,
        led_count=5,
        dma=10,
        brightness=26,  # 10% brightness
        channel=0,
        on_color=Pixel(255, 0, 0),
    )

    return GameConfig(
        wire_config=wire_config,
        led_strip=led_strip,
        audio_config=AudioConfig(sounds_folder="sounds", volume=0.8),
        module_config=ModuleConfig(),
        frame_duration_ms=20,  # 50 FPS
    )


def apply_arguments(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    """Override config switches from the command line"""
    if args.keyboard:
        config.wire_config.sampler = "keyboard"
    if args.mock_leds:
        config.use_mock_leds = True
    if args.mock_audio:
        config.audio_config.use_mock = True
    if args.commands:
        config.command_input = True
    if args.no_safety_valve:
        config.module_config.safety_valve_enabled = False
    if args.activation_delay is not None:
        config.module_config.activation_delay_ms = args.activation_delay
    return config


def create_game_system(config: GameConfig, main_logger: HybridLogger, app_logger) -> GameManager:
    """
    Create and wire the complete system from a config.

    Args:
        config: GameConfig instance with all system configuration
        main_logger: HybridLogger handing out component loggers
        app_logger: ClassLogger for initialization steps

    Returns:
        GameManager: Configured game manager ready to run
    """
    config.validate()
    sequence_table.validate_table()

    game_manager_logger = main_logger.get_class_logger("GameManager", logging.INFO)
    wire_reader_logger = main_logger.get_class_logger("WireReader", logging.INFO)
    display_logger = main_logger.get_class_logger("BinaryLedDisplay", logging.INFO)
    sound_controller_logger = main_logger.get_class_logger("SoundController", logging.INFO)

    try:
        if config.wire_config.sampler == "keyboard":
            wire_sampler = KeyboardWireSampler(wire_count=config.wire_count, logger=wire_reader_logger)
        else:
            wire_sampler = GPIOWireSampler(
                wire_pins=config.wire_config.pins,
                pull_mode=config.wire_config.pull_mode,
                logger=wire_reader_logger
            )
        wire_reader = WireReader(sampler=wire_sampler, logger=wire_reader_logger)

        strip_config = config.led_strip
        if config.use_mock_leds:
            app_logger.info("💡 Using MockLedStrip (LED hardware disabled)")
            strip = MockLedStrip(strip_config.led_count)
        else:
            strip = PixelStripAdapter(
                led_count=strip_config.led_count,
                gpio_pin=strip_config.gpio_pin,
                freq_hz=strip_config.freq_hz,
                dma=strip_config.dma,
                invert=strip_config.invert,
                brightness=strip_config.brightness,
                channel=strip_config.channel
            )
        display = BinaryLedDisplay(
            strip=strip,
            logger=display_logger,
            on_color=strip_config.on_color,
            off_color=strip_config.off_color,
            first_pixel=strip_config.first_pixel
        )
        display.blank()

        if config.audio_config.use_mock:
            app_logger.info("🔇 Using MockSoundController (audio hardware disabled)")
            sound_controller = MockSoundController(
                logger=sound_controller_logger,
                volume=config.audio_config.volume
            )
        else:
            from audio_system.sound_controller import SoundController
            sound_controller = SoundController(
                logger=sound_controller_logger,
                sounds_folder=config.audio_config.sounds_folder,
                volume=config.audio_config.volume
            )

        command_reader = None
        if config.command_input:
            command_reader = StdinCommandReader(logger=game_manager_logger)

        game_manager = GameManager(
            wire_reader=wire_reader,
            display=display,
            sound_controller=sound_controller,
            logger=game_manager_logger,
            module_config=config.module_config,
            frame_duration_ms=config.frame_duration_ms,
            command_reader=command_reader
        )

        app_logger.info("Binary LEDs system initialized successfully")
        return game_manager

    except Exception as e:
        app_logger.error(f"Failed to initialize Binary LEDs system: {e}", exception=e)
        raise


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Binary LEDs puzzle module")
    parser.add_argument("--keyboard", action="store_true", help="Cut wires with keys 1-3 instead of GPIO")
    parser.add_argument("--mock-leds", action="store_true", help="Run without the LED strip")
    parser.add_argument("--mock-audio", action="store_true", help="Run without sound")
    parser.add_argument("--commands", action="store_true", help="Read 'cut <color> <values>' commands from stdin")
    parser.add_argument("--no-safety-valve", action="store_true", help="Never pass the module after wrong cuts")
    parser.add_argument("--activation-delay", type=int, metavar="MS", help="Arm the module after MS milliseconds")
    parser.add_argument("--log-dir", default="logs", help="Directory for log files")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main function - sets up and runs the Binary LEDs module.
    """
    args = parse_arguments(argv)

    main_logger = HybridLogger("BinaryLeds", log_dir=args.log_dir)
    app_logger = main_logger.get_class_logger("App")

    def handle_sigterm(sig, frame):
        app_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - Process terminating")
        raise KeyboardInterrupt

    signal.signal(signal.SIGTERM, handle_sigterm)

    app_logger.info("💡 BINARY LEDS MODULE")

    config = apply_arguments(create_default_config(), args)

    app_logger.info(f"Wire configuration: {config.wire_count} wires on GPIO {config.wire_config.pins} ({config.wire_config.sampler})")
    app_logger.info(f"LED configuration: {config.led_strip.led_count} LEDs on GPIO {config.led_strip.gpio_pin}")
    app_logger.info(f"Game settings: {config.frame_duration_ms}ms frame duration ({config.target_fps:.1f} FPS)")
    app_logger.info(
        f"Module rules: blink delays {config.module_config.blink_delay_levels}, "
        f"safety valve {'on' if config.module_config.safety_valve_enabled else 'off'}"
    )

    try:
        game_manager = create_game_system(config, main_logger, app_logger)
        app_logger.info("🚀 Starting Binary LEDs module...")
        game_manager.run_game_loop()

    except KeyboardInterrupt:
        app_logger.info("⏹️  Binary LEDs stopped by user")
    except Exception as e:
        app_logger.error(f"Binary LEDs system error: {e}", exception=e)
        raise
    finally:
        app_logger.info("✅ Binary LEDs shut down")
        main_logger.cleanup()


if __name__ == "__main__":
    main()
