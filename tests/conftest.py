# tests/conftest.py
import logging
import os
import sys
from unittest import mock

import pytest

src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from utils import HybridLogger  # noqa: E402
from wire_system.interfaces import IWireSampler  # noqa: E402


@pytest.fixture
def hybrid_logger(tmp_path):
    """HybridLogger writing to a temporary directory, no console output"""
    main_logger = HybridLogger("BinaryLedsTest", log_dir=str(tmp_path), console=False)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


class ScriptedWireSampler(IWireSampler):
    """Wire sampler whose continuity is set by the test"""

    def __init__(self, wire_count=3):
        self.open = [False] * wire_count
        self.setup_called = False
        self.cleanup_called = False

    def is_cut(self, slot):
        return self.open[slot]

    def get_wire_count(self):
        return len(self.open)

    def setup(self):
        self.setup_called = True

    def cleanup(self):
        self.cleanup_called = True


@pytest.fixture
def sampler():
    return ScriptedWireSampler()


@pytest.fixture
def fake_gpio():
    """RPi.GPIO replaced by a MagicMock for the duration of a test"""
    gpio = mock.MagicMock()
    gpio.HIGH, gpio.LOW = 1, 0
    rpi = mock.MagicMock()
    rpi.GPIO = gpio
    with mock.patch.dict(sys.modules, {"RPi": rpi, "RPi.GPIO": gpio}):
        yield gpio
