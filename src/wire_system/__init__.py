"""
Wire System Package

Senses the module's wires and turns continuity changes into cut events.
A cut wire is latched: it never reports intact again.
"""

from .wire_state import WireState
from .interfaces import IWireReader, IWireSampler
from .wire_reader import WireReader
from .gpio_sampler import GPIOWireSampler
from .keyboard_sampler import KeyboardWireSampler
from .command_reader import StdinCommandReader

__all__ = [
    "WireState",
    "IWireReader",
    "IWireSampler",
    "WireReader",
    "GPIOWireSampler",
    "KeyboardWireSampler",
    "StdinCommandReader",
]
