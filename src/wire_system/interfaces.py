"""
Abstract interfaces for wire sensing
"""

from abc import ABC, abstractmethod
from .wire_state import WireState


class IWireSampler(ABC):
    """
    Abstract interface for sampling the raw continuity of individual wires.

    Separates reading hardware from cut latching and edge detection.
    Implementations: GPIO continuity, keyboard (development), scripted (tests).
    """

    @abstractmethod
    def is_cut(self, slot: int) -> bool:
        """
        Read the current state of one wire.

        Args:
            slot: Wire slot (0-based)

        Returns:
            True if the wire is currently open (cut), False if intact
        """
        pass

    @abstractmethod
    def get_wire_count(self) -> int:
        """Number of wire slots this sampler handles"""
        pass

    @abstractmethod
    def setup(self) -> None:
        """Initialize the sampler hardware/resources"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup sampler resources"""
        pass


class IWireReader(ABC):
    """
    Abstract interface for wire reading systems.

    A cut wire never becomes intact again: readers latch the cut state.
    """

    @abstractmethod
    def read_wires(self) -> WireState:
        """
        Sample all wires and return the latched state with new cut edges.

        Returns:
            WireState: Current and previous cut flags
        """
        pass

    @abstractmethod
    def mark_cut(self, slot: int) -> None:
        """
        Latch a wire as cut without reporting it as a new edge.

        Used when the cut was synthesized (automation) rather than sensed.
        """
        pass

    @abstractmethod
    def get_wire_count(self) -> int:
        """Number of wire slots"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release hardware resources"""
        pass
