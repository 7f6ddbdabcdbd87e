"""
WireState - Snapshot of wire continuity with calculated cut edges
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class WireState:
    """
    Snapshot of all wire slots with automatic cut-edge detection.

    Usage:
        state = WireState([False, True, False], [False, False, False])
        state.newly_cut        # [1]
        state.cut_count        # 1
    """
    is_cut: List[bool]               # Current state: [slot0, slot1, slot2]
    previous_cut: List[bool]         # State at the previous read

    # Calculated fields
    newly_cut: List[int] = field(init=False)     # Slots that went intact → cut
    cut_count: int = field(init=False)
    any_newly_cut: bool = field(init=False)

    def __post_init__(self):
        if len(self.is_cut) != len(self.previous_cut):
            raise ValueError(
                f"State lists must have same length: "
                f"is_cut={len(self.is_cut)}, previous_cut={len(self.previous_cut)}"
            )
        if not all(isinstance(x, bool) for x in self.is_cut + self.previous_cut):
            raise TypeError("All wire states must be bool")

        self.newly_cut = [
            slot for slot, (now_cut, was_cut) in enumerate(zip(self.is_cut, self.previous_cut))
            if now_cut and not was_cut
        ]
        self.cut_count = sum(self.is_cut)
        self.any_newly_cut = bool(self.newly_cut)

    def get_wire_count(self) -> int:
        """Get total number of wire slots in this state"""
        return len(self.is_cut)

    def __str__(self) -> str:
        cut_slots = [i for i, cut in enumerate(self.is_cut) if cut]
        return f"WireState(cut={cut_slots}, newly_cut={self.newly_cut})"
