"""
LED sequences and their wire solutions
"""

import enum
from typing import Tuple


SEQUENCE_COUNT = 8
SEQUENCE_LENGTH = 14
MAX_LED_VALUE = 31


class WireColor(enum.IntEnum):
    """Wire colors, valued by their column in the solution table"""
    RED = 0
    GREEN = 1
    BLUE = 2


SEQUENCES: Tuple[Tuple[int, ...], ...] = (
    (17, 15, 6, 2, 24, 8, 26, 25, 21, 24, 1, 15, 18, 8),
    (18, 15, 19, 31, 12, 6, 19, 21, 11, 16, 19, 2, 1, 29),
    (8, 25, 1, 15, 20, 15, 9, 3, 6, 24, 1, 24, 5, 26),
    (21, 27, 6, 12, 27, 20, 7, 1, 19, 15, 3, 13, 9, 28),
    (3, 21, 14, 22, 7, 28, 16, 27, 22, 17, 26, 2, 31, 15),
    (8, 22, 30, 19, 1, 25, 31, 16, 9, 7, 6, 13, 9, 7),
    (5, 18, 12, 7, 5, 12, 31, 16, 10, 15, 17, 9, 12, 25),
    (4, 20, 18, 25, 20, 4, 24, 29, 17, 16, 12, 16, 29, 19),
)

# Sequence position to cut at, per wire color (RED, GREEN, BLUE)
SOLUTIONS: Tuple[Tuple[int, int, int], ...] = (
    (5, 3, 7),
    (11, 8, 4),
    (9, 1, 2),
    (8, 12, 7),
    (10, 5, 8),
    (0, 10, 6),
    (2, 5, 9),
    (9, 5, 10),
)


def sequence_count() -> int:
    return len(SEQUENCES)


def sequence(sequence_index: int) -> Tuple[int, ...]:
    return SEQUENCES[sequence_index]


def value_at(sequence_index: int, position: int) -> int:
    """Value shown at a position of a sequence, in [0, 31]"""
    return SEQUENCES[sequence_index][position]


def solution(sequence_index: int, color: WireColor) -> int:
    """Position at which the wire of the given color must be cut"""
    return SOLUTIONS[sequence_index][int(color)]


def validate_table() -> None:
    """
    Check the table invariants.

    Raises:
        ValueError: If a sequence has the wrong length, a value does not fit
            in five lamps, or a solution points outside its sequence
    """
    if len(SEQUENCES) != SEQUENCE_COUNT or len(SOLUTIONS) != SEQUENCE_COUNT:
        raise ValueError(
            f"Expected {SEQUENCE_COUNT} sequences and solutions, "
            f"got {len(SEQUENCES)} and {len(SOLUTIONS)}"
        )

    for index, (values, targets) in enumerate(zip(SEQUENCES, SOLUTIONS)):
        if len(values) != SEQUENCE_LENGTH:
            raise ValueError(f"Sequence {index} has {len(values)} values, expected {SEQUENCE_LENGTH}")
        for value in values:
            if not (0 <= value <= MAX_LED_VALUE):
                raise ValueError(f"Sequence {index} value {value} out of range (0-{MAX_LED_VALUE})")
        if len(targets) != len(WireColor):
            raise ValueError(f"Solution {index} has {len(targets)} entries, expected {len(WireColor)}")
        for target in targets:
            if not (0 <= target < SEQUENCE_LENGTH):
                raise ValueError(f"Solution {index} position {target} out of range (0-{SEQUENCE_LENGTH - 1})")
