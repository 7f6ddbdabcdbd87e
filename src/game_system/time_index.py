"""
Time to sequence position mapping

The module walks its sequence forwards and then backwards: the first
span steps show positions 0..span-1, the next span show span..1, and
the walk repeats (span = length - 1).
"""

from typing import Sequence

from .sequence_table import SEQUENCE_LENGTH


def elapsed_steps(now: float, start: float, step_duration: float) -> int:
    """Whole steps since start, truncated toward zero"""
    return int((now - start) / step_duration)


def position(now: float, start: float, offset: int, step_duration: float,
             length: int = SEQUENCE_LENGTH) -> int:
    """
    Sequence position shown at a given time.

    Args:
        now: Current time in seconds
        start: Time the module started counting
        offset: Steps added after truncation
        step_duration: Seconds each position stays on the lamps
        length: Sequence length

    Returns:
        Position in [0, length - 1]

    Example:
        position(5.5, 0.0, 0, 1.0)    # 5
        position(15.5, 0.0, 0, 1.0)   # 11 (second leg, walking back)
    """
    elapsed = elapsed_steps(now, start, step_duration) + offset
    span = length - 1

    if (elapsed // span) % 2 == 0:
        return elapsed % span
    return span - (elapsed % span)


def step_fraction(now: float, start: float, step_duration: float) -> float:
    """Progress through the current step, in [0, 1)"""
    return ((now - start) % step_duration) / step_duration


def steps_until_value(values: Sequence[int], target: int, now: float, start: float,
                      offset: int, step_duration: float, skip_steps: int = 0) -> int:
    """
    Predict how many steps until the lamps show a value.

    Looks ahead from now + skip_steps steps, one step at a time, for at most
    two full walks of the sequence.

    Args:
        values: The module's sequence
        target: Value to wait for
        now: Current time in seconds
        start: Time the module started counting
        offset: Module's initial offset
        step_duration: Current blink delay
        skip_steps: Steps already committed to earlier waits

    Returns:
        Steps after skip_steps until target is shown, or 2 * len(values) if it
        never shows up
    """
    horizon = 2 * len(values)
    for step in range(horizon):
        future = now + (skip_steps + step) * step_duration
        if values[position(future, start, offset, step_duration, len(values))] == target:
            return step
    return horizon
