"""Puzzle drivers built on the cycle engine."""

from typing import Callable

from .cpu import CPU
from .errors import UnsolvedPart, UsageError
from .runner import SIGNAL_CYCLES, signal_strength_sum

DAY = 9


def part1(text: str) -> str:
    """Sum of signal strengths at the interesting cycles."""
    cpu = CPU.from_text(text)
    return str(signal_strength_sum(cpu, SIGNAL_CYCLES))


def part2(text: str) -> str:
    raise UnsolvedPart(f"day {DAY:02d} part 2 is not solved")


PARTS = {1: part1, 2: part2}


def resolve(day: int, part: int) -> Callable[[str], str]:
    """Look up the driver for ``day``/``part`` without running it."""
    if day != DAY or part not in PARTS:
        raise UsageError(f"Invalid arguments {day!r} {part!r}")
    return PARTS[part]


def solve(day: int, part: int, text: str) -> str:
    """Dispatch to the driver for ``day``/``part``."""
    return resolve(day, part)(text)
