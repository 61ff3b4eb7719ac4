"""Shared fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# noop / addx 3 / addx -5: five cycles, X ends at -1
LIGHT_WEIGHT_INPUT = "noop\naddx 3\naddx -5"


@pytest.fixture
def light_program() -> str:
    return LIGHT_WEIGHT_INPUT


@pytest.fixture
def reference_program() -> str:
    """146-instruction program; signal strengths at 20..220 sum to 13140."""
    return (FIXTURES_DIR / "reference_program.txt").read_text()
