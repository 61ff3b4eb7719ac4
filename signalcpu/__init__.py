"""Cycle-accurate single-register CPU simulator."""

__version__ = "0.1.0"

from .cpu import CPU
from .errors import ParseError, SignalCPUError, UnsolvedPart, UsageError
from .instructions import Add, Instruction, NoOp
from .parser import parse_program
from .runner import RunOptions, RunResult, run_program, signal_strength_sum

__all__ = [
    "CPU",
    "Add",
    "Instruction",
    "NoOp",
    "parse_program",
    "run_program",
    "signal_strength_sum",
    "RunOptions",
    "RunResult",
    "SignalCPUError",
    "ParseError",
    "UnsolvedPart",
    "UsageError",
]
