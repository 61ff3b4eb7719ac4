"""Program runner with tracing for the signal CPU."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .cpu import CPU
from .errors import CycleLimitExceeded, ErrorInfo, SignalCPUError
from .parser import parse_program

logger = logging.getLogger(__name__)

SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)


@dataclass
class RunOptions:
    """Options for program execution."""
    initial_register: int = 1
    signal_cycles: tuple[int, ...] = SIGNAL_CYCLES
    max_cycles: int = 100_000
    trace: bool = True


@dataclass
class TraceRow:
    """Single row of execution trace."""
    cycle: int
    register: int
    instr_text: str
    signal_strength: int

    def to_dict(self) -> dict:
        return {
            "cycle": self.cycle,
            "register": self.register,
            "instr_text": self.instr_text,
            "signal_strength": self.signal_strength,
        }


@dataclass
class RunResult:
    """Result of program execution."""
    status: str  # "ok" | "error"
    cycles_executed: int
    final_state: dict
    signal_strength_sum: int
    signal_cycles: list[int]
    trace: list[dict] = field(default_factory=list)
    error: Optional[ErrorInfo] = None

    def to_dict(self) -> dict:
        result = {
            "status": self.status,
            "cycles_executed": self.cycles_executed,
            "final_state": self.final_state,
            "signal_strength_sum": self.signal_strength_sum,
            "signal_cycles": self.signal_cycles,
            "trace": self.trace,
        }
        if self.error:
            result["error"] = self.error.to_dict()
        return result


def signal_strength_sum(values: Iterable[int], cycles: Iterable[int] = SIGNAL_CYCLES) -> int:
    """Sum cycle * value over the given 1-based cycles.

    Cycles beyond the end of ``values`` contribute nothing. Iteration stops
    at the last interesting cycle, so infinite sequences are fine.
    """
    wanted = set(cycles)
    if not wanted:
        return 0
    last = max(wanted)

    total = 0
    for cycle, value in enumerate(values, 1):
        if cycle in wanted:
            total += cycle * value
        if cycle >= last:
            break
    return total


def run_program(program_text: str, options: Optional[RunOptions] = None) -> RunResult:
    """Run a program to exhaustion, recording each cycle.

    Args:
        program_text: Program source code
        options: Execution options

    Returns:
        RunResult with status, signal-strength sum, and trace
    """
    if options is None:
        options = RunOptions()

    signal_cycles = sorted(set(options.signal_cycles))
    wanted = set(signal_cycles)
    trace_rows: list[dict] = []
    error_info: Optional[ErrorInfo] = None
    cycles_executed = 0
    total = 0

    # Parse program
    try:
        program = parse_program(program_text)
    except SignalCPUError as e:
        logger.debug("Parse failed: %s", e.message)
        return RunResult(
            status="error",
            cycles_executed=0,
            final_state=CPU([], options.initial_register).get_state(),
            signal_strength_sum=0,
            signal_cycles=signal_cycles,
            error=e.to_error_info(),
        )

    cpu = CPU(program, initial_register=options.initial_register)
    total_cycles = sum(instr.cycles for instr in program)

    try:
        while True:
            # Check step limit before running the next cycle
            if cycles_executed >= options.max_cycles and cycles_executed < total_cycles:
                raise CycleLimitExceeded(
                    f"Cycle limit exceeded: {options.max_cycles}",
                    cycle=cycles_executed + 1,
                )

            value = cpu.step()
            if value is None:
                break
            cycles_executed += 1

            strength = cycles_executed * value
            if cycles_executed in wanted:
                total += strength

            if options.trace:
                row = TraceRow(
                    cycle=cycles_executed,
                    register=value,
                    instr_text=cpu.current.text,
                    signal_strength=strength,
                )
                trace_rows.append(row.to_dict())

    except SignalCPUError as e:
        error_info = e.to_error_info()

    logger.debug(
        "Run finished after %d cycles with register %d",
        cycles_executed,
        cpu.register,
    )

    return RunResult(
        status="ok" if error_info is None else "error",
        cycles_executed=cycles_executed,
        final_state=cpu.get_state(),
        signal_strength_sum=total,
        signal_cycles=signal_cycles,
        trace=trace_rows,
        error=error_info,
    )
