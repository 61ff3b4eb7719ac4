"""Instruction set and execution for the signal CPU."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable


class Instruction(ABC):
    """Base class for the two-instruction set."""

    cycles: int

    @property
    @abstractmethod
    def text(self) -> str:
        """Source form of the instruction."""


@dataclass(frozen=True)
class NoOp(Instruction):
    """noop: takes one cycle, does nothing."""

    cycles = 1

    @property
    def text(self) -> str:
        return "noop"


@dataclass(frozen=True)
class Add(Instruction):
    """addx n: takes two cycles, then X := X + n."""

    amount: int
    cycles = 2

    @property
    def text(self) -> str:
        return f"addx {self.amount}"


# Instruction executor type
InstructionExecutor = Callable[[Instruction, int], int]


def execute_noop(instr: NoOp, register: int) -> int:
    """noop: X unchanged"""
    return register


def execute_add(instr: Add, register: int) -> int:
    """addx n: X := X + n"""
    return register + instr.amount


# Instruction dispatch table
INSTRUCTION_EXECUTORS: dict[type, InstructionExecutor] = {
    NoOp: execute_noop,
    Add: execute_add,
}


def execute_instruction(instr: Instruction, register: int) -> int:
    """Apply a completed instruction to the register.

    Returns:
        Register value after the instruction's effect
    """
    executor = INSTRUCTION_EXECUTORS.get(type(instr))
    if executor is None:
        raise ValueError(f"No executor for instruction: {instr!r}")
    return executor(instr, register)
