"""Cycle engine for the signal CPU."""

from typing import Iterable, Iterator, Optional

from .instructions import Instruction, execute_instruction
from .parser import parse_program


class CPU:
    """Single-register CPU that yields the X register once per cycle.

    An instruction only touches the register on its final cycle. The
    engine consumes its program once and cannot be restarted.
    """

    def __init__(self, instructions: Iterable[Instruction], initial_register: int = 1):
        self._instructions: Iterator[Instruction] = iter(instructions)

        # Registers
        self.register: int = initial_register
        self.current: Optional[Instruction] = None
        self.subcycle: int = 0
        self.exhausted: bool = False

    @classmethod
    def from_text(cls, text: str, initial_register: int = 1) -> "CPU":
        """Parse program text and build a CPU over it."""
        return cls(parse_program(text), initial_register=initial_register)

    def step(self) -> Optional[int]:
        """Advance one cycle.

        Returns:
            Register value observed this cycle, or None once exhausted
        """
        self.subcycle += 1

        if self.current is None:
            finished = True
        elif self.current.cycles <= self.subcycle:
            self.register = execute_instruction(self.current, self.register)
            finished = True
        else:
            finished = False

        if finished:
            self.current = next(self._instructions, None)
            self.subcycle = 0

        if self.current is None:
            self.exhausted = True
            return None
        return self.register

    def __iter__(self) -> "CPU":
        return self

    def __next__(self) -> int:
        value = self.step()
        if value is None:
            raise StopIteration
        return value

    def get_state(self) -> dict:
        """Get current engine state as dictionary."""
        return {
            "register": self.register,
            "subcycle": self.subcycle,
            "current": self.current.text if self.current else None,
            "exhausted": self.exhausted,
        }
