"""Program parser for the signal CPU."""

import logging
import re

from .errors import InvalidAmount, MissingInstruction, UnknownInstruction
from .instructions import Add, Instruction, NoOp

logger = logging.getLogger(__name__)

# Valid mnemonics
VALID_MNEMONICS = {"noop", "addx"}

_AMOUNT_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_program(text: str) -> list[Instruction]:
    """Parse program text into instructions.

    The whole program is validated before anything is returned; the first
    malformed line aborts parsing.

    Args:
        text: Program source, one instruction per line

    Returns:
        Instructions in program order
    """
    instructions: list[Instruction] = []

    for line_index, line in enumerate(text.splitlines()):
        instructions.append(_parse_instruction(line, line_index))

    logger.debug("Parsed %d instructions", len(instructions))
    return instructions


def _parse_instruction(line: str, line_index: int) -> Instruction:
    """Parse a single instruction line."""
    parts = line.split()
    if not parts:
        raise MissingInstruction(
            f"missing instruction at line {line_index}",
            line_index=line_index,
            source_text=line,
        )

    mnemonic = parts[0]
    operands = parts[1:]

    if mnemonic not in VALID_MNEMONICS:
        raise UnknownInstruction(
            f"unknown instruction {mnemonic} at line {line_index}",
            line_index=line_index,
            source_text=line,
        )

    if mnemonic == "noop" and not operands:
        return NoOp()

    if mnemonic == "addx" and len(operands) == 1:
        return Add(_parse_amount(operands[0], line_index, line))

    # Known mnemonic with the wrong operand count
    raise UnknownInstruction(
        f"unknown instruction {mnemonic} at line {line_index}",
        line_index=line_index,
        source_text=line,
    )


def _parse_amount(token: str, line_index: int, source_text: str) -> int:
    """Parse a signed decimal amount, raising for anything else."""
    if not _AMOUNT_RE.fullmatch(token):
        raise InvalidAmount(
            f"invalid amount {token} for add instruction at line {line_index}",
            line_index=line_index,
            source_text=source_text,
        )
    return int(token, 10)
