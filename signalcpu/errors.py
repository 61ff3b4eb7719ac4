"""Custom exceptions for the signal CPU simulator."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorInfo:
    """Structured error information for API responses."""
    type: str
    message: str
    cycle: int
    line_index: Optional[int] = None
    source_text: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "message": self.message,
            "cycle": self.cycle,
            "line_index": self.line_index,
            "source_text": self.source_text,
        }


class SignalCPUError(Exception):
    """Base exception for all simulator errors."""

    def __init__(
        self,
        message: str,
        cycle: int = 0,
        line_index: Optional[int] = None,
        source_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cycle = cycle
        self.line_index = line_index
        self.source_text = source_text

    def to_error_info(self) -> ErrorInfo:
        return ErrorInfo(
            type=self.__class__.__name__,
            message=self.message,
            cycle=self.cycle,
            line_index=self.line_index,
            source_text=self.source_text,
        )


class ParseError(SignalCPUError):
    """Error during program parsing."""
    pass


class MissingInstruction(ParseError):
    """Line without any tokens."""
    pass


class UnknownInstruction(ParseError):
    """Unrecognized mnemonic or wrong operand count."""
    pass


class InvalidAmount(ParseError):
    """addx operand is not a signed decimal integer."""
    pass


class SignalCPURuntimeError(SignalCPUError):
    """Error during traced execution."""
    pass


class CycleLimitExceeded(SignalCPURuntimeError):
    """Maximum cycle count exceeded."""
    pass


class UsageError(SignalCPUError):
    """Invalid day/part selection."""
    pass


class UnsolvedPart(SignalCPUError):
    """Requested puzzle part has no defined behavior."""
    pass
