"""
Adder error module - exception hierarchy for the u64 primitives
"""

from typing import List, Optional, Tuple


# Base exception for adder
class AdderException(Exception):
    """Adder specific exception with context trace support"""

    def __init__(self, msg: str, stack_trace: Optional[List[Tuple[str, str]]] = None):
        self.msg = msg
        self.stack_trace = stack_trace or []
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if not self.stack_trace:
            return self.msg

        trace_str = ""
        for identifier, position in self.stack_trace:
            trace_str += f"\n{identifier} at {position}"

        return f"{self.msg}{trace_str}"


# Type alias for stack trace
Stack = List[Tuple[str, str]]


class ArithmeticOverflow(AdderException, OverflowError):
    """Raised when a u64 sum exceeds U64_MAX under the 'raise' policy"""

    def __init__(self, operation: str, left: int, right: int, attempted: int):
        self.operation = operation
        self.left = left
        self.right = right
        self.attempted = attempted
        super().__init__(
            f"{operation} overflow: {left} + {right} = {attempted} exceeds u64 range",
            [(operation, f"left={left}, right={right}")],
        )


class OperandTypeError(AdderException, TypeError):
    """Raised when an operand is not a plain int"""


class OperandRangeError(AdderException, ValueError):
    """Raised when an operand is outside [0, U64_MAX]"""


class PolicyConfigError(AdderException, ValueError):
    """Raised for an unknown overflow policy name"""


class UnknownPrimitiveError(AdderException, KeyError):
    """Raised when the registry cannot resolve a primitive name"""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.format_message()


def fail(msg: str) -> None:
    """Raise an adder exception with a message"""
    raise AdderException(msg, [])


def fail_with_stacktrace(msg: str, stack_trace: Stack) -> None:
    """Raise an adder exception with a message and stack trace"""
    raise AdderException(msg, stack_trace)
