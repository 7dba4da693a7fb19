"""
adder - unsigned 64-bit addition primitive
"""

from adder.error_msg import (
    AdderException,
    ArithmeticOverflow,
    OperandRangeError,
    OperandTypeError,
    PolicyConfigError,
    UnknownPrimitiveError,
)
from adder.policy import OverflowPolicy, overflow_policy_scope
from adder.primitives.default._u64 import U64_MAX, U64_MIN
from adder.primitives.default.addition import add
from adder.version import __version__

__all__ = [
    "AdderException",
    "ArithmeticOverflow",
    "OperandRangeError",
    "OperandTypeError",
    "OverflowPolicy",
    "PolicyConfigError",
    "U64_MAX",
    "U64_MIN",
    "UnknownPrimitiveError",
    "__version__",
    "add",
    "overflow_policy_scope",
]
