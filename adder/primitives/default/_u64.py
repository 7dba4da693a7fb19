"""Helpers for unsigned 64-bit scalar arithmetic."""

from __future__ import annotations

import logging
from typing import Any, Callable

from adder.error_msg import (
    AdderException,
    ArithmeticOverflow,
    OperandRangeError,
    OperandTypeError,
)
from adder.policy import OverflowPolicy, effective_policy

U64_BITS = 64
U64_MIN = 0
U64_MAX = (1 << U64_BITS) - 1
U64_MODULUS = 1 << U64_BITS

ScalarBinaryOp = Callable[[int, int], int]

logger = logging.getLogger(__name__)


def check_operand(name: str, value: Any) -> int:
    """Return value if it is an int in [U64_MIN, U64_MAX], else raise."""
    # bool is an int subclass but never a valid operand
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandTypeError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    if value < U64_MIN or value > U64_MAX:
        raise OperandRangeError(
            f"{name}={value} is outside the u64 range [{U64_MIN}, {U64_MAX}]"
        )
    return value


def fit_u64(name: str, left: int, right: int, raw: int, policy: OverflowPolicy) -> int:
    """Map a raw result back into u64 according to policy."""
    if U64_MIN <= raw <= U64_MAX:
        return raw
    if policy is OverflowPolicy.RAISE:
        raise ArithmeticOverflow(name, left, right, raw)
    if policy is OverflowPolicy.WRAP:
        wrapped = raw % U64_MODULUS
        logger.debug("%s overflow wrapped: %d -> %d", name, raw, wrapped)
        return wrapped
    saturated = U64_MAX if raw > U64_MAX else U64_MIN
    logger.debug("%s overflow saturated: %d -> %d", name, raw, saturated)
    return saturated


def apply_binary_op(
    name: str,
    left: Any,
    right: Any,
    op: ScalarBinaryOp,
    policy: OverflowPolicy | str | None = None,
) -> int:
    """Apply a scalar op over two u64 operands under the effective overflow policy."""
    left_value = check_operand("left", left)
    right_value = check_operand("right", right)
    resolved = effective_policy(policy)

    try:
        raw = op(left_value, right_value)
    except AdderException:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{name} failed: {exc}") from exc

    return fit_u64(name, left_value, right_value, raw, resolved)
