"""
Addition primitive for adder

Implements addition of two unsigned 64-bit integers.
"""

from adder.primitives.api import AritySpec, PrimitiveSpec
from adder.primitives.default._u64 import apply_binary_op


def execute(left, right, *, policy=None):
    """
    Execute addition operation

    Args:
        left: Left operand (int in [0, 2**64 - 1])
        right: Right operand (int in [0, 2**64 - 1])
        policy: Optional overflow policy override ("raise", "wrap", "saturate")

    Returns:
        Sum of left and right. When the sum exceeds 2**64 - 1 the overflow
        policy decides: ArithmeticOverflow (default), wrap modulo 2**64,
        or saturate at 2**64 - 1.
    """
    return apply_binary_op(
        "Addition",
        left,
        right,
        lambda left_value, right_value: left_value + right_value,
        policy=policy,
    )


add = execute

KERNEL = execute
PRIMITIVE_SPEC = PrimitiveSpec(
    name="addition",
    namespace="default",
    kind="scalar",
    arity=AritySpec.fixed(2),
    kernel_name="default.addition",
    description="Addition of two unsigned 64-bit integers",
)
