# adder primitives directory
"""
This directory contains primitive operation implementations for adder.
Primitives are registered through `PrimitiveSpec` contracts and resolved
by `PrimitiveRegistry` with deterministic namespace rules.
"""
