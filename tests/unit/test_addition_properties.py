from __future__ import annotations

import pytest
pytest.importorskip("hypothesis")
from hypothesis import given, strategies as st

from adder import ArithmeticOverflow, U64_MAX, add

u64 = st.integers(min_value=0, max_value=U64_MAX)


@st.composite
def non_overflowing_pairs(draw):
    left = draw(u64)
    right = draw(st.integers(min_value=0, max_value=U64_MAX - left))
    return left, right


@pytest.mark.unit
@given(non_overflowing_pairs())
def test_sum_is_exact_and_commutative(pair):
    left, right = pair
    assert add(left, right) == left + right
    assert add(left, right) == add(right, left)


@pytest.mark.unit
@given(u64)
def test_zero_is_identity(value):
    assert add(value, 0) == value
    assert add(0, value) == value


@pytest.mark.unit
@given(u64, u64)
def test_policies_agree_with_their_definition(left, right):
    total = left + right
    if total <= U64_MAX:
        assert add(left, right) == total
    else:
        with pytest.raises(ArithmeticOverflow):
            add(left, right)
    assert add(left, right, policy="wrap") == total % (U64_MAX + 1)
    assert add(left, right, policy="saturate") == min(total, U64_MAX)
