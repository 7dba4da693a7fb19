from __future__ import annotations

import asyncio
import threading

import pytest

from adder import ArithmeticOverflow, U64_MAX, add
from adder.error_msg import PolicyConfigError
from adder.policy import (
    OVERFLOW_POLICY_ENV,
    AdderSettings,
    OverflowPolicy,
    current_policy,
    effective_policy,
    overflow_policy_scope,
    parse_policy,
    resolve_settings,
)


@pytest.mark.unit
def test_default_policy_is_raise():
    assert current_policy() is OverflowPolicy.RAISE
    assert AdderSettings().overflow_policy is OverflowPolicy.RAISE


@pytest.mark.unit
def test_parse_policy_normalizes_names():
    assert parse_policy(" Wrap ") is OverflowPolicy.WRAP
    assert parse_policy("SATURATE") is OverflowPolicy.SATURATE
    assert parse_policy(OverflowPolicy.RAISE) is OverflowPolicy.RAISE
    with pytest.raises(PolicyConfigError, match="Unknown overflow policy"):
        parse_policy("clamp")


@pytest.mark.unit
def test_environment_sets_policy(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(OVERFLOW_POLICY_ENV, "wrap")
    assert resolve_settings().overflow_policy is OverflowPolicy.WRAP
    assert add(U64_MAX, 1) == 0


@pytest.mark.unit
def test_unknown_environment_policy_fails(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(OVERFLOW_POLICY_ENV, "explode")
    with pytest.raises(PolicyConfigError):
        resolve_settings()
    with pytest.raises(ValueError):
        add(1, 1)


@pytest.mark.unit
def test_scope_overrides_environment_and_argument_overrides_scope(
    monkeypatch: pytest.MonkeyPatch,
):
    monkeypatch.setenv(OVERFLOW_POLICY_ENV, "wrap")
    with overflow_policy_scope("saturate") as active:
        assert active is OverflowPolicy.SATURATE
        assert add(U64_MAX, 1) == U64_MAX
        assert add(U64_MAX, 1, policy="wrap") == 0
        with pytest.raises(ArithmeticOverflow):
            add(U64_MAX, 1, policy="raise")
    assert add(U64_MAX, 1) == 0


@pytest.mark.unit
def test_scope_is_restored_after_error():
    with pytest.raises(RuntimeError):
        with overflow_policy_scope("wrap"):
            raise RuntimeError("boom")
    assert effective_policy() is OverflowPolicy.RAISE


@pytest.mark.unit
def test_scope_is_local_to_thread():
    seen: list[OverflowPolicy] = []

    def worker():
        seen.append(current_policy())

    with overflow_policy_scope("wrap"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
        assert current_policy() is OverflowPolicy.WRAP

    assert seen == [OverflowPolicy.RAISE]


@pytest.mark.unit
def test_scope_is_local_to_task():
    async def scoped(policy: str) -> int:
        with overflow_policy_scope(policy):
            await asyncio.sleep(0)
            return add(U64_MAX, 1)

    async def main():
        return await asyncio.gather(scoped("wrap"), scoped("saturate"))

    assert asyncio.run(main()) == [0, U64_MAX]


@pytest.mark.unit
def test_settings_model_is_frozen():
    settings = AdderSettings(overflow_policy="wrap", log_level="debug")
    assert settings.overflow_policy is OverflowPolicy.WRAP
    assert settings.log_level == "DEBUG"
    with pytest.raises(Exception):
        settings.log_level = "INFO"
