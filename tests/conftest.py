"""Shared pytest fixtures for adder tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "contract: primitive contract checks")


@pytest.fixture(autouse=True)
def _clean_adder_env(monkeypatch: pytest.MonkeyPatch):
    from adder.policy import LOG_LEVEL_ENV, OVERFLOW_POLICY_ENV

    monkeypatch.delenv(OVERFLOW_POLICY_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield


@pytest.fixture
def registry():
    from adder.primitives.registry import PrimitiveRegistry

    return PrimitiveRegistry()


@pytest.fixture
def u64_max() -> int:
    from adder import U64_MAX

    return U64_MAX
