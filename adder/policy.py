"""Overflow policy configuration and runtime policy scoping."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
import logging
import os

from pydantic import BaseModel, ConfigDict, field_validator

from adder.error_msg import PolicyConfigError

OVERFLOW_POLICY_ENV = "ADDER_OVERFLOW_POLICY"
LOG_LEVEL_ENV = "ADDER_LOG_LEVEL"

logger = logging.getLogger(__name__)


class OverflowPolicy(str, Enum):
    """What a u64 primitive does when the true result leaves [0, U64_MAX]."""

    RAISE = "raise"
    WRAP = "wrap"
    SATURATE = "saturate"


DEFAULT_OVERFLOW_POLICY = OverflowPolicy.RAISE


def parse_policy(value: OverflowPolicy | str) -> OverflowPolicy:
    """Normalize a policy name, raising PolicyConfigError for unknown names."""
    if isinstance(value, OverflowPolicy):
        return value
    token = str(value).strip().lower()
    try:
        return OverflowPolicy(token)
    except ValueError:
        allowed = ", ".join(member.value for member in OverflowPolicy)
        raise PolicyConfigError(
            f"Unknown overflow policy '{value}'. Allowed: {allowed}"
        ) from None


class AdderSettings(BaseModel):
    """Runtime settings resolved from the environment."""

    model_config = ConfigDict(frozen=True)

    overflow_policy: OverflowPolicy = DEFAULT_OVERFLOW_POLICY
    log_level: str = "INFO"

    @field_validator("overflow_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value):
        return parse_policy(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        return str(value).strip().upper() or "INFO"


def resolve_settings() -> AdderSettings:
    """Build settings from ADDER_* environment variables."""
    values: dict[str, str] = {}
    policy_raw = os.environ.get(OVERFLOW_POLICY_ENV, "").strip()
    if policy_raw:
        values["overflow_policy"] = policy_raw
    level_raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if level_raw:
        values["log_level"] = level_raw
    # parse up front so unknown names raise PolicyConfigError, not ValidationError
    policy = parse_policy(values.pop("overflow_policy", DEFAULT_OVERFLOW_POLICY))
    return AdderSettings(overflow_policy=policy, **values)


_OVERFLOW_POLICY: ContextVar[OverflowPolicy | None] = ContextVar(
    "adder_overflow_policy",
    default=None,
)


def current_policy() -> OverflowPolicy:
    """Return the policy in effect: active scope first, then the environment."""
    scoped = _OVERFLOW_POLICY.get()
    if scoped is not None:
        return scoped
    return resolve_settings().overflow_policy


def effective_policy(explicit: OverflowPolicy | str | None = None) -> OverflowPolicy:
    if explicit is not None:
        return parse_policy(explicit)
    return current_policy()


@contextmanager
def overflow_policy_scope(policy: OverflowPolicy | str):
    """Apply an overflow policy for the current thread or task."""
    resolved = parse_policy(policy)
    token = _OVERFLOW_POLICY.set(resolved)
    logger.debug("Entering overflow policy scope: %s", resolved.value)
    try:
        yield resolved
    finally:
        _OVERFLOW_POLICY.reset(token)


__all__ = [
    "DEFAULT_OVERFLOW_POLICY",
    "LOG_LEVEL_ENV",
    "OVERFLOW_POLICY_ENV",
    "AdderSettings",
    "OverflowPolicy",
    "current_policy",
    "effective_policy",
    "overflow_policy_scope",
    "parse_policy",
    "resolve_settings",
]
