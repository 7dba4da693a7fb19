"""
This module defines the adder features using a unified registry system.
This module serves as the single source of truth for all features.
"""

from typing import (
    Dict,
    Any,
    Callable,
    Optional,
    TypeVar,
    Generic,
)
from dataclasses import dataclass
import logging

from adder.error_msg import AdderException
from adder.primitives.registry import get_registry

logger = logging.getLogger("adder.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error


@dataclass
class Feature:
    """Base class for all adder features"""

    name: str
    description: str
    handler: Callable


class FeatureRegistry:
    """Registry for all adder features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from adder.version import get_version

    return OperationResult[Dict[str, str]](
        success=True, data={"version": get_version()}
    )


def handle_add(
    left: Any, right: Any, policy: Optional[str] = None, **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Handle an add request through the primitive registry"""
    from adder.policy import effective_policy

    try:
        resolved = effective_policy(policy)
        result = get_registry().call("addition", left, right, policy=resolved)
    except AdderException as e:
        logger.error(f"Addition failed: {e}")
        return OperationResult[Dict[str, Any]](success=False, error=str(e))

    logger.debug(f"Addition {left} + {right} = {result} ({resolved.value})")
    return OperationResult[Dict[str, Any]](
        success=True,
        data={
            "left": left,
            "right": right,
            "result": result,
            "policy": resolved.value,
        },
    )


# ----------------- Feature Registration -----------------

FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the adder version",
        handler=handle_version,
    )
)

FeatureRegistry.register(
    Feature(
        name="add",
        description="Add two unsigned 64-bit integers",
        handler=handle_add,
    )
)
