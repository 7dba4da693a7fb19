"""Deterministic primitive discovery and resolution registry."""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
from typing import Any
import importlib
import logging

from adder.error_msg import UnknownPrimitiveError
from adder.primitives.api import KernelFn, PrimitiveSpec, validate_spec

logger = logging.getLogger(__name__)


class PrimitiveRegistry:
    """Registry with deterministic namespace loading and name resolution."""

    def __init__(self, primitives_dir: Path | None = None) -> None:
        if primitives_dir is None:
            primitives_dir = Path(__file__).parent

        self.primitives_dir = primitives_dir
        self._specs_by_qualified: OrderedDict[str, PrimitiveSpec] = OrderedDict()
        self._kernels_by_name: dict[str, KernelFn] = {}
        self._specs_by_namespace: dict[str, OrderedDict[str, PrimitiveSpec]] = {}
        self._import_order: list[str] = []

        self.import_namespace("default")
        self._discover_namespaces()

    @property
    def imported_namespaces(self) -> tuple[str, ...]:
        return tuple(self._import_order)

    def _discover_namespaces(self) -> None:
        if not self.primitives_dir.exists():
            return
        for item in sorted(self.primitives_dir.iterdir(), key=lambda p: p.name):
            if not item.is_dir() or item.name.startswith("_"):
                continue
            self.import_namespace(item.name)

    def import_namespace(self, namespace: str) -> None:
        if namespace in self._specs_by_namespace:
            return

        namespace_dir = self.primitives_dir / namespace
        if not namespace_dir.exists() or not namespace_dir.is_dir():
            raise ValueError(f"Unknown primitive namespace: {namespace}")

        module_path = f"adder.primitives.{namespace}"
        namespace_specs = self._specs_by_namespace.setdefault(namespace, OrderedDict())
        self._import_order.append(namespace)

        for py_file in sorted(namespace_dir.glob("*.py"), key=lambda p: p.name):
            if py_file.name.startswith("_"):
                continue
            module_name = f"{module_path}.{py_file.stem}"
            try:
                module = importlib.import_module(module_name)
            except Exception as exc:
                logger.warning(
                    "Failed loading primitive module %s: %s", module_name, exc
                )
                continue

            spec_and_kernel = self._extract_spec_from_module(module, module_name)
            if spec_and_kernel is None:
                continue

            spec, kernel = spec_and_kernel
            self.register(spec, kernel)
            namespace_specs[spec.name] = spec

        logger.debug(
            "Imported namespace %s with %d primitives", namespace, len(namespace_specs)
        )

    @staticmethod
    def _extract_spec_from_module(
        module: Any, module_name: str
    ) -> tuple[PrimitiveSpec, KernelFn] | None:
        spec = getattr(module, "PRIMITIVE_SPEC", None)
        kernel = getattr(module, "KERNEL", None)
        if spec is None or kernel is None:
            logger.debug("Module %s exports no primitive contract", module_name)
            return None
        if not isinstance(spec, PrimitiveSpec):
            raise TypeError(f"{module_name}.PRIMITIVE_SPEC is not a PrimitiveSpec")
        if not callable(kernel):
            raise TypeError(f"{module_name}.KERNEL is not callable")
        return spec, kernel

    def register(self, spec: PrimitiveSpec, kernel: KernelFn) -> None:
        validate_spec(spec)
        qualified = spec.qualified_name
        if qualified in self._specs_by_qualified:
            logger.debug("Replacing primitive %s", qualified)
        self._specs_by_qualified[qualified] = spec
        self._kernels_by_name[spec.kernel_name] = kernel
        if spec.namespace not in self._import_order:
            self._import_order.append(spec.namespace)
        self._specs_by_namespace.setdefault(spec.namespace, OrderedDict())[spec.name] = spec

    def resolve(self, name: str) -> PrimitiveSpec:
        """Resolve a qualified or unqualified primitive name."""
        if "." in name:
            spec = self._specs_by_qualified.get(name)
            if spec is None:
                raise UnknownPrimitiveError(f"Unknown primitive: {name}")
            return spec

        default_specs = self._specs_by_namespace.get("default", {})
        if name in default_specs:
            return default_specs[name]
        for namespace in self._import_order:
            specs = self._specs_by_namespace.get(namespace, {})
            if name in specs:
                return specs[name]
        raise UnknownPrimitiveError(f"Unknown primitive: {name}")

    def get_spec(self, name: str) -> PrimitiveSpec:
        return self.resolve(name)

    def get_kernel(self, name: str) -> KernelFn:
        spec = self.resolve(name)
        return self._kernels_by_name[spec.kernel_name]

    def has_primitive(self, name: str) -> bool:
        try:
            self.resolve(name)
        except UnknownPrimitiveError:
            return False
        return True

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Validate arity and invoke a primitive kernel."""
        spec = self.resolve(name)
        spec.arity.validate(len(args))
        return self._kernels_by_name[spec.kernel_name](*args, **kwargs)

    def list_namespaces(self) -> list[str]:
        return list(self._import_order)

    def list_primitives(self, namespace: str | None = None) -> dict[str, str]:
        if namespace is not None:
            specs = self._specs_by_namespace.get(namespace, {})
            return {spec.qualified_name: spec.description for spec in specs.values()}
        return {
            qualified: spec.description
            for qualified, spec in self._specs_by_qualified.items()
        }


_default_registry: PrimitiveRegistry | None = None


def get_registry() -> PrimitiveRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = PrimitiveRegistry()
    return _default_registry
