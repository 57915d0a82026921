"""Scalar resolution for TypeScript code generation.

Maps GraphQL scalar names to TypeScript types. The five built-in scalars
always map to TypeScript primitives; any other name resolves to itself so it
refers to a type declared elsewhere in the generated output (or, for opaque
scalars, to a hand-written type maintained outside of it).

Example usage:
    from gql_tsgen.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.resolve("Int")        # "number"
    registry.resolve("User")       # "User"

    # Map a custom scalar to a concrete TypeScript type
    registry.register("DateTime", "string")
    registry.resolve("DateTime")   # "DateTime" (the alias declares it)
    registry.get("DateTime")       # "string"
"""

import re
from types import MappingProxyType
from typing import Iterable, Mapping

BUILTIN_SCALARS: Mapping[str, str] = MappingProxyType(
    {
        "ID": "string",
        "String": "string",
        "Boolean": "boolean",
        "Int": "number",
        "Float": "number",
    }
)

# Custom scalars left to a hand-written declaration by default
DEFAULT_OPAQUE_SCALARS = frozenset({"Date"})

# TypeScript's catch-all type, used for custom scalars without a mapping
ANY_TYPE = "any"

GRAPHQL_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class ScalarRegistry:
    """Registry of scalar name to TypeScript type mappings.

    Built-in scalars are fixed. Custom scalars can be given a TypeScript type
    with register(); a custom scalar without one is declared as ``any``.

    The registry is configured before a fold starts and only read while
    folding, so one instance can be shared by independent conversions.
    """

    def __init__(
        self,
        custom: Mapping[str, str] | None = None,
        opaque: Iterable[str] | None = None,
    ):
        self._custom: dict[str, str] = {}
        self._opaque = frozenset(DEFAULT_OPAQUE_SCALARS if opaque is None else opaque)
        for name, ts_type in (custom or {}).items():
            self.register(name, ts_type)

    @classmethod
    def from_config(cls, config) -> "ScalarRegistry":
        """Build a registry from a GeneratorConfig."""
        return cls(custom=config.scalars, opaque=config.opaque_scalars)

    def register(self, scalar_name: str, ts_type: str):
        """Register the TypeScript type a custom scalar is declared as."""
        if scalar_name in BUILTIN_SCALARS:
            raise ValueError(f"Cannot remap built-in scalar {scalar_name!r}")
        if not GRAPHQL_NAME.match(scalar_name):
            raise ValueError(f"Invalid GraphQL name: {scalar_name!r}")
        self._custom[scalar_name] = ts_type

    def resolve(self, type_name: str) -> str:
        """Return the TypeScript name used to reference a GraphQL named type."""
        return BUILTIN_SCALARS.get(type_name, type_name)

    def get(self, scalar_name: str) -> str | None:
        """Get the registered TypeScript type for a custom scalar, or None."""
        return self._custom.get(scalar_name)

    def is_opaque(self, scalar_name: str) -> bool:
        """Check if a scalar is typed by hand and must not be declared."""
        return scalar_name in self._opaque

    def declared_type(self, scalar_name: str) -> str:
        """Return the right-hand side of a custom scalar's type alias."""
        return self.get(scalar_name) or ANY_TYPE
