"""Generator configuration.

GeneratorConfig is immutable once built and passed explicitly to the
folder, emitter and generator, so independent conversions never share
mutable state.

Example:
    config = GeneratorConfig(
        scalars={"DateTime": "string"},
        opaque_scalars={"Date", "Upload"},
    )
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .scalars import BUILTIN_SCALARS, DEFAULT_OPAQUE_SCALARS, GRAPHQL_NAME

DEFAULT_OPERATION_ROOTS = frozenset({"Query", "Mutation", "Subscription"})


def _check_names(names) -> None:
    for name in names:
        if not GRAPHQL_NAME.match(name):
            raise ValueError(f"invalid GraphQL name: {name!r}")


class GeneratorConfig(BaseModel):
    """Settings for one schema to TypeScript conversion.

    Attributes:
        scalars: TypeScript types for custom scalars (e.g. {"DateTime": "string"})
        opaque_scalars: Scalars declared by hand elsewhere; their definitions are dropped
        operation_roots: Object type names treated as operation roots and dropped
        optional_marker: Suffix appended to nullable field names
        export_keyword: Marker prefixed to every emitted declaration
        indent: Indentation of fields inside interface bodies
        template_dir: Directory with templates overriding the built-in ones
    """

    model_config = ConfigDict(frozen=True)

    scalars: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    opaque_scalars: frozenset[str] = DEFAULT_OPAQUE_SCALARS
    operation_roots: frozenset[str] = DEFAULT_OPERATION_ROOTS
    optional_marker: str = "?"
    export_keyword: str = "export"
    indent: str = "\t"
    template_dir: str | None = None

    @field_validator("scalars")
    @classmethod
    def _validate_scalars(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        _check_names(value)
        remapped = sorted(set(value) & set(BUILTIN_SCALARS))
        if remapped:
            raise ValueError(f"built-in scalars cannot be remapped: {', '.join(remapped)}")
        for name, ts_type in value.items():
            if not ts_type.strip():
                raise ValueError(f"empty TypeScript type for scalar {name!r}")
        return MappingProxyType(dict(value))

    @field_validator("opaque_scalars", "operation_roots")
    @classmethod
    def _validate_names(cls, value: frozenset[str]) -> frozenset[str]:
        _check_names(value)
        return value
