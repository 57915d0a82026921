"""Values produced while folding a schema AST.

Most nodes fold to plain strings. Two extra shapes exist:

- FoldedType, the result of a NonNullType node: the wrapped type's text plus
  a non-null flag read by the enclosing field or argument.
- SUPPRESSED, returned in place of a definition that must not be emitted.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoldedType:
    """A folded type reference carrying its nullability."""
    type: str
    non_null: bool = False


class _Suppressed:
    """Marker for a definition left out of the generated output."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SUPPRESSED"


SUPPRESSED = _Suppressed()


def unwrap_type(value) -> FoldedType | None:
    """Normalize a folded type slot, or return None if it is not a type."""
    if isinstance(value, FoldedType):
        return value
    if isinstance(value, str):
        return FoldedType(value)
    return None
