"""Assemble folded definition entries into the final TypeScript module."""

import logging
from typing import Any, Iterable

from .folded import SUPPRESSED

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


def emit_declarations(entries: Iterable[Any], export_keyword: str = "export") -> str:
    """Join declaration entries into module text.

    Suppressed entries are dropped, as are definitions that folded to
    something other than text (directive and schema definitions, type
    extensions). Every remaining declaration is prefixed with the export
    keyword and separated from the next by a blank line.

    Args:
        entries: Definition entries in source order
        export_keyword: Marker prefixed to each declaration ("" to omit)

    Returns:
        The module text; empty when nothing is left to emit
    """
    declarations = []
    for entry in entries:
        if entry is SUPPRESSED or entry is None:
            continue
        if not isinstance(entry, str):
            logger.debug("Skipping %s without a TypeScript counterpart", getattr(entry, "kind", entry))
            continue
        declarations.append(f"{export_keyword} {entry}" if export_keyword else entry)
    return SEPARATOR.join(declarations)
