"""Core modules for GraphQL to TypeScript code generation."""

from .config import GeneratorConfig
from .emitter import emit_declarations
from .errors import FoldError, GqlTsgenError, SchemaLoadError
from .folded import SUPPRESSED, FoldedType
from .folder import TypeScriptFolder, fold_document
from .generator import TypeScriptGenerator
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .loader import SchemaLoader, load_schema
from .scalars import BUILTIN_SCALARS, ScalarRegistry

__all__ = [
    # Config
    "GeneratorConfig",
    # Errors
    "GqlTsgenError",
    "SchemaLoadError",
    "FoldError",
    # Scalars
    "BUILTIN_SCALARS",
    "ScalarRegistry",
    # Folding
    "FoldedType",
    "SUPPRESSED",
    "TypeScriptFolder",
    "fold_document",
    # Emitting
    "emit_declarations",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # Loading
    "SchemaLoader",
    "load_schema",
    # Generator
    "TypeScriptGenerator",
]
