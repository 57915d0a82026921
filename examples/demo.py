#!/usr/bin/env python3
"""Demonstration of generating TypeScript declarations from a schema.

This script shows how to:
1. Load a GraphQL schema
2. Configure custom scalars and hooks
3. Render the declarations without writing a file
"""

from pathlib import Path

from gql_tsgen.core import (
    AddHeaderHook,
    GeneratorConfig,
    HookRunner,
    TypeScriptGenerator,
    load_schema,
)


def main():
    schema_path = Path(__file__).parent / "schema.graphql"

    print("=== gql-tsgen Demo ===\n")

    print("1. Loading GraphQL schema...")
    document = load_schema(str(schema_path))
    print(f"   Definitions: {len(document.definitions)}\n")

    print("2. Configuring generator...")
    config = GeneratorConfig(scalars={"JSON": "Record<string, unknown>"})
    hooks = HookRunner()
    hooks.add_post_hook(AddHeaderHook("// Generated from schema.graphql"))
    generator = TypeScriptGenerator(config, hooks)
    print(f"   Custom scalars: {config.scalars}")
    print(f"   Opaque scalars: {sorted(config.opaque_scalars)}\n")

    print("3. Rendering declarations...\n")
    content = generator.render(document)
    print(hooks.run_post_hooks("schema.d.ts", content))


if __name__ == "__main__":
    main()
