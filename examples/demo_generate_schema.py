#!/usr/bin/env python3
"""Demonstration of schema generation from annotated classes.

This script shows how to:
1. Discover @graphql_schema classes in a package
2. Generate the SDL document
3. Inspect what was skipped

Run from the repository root:
    python examples/demo_generate_schema.py
"""

import sys
from pathlib import Path

from gql_sdlgen.core import AddHeaderHook, HookRunner, SchemaGenerator, discover
from gql_sdlgen.utils import setup_logging


def main():
    sys.path.insert(0, str(Path(__file__).parent))
    setup_logging("INFO")

    print("=== Schema Generation Demo ===\n")

    print("1. Discovering schema classes...")
    found = discover("library")
    for descriptor in found.descriptors:
        print(f"   {descriptor.kind.name:<15} {descriptor.operation_name}")

    print("\n2. Generating schema...")
    hooks = HookRunner()
    hooks.add_post_hook(AddHeaderHook("Generated by gql-sdlgen - do not edit"))
    result = SchemaGenerator(hooks=hooks).generate(found.descriptors)
    print(result.sdl)

    print("3. Skipped elements:")
    for diagnostic in found.diagnostics + result.diagnostics:
        print(f"   {diagnostic}")
    if not (found.diagnostics or result.diagnostics):
        print("   none")


if __name__ == "__main__":
    main()
