"""
Default namespace for adder primitives

Contains the u64 arithmetic primitives available as unqualified names.
"""

import importlib
from pathlib import Path


def list_primitives():
    """List all primitives available in this namespace"""
    primitives = {}

    namespace_dir = Path(__file__).parent

    # Scan for .py files (excluding private helpers and __init__.py)
    for item in sorted(namespace_dir.iterdir(), key=lambda p: p.name):
        if not (item.is_file() and item.suffix == '.py' and not item.name.startswith('_')):
            continue

        module_name = item.stem
        module = importlib.import_module(f"adder.primitives.default.{module_name}")

        # First line of the module docstring, or of execute's docstring
        description = "No description available"
        if module.__doc__:
            description = module.__doc__.strip().split('\n')[0]
        elif hasattr(module, 'execute') and module.execute.__doc__:
            description = module.execute.__doc__.strip().split('\n')[0]

        primitives[module_name] = description

    return primitives
