"""
Build script for turbojsx with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compiled with mypyc
    TURBOJSX_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import setup

# Determine if we should use mypyc
USE_MYPYC = os.environ.get("TURBOJSX_USE_MYPYC", "0") == "1"

# Pure helper modules only.
# Note: transformer.py is excluded since it subclasses ast.NodeTransformer
# Note: catalog.py is excluded due to attribute access on ast node classes
MYPYC_MODULES = [
    "src/turbojsx/namespace.py",
    "src/turbojsx/attributes.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install turbojsx[mypyc]", file=sys.stderr)
        sys.exit(1)

    # Verify all modules exist
    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print(f"Compiling {len(MYPYC_MODULES)} modules with mypyc:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")

    return mypycify(MYPYC_MODULES, opt_level=opt_level)


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()

    setup(
        ext_modules=ext_modules,
    )
