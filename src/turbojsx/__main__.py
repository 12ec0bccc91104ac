"""Rewrite the markup in a Python file and print the result.

Usage:
    python -m turbojsx page.py
    python -m turbojsx --debug page.py
    cat page.py | python -m turbojsx -
"""

import argparse
import sys
from pathlib import Path

from .errors import TransformError
from .transformer import TransformOpts, transform_source


def build_parser():
    parser = argparse.ArgumentParser(prog="turbojsx", description="Rewrite jsx(...) markup into construction calls.")
    parser.add_argument("path", help="Python source file, or - for stdin")
    parser.add_argument("--disable", action="store_true", help="Start with markup rewriting switched off")
    parser.add_argument("--marker", default=None, help="Name of the markup marker call (default: jsx)")
    parser.add_argument("--html-module", default=None, help="Module name for HTML calls (default: Html)")
    parser.add_argument("--svg-module", default=None, help="Module name for SVG calls (default: Svg)")
    parser.add_argument("--debug", action="store_true", help="Trace namespace resolution")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.path == "-":
        source = sys.stdin.read()
        filename = "<stdin>"
    else:
        path = Path(args.path)
        if not path.exists():
            print(f"File not found: {path}", file=sys.stderr)
            return 2
        source = path.read_text(encoding="utf-8")
        filename = str(path)

    module_names = {}
    if args.html_module:
        module_names["html"] = args.html_module
    if args.svg_module:
        module_names["svg"] = args.svg_module

    opts_kwargs = {"enabled": not args.disable, "module_names": module_names, "debug": args.debug}
    if args.marker:
        opts_kwargs["marker"] = args.marker
    opts = TransformOpts(**opts_kwargs)

    try:
        output = transform_source(source, filename=filename, opts=opts)
    except TransformError as exc:
        print(f"{filename}:{exc}", file=sys.stderr)
        return 1
    except SyntaxError as exc:
        print(f"{filename}: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
