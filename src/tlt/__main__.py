#!/usr/bin/env python3
"""
CLI for the tlt evaluator.

Usage:
    python -m tlt
    python -m tlt [-v] demo [--overflow POLICY] [--zero-division POLICY]

Examples:
    # Print the greeting
    python -m tlt

    # Evaluate the demonstration expressions
    python -m tlt demo

    # Same, with wrapping integer arithmetic and debug logging
    TLT_OVERFLOW=wrap python -m tlt -v demo
"""

import argparse
import logging
import sys

from .ast import Add, Divide, Multiply, Subtract, format_expression, lit
from .config import EvalConfig, OverflowPolicy, ZeroDivisionPolicy
from .errors import TltError
from .interpreter import execute

GREETING = "Hello, world!"


def demo_expressions():
    """The demonstration expressions, in display order."""
    return [
        Add(lit(10), lit(20.0)),
        Subtract(lit(10), lit(20.0)),
        Multiply(lit(10), lit(20.0)),
        Divide(lit(10), lit(20.0)),
        Add(lit(True), lit(1)),
    ]


def load_config(args) -> EvalConfig:
    """Environment config with command-line overrides applied."""
    config = EvalConfig.from_env()
    overrides = EvalConfig.from_names(args.overflow, args.zero_division)
    if args.overflow is not None:
        config = config.replace(overflow=overrides.overflow)
    if args.zero_division is not None:
        config = config.replace(zero_division=overrides.zero_division)
    return config


def cmd_demo(args) -> int:
    """Evaluate the demonstration expressions."""
    config = load_config(args)

    print(GREETING)
    for expr in demo_expressions():
        result = execute(expr, config)
        if result.error is not None:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        shown = repr(result.value) if result.success else "<no result>"
        print(f"{format_expression(expr)} => {shown}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='python -m tlt',
        description='tlt type-checked arithmetic evaluator',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='action')

    demo_parser = subparsers.add_parser('demo', help='Evaluate demonstration expressions')
    demo_parser.add_argument('--overflow', choices=[p.value for p in OverflowPolicy],
                             help='Integer overflow policy')
    demo_parser.add_argument('--zero-division', choices=[p.value for p in ZeroDivisionPolicy],
                             help='Integer division by zero policy')

    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # root may already have handlers, so set the package level directly
    logging.getLogger("tlt").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    if args.action is None:
        print(GREETING)
        return 0

    try:
        if args.action == 'demo':
            return cmd_demo(args)
    except TltError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
