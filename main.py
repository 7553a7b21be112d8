#!/usr/bin/env python3
"""
Sequence generators - CLI Entry Point

Usage:
    python main.py generators [GENERATOR_KEY]
    python main.py count GENERATOR_KEY [PARAM=VALUE ...] [--dtype DTYPE]

Examples:
    python main.py count combination n=5 k=3
    python main.py count mixed_radix radices=[1,2] --dtype uint8
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

# Add project root to path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))


def parse_params(pairs: List[str]) -> Dict[str, Any]:
    """
    Parse PARAM=VALUE pairs. Values are read as YAML scalars or lists.

    Raises:
        ValueError: If a pair has no '='
        yaml.YAMLError: If a value is not valid YAML
    """
    params = {}
    for pair in pairs:
        name, sep, raw = pair.partition('=')
        if not sep or not name:
            raise ValueError(f"Expected PARAM=VALUE, got '{pair}'")
        params[name] = yaml.safe_load(raw)
    return params


def cmd_generators(args):
    """List available generators or show generator details."""
    from sequences import list_generators, get_generator_info, generator_exists

    if args.generator:
        if not generator_exists(args.generator):
            print(f"Unknown generator: {args.generator}")
            print(f"Available: {list_generators()}")
            return 1

        info = get_generator_info(args.generator)
        print(f"Generator: {info['key']}")
        print(f"Class: {info['class']}")
        print(f"Family: {info['description']}")
        print(f"Parameters: {info['params']}")
        print(f"Value kind: {info['value_kind']}")
    else:
        generators = list_generators()
        print(f"Registered generators ({len(generators)}):")
        for key in generators:
            print(f"  - {key}")

    return 0


def cmd_count(args):
    """Print the number of elements a generator configuration produces."""
    from sequences import create_generator, generator_exists, list_generators
    from sequences.errors import InvalidParameter

    if not generator_exists(args.generator):
        print(f"Unknown generator: {args.generator}")
        print(f"Available: {list_generators()}")
        return 1

    try:
        params = parse_params(args.params)
        gen = create_generator(args.generator, dtype=args.dtype, **params)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        code = e.code if isinstance(e, InvalidParameter) else 'E_INVALID_PARAMS'
        print(f"Invalid parameters [{code}]: {e}")
        return 1

    print(f"Generator: {gen!r}")
    print(f"Elements: {gen.count()}")
    return 0


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Combinatorial sequence generators",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # generators
    p_generators = subparsers.add_parser("generators", help="List generators")
    p_generators.add_argument("generator", nargs="?", help="Generator KEY for details")

    # count
    p_count = subparsers.add_parser("count", help="Count elements of a configuration")
    p_count.add_argument("generator", help="Generator KEY")
    p_count.add_argument("params", nargs="*", help="PARAM=VALUE pairs")
    p_count.add_argument("--dtype", default=None, help="Integer dtype (e.g. uint8)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch to command handler
    handlers = {
        "generators": cmd_generators,
        "count": cmd_count,
    }

    handler = handlers.get(args.command)
    if handler:
        return handler(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
