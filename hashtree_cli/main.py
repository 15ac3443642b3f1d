"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m hashtree_cli build R1 R2 R3 [--file PATH] [--stdin] [--print] [--json]
    python -m hashtree_cli hash R1 [--json]
    python -m hashtree_cli verify --proof proof.json [--json]
    python -m hashtree_cli verify --root HEX --leaf HEX --sibling HEX --index N
    python -m hashtree_cli config --init

Environment Variables:
    HASHTREE_VALUE_SEPARATOR      Joiner for branch informational values (default: ;)
    HASHTREE_RENDER_INDENT        Indent unit per tree depth (default: " -- -- ")
    HASHTREE_RENDER_SHOW_VALUES   Print informational values (default: true)
    HASHTREE_LOG_LEVEL            Log level (default: INFO)
    HASHTREE_LOG_FILE             Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from hashtree import __version__
from hashtree.config.runtime import get_default_config_template
from hashtree.schemas.errors import HashtreeException
from hashtree_cli.commands import build, digest, verify
from hashtree_cli.config import load_config


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="hashtree",
        description="hashtree CLI - Build Merkle trees and verify inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./hashtree.yaml or ~/.config/hashtree/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- build command ---
    build_parser = subparsers.add_parser(
        "build",
        help="Build a Merkle tree and print its root",
        description="Collect values from arguments, a file, or stdin and build a Merkle tree over them.",
    )
    build_parser.add_argument(
        "values",
        nargs="*",
        help="Values to insert, in order",
    )
    build_parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read additional values from a file, one per line",
    )
    build_parser.add_argument(
        "--stdin",
        action="store_true",
        default=False,
        help="Read additional values from stdin, one per line",
    )
    build_parser.add_argument(
        "--print",
        action="store_true",
        default=False,
        help="Print the whole tree before the root",
    )
    build_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    build_parser.set_defaults(func=build.build_cmd)

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Print the leaf digest of a value",
    )
    hash_parser.add_argument("value", type=str, help="Value to hash")
    hash_parser.add_argument("--json", action="store_true", help="JSON output")
    hash_parser.set_defaults(func=digest.hash_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an inclusion proof against a root",
        description="Recompute the root from a leaf digest and sibling path and compare it to the expected root.",
    )
    verify_parser.add_argument(
        "--proof",
        type=str,
        default=None,
        help="JSON file with root, leaf, siblings and index",
    )
    verify_parser.add_argument("--root", type=str, default=None, help="Expected root digest (hex)")
    verify_parser.add_argument("--leaf", type=str, default=None, help="Leaf digest (hex)")
    verify_parser.add_argument("--leaf-value", type=str, default=None, help="Leaf value, hashed before verifying")
    verify_parser.add_argument(
        "--sibling", "-s",
        action="append",
        default=None,
        help="Sibling digest (hex), lowest level first; repeat per level",
    )
    verify_parser.add_argument("--index", type=int, default=None, help="Leaf index")
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="hashtree.yaml",
        help="Path for config file (default: hashtree.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (HASHTREE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: hashtree config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except HashtreeException as e:
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
