#!/usr/bin/env python3
"""
Ecotree CLI - Command-line interface for browsing the category hierarchy.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Browse and search categories

Examples:
    python -m cli categories list
    python -m cli categories tree
    python -m cli categories tree --search IT
    python -m cli categories tree --expand 1 --expand 4
    python -m cli categories --file export.yaml show 2
    python -m cli categories show --name "Fournisseurs IT"
    python -m cli -v categories parents --exclude 2
"""

import sys
import logging
import argparse
from cli import categories
from config import load_config
from services.base import Services
from store.manager import StoreManager
from logger import setup_logging


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Ecotree - External ecosystem category hierarchy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages, whatever the configured level",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    categories.setup_parser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        try:
            config = load_config()

            setup_logging(config, level=logging.DEBUG if args.verbose else None)

            # A --file option points the store at another export
            store_manager = StoreManager(config, getattr(args, "file", None))
            services = Services(config, store_manager=store_manager)

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
