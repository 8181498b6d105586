# sa_config/cli.py

"""
Print values from the gromox sa.cfg file.

Examples:
  All entries, one ``key = value`` per line:
    sa-config

  A single value (exit status 1 if the key is absent):
    sa-config mysql_host

  Machine-readable dump of another file:
    sa-config --file ./sa.cfg --format json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import TYPE_CHECKING

import yaml

from . import config_loader
from .logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

FORMATS = ("ini", "json", "yaml")


def format_entries(entries: Mapping[str, str], fmt: str) -> str:
    """Render entries sorted by key in one of ``FORMATS``."""
    ordered = dict(sorted(entries.items()))
    if fmt == "json":
        return json.dumps(ordered, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        if not ordered:
            return "{}\n"
        return yaml.safe_dump(ordered, default_flow_style=False, allow_unicode=True)
    return "".join(f"{key} = {value}\n" for key, value in ordered.items())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sa-config",
        description="Print values from the gromox sa.cfg configuration file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("key", nargs="?", help="Print only the value of KEY")
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="ini",
        help="Output format for the full dump (default: ini)",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Read PATH instead of the system sa.cfg",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Emit JSON log lines at LEVEL on stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        setup_logging(args.log_level)

    if args.file:
        entries = config_loader.ConfigAccessor(args.file).get_config()
    else:
        entries = config_loader.get_config()

    if args.key is not None:
        value = entries.get(args.key)
        if value is None:
            print(f"{args.key}: no such key", file=sys.stderr)
            return 1
        print(value)
        return 0

    sys.stdout.write(format_entries(entries, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
