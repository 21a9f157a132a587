"""fabric-mcp entry point.

Serves the Fabric tools over stdio. `--check` only reports whether the
fabric executable can be found.
"""

import argparse
import asyncio
import logging
import sys

from fabric_mcp import __version__
from fabric_mcp.config import get_settings
from fabric_mcp.readiness import probe
from fabric_mcp.server import run_stdio
from fabric_mcp.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fabric-mcp",
        description="MCP server exposing Fabric AI patterns as tools",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report whether the fabric CLI is installed, then exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if args.debug:
        settings = settings.model_copy(update={"debug": True})

    get_logger("fabric_mcp", logging.DEBUG if settings.debug else None, settings=settings)

    if args.check:
        readiness = probe(settings.fabric_binary)
        print(readiness.describe(), file=sys.stderr)
        sys.exit(0 if readiness.installed else 1)

    try:
        asyncio.run(run_stdio(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
