# isinfo/cli/main.py
import argparse
import logging
import sys
from typing import List, Optional

from isinfo import __version__
from isinfo.config import load_config
from isinfo.errors import IsinfoError
from isinfo.cli.commands import check_cmd, render_cmd, serve_cmd, show_cmd


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isinfo",
        description="Runtime environment report: modules, limits, disabled functions, add-ons",
    )
    parser.add_argument("--version", action="version", version=f"isinfo {__version__}")
    parser.add_argument(
        "-c", "--config",
        help="YAML configuration file (default: $ISINFO_CONFIG, ./isinfo.yml, ~/.isinfo/config.yml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    serve_cmd.register_command(subparsers)
    render_cmd.register_command(subparsers)
    show_cmd.register_command(subparsers)
    check_cmd.register_command(subparsers)
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        args.loaded_config = load_config(args.config)
        return args.func(args) or 0
    except IsinfoError as e:
        print(f"[isinfo] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
