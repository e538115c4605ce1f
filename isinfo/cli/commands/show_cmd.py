# isinfo/cli/commands/show_cmd.py
"""
Show command - print the report as text or JSON
"""

from isinfo.core import EnvironmentReader, build_report
from isinfo.renderers import JsonRenderer, TextRenderer


def register_command(subparsers):
    parser = subparsers.add_parser(
        "show",
        help="Print the report to the terminal",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.set_defaults(func=run_show)


def run_show(args) -> int:
    config = args.loaded_config
    report = build_report(EnvironmentReader(config).read(), config)
    renderer = JsonRenderer() if args.format == "json" else TextRenderer()
    print(renderer.render(report), end="" if args.format == "text" else "\n")
    return 0
