# isinfo/cli/commands/render_cmd.py
"""
Render command - write the HTML report to a file or stdout
"""

import sys
from pathlib import Path

from isinfo.core import EnvironmentReader, build_report
from isinfo.errors import IsinfoError, codes
from isinfo.renderers import HtmlRenderer


def register_command(subparsers):
    parser = subparsers.add_parser(
        "render",
        help="Write the HTML report",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    parser.set_defaults(func=run_render)


def run_render(args) -> int:
    config = args.loaded_config
    report = build_report(EnvironmentReader(config).read(), config)
    html = HtmlRenderer(config.ui).render(report)

    if not args.output:
        sys.stdout.write(html)
        return 0

    output = Path(args.output)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        raise IsinfoError(
            message=f"Cannot write report to {output}: {e}",
            error_code=codes.OUTPUT_WRITE_FAILED,
            details={"path": str(output)},
            cause=e,
        ) from e

    print(f"Report written: {output}")
    return 0
