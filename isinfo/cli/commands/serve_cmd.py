# isinfo/cli/commands/serve_cmd.py
"""
Serve command - run the report page under uvicorn
"""

import argparse
import os
import sys
from typing import Tuple


def register_command(subparsers):
    parser = subparsers.add_parser(
        "serve",
        help="Serve the report over HTTP",
        description="Serve the environment report page (GET /), its JSON form (GET /api/report) and /health.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--listen",
        help="Listen address HOST:PORT (default: from configuration, 127.0.0.1:8000)",
    )
    parser.set_defaults(func=run_serve)


def parse_listen(listen: str) -> Tuple[str, int]:
    """'HOST:PORT' or '[IPV6]:PORT' -> (host, port), brackets stripped"""
    host, sep, port = listen.rpartition(":")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not sep or not host:
        raise ValueError(f"expected HOST:PORT, got '{listen}'")
    return host, int(port)


def run_serve(args) -> int:
    config = args.loaded_config

    if args.listen:
        try:
            host, port = parse_listen(args.listen)
        except ValueError as e:
            print(f"[isinfo.serve] invalid --listen: {e}", file=sys.stderr)
            return 2
    else:
        host, port = config.server.host, config.server.port

    try:
        import uvicorn
    except ImportError:
        print(
            "ERROR: uvicorn is required. Install with: pip install uvicorn",
            file=sys.stderr,
        )
        return 1

    from isinfo.web import create_app

    os.environ.setdefault("SERVER_SOFTWARE", f"uvicorn/{uvicorn.__version__}")
    app = create_app(config)

    try:
        uvicorn.run(
            app,
            host=host,
            port=port,
            log_level="info",
            access_log=False,
        )
    except KeyboardInterrupt:
        print("\n[isinfo.serve] stopped")
    return 0
