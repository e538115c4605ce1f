# isinfo/web/app.py
"""
Web application factory

Single composition root used by:
- CLI: isinfo serve
- Tests: fastapi.testclient.TestClient(create_app(...))
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import FastAPI

from isinfo import __version__
from isinfo.config.loader import IsinfoConfig
from isinfo.core.reader import EnvironmentReader
from isinfo.core.snapshot import EnvironmentSnapshot
from isinfo.renderers.html import HtmlRenderer
from .routes import api_router, pages_router


logger = logging.getLogger(__name__)


def create_app(
    config: Optional[IsinfoConfig] = None,
    read_environment: Optional[Callable[[], EnvironmentSnapshot]] = None,
) -> FastAPI:
    """
    Build the ASGI app.

    Args:
        config: Loaded configuration (code defaults when None)
        read_environment: Snapshot source; defaults to reading the live
            process on every request
    """
    config = config or IsinfoConfig.default()

    for issue in config.validate():
        log = logger.error if issue.level == "error" else logger.warning
        log("config %s: %s", issue.path, issue.message)

    app = FastAPI(
        title="isinfo",
        description="Runtime environment report",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )

    app.state.config = config
    app.state.read_environment = read_environment or EnvironmentReader(config).read
    app.state.renderer = HtmlRenderer(config.ui)

    app.include_router(pages_router)
    app.include_router(api_router)

    return app


__all__ = ["create_app"]
