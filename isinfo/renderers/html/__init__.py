# isinfo/renderers/html/__init__.py
"""
HTML renderer - Generate the standalone environment report page

- styles: CSS and JavaScript resources
- templates/report.html: document structure (Jinja2, autoescaped)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from isinfo.config.ui import UIConfig
from isinfo.core.report import EnvironmentReport
from .styles import get_css, get_js


TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class FactRow:
    """One row of the general information table"""
    key: str
    icon: str
    label: str
    suffix: str = ""


FACT_ROWS: Tuple[FactRow, ...] = (
    FactRow("runtime_version", "fa-code", "نسخه پایتون"),
    FactRow("server_software", "fa-server", "وب‌سرور"),
    FactRow("os", "fa-desktop", "سیستم عامل"),
    FactRow("memory_limit", "fa-memory", "محدودیت حافظه"),
    FactRow("upload_max_size", "fa-upload", "حداکثر حجم آپلود"),
    FactRow("post_max_size", "fa-database", "حداکثر حجم POST"),
    FactRow("max_execution_time", "fa-clock", "حداکثر زمان اجرا", " ثانیه"),
    FactRow("max_input_vars", "fa-list", "حداکثر ورودی‌ها"),
    FactRow("display_errors", "fa-bug", "نمایش خطاها"),
    FactRow("allow_url_fetch", "fa-link", "allow_url_fetch"),
    FactRow("config_file", "fa-cog", "مسیر فایل پیکربندی"),
    FactRow("engine_version", "fa-bolt", "موتور اجرا"),
)


def _build_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class HtmlRenderer:
    """
    HTML renderer for environment reports

    Generates one standalone document with embedded CSS/JS. Every value
    taken from the host is escaped. Output depends only on the report and
    UI settings, so identical inputs give byte-identical documents.
    """

    def __init__(self, ui: Optional[UIConfig] = None):
        self.ui = ui or UIConfig()
        self._env = _build_environment()

    def render(self, report: EnvironmentReport) -> str:
        """Render EnvironmentReport as HTML"""
        template = self._env.get_template("report.html")
        return template.render(
            ui=self.ui,
            report=report,
            fact_rows=FACT_ROWS,
            css=Markup(get_css()),
            js=Markup(get_js()),
        )


__all__ = ["HtmlRenderer", "FACT_ROWS", "FactRow"]
