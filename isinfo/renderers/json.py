# isinfo/renderers/json.py
"""
JSON renderer (for CI/tools)
"""

import json

from isinfo.core.report import EnvironmentReport


class JsonRenderer:
    """Render an EnvironmentReport as JSON"""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def render(self, report: EnvironmentReport) -> str:
        return json.dumps(report.to_dict(), indent=self.indent, ensure_ascii=False)
