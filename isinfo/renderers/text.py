# isinfo/renderers/text.py
"""
Plain text renderer (terminal output)
"""

from typing import List

from isinfo.core.report import EnvironmentReport


FACT_LABELS = (
    ("runtime_version", "Python version"),
    ("server_software", "Web server"),
    ("os", "Operating system"),
    ("memory_limit", "Memory limit"),
    ("upload_max_size", "Max upload size"),
    ("post_max_size", "Max POST size"),
    ("max_execution_time", "Max execution time (s)"),
    ("max_input_vars", "Max input vars"),
    ("display_errors", "Display errors"),
    ("allow_url_fetch", "allow_url_fetch"),
    ("config_file", "Config file"),
    ("engine_version", "Engine"),
)


class TextRenderer:
    """Render an EnvironmentReport as aligned plain text"""

    def render(self, report: EnvironmentReport) -> str:
        lines: List[str] = []
        width = max(len(label) for _, label in FACT_LABELS)

        lines.append("General")
        lines.append("-" * 70)
        for key, label in FACT_LABELS:
            lines.append(f"  {label.ljust(width)}  {report.fact(key)}")

        lines.append("")
        lines.append("Add-ons")
        lines.append("-" * 70)
        for addon in report.addons:
            version = f" ({addon.version})" if addon.has_version else ""
            mark = "[X]" if addon.loaded else "[ ]"
            lines.append(f"  {mark} {addon.name}{version}")

        lines.append("")
        lines.append(f"Active modules ({len(report.active_modules)})")
        lines.append("-" * 70)
        lines.extend(f"  + {name}" for name in report.active_modules)

        lines.append("")
        lines.append(f"Inactive modules ({len(report.inactive_modules)})")
        lines.append("-" * 70)
        lines.extend(f"  - {name}" for name in report.inactive_modules)

        lines.append("")
        lines.append("Disabled functions")
        lines.append("-" * 70)
        if report.disabled_functions:
            lines.extend(f"  x {name}" for name in report.disabled_functions)
        else:
            lines.append("  (none)")

        return "\n".join(lines) + "\n"
