# isinfo/config/ui.py
"""
Presentation and server configuration
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


DEFAULT_STYLESHEETS: Tuple[str, ...] = (
    "https://cdn.jsdelivr.net/gh/rastikerdar/vazir-font@v30.1.0/dist/font-face.css",
    "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.0/css/all.min.css",
)


@dataclass(frozen=True)
class UIConfig:
    """Report page settings"""

    lang: str = "fa"
    dir: str = "rtl"
    title: str = "اطلاعات نسخه پایتون"
    brand: str = "isinfo"
    subtitle: str = "اطلاعات نسخه پایتون"
    stylesheets: Tuple[str, ...] = DEFAULT_STYLESHEETS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lang": self.lang,
            "dir": self.dir,
            "title": self.title,
            "brand": self.brand,
            "subtitle": self.subtitle,
            "stylesheets": list(self.stylesheets),
        }


@dataclass(frozen=True)
class ServerConfig:
    """Bind address for `isinfo serve`"""

    host: str = "127.0.0.1"
    port: int = 8000

    def to_dict(self) -> Dict[str, Any]:
        return {"host": self.host, "port": self.port}
