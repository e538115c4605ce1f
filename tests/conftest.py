"""
Shared fixtures: a fixed snapshot standing in for a live host
"""

import pytest

from isinfo.config import IsinfoConfig
from isinfo.core import AddonStatus, EnvironmentSnapshot


SAMPLE_FACTS = {
    "runtime_version": "3.12.4",
    "server_software": "uvicorn/0.30.1",
    "os": "Linux web01 6.1.0 #1 SMP x86_64",
    "memory_limit": "512M",
    "upload_max_size": "2M",
    "post_max_size": "8M",
    "max_execution_time": "30",
    "max_input_vars": "1000",
    "display_errors": "غیرفعال",
    "allow_url_fetch": "فعال",
    "config_file": "/etc/isinfo/config.yml",
    "engine_version": "CPython 3.12.4 (GCC 12.2.0)",
    "disabled_functions": "os.system, os.popen ,subprocess.Popen",
}


@pytest.fixture
def config():
    return IsinfoConfig.default()


@pytest.fixture
def sample_snapshot():
    return EnvironmentSnapshot(
        active_modules=frozenset({"_ssl", "_sqlite3", "zlib", "yaml", "json", "os"}),
        facts=dict(SAMPLE_FACTS),
        addons=(
            AddonStatus(name="PyArmor", loaded=False, icon="fa-shield-halved"),
            AddonStatus(name="Cython", loaded=True, version="3.0.10", icon="fa-lock"),
            AddonStatus(name="Redis (Python client)", loaded=True, version="5.0.4", icon="fa-database"),
        ),
    )
