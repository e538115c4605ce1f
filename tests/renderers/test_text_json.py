"""
Tests for the text and JSON renderers
"""

import json

import pytest

from isinfo.core import build_report
from isinfo.renderers import JsonRenderer, TextRenderer


class TestJsonRenderer:

    def test_structure(self, sample_snapshot, config):
        data = json.loads(JsonRenderer().render(build_report(sample_snapshot, config)))
        assert data["facts"]["runtime_version"] == "3.12.4"
        assert data["modules"]["active"] == sorted(sample_snapshot.active_modules)
        assert "numpy" in data["modules"]["inactive"]
        assert data["disabled_functions"] == ["os.popen", "os.system", "subprocess.Popen"]
        assert data["addons"][0] == {"name": "PyArmor", "loaded": False, "version": "-"}

    def test_non_ascii_kept(self, sample_snapshot, config):
        out = JsonRenderer().render(build_report(sample_snapshot, config))
        assert "فعال" in out


class TestTextRenderer:

    def test_sections(self, sample_snapshot, config):
        out = TextRenderer().render(build_report(sample_snapshot, config))
        assert "Python version" in out
        assert "[X] Cython (3.0.10)" in out
        assert "[ ] PyArmor" in out
        assert "  + _ssl" in out
        assert "  x os.system" in out

    def test_no_disabled_functions(self, config):
        from isinfo.core import EnvironmentSnapshot
        out = TextRenderer().render(build_report(EnvironmentSnapshot(active_modules=frozenset()), config))
        assert "(none)" in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
