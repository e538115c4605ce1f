"""
Tests for the isinfo command line
"""

import json
import os

import pytest

from isinfo.cli.main import main
from isinfo.cli.commands.serve_cmd import parse_listen
from isinfo.config import CONFIG_ENV_VAR
from isinfo.config import loader as loader_mod


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(loader_mod, "default_search_paths", lambda: [tmp_path / "none.yml"])


class TestRender:

    def test_render_to_file(self, tmp_path, capsys):
        out = tmp_path / "reports" / "env.html"
        assert main(["render", "-o", str(out)]) == 0
        html = out.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "Report written" in capsys.readouterr().out

    def test_render_to_stdout(self, capsys):
        assert main(["render"]) == 0
        assert 'id="inactiveList"' in capsys.readouterr().out


class TestShow:

    def test_show_json(self, capsys):
        assert main(["show", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"facts", "addons", "modules", "disabled_functions"}

    def test_show_text(self, capsys):
        assert main(["show"]) == 0
        assert "Active modules" in capsys.readouterr().out


class TestCheck:

    def test_clean_defaults(self, capsys):
        assert main(["check"]) == 0
        assert "No issues found." in capsys.readouterr().out

    def test_errors_exit_one(self, tmp_path, capsys):
        path = tmp_path / "bad.yml"
        path.write_text("directives:\n  max_input_vars: -1\n", encoding="utf-8")
        assert main(["--config", str(path), "check"]) == 1
        assert "directives.max_input_vars" in capsys.readouterr().out

    def test_missing_config_exits_two(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.yml"), "check"]) == 2
        assert "CONFIG_NOT_FOUND" in capsys.readouterr().err


class TestServe:

    def test_parse_listen(self):
        assert parse_listen("0.0.0.0:8080") == ("0.0.0.0", 8080)
        assert parse_listen("localhost:8000") == ("localhost", 8000)

    def test_parse_listen_strips_ipv6_brackets(self):
        """uvicorn binds '::1', not '[::1]'"""
        assert parse_listen("[::1]:9000") == ("::1", 9000)
        assert parse_listen("[::]:80") == ("::", 80)

    @pytest.mark.parametrize("bad", ["8080", ":8080", "host:port", "[]:8080"])
    def test_parse_listen_rejects(self, bad):
        with pytest.raises(ValueError):
            parse_listen(bad)

    def test_serve_uses_uvicorn(self, monkeypatch):
        import uvicorn
        captured = {}

        def fake_run(app, **kwargs):
            captured["app"] = app
            captured.update(kwargs)

        monkeypatch.setattr(uvicorn, "run", fake_run)
        monkeypatch.setenv("SERVER_SOFTWARE", "gunicorn/22.0")
        assert main(["serve", "--listen", "127.0.0.1:8765"]) == 0
        assert captured["host"] == "127.0.0.1"
        assert captured["port"] == 8765
        assert captured["access_log"] is False
        # an operator-provided value is kept
        assert os.environ["SERVER_SOFTWARE"] == "gunicorn/22.0"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
