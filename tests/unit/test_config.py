"""
Tests for configuration loading and validation
"""

from pathlib import Path

import pytest

from isinfo.catalog import DANGEROUS_FUNCTIONS, KNOWN_MODULES
from isinfo.config import (
    CONFIG_ENV_VAR,
    DEFAULT_ADDONS,
    AddonConfig,
    IsinfoConfig,
    load_config,
)
from isinfo.config import loader as loader_mod
from isinfo.errors import IsinfoError, codes


@pytest.fixture(autouse=True)
def isolated_search_paths(monkeypatch, tmp_path):
    """Keep the developer's own isinfo.yml out of the tests"""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(loader_mod, "default_search_paths", lambda: [tmp_path / "implicit.yml"])


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestLoader:

    def test_defaults_without_yaml(self):
        config = load_config()
        assert config.source is None
        assert config.catalog.known_modules == KNOWN_MODULES
        assert config.catalog.dangerous_functions == DANGEROUS_FUNCTIONS
        assert config.addons == DEFAULT_ADDONS
        assert config.ui.dir == "rtl"

    def test_yaml_merges_into_defaults(self, tmp_path):
        path = write(tmp_path / "c.yml", """
directives:
  post_max_size: "64M"
  disabled_functions: [os.system, eval]
catalog:
  extra_known_modules: [pydantic_core]
addons:
  - name: YAML
    module: yaml
    distribution: PyYAML
  - redis
ui:
  brand: Example Hosting
  stylesheets: []
server:
  port: 9000
""")
        config = load_config(path)
        assert config.source == path
        assert config.directives.post_max_size == "64M"
        assert config.directives.upload_max_size == "2M"
        assert config.directives.disabled_functions == "os.system, eval"
        assert "pydantic_core" in config.catalog.all_known_modules
        assert config.addons == (
            AddonConfig(name="YAML", module="yaml", distribution="PyYAML"),
            AddonConfig(name="redis", module="redis"),
        )
        assert config.ui.brand == "Example Hosting"
        assert config.ui.stylesheets == ()
        assert config.server.port == 9000
        assert config.server.host == "127.0.0.1"

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = write(tmp_path / "c.yml", "directives:\n  no_such_key: 1\nextra: true\n")
        assert load_config(path).directives == IsinfoConfig.default().directives

    def test_empty_file_gives_defaults(self, tmp_path):
        path = write(tmp_path / "c.yml", "")
        config = load_config(path)
        assert config.source == path
        assert config.directives == IsinfoConfig.default().directives

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(IsinfoError) as exc:
            load_config(tmp_path / "missing.yml")
        assert exc.value.error_code == codes.CONFIG_NOT_FOUND
        assert exc.value.is_config

    def test_explicit_invalid_yaml_raises(self, tmp_path):
        path = write(tmp_path / "c.yml", "directives: [unclosed\n")
        with pytest.raises(IsinfoError) as exc:
            load_config(path)
        assert exc.value.error_code == codes.CONFIG_INVALID

    def test_wrong_section_type_raises(self, tmp_path):
        path = write(tmp_path / "c.yml", "directives: just a string\n")
        with pytest.raises(IsinfoError):
            load_config(path)

    def test_environment_variable(self, tmp_path, monkeypatch):
        path = write(tmp_path / "env.yml", "server:\n  port: 8123\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().server.port == 8123

    def test_implicit_file_is_discovered(self, tmp_path):
        write(tmp_path / "implicit.yml", "ui:\n  brand: Found\n")
        assert load_config().ui.brand == "Found"

    def test_broken_implicit_file_falls_back_to_defaults(self, tmp_path, caplog):
        write(tmp_path / "implicit.yml", "- not\n- a mapping\n")
        with caplog.at_level("WARNING"):
            config = load_config()
        assert config == IsinfoConfig.default()
        assert "Ignoring configuration" in caplog.text

    def test_to_dict_round_trips_basic_fields(self):
        data = IsinfoConfig.default().to_dict()
        assert data["server"] == {"host": "127.0.0.1", "port": 8000}
        assert data["source"] is None
        assert len(data["addons"]) == 3


class TestValidator:

    def issues_for(self, tmp_path, text):
        return load_config(write(tmp_path / "c.yml", text)).validate()

    def test_defaults_are_clean(self):
        assert IsinfoConfig.default().validate() == []

    def test_bad_size(self, tmp_path):
        issues = self.issues_for(tmp_path, "directives:\n  post_max_size: lots\n")
        assert [(i.level, i.path) for i in issues] == [("error", "directives.post_max_size")]

    def test_negative_limits(self, tmp_path):
        issues = self.issues_for(tmp_path, "directives:\n  max_input_vars: -5\n  max_execution_time: -1\n")
        paths = {i.path for i in issues if i.level == "error"}
        assert paths == {"directives.max_input_vars", "directives.max_execution_time"}

    def test_upload_larger_than_post(self, tmp_path):
        issues = self.issues_for(tmp_path, "directives:\n  upload_max_size: 16M\n  post_max_size: 8M\n")
        assert [(i.level, i.path) for i in issues] == [("warn", "directives.upload_max_size")]

    def test_disabled_function_outside_catalog(self, tmp_path):
        issues = self.issues_for(tmp_path, "directives:\n  disabled_functions: 'os.system, my_helper'\n")
        assert len(issues) == 1
        assert "my_helper" in issues[0].message

    def test_addon_problems(self, tmp_path):
        issues = self.issues_for(tmp_path, """
addons:
  - {name: A, module: a}
  - {name: A, module: b}
  - {name: C}
""")
        assert ("error", "addons[2].module") in [(i.level, i.path) for i in issues]
        assert ("warn", "addons") in [(i.level, i.path) for i in issues]

    def test_unreadable_flag_is_an_error(self, tmp_path):
        issues = self.issues_for(tmp_path, "directives:\n  display_errors: maybe\n")
        assert [(i.level, i.path) for i in issues] == [("error", "directives.display_errors")]

    @pytest.mark.parametrize("value", ["'0'", "'off'", "'On'", "'yes'", "0", "1", "false", "''"])
    def test_ini_style_flags_are_accepted(self, tmp_path, value):
        issues = self.issues_for(tmp_path, f"directives:\n  allow_url_fetch: {value}\n")
        assert issues == []

    def test_issue_str_contains_hint(self, tmp_path):
        issues = self.issues_for(tmp_path, "ui:\n  dir: sideways\n")
        assert "Hint:" in str(issues[0])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
