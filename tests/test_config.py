"""Tests for configuration management."""

import json

from resumeforge.config import ConfigManager, get_config_manager, reload_config


def test_defaults_loaded(isolated_config):
    assert isolated_config.get("ollama", "port") == 11434
    assert isolated_config.get("ollama", "model") == "nomic-embed-text"
    assert isolated_config.get("semantic", "enabled") is True
    assert isolated_config.get("integration", "random_seed") is None


def test_get_whole_section(isolated_config):
    scoring = isolated_config.get("scoring")
    assert scoring["keyword_weight"] == 0.3
    assert isolated_config.get("missing_section") == {}


def test_set_persists_to_json(tmp_path, isolated_config):
    assert isolated_config.set("scoring", "engine_weight", 0.5)

    saved = json.loads((tmp_path / "resumeforge.config.json").read_text())
    assert saved["scoring"]["engine_weight"] == 0.5

    reloaded = reload_config(str(tmp_path))
    assert reloaded.get("scoring", "engine_weight") == 0.5
    assert get_config_manager() is reloaded


def test_env_var_overrides_json_file(tmp_path, monkeypatch, isolated_config):
    isolated_config.set("ollama", "port", 1234)
    monkeypatch.setenv("RESUMEFORGE_OLLAMA_PORT", "9999")

    config = reload_config(str(tmp_path))
    assert config.get("ollama", "port") == 9999


def test_invalid_env_value_keeps_default(tmp_path, monkeypatch):
    monkeypatch.setenv("RESUMEFORGE_OLLAMA_TIMEOUT", "soon")
    config = reload_config(str(tmp_path))
    assert config.get("ollama", "timeout") == 30


def test_boolean_and_optional_env_values(tmp_path, monkeypatch):
    monkeypatch.setenv("RESUMEFORGE_SEMANTIC_ENABLED", "off")
    monkeypatch.setenv("RESUMEFORGE_RANDOM_SEED", "42")
    config = reload_config(str(tmp_path))
    assert config.get("semantic", "enabled") is False
    assert config.get("integration", "random_seed") == 42


def test_convert_value():
    assert ConfigManager._convert_value("yes", True) is True
    assert ConfigManager._convert_value("0", True) is False
    assert ConfigManager._convert_value("7", 3) == 7
    assert ConfigManager._convert_value("0.25", 0.5) == 0.25
    assert ConfigManager._convert_value("none", None) is None
    assert ConfigManager._convert_value("html", "json") == "html"


def test_set_env_var_writes_dotenv(tmp_path, isolated_config):
    assert isolated_config.set_env_var("RESUMEFORGE_OLLAMA_MODEL", "mxbai-embed-large")

    assert "RESUMEFORGE_OLLAMA_MODEL" in (tmp_path / ".env").read_text()
    assert isolated_config.get("ollama", "model") == "mxbai-embed-large"

    assert isolated_config.unset_env_var("RESUMEFORGE_OLLAMA_MODEL")
    assert "RESUMEFORGE_OLLAMA_MODEL" not in (tmp_path / ".env").read_text()
    assert isolated_config.get("ollama", "model") == "nomic-embed-text"


def test_validate_default_config(isolated_config):
    assert isolated_config.validate_config() == []


def test_validate_reports_bad_values(isolated_config):
    isolated_config.set("ollama", "port", 70000)
    isolated_config.set("semantic", "match_threshold", 1.5)
    isolated_config.set("scoring", "semantic_weight", 0.9)
    isolated_config.set("export", "default_format", "xml")

    issues = isolated_config.validate_config()

    assert any("Ollama port" in issue for issue in issues)
    assert any("match threshold" in issue for issue in issues)
    assert any("sum to 1.0" in issue for issue in issues)
    assert any("export format" in issue for issue in issues)


def test_reset_to_defaults(isolated_config):
    isolated_config.set("cli", "default_table_limit", 5)
    assert isolated_config.reset_to_defaults()
    assert isolated_config.get("cli", "default_table_limit") == 20


def test_env_template_lists_settings(tmp_path, isolated_config):
    template = isolated_config.get_env_template()
    assert "RESUMEFORGE_OLLAMA_HOST" in template
    assert "RESUMEFORGE_SEMANTIC_WEIGHT" in template

    output = tmp_path / "template.env"
    assert isolated_config.export_env_template(str(output))
    assert output.read_text().startswith("# ResumeForge Configuration")


def test_connection_info(isolated_config):
    info = isolated_config.get_connection_info()
    assert info["ollama"]["url"] == "http://localhost:11434"
    assert info["semantic"] == {"enabled": True, "cache": True}
    assert "database" not in info
