"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from resumeforge.cli import main
from resumeforge.config import get_config_manager


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_analyze_prints_score(runner, resume_file, job_file):
    result = runner.invoke(main, ["analyze", str(resume_file), "--job", str(job_file), "--no-semantic"])

    assert result.exit_code == 0, result.output
    assert "ATS Score" in result.output
    assert "Missing keywords" in result.output


def test_analyze_exports_report(runner, tmp_path, resume_file, job_file):
    output = tmp_path / "report.json"
    result = runner.invoke(main, ["analyze", str(resume_file), "-j", str(job_file), "--no-semantic",
                                  "-o", str(output), "-f", "json"])

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["resume"] == "resume.txt"
    assert data["analysis"]["semantic_method"] == "tfidf"


def test_analyze_rejects_unsupported_file(runner, tmp_path):
    bad = tmp_path / "resume.rtf"
    bad.write_text("text")

    result = runner.invoke(main, ["analyze", str(bad), "--no-semantic"])
    assert result.exit_code != 0
    assert "Unsupported" in result.output


def test_detect(runner, tmp_path, resume_file):
    output = tmp_path / "industries.csv"
    result = runner.invoke(main, ["detect", str(resume_file), "-o", str(output), "-f", "csv"])

    assert result.exit_code == 0, result.output
    assert "Industry Detection" in result.output
    assert output.read_text(encoding="utf-8").startswith("rank,industry,name,confidence,reasons")


def test_integrate_writes_markdown(runner, tmp_path, resume_file):
    output = tmp_path / "updated.md"
    result = runner.invoke(main, ["integrate", str(resume_file), "Terraform", "Jenkins", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Added 2 keywords" in result.output
    content = output.read_text(encoding="utf-8")
    assert "Terraform" in content
    assert "## Skills" in content


def test_integrate_simple_prints_resume(runner, resume_file):
    result = runner.invoke(main, ["integrate", str(resume_file), "Terraform", "--simple"])

    assert result.exit_code == 0, result.output
    assert "(simple)" in result.output
    assert "• Terraform" in result.output


def test_integrate_requires_keywords(runner, resume_file):
    result = runner.invoke(main, ["integrate", str(resume_file)])
    assert result.exit_code == 2


def test_optimize(runner, tmp_path, resume_file, job_file):
    output = tmp_path / "optimized.txt"
    result = runner.invoke(main, ["optimize", str(resume_file), "-j", str(job_file), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Score before optimization" in result.output
    assert output.read_text(encoding="utf-8").startswith("Jane Citizen")


def test_parse_text_and_info(runner, resume_file):
    result = runner.invoke(main, ["parse", str(resume_file)])
    assert result.exit_code == 0
    assert "PROFESSIONAL SUMMARY" in result.output

    result = runner.invoke(main, ["parse", str(resume_file), "--info"])
    assert result.exit_code == 0
    assert "Jane Citizen" in result.output
    assert "jane.citizen@example.com" in result.output


def test_parse_preview(runner, resume_file):
    result = runner.invoke(main, ["parse", str(resume_file), "--preview", "40"])
    assert result.exit_code == 0
    assert "EDUCATION" not in result.output


def test_industries(runner):
    result = runner.invoke(main, ["industries"])
    assert result.exit_code == 0
    assert "Industry Keyword Database" in result.output

    result = runner.invoke(main, ["industries", "banking"])
    assert result.exit_code == 0
    assert "Finance & Banking" in result.output

    result = runner.invoke(main, ["industries", "underwater"])
    assert result.exit_code != 0
    assert "not found" in result.output


def test_config_set_converts_types(runner):
    result = runner.invoke(main, ["config", "set", "scoring", "engine_weight", "0.5"])
    assert result.exit_code == 0
    assert get_config_manager().get("scoring", "engine_weight") == 0.5

    runner.invoke(main, ["config", "set", "integration", "random_seed", "42"])
    assert get_config_manager().get("integration", "random_seed") == 42

    result = runner.invoke(main, ["config", "set", "ollama", "port", "abc"])
    assert "Invalid value" in result.output
    assert get_config_manager().get("ollama", "port") == 11434


def test_config_show_validate_info(runner):
    result = runner.invoke(main, ["config", "show", "--section", "ollama"])
    assert "nomic-embed-text" in result.output

    result = runner.invoke(main, ["config", "validate"])
    assert "validation passed" in result.output

    result = runner.invoke(main, ["config", "info"])
    assert "http://localhost:11434" in result.output
    assert "Semantic matching" in result.output


def test_config_env_and_unset(runner, tmp_path):
    result = runner.invoke(main, ["config", "env", "RESUMEFORGE_OLLAMA_MODEL", "all-minilm"])
    assert result.exit_code == 0
    assert get_config_manager().get("ollama", "model") == "all-minilm"

    result = runner.invoke(main, ["config", "unset", "RESUMEFORGE_OLLAMA_MODEL"])
    assert result.exit_code == 0
    assert get_config_manager().get("ollama", "model") == "nomic-embed-text"


def test_config_reset_and_template(runner, tmp_path):
    runner.invoke(main, ["config", "set", "cli", "default_table_limit", "5"])

    result = runner.invoke(main, ["config", "reset"], input="n\n")
    assert "Reset cancelled" in result.output
    assert get_config_manager().get("cli", "default_table_limit") == 5

    result = runner.invoke(main, ["config", "reset", "--confirm"])
    assert "reset to defaults" in result.output
    assert get_config_manager().get("cli", "default_table_limit") == 20

    template = tmp_path / "resumeforge.env"
    runner.invoke(main, ["config", "template", "-o", str(template)])
    assert "RESUMEFORGE_OLLAMA_HOST" in template.read_text()


def test_status_with_semantic_disabled(runner, isolated_config):
    isolated_config.set("semantic", "enabled", False)
    result = runner.invoke(main, ["status"])

    assert result.exit_code == 0
    assert "System Overview" in result.output
    assert "Disabled" in result.output


def test_industries_template(runner, tmp_path):
    result = runner.invoke(main, ["industries", "--template"])
    assert result.exit_code == 0, result.output
    assert "Australian Resume Templates" in result.output

    result = runner.invoke(main, ["industries", "healthcare", "--template", "--name", "Jane Citizen"])
    assert result.exit_code == 0, result.output
    assert "Jane Citizen\n\nPROFESSIONAL SUMMARY" in result.output
    assert "AHPRA" in result.output

    result = runner.invoke(main, ["industries", "data_science", "--template"])
    assert result.exit_code != 0
    assert "No resume template" in result.output

    output = tmp_path / "finance.json"
    result = runner.invoke(main, ["industries", "finance", "--template", "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text(encoding="utf-8"))["id"] == "finance-accounting"
