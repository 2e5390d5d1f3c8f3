"""Tests for the skillget CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from skillget.cli import app
from skillget.cli._errors import EXIT_FAILURE, EXIT_UNSAFE_PATH
from skillget.core import installer, paths

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setattr(paths, "SKILLGET_HOME", tmp_path / ".skillget")


def _make_skill(directory: Path, description: str = "Test skill") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "SKILL.md").write_text(f"---\ndescription: {description}\n---\n")
    return directory


def test_resolve_shorthand():
    result = runner.invoke(app, ["resolve", "anthropics/skills/document-skills/pdf"])
    assert result.exit_code == 0
    assert "github_shorthand" in result.output
    assert "https://github.com/anthropics/skills" in result.output
    assert "document-skills/pdf" in result.output


def test_resolve_git_url():
    result = runner.invoke(app, ["resolve", "git@github.com:owner/repo.git"])
    assert result.exit_code == 0
    assert "git_url" in result.output
    assert "repository root" in result.output


def test_resolve_invalid_source():
    result = runner.invoke(app, ["resolve", "single"])
    assert result.exit_code == EXIT_FAILURE
    assert "not a valid source" in result.output


def test_verbose_flag():
    result = runner.invoke(app, ["--verbose", "resolve", "owner/repo"])
    assert result.exit_code == 0


def test_install_local(tmp_path):
    src = _make_skill(tmp_path / "alpha")
    skills_dir = tmp_path / "skills"

    result = runner.invoke(app, ["install", str(src), "--dir", str(skills_dir)])

    assert result.exit_code == 0, result.output
    assert "Installed alpha" in result.output
    assert (skills_dir / "alpha" / "SKILL.md").exists()


def test_install_resolves_source_once(tmp_path, monkeypatch):
    def no_second_resolve(*args, **kwargs):
        raise AssertionError("source was already resolved by the command")

    monkeypatch.setattr(installer, "resolve_source", no_second_resolve)
    src = _make_skill(tmp_path / "alpha")
    skills_dir = tmp_path / "skills"

    result = runner.invoke(app, ["install", str(src), "--dir", str(skills_dir)])

    assert result.exit_code == 0, result.output
    assert (skills_dir / "alpha" / "SKILL.md").exists()


def test_install_existing_fails_without_force(tmp_path):
    src = _make_skill(tmp_path / "alpha")
    skills_dir = tmp_path / "skills"
    _make_skill(skills_dir / "alpha")

    result = runner.invoke(app, ["install", str(src), "--dir", str(skills_dir)])
    assert result.exit_code == EXIT_FAILURE

    result = runner.invoke(app, ["install", str(src), "--dir", str(skills_dir), "--force"])
    assert result.exit_code == 0


def test_install_traversal_is_a_security_failure(tmp_path, monkeypatch):
    def fake_clone(repo_url, dest, *, timeout, depth):
        dest.mkdir(parents=True)
        return dest

    monkeypatch.setattr(installer, "clone_repository", fake_clone)
    skills_dir = tmp_path / "skills"

    result = runner.invoke(app, ["install", "owner/repo/../../etc", "--dir", str(skills_dir)])

    assert result.exit_code == EXIT_UNSAFE_PATH
    assert "Security" in result.output
    assert not skills_dir.exists()


def test_install_uses_project_dir(tmp_path, monkeypatch):
    src = _make_skill(tmp_path / "alpha")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["install", str(src), "--project"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / ".claude" / "skills" / "alpha" / "SKILL.md").exists()


def test_list(tmp_path):
    skills_dir = tmp_path / "skills"
    _make_skill(skills_dir / "alpha", "First")
    _make_skill(skills_dir / "beta", "Second")

    result = runner.invoke(app, ["list", "--dir", str(skills_dir)])

    assert result.exit_code == 0
    assert "Skills (2)" in result.output
    assert "alpha" in result.output
    assert "beta" in result.output


def test_list_empty(tmp_path):
    result = runner.invoke(app, ["list", "--dir", str(tmp_path / "none")])
    assert result.exit_code == 0
    assert "No skills installed" in result.output


def test_remove(tmp_path):
    skills_dir = tmp_path / "skills"
    _make_skill(skills_dir / "alpha")

    result = runner.invoke(app, ["remove", "alpha", "--dir", str(skills_dir), "--force"])

    assert result.exit_code == 0
    assert not (skills_dir / "alpha").exists()


def test_remove_aborts_without_confirmation(tmp_path):
    skills_dir = tmp_path / "skills"
    _make_skill(skills_dir / "alpha")

    result = runner.invoke(app, ["remove", "alpha", "--dir", str(skills_dir)], input="n\n")

    assert result.exit_code == 0
    assert "Aborted" in result.output
    assert (skills_dir / "alpha").exists()


def test_remove_traversal(tmp_path):
    skills_dir = tmp_path / "skills"
    skills_dir.mkdir()

    result = runner.invoke(app, ["remove", "..", "--dir", str(skills_dir), "--force"])

    assert result.exit_code == EXIT_UNSAFE_PATH
    assert skills_dir.exists()


def test_config_set_and_get():
    result = runner.invoke(app, ["config", "git.timeout", "300"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["config", "git.timeout"])
    assert result.exit_code == 0
    assert result.output.strip() == "300"


def test_config_show_all():
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "global_dir" in result.output
    assert "timeout: 120" in result.output


def test_config_rejects_unknown_key():
    result = runner.invoke(app, ["config", "nope.key", "1"])
    assert result.exit_code == 1


def test_config_rejects_invalid_value():
    result = runner.invoke(app, ["config", "git.timeout", "soon"])
    assert result.exit_code == 1
