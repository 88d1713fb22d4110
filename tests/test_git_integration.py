"""End-to-end checks against a real git binary and local repositories."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from template_starter.config import StarterSettings
from template_starter.errors import ExternalToolError
from template_starter.git import discover_branches
from template_starter.templates import TemplateSelection, import_template

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def commit_file(repo: Path, name: str, content: str, message: str) -> None:
    (repo / name).write_text(content)
    git(repo, "add", name)
    git(repo, "commit", "-m", message)


@pytest.fixture(autouse=True)
def isolated_git(monkeypatch, tmp_path: Path) -> None:
    global_config = tmp_path / "gitconfig"
    global_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Template Tester")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "tester@example.com")


@pytest.fixture
def template_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "template"
    repo.mkdir()
    git(repo, "init")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    commit_file(repo, "cli.txt", "starter code\n", "starter")
    git(repo, "checkout", "-b", "feature")
    commit_file(repo, "template.txt", "feature template\n", "feature template")
    git(repo, "checkout", "main")
    git(repo, "branch", "dev")
    return repo


@pytest.fixture
def workdir(monkeypatch, tmp_path: Path) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


def test_discovery_hides_main_only_for_default(template_repo: Path, workdir: Path) -> None:
    repo = str(template_repo)

    as_default = discover_branches(repo, StarterSettings(default_repository=repo))
    as_other = discover_branches(repo, StarterSettings(default_repository="elsewhere"))

    assert sorted(as_default) == ["dev", "feature"]
    assert sorted(as_other) == ["dev", "feature", "main"]
    assert not (workdir / ".template-starter-temp").exists()


def test_discovery_cleans_up_after_clone_failure(tmp_path: Path, workdir: Path) -> None:
    with pytest.raises(ExternalToolError) as excinfo:
        discover_branches(str(tmp_path / "missing"), StarterSettings())

    assert excinfo.value.stderr
    assert not (workdir / ".template-starter-temp").exists()


def test_import_into_empty_history(template_repo: Path, workdir: Path) -> None:
    selection = TemplateSelection(repo=str(template_repo), branch="feature")

    import_template(selection, StarterSettings())

    assert git(workdir, "rev-parse", "HEAD^{tree}") == git(
        template_repo, "rev-parse", "feature^{tree}"
    )
    assert (workdir / "template.txt").read_text() == "feature template\n"
    assert git(workdir, "log", "--merges", "--oneline") == ""
    assert git(workdir, "remote") == ""


def test_import_into_existing_history(template_repo: Path, workdir: Path) -> None:
    git(workdir, "init")
    commit_file(workdir, "README.md", "my project\n", "initial")
    before = git(workdir, "rev-parse", "HEAD")
    selection = TemplateSelection(repo=str(template_repo), branch="feature")

    import_template(selection, StarterSettings())

    merges = git(workdir, "rev-list", "--merges", f"{before}..HEAD").splitlines()
    assert merges == [git(workdir, "rev-parse", "HEAD")]
    message = git(workdir, "log", "-1", "--format=%B")
    assert str(template_repo) in message
    assert "feature" in message
    subprocess.run(
        ["git", "merge-base", "--is-ancestor", before, "HEAD"], cwd=workdir, check=True
    )
    assert (workdir / "README.md").exists()
    assert (workdir / "template.txt").exists()
    assert git(workdir, "remote") == ""


def test_failed_import_leaves_no_remote(tmp_path: Path, workdir: Path) -> None:
    git(workdir, "init")
    commit_file(workdir, "README.md", "my project\n", "initial")
    selection = TemplateSelection(repo=str(tmp_path / "missing"), branch="feature")

    with pytest.raises(ExternalToolError):
        import_template(selection, StarterSettings())

    assert git(workdir, "remote") == ""
