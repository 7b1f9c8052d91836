"""Tests for git status probing."""

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from codeman.utils.git_ops import GitProbe, GitStatus, get_git_status

needs_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


class FakeProbe:
    """Stands in for GitProbe without spawning git."""

    def __init__(self, branch=None, uncommitted=None):
        self.branch = branch
        self.uncommitted = uncommitted
        self.calls: list[str] = []

    def current_branch(self, directory: Path):
        self.calls.append("branch")
        return self.branch

    def uncommitted_changes(self, directory: Path):
        self.calls.append("status")
        return self.uncommitted


def _init_repo(path: Path):
    from git import Repo

    repo = Repo.init(path)
    with repo.config_writer() as cw:
        cw.set_value("user", "name", "Test")
        cw.set_value("user", "email", "test@example.com")
    (path / "main.py").write_text("print('hi')\n")
    repo.index.add(["main.py"])
    repo.index.commit("initial")
    return repo


# --- Rendering ---


def test_render_dirty():
    assert GitStatus(branch="main", uncommitted=True).render() == "main *"


def test_render_clean_keeps_trailing_space():
    assert str(GitStatus(branch="main", uncommitted=False)) == "main "


# --- Combined status with a fake probe ---


def test_combined_status():
    probe = FakeProbe(branch="dev", uncommitted=True)
    assert get_git_status(Path("."), probe=probe) == GitStatus(branch="dev", uncommitted=True)


def test_combined_status_skips_status_when_branch_fails():
    probe = FakeProbe(branch=None, uncommitted=False)
    assert get_git_status(Path("."), probe=probe) is None
    assert probe.calls == ["branch"]


def test_combined_status_absent_when_status_fails():
    probe = FakeProbe(branch="main", uncommitted=None)
    assert get_git_status(Path("."), probe=probe) is None
    assert probe.calls == ["branch", "status"]


# --- Real git ---


@needs_git
def test_probe_outside_repo(tmp_path):
    probe = GitProbe()
    assert probe.current_branch(tmp_path) is None
    assert probe.uncommitted_changes(tmp_path) is None
    assert get_git_status(tmp_path) is None


@needs_git
def test_probe_clean_repo(tmp_path):
    repo = _init_repo(tmp_path)
    status = get_git_status(tmp_path)
    assert status == GitStatus(branch=repo.active_branch.name, uncommitted=False)


@needs_git
def test_probe_dirty_repo(tmp_path):
    repo = _init_repo(tmp_path)
    (tmp_path / "new.py").write_text("")
    status = get_git_status(tmp_path)
    assert status.branch == repo.active_branch.name
    assert status.uncommitted is True


@needs_git
def test_git_not_startable_is_fatal(tmp_path):
    from git import Git
    from git.exc import GitCommandNotFound

    error = GitCommandNotFound("git", "No such file or directory")
    with patch.object(Git, "execute", side_effect=error):
        with pytest.raises(GitCommandNotFound):
            GitProbe().current_branch(tmp_path)
        with pytest.raises(GitCommandNotFound):
            GitProbe().uncommitted_changes(tmp_path)
        with pytest.raises(GitCommandNotFound):
            get_git_status(tmp_path)
