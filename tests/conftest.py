"""Shared fixtures for gitmsglint tests."""
from __future__ import annotations

import subprocess

import pytest


@pytest.fixture
def git_repo(tmp_path):
    """A freshly initialised git repository with a hooks directory."""
    subprocess.run(["git", "init"], cwd=str(tmp_path), capture_output=True, check=True)
    (tmp_path / ".git" / "hooks").mkdir(exist_ok=True)
    return tmp_path
