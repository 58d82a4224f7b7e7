from __future__ import annotations

import asyncio
import shutil
import subprocess

import pytest

from schemaform.core.form import GitIdentityProbe, Identity, StaticIdentityProbe
from schemaform.core.form import identity as identity_module


def _completed(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["git"], returncode, stdout=stdout, stderr="")


def test_reads_and_trims_git_identity(monkeypatch):
    outputs = {"user.name": "Jane Doe\n", "user.email": " jane@example.com \n"}
    monkeypatch.setattr(identity_module.shutil, "which", lambda cmd: "/usr/bin/git")
    monkeypatch.setattr(
        identity_module,
        "run_with_timeout",
        lambda argv, **kwargs: _completed(outputs[argv[-1]]),
    )
    identity = asyncio.run(GitIdentityProbe().lookup_identity())
    assert identity == Identity(author="Jane Doe", email="jane@example.com")


def test_unconfigured_identity_is_absent(monkeypatch):
    monkeypatch.setattr(identity_module.shutil, "which", lambda cmd: "/usr/bin/git")
    monkeypatch.setattr(identity_module, "run_with_timeout", lambda argv, **kwargs: _completed("", 1))
    assert asyncio.run(GitIdentityProbe().lookup_identity()) == Identity()


def test_probe_failures_never_raise(monkeypatch):
    def _boom(argv, **kwargs):
        raise subprocess.TimeoutExpired(argv, 1)

    monkeypatch.setattr(identity_module.shutil, "which", lambda cmd: "/usr/bin/git")
    monkeypatch.setattr(identity_module, "run_with_timeout", _boom)
    assert asyncio.run(GitIdentityProbe().lookup_identity()) == Identity()


def test_missing_git_binary_is_absent():
    probe = GitIdentityProbe(command="definitely-not-a-real-git-binary")
    assert asyncio.run(probe.lookup_identity()) == Identity()


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
def test_reads_repository_identity_from_real_git(tmp_path):
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    subprocess.run(["git", "config", "user.name", "Test User"], cwd=tmp_path, check=True)
    subprocess.run(["git", "config", "user.email", "test@example.com"], cwd=tmp_path, check=True)
    identity = asyncio.run(GitIdentityProbe(cwd=tmp_path).lookup_identity())
    assert identity == Identity(author="Test User", email="test@example.com")


def test_static_probe():
    probe = StaticIdentityProbe(Identity(author="a"))
    assert asyncio.run(probe.lookup_identity()).get("author") == "a"
    assert asyncio.run(probe.lookup_identity()).get("email") is None
