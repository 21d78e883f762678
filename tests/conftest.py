from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path

import pytest

from brighttask import runner
from brighttask.runner import load_recipes

REPO_ROOT = Path(__file__).resolve().parents[1]
TRAYBRIGHT_FILE = REPO_ROOT / "brighttask_recipes.py"


def py(code: str) -> str:
    """Shell command running a python snippet with the current interpreter."""
    return f'{shlex.quote(sys.executable)} -c "{code}"'


class FakeShell:
    """
    Stands in for subprocess.run inside the runner.

    Records every command; `codes` maps a command to its exit status (default 0).
    Commands listed in `passthrough_prefixes` are really executed.
    """

    def __init__(self, real_run, codes=None, passthrough_prefixes=()):
        self.real_run = real_run
        self.codes = dict(codes or {})
        self.passthrough_prefixes = tuple(passthrough_prefixes)
        self.calls: list[tuple[str, str]] = []

    def __call__(self, cmd, shell=False, cwd=None, **kwargs):
        self.calls.append((cmd, cwd))
        if cmd.startswith(self.passthrough_prefixes):
            return self.real_run(cmd, shell=shell, cwd=cwd, **kwargs)
        return subprocess.CompletedProcess(cmd, self.codes.get(cmd, 0))

    @property
    def commands(self) -> list[str]:
        return [c for c, _ in self.calls]


@pytest.fixture
def fake_shell(monkeypatch):
    def install(codes=None, passthrough_prefixes=()):
        fake = FakeShell(subprocess.run, codes, passthrough_prefixes)
        monkeypatch.setattr(runner.subprocess, "run", fake)
        return fake

    return install


@pytest.fixture
def traybright():
    return load_recipes(TRAYBRIGHT_FILE)
