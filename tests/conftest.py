"""
Shared test fixtures and utilities for the tagrun test suite.
"""

import subprocess

import pytest

from tagrun.parsing.combinators import Failure, Parser


@pytest.fixture
def always_fails():
    """Parser that rejects every input without consuming anything."""
    return Parser(lambda text: Failure(text))


@pytest.fixture
def recorded_runs(monkeypatch):
    """Replace subprocess.run in the dispatcher and record every call.

    The fake process exits with the status stored in `recorded_runs.returncode`
    (0 by default).

    Usage:
        def test_something(recorded_runs):
            recorded_runs.returncode = 3
            run_cli_command(["ls"])
            assert recorded_runs.calls[0][0] == ["ls"]
    """

    class Recorder:
        def __init__(self):
            self.calls = []
            self.returncode = 0

        def __call__(self, args, **kwargs):
            self.calls.append((args, kwargs))
            return subprocess.CompletedProcess(args, self.returncode)

    recorder = Recorder()
    monkeypatch.setattr("tagrun.execution.dispatch.subprocess.run", recorder)
    return recorder
