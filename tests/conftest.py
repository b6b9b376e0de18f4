"""Shared pytest setup for the enumerator suite.

Puts the project root on sys.path so ``import combinatorics`` resolves from a
plain checkout, and prints a one-line outcome tally after the run.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Report enumerator suite outcomes and list any failing node ids."""
    stats = terminalreporter.stats
    counts = {key: len(stats.get(key, [])) for key in ("passed", "failed", "error", "skipped")}

    terminalreporter.section("combinatorics tests", sep="=")
    terminalreporter.write_line(" | ".join(f"{key}={value}" for key, value in counts.items()))
    for rep in stats.get("failed", []):
        terminalreporter.write_line(f"  FAILED {rep.nodeid}")
