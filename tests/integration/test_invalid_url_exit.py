"""
Out-of-process test for the fatal URL check.

A URL that does not start with http:// must terminate the whole process, so
the check runs in a child interpreter and its exit status is asserted.

System role: Verification of fatal configuration handling
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]

CHILD = """
from ycsb_ravendb.application.adapters import DocumentStoreAdapter
DocumentStoreAdapter({{"ravendb.url": {url!r}}}).initialize()
print("still running")
"""


def run_child(url: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    env.pop("RAVENDB_URL", None)
    return subprocess.run(
        [sys.executable, "-c", CHILD.format(url=url)],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
        env=env,
        timeout=60,
    )


class TestInvalidUrlExit:
    """Test suite for process termination on malformed URLs."""

    @pytest.mark.parametrize("url", ["https://localhost:10301", "localhost:10301", "tcp://raven:10301"])
    def test_initialize_should_terminate_process(self, url: str) -> None:
        """Test the child exits with status 1 and prints the diagnostic."""
        # Act
        completed = run_child(url)

        # Assert
        assert completed.returncode == 1
        assert f"ERROR: Invalid URL: '{url}'" in completed.stderr
        assert "still running" not in completed.stdout
