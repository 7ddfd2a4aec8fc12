"""
Pytest configuration for graph search tests.

The ``lib`` fixture exposes the package directly; the ``cli`` fixture drives
the same functions through the JSON command wrapper in a subprocess.
"""
import json
import os
import subprocess
import sys

import pytest

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PY_DIR = os.path.join(BASE_DIR, "py")


class CLIBridge:
    """Call ``python -m graphsearch.cli`` with JSON arguments on stdin."""

    def run(self, cmd, payload, *options):
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (PY_DIR, env.get("PYTHONPATH")) if p
        )
        return subprocess.run(
            [sys.executable, "-m", "graphsearch.cli"] + ([cmd] if cmd else []) + list(options),
            cwd=BASE_DIR,
            input=payload,
            capture_output=True,
            text=True,
            env=env,
        )

    def _call(self, cmd, *args):
        result = self.run(cmd, json.dumps(list(args)))
        if result.returncode != 0:
            raise RuntimeError(result.stdout + result.stderr)
        return json.loads(result.stdout)

    def bfs(self, start, adjacency, goal):
        return self._call("bfs", start, adjacency, goal)

    def dfs(self, start, adjacency, goal):
        return self._call("dfs", start, adjacency, goal)

    def shortest_distance(self, start, adjacency, goal):
        return self._call("shortest_distance", start, adjacency, goal)


@pytest.fixture
def lib():
    """The graphsearch package."""
    import graphsearch
    return graphsearch


@pytest.fixture
def cli():
    """Subprocess bridge to the command line wrapper."""
    return CLIBridge()


@pytest.fixture
def diamond():
    """A -> B -> D and A -> C -> D."""
    return {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}


@pytest.fixture
def weighted_diamond():
    """Weighted diamond whose cheapest route is A -> B -> D (cost 3)."""
    return {
        "A": [("B", 1), ("C", 4)],
        "B": [("D", 2)],
        "C": [("D", 1)],
        "D": [],
    }


@pytest.fixture
def disconnected():
    """C has no incoming edges."""
    return {"A": ["B"], "B": [], "C": []}
