"""Pytest configuration and shared fixtures for shortpath tests.

This module provides:
- A deterministic numpy RNG fixture
- A random graph factory built on that RNG
- The small weighted graphs several test modules share
"""

import os
from typing import Callable, List

import numpy as np
import pytest

from shortpath import Arc, LabeledGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set the numpy global seed for reproducibility."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., List[List[Arc]]]:
    """Factory for random directed graphs with integer arc labels.

    Integer weights keep distance comparisons exact.
    """

    def make(n: int, m: int, low: int = 0, high: int = 10) -> List[List[Arc]]:
        g: List[List[Arc]] = [[] for _ in range(n)]
        for _ in range(m):
            fr = int(rng.integers(n))
            to = int(rng.integers(n))
            g[fr].append(Arc(to, int(rng.integers(low, high + 1))))
        return g

    return make


@pytest.fixture
def wiki_graph() -> LabeledGraph:
    """The six node directed graph of the classic Dijkstra walkthrough."""
    g = LabeledGraph(directed=True)
    for u, v, w in [
        ("a", "b", 7), ("a", "c", 9), ("a", "f", 14),
        ("b", "c", 10), ("b", "d", 15),
        ("c", "d", 11), ("c", "f", 2),
        ("d", "e", 6),
        ("e", "f", 9),
    ]:
        g.add_arc(u, v, w)
    return g


@pytest.fixture
def h_graph() -> List[List[Arc]]:
    """Graph used with the heuristic estimates toward node 4."""
    return [
        [Arc(1, 0.7), Arc(2, 0.9), Arc(5, 1.4)],
        [Arc(2, 1.0), Arc(3, 1.5)],
        [Arc(3, 1.1), Arc(5, 0.2)],
        [Arc(4, 0.6)],
        [Arc(5, 0.9)],
        [],
    ]


@pytest.fixture
def h4() -> List[float]:
    """Admissible and monotonic estimates of distance to node 4 of h_graph."""
    return [1.9, 2.0, 1.0, 0.6, 0.0, 0.9]
