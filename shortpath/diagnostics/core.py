"""Debug mode and structural checks for graphs, weights and path trees.

Checks in this module are always callable. Searches run them only while
debug mode is on, which is read once from ``SHORTPATH_DEBUG`` at import and
can be changed at runtime.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Sequence, Tuple

from ..fromlist import FromList
from ..graph import WeightFunction

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES


_state: Dict[str, bool] = {"debug": _env_flag("SHORTPATH_DEBUG")}


def is_debug_enabled() -> bool:
    """Return True while searches validate their input before running."""
    return _state["debug"]


def set_debug_enabled(enabled: bool) -> None:
    _state["debug"] = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch debug mode for the duration of a with block.

    The previous setting is restored on exit, including exit by exception.

    Example
    -------
    >>> with debug_context(True):
    ...     Dijkstra(graph, identity_weight).all_paths(0)
    """
    prev = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(prev)


def assert_valid_graph(graph: Sequence[Sequence[Tuple[int, Any]]]) -> None:
    """
    Assert that every arc of graph leads to a node of graph.

    Parameters
    ----------
    graph:
        Labeled adjacency list.

    Raises
    ------
    ValueError
        If an arc leads outside ``0..len(graph)-1``.
    """
    n = len(graph)
    for fr, arcs in enumerate(graph):
        for to, _ in arcs:
            if to < 0 or to >= n:
                raise ValueError(
                    f"Arc ({fr}, {to}) leads outside the graph of order {n}."
                )


def assert_non_negative(
    graph: Sequence[Sequence[Tuple[int, Any]]],
    weight: WeightFunction,
) -> None:
    """
    Assert that no arc of graph has a negative weight.

    Parameters
    ----------
    graph:
        Labeled adjacency list.
    weight:
        Weight function applied to arc labels.

    Raises
    ------
    ValueError
        If an arc has negative weight.
    """
    for fr, arcs in enumerate(graph):
        for to, label in arcs:
            w = weight(label)
            if w < 0:
                raise ValueError(
                    f"Search requires non-negative weights. "
                    f"Found negative weight {w} on arc ({fr}, {to})"
                )


def assert_valid_tree(tree: FromList) -> None:
    """
    Assert that a path tree has in-range from values and no cycles.

    Each reached node must reach a root by following from pointers in
    fewer steps than its recorded length.

    Raises
    ------
    ValueError
        If a from value is out of range or a from chain does not end at a
        root within the recorded length.
    """
    ok, n = tree.bounds_ok()
    if not ok:
        raise ValueError(f"Node {n} has from value {tree[n].from_} out of range.")

    for node in range(len(tree)):
        steps = tree[node].length - 1
        cur = node
        while steps > 0 and tree[cur].from_ >= 0:
            cur = tree[cur].from_
            steps -= 1
        if tree[node].length > 0 and tree[cur].from_ >= 0:
            raise ValueError(
                f"Path from node {node} does not reach a root within "
                f"{tree[node].length} nodes."
            )
