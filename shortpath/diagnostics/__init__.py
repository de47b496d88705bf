"""Diagnostics: debug mode and structural checks for shortpath."""

from .core import (
    assert_non_negative,
    assert_valid_graph,
    assert_valid_tree,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_valid_graph",
    "assert_non_negative",
    "assert_valid_tree",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
