"""Performance benchmarks for shortpath.

This package contains timing scripts for the search hot paths on random
graphs.
"""
