"""
Longest common subsequence length, three ways.

The package provides:
- Greedy scan, plain recursive and dynamic-programming LCS length variants.
- A closed algorithm enumeration with dispatch and optional timing.
- A command line entry point and a seeded comparison sweep.
"""

__all__ = [
    "algorithms",
    "bench",
    "engine",
    "logger",
    "main",
    "metrics",
    "utils",
]
