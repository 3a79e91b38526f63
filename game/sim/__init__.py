"""
Determinism-friendly simulation helpers.

This package intentionally contains *small* primitives (seed threading + debug output)
so gameplay code never reaches for the global `random` module or wall-clock time.
"""
