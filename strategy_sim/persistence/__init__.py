"""
Result persistence module.

Writes simulation bundles to disk and reads their price series back for
offline replays.
"""
from .results_store import ResultsStore

__all__ = ["ResultsStore"]
