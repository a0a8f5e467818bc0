"""
Top-level package for the Fitness Events API.

All functionality lives in submodules under ``app``; this marker makes
fully qualified imports such as ``fitness_events_api.app.main`` work
from the repository root and from an installed distribution.
"""

__all__ = []
