"""
Analyzer - dependency analysis and declaration ordering.
"""

from .dependency_analyzer import DependencyMap, dependencies_of
from .sequencer import sequence

__all__ = [
    "DependencyMap",
    "dependencies_of",
    "sequence",
]
