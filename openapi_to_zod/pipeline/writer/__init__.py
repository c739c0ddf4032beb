"""
Output writing for generated code.
"""

from .atomic_writer import AtomicWriter

__all__ = ["AtomicWriter"]
