"""
Code generation backends.
"""

from .base import CodeBackend
from .zod_backend import GenerationState, ZodBackend

__all__ = ["CodeBackend", "GenerationState", "ZodBackend"]
