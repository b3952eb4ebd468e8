"""
Models package for Hashculate.

This package contains the Pydantic-based digest result model and the algorithm enum.
"""

from .hash_result import AlgorithmKind, HashResult

__all__ = ["AlgorithmKind", "HashResult"]
