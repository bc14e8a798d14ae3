"""Pure analysis package for goldenRaspberry.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not import Django or perform any
database I/O.
"""

from .engine import analyze_award_intervals

__all__ = ["analyze_award_intervals"]
