"""
Application common module.

- Result: Success/Failure type for use case outcomes
"""

from .result import Failure, Result, Success

__all__ = ["Failure", "Result", "Success"]
