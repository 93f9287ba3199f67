"""Utility modules for the projecthub core package.

This package contains shared utility functions used across the codebase.
"""

from .timing import log_execution_time

__all__ = ["log_execution_time"]
