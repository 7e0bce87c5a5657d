"""Matching adapters - Implementations of LocationMatcherPort.

Available implementations:
- SubstringLocationMatcher: Case-insensitive substring rules
"""

from .substring_matcher import SubstringLocationMatcher

__all__ = ["SubstringLocationMatcher"]
