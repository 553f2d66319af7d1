"""
Utility functions and helpers.

This package contains validation of domain names and IP addresses.
"""

from .validators import classify_address, classify_expected, parse_domain

__all__ = ["classify_address", "classify_expected", "parse_domain"]
