"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and verification

Usage:
======
    from moviejournal.shared.utils.security import SecurityUtils
"""

from moviejournal.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
