"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing (CredentialService) and JWT management
- validation: Argument checks run before any domain logic

Usage:
======
    from photopin.shared.utils.security import CredentialService, SecurityUtils
    from photopin.shared.utils.validation import Validator
"""

from photopin.shared.utils.security import CredentialService, SecurityUtils
from photopin.shared.utils.validation import Validator

__all__ = [
    "CredentialService",
    "SecurityUtils",
    "Validator",
]
