"""
Enums used across the application.
"""

from enum import Enum


class Language(str, Enum):
    """Interface language a user can choose; the client ships tables for these."""

    EN = "en"
    ES = "es"
