"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from photopin.shared.core.logging import logger, get_logger
    from photopin.shared.core.exceptions import LogicError, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from photopin.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from photopin.shared.core.exceptions import (
    PhotopinException,
    AuthenticationError,
    ValidationError,
    ArgumentTypeError,
    RequirementError,
    ArgumentValueError,
    FormatError,
    LogicError,
    NotFoundError,
    OwnershipError,
    DuplicateResourceError,
    CredentialsError,
    StorageError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "PhotopinException",
    "AuthenticationError",
    "ValidationError",
    "ArgumentTypeError",
    "RequirementError",
    "ArgumentValueError",
    "FormatError",
    "LogicError",
    "NotFoundError",
    "OwnershipError",
    "DuplicateResourceError",
    "CredentialsError",
    "StorageError",
]
