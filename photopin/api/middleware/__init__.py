"""
API Middleware

Usage:
======
    from photopin.api.middleware import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from photopin.api.middleware.error_handler import setup_exception_handlers

__all__ = [
    "setup_exception_handlers",
]
