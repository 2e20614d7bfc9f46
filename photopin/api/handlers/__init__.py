"""
API Handlers

One router per resource:

- health_handler: /health, /ready, /live
- auth_handler: /auth
- user_handler: /users
- map_handler: /maps and their collections
- pin_handler: pins inside collections and /pins
"""

from photopin.api.handlers import (
    auth_handler,
    health_handler,
    map_handler,
    pin_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "health_handler",
    "map_handler",
    "pin_handler",
    "user_handler",
]
