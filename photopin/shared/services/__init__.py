"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
the credential service and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ CredentialService / Validator

Services should:
- Validate arguments before touching storage
- Enforce ownership and referential rules
- flush() only; the request dependency commits or rolls back
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- UserService: Registration, authentication, profile, removal
- MapService: Maps and their embedded collections
- PinService: Pins inside map collections

Usage:
======
    from photopin.shared.services import MapService

    service = MapService(db, policy=LogicPolicy(strict_collection_rename_check=True))
    await service.update_collection(user_id, map_id, "Trips", "Road trips")
"""

from photopin.shared.services.policy import LogicPolicy
from photopin.shared.services.base import BaseService
from photopin.shared.services.user_service import UserService
from photopin.shared.services.map_service import MapService
from photopin.shared.services.pin_service import PinService

__all__ = [
    "LogicPolicy",
    "BaseService",
    "UserService",
    "MapService",
    "PinService",
]
