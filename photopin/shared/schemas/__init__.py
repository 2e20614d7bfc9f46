"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, id/count responses, error and health responses
- user: Registration, login, profile update
- map: Maps and collections
- pin: Pins and coordinates

Usage:
======
    from photopin.shared.schemas.map import MapCreate, MapResponse
    from photopin.shared.schemas.common import ErrorResponse
"""

from photopin.shared.schemas.common import (
    BaseSchema,
    IdResponse,
    CountResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from photopin.shared.schemas.user import (
    UserRegister,
    UserLogin,
    UserUpdate,
    UserResponse,
    AuthResponse,
)
from photopin.shared.schemas.map import (
    MapCreate,
    MapUpdate,
    CollectionCreate,
    CollectionRename,
    CollectionResponse,
    PopulatedCollectionResponse,
    MapResponse,
    PopulatedMapResponse,
)
from photopin.shared.schemas.pin import (
    Coordinates,
    PinCreate,
    PinUpdate,
    PinResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "IdResponse",
    "CountResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "AuthResponse",
    # Map
    "MapCreate",
    "MapUpdate",
    "CollectionCreate",
    "CollectionRename",
    "CollectionResponse",
    "PopulatedCollectionResponse",
    "MapResponse",
    "PopulatedMapResponse",
    # Pin
    "Coordinates",
    "PinCreate",
    "PinUpdate",
    "PinResponse",
]
