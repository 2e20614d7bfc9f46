"""
Base Service

Shared wiring for the domain services.

Every service is built per request with the request's database session and,
optionally, its collaborators; anything not passed falls back to the default
implementation:

    Service(session, credentials=None, validator=None, policy=None)
        │
        ├── credentials : CredentialService   (password hash / verify)
        ├── validator   : Validator           (argument checks)
        ├── policy      : LogicPolicy         (edge-case switches)
        └── users / maps / pins repositories  (bound to the session)

Storage failures:
=================
Repository calls run inside ``self.storage_errors(message, step=...)``, which
turns any SQLAlchemyError into a StorageError (a LogicError) carrying a
readable message. The driver error is logged, not exposed.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from photopin.shared.core.exceptions import NotFoundError, OwnershipError, StorageError
from photopin.shared.core.logging import get_logger
from photopin.shared.models.map import Map
from photopin.shared.repositories.map_repository import MapRepository
from photopin.shared.repositories.pin_repository import PinRepository
from photopin.shared.repositories.user_repository import UserRepository
from photopin.shared.services.policy import LogicPolicy
from photopin.shared.utils.security import CredentialService
from photopin.shared.utils.validation import Validator


logger = get_logger(__name__)


def to_uuid(value: Any) -> Optional[UUID]:
    """
    Parse an identifier coming from the outside.

    Returns None for anything that is not a UUID, so a malformed id behaves
    like an id that matches nothing.
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


class BaseService:
    """
    Base class for UserService, MapService and PinService.

    Attributes:
        session: Database session
        credentials: Credential service
        validator: Argument validator
        policy: Edge-case switches
        users / maps / pins: Repositories bound to the session
    """

    def __init__(
        self,
        session: AsyncSession,
        credentials: Optional[CredentialService] = None,
        validator: Optional[Validator] = None,
        policy: Optional[LogicPolicy] = None,
    ) -> None:
        self.session = session
        self.credentials = credentials or CredentialService()
        self.validator = validator or Validator()
        self.policy = policy or LogicPolicy.from_settings()
        self.users = UserRepository(session)
        self.maps = MapRepository(session)
        self.pins = PinRepository(session)

    @contextmanager
    def storage_errors(self, message: str, **details: Any) -> Iterator[None]:
        """Re-raise database failures inside the block as StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(
                "Storage failure",
                message=message,
                error=str(e),
                error_type=type(e).__name__,
                **details,
            )
            raise StorageError(message, details=details) from e

    # ═══════════════════════════════════════════════════════════════════════════
    # MAP LOOKUPS
    # ═══════════════════════════════════════════════════════════════════════════

    async def load_map(self, map_id: str) -> Map:
        """
        Fetch a map by id.

        Raises:
            NotFoundError: if no map has this id
        """
        map_uuid = to_uuid(map_id)
        pin_map = None
        if map_uuid is not None:
            with self.storage_errors(f"error retrieving map {map_id}"):
                pin_map = await self.maps.get(map_uuid)

        if pin_map is None:
            raise NotFoundError("Map", map_id, message=f"no map with id {map_id}")

        return pin_map

    async def load_owned_map(self, user_id: str, map_id: str) -> Map:
        """
        Fetch a map and check that ``user_id`` is its author.

        Raises:
            NotFoundError: if no map has this id
            OwnershipError: if the map belongs to another user
        """
        pin_map = await self.load_map(map_id)

        if not pin_map.is_authored_by(to_uuid(user_id)):
            raise OwnershipError(f"map {map_id} is not from user {user_id}")

        return pin_map
