"""
User Service

Business logic for user registration, authentication and profile management.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Validation (before any storage access)
- Repositories (data access)
- The credential service (password hashing)

Usage:
======
    from photopin.shared.services.user_service import UserService

    service = UserService(db)
    user_id = await service.register_user("Ada", "Lovelace", "ada@example.com", "s3cret")
    assert await service.authenticate_user("ada@example.com", "s3cret") == user_id
"""

from typing import Any

from sqlalchemy.exc import IntegrityError

from photopin.shared.core.exceptions import (
    ArgumentValueError,
    CredentialsError,
    DuplicateResourceError,
    LogicError,
    NotFoundError,
)
from photopin.shared.core.logging import get_logger
from photopin.shared.models.enums import Language
from photopin.shared.models.user import User
from photopin.shared.services.base import BaseService, to_uuid


logger = get_logger(__name__)


# Fields accepted by update_user
UPDATABLE_USER_FIELDS = (
    "name",
    "surname",
    "email",
    "password",
    "avatar",
    "language",
    "favorite_public_map",
)


class UserService(BaseService):
    """
    Service for user-related business logic.

    Handles:
    - Registration and authentication
    - Profile retrieval and partial updates
    - Account removal with cascade to the user's maps and pins
    """

    async def _load_user(self, user_id: str) -> User:
        user_uuid = to_uuid(user_id)
        user = None
        if user_uuid is not None:
            with self.storage_errors(f"error retrieving user {user_id}"):
                user = await self.users.get(user_uuid)

        if user is None:
            raise NotFoundError("User", user_id, message=f"user with id {user_id} doesn't exists")

        return user

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION & AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def register_user(self, name: str, surname: str, email: str, password: str) -> str:
        """
        Register a new user.

        Args:
            name: The user name
            surname: The user surname
            email: The user email, must not be registered yet
            password: Plain text password (stored hashed)

        Returns:
            The new user id

        Raises:
            ValidationError: if an argument is missing, empty or malformed
            DuplicateResourceError: if the email is already registered
        """
        self.validator.check_arguments([
            {"name": "name", "value": name, "type": str, "not_empty": True},
            {"name": "surname", "value": surname, "type": str, "not_empty": True},
            {"name": "email", "value": email, "type": str, "not_empty": True},
            {"name": "password", "value": password, "type": str, "not_empty": True},
        ])
        self.validator.check_email(email)

        with self.storage_errors(f"error registering user with email {email}"):
            if await self.users.email_exists(email):
                raise DuplicateResourceError(f"user with email {email} already exists")

            try:
                user = await self.users.create(
                    name=name,
                    surname=surname,
                    email=email,
                    password_hash=self.credentials.hash(password),
                )
            except IntegrityError as e:
                # registered concurrently after the email_exists check
                raise DuplicateResourceError(f"user with email {email} already exists") from e

        logger.info("User registered", user_id=str(user.id))
        return str(user.id)

    async def authenticate_user(self, email: str, password: str) -> str:
        """
        Check a user's credentials.

        Returns:
            The user id

        Raises:
            CredentialsError: if the email is unknown or the password is wrong
        """
        self.validator.check_arguments([
            {"name": "email", "value": email, "type": str, "not_empty": True},
            {"name": "password", "value": password, "type": str, "not_empty": True},
        ])
        self.validator.check_email(email)

        with self.storage_errors(f"error authenticating user with email {email}"):
            user = await self.users.get_by_email(email)

        if user is None:
            raise CredentialsError(f"user with email {email} doesn't exists")

        if not self.credentials.verify(password, user.password_hash):
            raise CredentialsError("wrong credentials")

        return str(user.id)

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    async def retrieve_user(self, user_id: str) -> dict[str, Any]:
        """Return the public projection of a user (no id, no password hash)."""
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
        ])

        user = await self._load_user(user_id)
        return user.to_dict()

    async def update_user(self, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Overwrite the fields present in ``data``.

        Accepted keys: name, surname, email, password, avatar, language,
        favorite_public_map. A new password is hashed; a new email must be
        free; the favorite map must exist and be public (None clears it).

        Returns:
            The user projection as it was before the update

        Raises:
            ValidationError: unknown keys or invalid values
            NotFoundError: user or favorite map not found
            DuplicateResourceError: email taken by another user
            LogicError: favorite map is not public
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
            {"name": "data", "value": data, "type": dict, "not_empty": True},
        ])

        unknown = sorted(set(data) - set(UPDATABLE_USER_FIELDS))
        if unknown:
            raise ArgumentValueError(
                f"cannot update user fields: {', '.join(unknown)}", field=unknown[0]
            )

        self.validator.check_arguments([
            {"name": field, "value": data[field], "type": str, "not_empty": True}
            for field in ("name", "surname", "email", "password", "language")
            if field in data
        ] + [
            {"name": field, "value": data[field], "type": str, "optional": True}
            for field in ("avatar", "favorite_public_map")
            if field in data
        ])

        if "email" in data:
            self.validator.check_email(data["email"])

        if "language" in data and data["language"] not in {lang.value for lang in Language}:
            raise ArgumentValueError(
                f"language {data['language']} is not supported", field="language"
            )

        user = await self._load_user(user_id)
        previous = user.to_dict()

        updates: dict[str, Any] = {
            field: data[field] for field in ("name", "surname", "avatar", "language") if field in data
        }

        if "password" in data:
            updates["password_hash"] = self.credentials.hash(data["password"])

        with self.storage_errors(f"error updating user with id {user_id}"):
            if "email" in data and data["email"] != user.email:
                if await self.users.email_exists(data["email"]):
                    raise DuplicateResourceError(f"user with email {data['email']} already exists")
                updates["email"] = data["email"]

        if "favorite_public_map" in data:
            favorite_id = data["favorite_public_map"]
            if favorite_id is None:
                updates["favorite_public_map"] = None
            else:
                favorite = await self.load_map(favorite_id)
                if not favorite.is_public:
                    raise LogicError(f"map {favorite_id} is not public")
                updates["favorite_public_map"] = favorite.id

        with self.storage_errors(f"error updating user with id {user_id}"):
            try:
                await self.users.update(user, **updates)
            except IntegrityError as e:
                if "email" not in updates:
                    raise
                raise DuplicateResourceError(f"user with email {updates['email']} already exists") from e

        logger.info("User updated", user_id=user_id, fields=sorted(data))
        return previous

    # ═══════════════════════════════════════════════════════════════════════════
    # REMOVAL
    # ═══════════════════════════════════════════════════════════════════════════

    async def remove_user(self, user_id: str) -> dict[str, Any]:
        """
        Delete a user together with every pin and map they authored.

        Cascade order: pins, maps, user. Runs inside the caller's transaction;
        on failure the StorageError details name the step that failed.

        Returns:
            The removed user's projection
        """
        self.validator.check_arguments([
            {"name": "userId", "value": user_id, "type": str, "not_empty": True},
        ])

        user = await self._load_user(user_id)
        removed = user.to_dict()

        with self.storage_errors(f"error removing pins of user {user_id}", step="pins"):
            pin_count = await self.pins.delete_by_author(user.id)

        with self.storage_errors(f"error removing maps of user {user_id}", step="maps"):
            map_count = await self.maps.delete_by_author(user.id)

        with self.storage_errors(f"error removing user {user_id}", step="user"):
            await self.users.delete(user)

        logger.info("User removed", user_id=user_id, pins=pin_count, maps=map_count)
        return removed
