"""
Logic Policy

Switches for four long-standing edge cases of the collection and pin
operations. Every switch defaults to False, which keeps the historical
behaviour; turning one on selects the stricter variant.

    unique_collection_titles_on_create
        False: create_collection accepts a title that already exists in the map.
        True:  it raises DuplicateResourceError.

    strict_collection_rename_check
        False: update_collection only detects a clash when the first collection
               carrying the new title is not at position 0.
        True:  any other collection with the new title is a clash.

    partial_pin_update
        False: update_pin writes every text field, missing keys become None.
        True:  only the keys present in the payload are written.

    prune_pin_reference_on_remove
        False: remove_pin leaves the pin id in its collection.
        True:  the id is dropped from the collection as well.

Usage:
======
    policy = LogicPolicy.from_settings()
    strict = LogicPolicy(strict_collection_rename_check=True)
    service = MapService(db, policy=strict)
"""

from pydantic import BaseModel, ConfigDict

from photopin.config.settings import Settings, settings


class LogicPolicy(BaseModel):
    """Immutable set of behaviour switches handed to every service."""

    model_config = ConfigDict(frozen=True)

    unique_collection_titles_on_create: bool = False
    strict_collection_rename_check: bool = False
    partial_pin_update: bool = False
    prune_pin_reference_on_remove: bool = False

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "LogicPolicy":
        """Build the policy from the COLLECTION_* / PIN_* settings."""
        return cls(
            unique_collection_titles_on_create=config.COLLECTION_UNIQUE_TITLE_ON_CREATE,
            strict_collection_rename_check=config.COLLECTION_STRICT_RENAME_CHECK,
            partial_pin_update=config.PIN_PARTIAL_UPDATE,
            prune_pin_reference_on_remove=config.PIN_PRUNE_REFERENCE_ON_REMOVE,
        )
