"""Add/remove operations over the timezone store."""
from __future__ import annotations

import logging
from typing import List

from worldclock.clock.presentation import is_valid_timezone
from worldclock.data.store import TimezoneStore
from worldclock.errors import TimezoneValidationError

logger = logging.getLogger("worldclock.repositories")

INVALID = "invalid"
DUPLICATE = "duplicate"


async def list_timezones(store: TimezoneStore) -> List[str]:
    await store.ensure_exists()
    return await store.read_all()


async def add_timezone(store: TimezoneStore, identifier: str) -> List[str]:
    """Validate ``identifier`` and append it to the stored list.

    Raises ``TimezoneValidationError`` for an identifier the platform rejects
    or one already stored (exact, case-sensitive match); the file is left
    untouched in both cases.  Store failures propagate as ``StoreIOError`` /
    ``StoreDataError``.
    """
    if not is_valid_timezone(identifier):
        raise TimezoneValidationError(identifier, INVALID, f"Invalid timezone: {identifier!r}")

    def _append(current: List[str]) -> List[str]:
        if identifier in current:
            raise TimezoneValidationError(identifier, DUPLICATE, f"Timezone already exists: {identifier!r}")
        current.append(identifier)
        return current

    await store.ensure_exists()
    updated = await store.update(_append)
    logger.info("Added timezone %s (%d stored)", identifier, len(updated))
    return updated


async def remove_timezone(store: TimezoneStore, identifier: str) -> List[str]:
    """Remove ``identifier``; removing an absent identifier is a no-op."""

    def _drop(current: List[str]) -> List[str]:
        return [item for item in current if item != identifier]

    await store.ensure_exists()
    updated = await store.update(_drop)
    logger.info("Removed timezone %s (%d stored)", identifier, len(updated))
    return updated
