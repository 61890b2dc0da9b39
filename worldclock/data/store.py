"""JSON file persistence for the user's timezone list.

The list lives in a single file holding a flat JSON array of identifier
strings, e.g. ``["America/New_York","Europe/London"]``.  Reads fail loudly:
a missing file raises ``StoreIOError`` and anything that is not an array of
strings raises ``StoreDataError``, so a corrupt file is never mistaken for an
empty list.

All mutations go through ``TimezoneStore.update`` which holds an
``asyncio.Lock`` for the whole read-modify-write, so within one process the
writes are applied one at a time.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, List

from worldclock.errors import StoreDataError, StoreIOError

logger = logging.getLogger("worldclock.store")


def _decode(path: Path, text: str) -> List[str]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StoreDataError(path, f"invalid JSON ({exc.msg})") from exc
    except RecursionError as exc:
        raise StoreDataError(path, "JSON nested too deeply") from exc
    if not isinstance(data, list):
        raise StoreDataError(path, f"expected a JSON array, got {type(data).__name__}")
    for item in data:
        if not isinstance(item, str):
            raise StoreDataError(path, f"expected strings, got {item!r}")
    return data


def _encode(identifiers: List[str]) -> str:
    return json.dumps(list(identifiers))


def _replace_file(path: Path, content: str) -> None:
    """Write ``content`` to a sibling temp file and move it over ``path``."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


class TimezoneStore:
    """File-backed list of timezone identifiers."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"TimezoneStore({str(self.path)!r})"

    # -- sync helpers (run in a worker thread) --------------------------------

    def _ensure_exists_sync(self) -> bool:
        if self.path.is_file():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        _replace_file(self.path, _encode([]))
        return True

    def _read_sync(self) -> List[str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise StoreDataError(self.path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
        return _decode(self.path, text)

    def _write_sync(self, identifiers: List[str]) -> None:
        _replace_file(self.path, _encode(identifiers))

    # -- public API ------------------------------------------------------------

    async def ensure_exists(self) -> None:
        """Create the file containing ``[]`` if it is absent."""
        try:
            created = await asyncio.to_thread(self._ensure_exists_sync)
        except OSError as exc:
            logger.error("Failed to create %s: %s", self.path, exc)
            raise StoreIOError(self.path, "create", exc) from exc
        if created:
            logger.info("Created empty timezone list at %s", self.path)

    async def read_all(self) -> List[str]:
        """Return the stored identifiers in stored order."""
        try:
            return await asyncio.to_thread(self._read_sync)
        except OSError as exc:
            logger.error("Failed to read %s: %s", self.path, exc)
            raise StoreIOError(self.path, "read", exc) from exc

    async def write_all(self, identifiers: List[str]) -> None:
        """Overwrite the file with ``identifiers``; the old content survives a failure."""
        snapshot = list(identifiers)
        try:
            await asyncio.to_thread(self._write_sync, snapshot)
        except OSError as exc:
            logger.error("Failed to write %s: %s", self.path, exc)
            raise StoreIOError(self.path, "write", exc) from exc
        logger.debug("Wrote %d timezones to %s", len(snapshot), self.path)

    async def update(self, mutator: Callable[[List[str]], List[str]]) -> List[str]:
        """Serialized read-modify-write.

        ``mutator`` receives the current list and returns the list to store.
        If it raises, nothing is written.
        """
        async with self._lock:
            current = await self.read_all()
            updated = mutator(list(current))
            if updated != current:
                await self.write_all(updated)
            return updated
