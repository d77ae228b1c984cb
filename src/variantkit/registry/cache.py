"""Content-hash keyed cache of per-component registry metadata.

Only the component's own source and story files are hashed. Changes to the
extraction rules themselves are invisible to the hashes, so bump
``CACHE_VERSION`` whenever they change (or build with ``no_cache``).
"""

from __future__ import annotations

import hashlib
import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from variantkit.model import ComponentSchema, schema_from_dict

__all__ = ["CACHE_VERSION", "CacheEntry", "RegistryCache", "hash_file"]

logger = logging.getLogger(__name__)

CACHE_VERSION = 4


def hash_file(path: Path) -> str:
    """SHA-256 hex digest of the file's text, or ``""`` when it cannot be read."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class CacheEntry:
    """Metadata computed for one component, keyed by the hashes it was computed from."""

    component_name: str
    source_hash: str
    story_hash: str
    metadata: ComponentSchema
    cache_version: int = CACHE_VERSION
    generated_at: int = 0

    def matches(self, source_hash: str, story_hash: str) -> bool:
        return (
            self.source_hash == source_hash
            and self.story_hash == story_hash
            and self.cache_version == CACHE_VERSION
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "componentName": self.component_name,
            "sourceHash": self.source_hash,
            "storyHash": self.story_hash,
            "cacheVersion": self.cache_version,
            "generatedAt": self.generated_at,
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheEntry:
        return cls(
            component_name=data["componentName"],
            source_hash=data["sourceHash"],
            story_hash=data["storyHash"],
            metadata=schema_from_dict(data["metadata"]),
            cache_version=int(data.get("cacheVersion", 0)),
            generated_at=int(data.get("generatedAt", 0)),
        )

    # --- factory --------------------------------------------------------------

    @classmethod
    def create_now(
        cls, component_name: str, source_hash: str, story_hash: str, metadata: ComponentSchema
    ) -> CacheEntry:
        """Create an entry stamped with the current time in milliseconds."""
        return cls(
            component_name=component_name,
            source_hash=source_hash,
            story_hash=story_hash,
            metadata=metadata,
            generated_at=int(time.time() * 1000),
        )


class RegistryCache:
    """In-memory view of the cache file.

    Read once with :meth:`load`, consulted per component, written once with
    :meth:`save`. With ``no_cache`` every lookup misses but fresh entries
    are still recorded and saved.
    """

    def __init__(
        self,
        path: Path | None = None,
        entries: dict[str, CacheEntry] | None = None,
        *,
        no_cache: bool = False,
    ) -> None:
        self.path = path
        self.no_cache = no_cache
        self._entries: dict[str, CacheEntry] = dict(entries or {})

    @classmethod
    def load(cls, path: Path, *, no_cache: bool = False) -> RegistryCache:
        """Read the cache at *path*; a missing, stale or corrupt file gives an empty cache."""
        if not path.exists():
            return cls(path, no_cache=no_cache)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if data.get("version") != CACHE_VERSION:
                logger.info("Cache version mismatch, invalidating %s", path)
                return cls(path, no_cache=no_cache)
            entries = {
                name: CacheEntry.from_dict(entry) for name, entry in data.get("entries", {}).items()
            }
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.info("Ignoring unreadable cache %s: %s", path, e)
            return cls(path, no_cache=no_cache)
        return cls(path, entries, no_cache=no_cache)

    @property
    def entries(self) -> dict[str, CacheEntry]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str, source_hash: str, story_hash: str) -> ComponentSchema | None:
        """Cached metadata for *name* if both hashes and the cache version still match."""
        if self.no_cache:
            return None
        entry = self._entries.get(name)
        if entry is None or not entry.matches(source_hash, story_hash):
            return None
        return entry.metadata

    def put(self, entry: CacheEntry) -> None:
        """Store *entry*, replacing any previous entry for the same component."""
        self._entries[entry.component_name] = entry

    def retain(self, names: set[str]) -> None:
        """Drop entries for components that no longer exist."""
        self._entries = {name: e for name, e in self._entries.items() if name in names}

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": CACHE_VERSION,
            "entries": {name: self._entries[name].to_dict() for name in sorted(self._entries)},
        }

    def save(self, path: Path | None = None) -> None:
        """Write the cache as JSON to *path* (default: the path it was loaded from)."""
        target = path or self.path
        if target is None:
            raise ValueError("RegistryCache.save() needs a path")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.to_dict(), indent=2) + "\n", encoding="utf-8")
