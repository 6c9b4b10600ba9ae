"""
Render Caching

Caches render payloads keyed by a fingerprint of both documents, the
random seed and the engine version. Unseeded renders are never cached.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class RenderCache:
    """Cache for render payloads."""

    def __init__(self, cache_dir: Path):
        """
        Initialize render cache.

        Args:
            cache_dir: Directory to store cache files
        """
        self.cache_dir = cache_dir
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _get_cache_path(self, fingerprint: str) -> Path:
        return self.cache_dir / f"{fingerprint}.json"

    def get(self, fingerprint: str) -> dict[str, Any] | None:
        """
        Get cached payload for a fingerprint.

        Args:
            fingerprint: Render fingerprint (SHA-256 hex digest)

        Returns:
            Cached payload if found, None otherwise
        """
        cache_path = self._get_cache_path(fingerprint)

        if not cache_path.exists():
            return None

        try:
            with cache_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            # Cache corrupted, ignore
            logger.debug(f"Ignoring corrupt cache entry {cache_path.name}")
            return None

        if not isinstance(data, dict):
            return None
        return data

    def set(self, fingerprint: str, payload: dict[str, Any]) -> None:
        """
        Cache a render payload.

        Args:
            fingerprint: Render fingerprint
            payload: JSON-ready payload
        """
        cache_path = self._get_cache_path(fingerprint)
        with cache_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)

    def clear(self) -> None:
        """Clear all cached payloads."""
        for cache_file in self.cache_dir.glob("*.json"):
            cache_file.unlink()

    def invalidate(self, fingerprint: str) -> None:
        """
        Invalidate a single cached payload.

        Args:
            fingerprint: Render fingerprint to drop
        """
        cache_path = self._get_cache_path(fingerprint)

        if cache_path.exists():
            cache_path.unlink()


def get_render_cache(project_root: Path, cache_dir: str | None = None) -> RenderCache:
    """
    Get render cache for project.

    Args:
        project_root: Project root directory
        cache_dir: Cache directory relative to the root (defaults to
            ``.wirespec/cache/renders``)

    Returns:
        Render cache instance
    """
    if cache_dir:
        return RenderCache(project_root / cache_dir)
    return RenderCache(project_root / ".wirespec" / "cache" / "renders")


__all__ = ["RenderCache", "get_render_cache"]
