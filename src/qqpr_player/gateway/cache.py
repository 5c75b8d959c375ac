"""
Animation Cache
===============

Flat per-id cache of downloaded animation scripts.

Layout:
    <cache_root>/<id>.js   raw UTF-8 script text, one file per animation

Design Rules:
    - Only *.js files belong to the cache; anything else is left alone
    - Ids are listed in numeric order
    - Missing cache root reads as an empty cache
"""

import logging
import random
from pathlib import Path
from typing import List, Optional, Union


logger = logging.getLogger(__name__)


CACHE_SUFFIX = ".js"


class CacheMissError(Exception):
    """Raised when a requested animation is not in the cache."""
    pass


def _numeric_key(animation_id: str):
    return (0, int(animation_id), "") if animation_id.isdigit() else (1, 0, animation_id)


class AnimationCache:
    """
    Directory of cached animation scripts.

    Example:
        cache = AnimationCache(Path("~/.cache/play-qqpr").expanduser())
        cache.ensure()
        if not cache.contains("1044"):
            cache.write("1044", text)
        print(cache.list_ids())
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def ensure(self) -> Path:
        """Create the cache root if needed."""
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def path_for(self, animation_id: str) -> Path:
        return self.root / f"{animation_id}{CACHE_SUFFIX}"

    def contains(self, animation_id: str) -> bool:
        return self.path_for(animation_id).is_file()

    def read(self, animation_id: str) -> str:
        """
        Read a cached script.

        Raises:
            CacheMissError: If the id is not cached
        """
        path = self.path_for(animation_id)
        if not path.is_file():
            raise CacheMissError(f"Animation {animation_id} not in cache: {path}")
        return path.read_text(encoding="utf-8")

    def write(self, animation_id: str, text: str) -> Path:
        """Store a script, creating the cache root if needed."""
        self.ensure()
        path = self.path_for(animation_id)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Cached animation {animation_id} at {path} ({len(text)} chars)")
        return path

    def list_ids(self) -> List[str]:
        """Cached ids in numeric order. Empty if the root does not exist."""
        if not self.root.is_dir():
            return []
        ids = [
            path.name[: -len(CACHE_SUFFIX)]
            for path in self.root.iterdir()
            if path.is_file() and path.name.endswith(CACHE_SUFFIX)
        ]
        return sorted(ids, key=_numeric_key)

    def clear(self) -> int:
        """
        Delete every cached script.

        Returns:
            Number of files removed
        """
        removed = 0
        for animation_id in self.list_ids():
            self.path_for(animation_id).unlink()
            removed += 1
        logger.info(f"Cleared {removed} cached animations from {self.root}")
        return removed

    def random_id(self, rng: Optional[random.Random] = None) -> str:
        """
        Pick a cached id at random.

        Raises:
            CacheMissError: If the cache is empty
        """
        ids = self.list_ids()
        if not ids:
            raise CacheMissError(f"No cached animations in {self.root}")
        return (rng or random).choice(ids)
