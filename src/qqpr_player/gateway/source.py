"""
Animation Source
================

Resolves an animation id to raw script text: cache first, network on miss.
"""

import logging

from qqpr_player.gateway.cache import AnimationCache, CacheMissError
from qqpr_player.gateway.fetch import AnimationFetcher


logger = logging.getLogger(__name__)


class InvalidAnimationId(ValueError):
    """Raised for ids that are not purely numeric."""
    pass


def normalize_id(animation_id) -> str:
    """
    Trim and validate an animation id.

    Raises:
        InvalidAnimationId: If the id is not all digits
    """
    normalized = str(animation_id).strip()
    if not normalized.isdigit() or not normalized.isascii():
        raise InvalidAnimationId(f"ID must be numeric (e.g. 1000, 1044), got {animation_id!r}")
    return normalized


class AnimationSource:
    """
    Cache-backed access to animation scripts.

    Example:
        source = AnimationSource(AnimationCache(root), AnimationFetcher())
        text = source.load("1044")
    """

    def __init__(self, cache: AnimationCache, fetcher: AnimationFetcher) -> None:
        self.cache = cache
        self.fetcher = fetcher

    def load(self, animation_id, allow_download: bool = True) -> str:
        """
        Return the script text for an id.

        Args:
            animation_id: Numeric id (str or int)
            allow_download: Fetch and cache on a miss

        Returns:
            Script text

        Raises:
            InvalidAnimationId: If the id is not numeric
            CacheMissError: If not cached and downloads are disabled
            FetchError: If the download fails
        """
        animation_id = normalize_id(animation_id)

        if self.cache.contains(animation_id):
            logger.debug(f"Cache hit for animation {animation_id}")
            return self.cache.read(animation_id)

        if not allow_download:
            raise CacheMissError(
                f"Not in cache and downloads disabled: {self.cache.path_for(animation_id)}"
            )

        text = self.fetcher.fetch(animation_id)
        self.cache.write(animation_id, text)
        return text
