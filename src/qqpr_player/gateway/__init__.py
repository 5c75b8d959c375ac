"""
Gateway Module
==============

Where animation scripts come from.

Components:
    - AnimationCache: flat <id>.js files under a cache root
    - AnimationFetcher: HTTP download with redirect following
    - AnimationSource: cache first, download on miss
"""

from qqpr_player.gateway.cache import AnimationCache, CacheMissError
from qqpr_player.gateway.fetch import AnimationFetcher, FetchError
from qqpr_player.gateway.source import AnimationSource, InvalidAnimationId, normalize_id


__all__ = [
    "AnimationCache",
    "CacheMissError",
    "AnimationFetcher",
    "FetchError",
    "AnimationSource",
    "InvalidAnimationId",
    "normalize_id",
]
