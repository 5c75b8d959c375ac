"""
play-qqpr Command Line
======================

Play QQPR animated ASCII art in your terminal.

Usage:
    play-qqpr <id> [--fps N] [--loop N] [--cache-dir PATH] [--no-download]
    play-qqpr --random [--fps N] [--loop N]
    play-qqpr --list
    play-qqpr --info <id>
    play-qqpr --clear-cache

Examples:
    play-qqpr 1000
    play-qqpr 1044 --fps 12 --loop 3
    play-qqpr --random
    play-qqpr --info 1044

Exit Codes:
    0  success (playback completed or was interrupted)
    1  invalid parameters, unknown id, download or extraction failure
    2  usage error
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from qqpr_player import __version__
from qqpr_player.config import Settings, load_config, resolve_cache_dir, setup_logging
from qqpr_player.extract import ExtractionError, FrameExtractor, FrameHeuristic
from qqpr_player.gateway import (
    AnimationCache,
    AnimationFetcher,
    AnimationSource,
    CacheMissError,
    FetchError,
    InvalidAnimationId,
    normalize_id,
)
from qqpr_player.models import AnimationInfo, FrameSequence
from qqpr_player.playback import InvalidParameterError, run_playback, validate_parameters


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="play-qqpr",
        description="Play QQPR animated ASCII art in your terminal",
        epilog=(
            "examples:\n"
            "  play-qqpr 1000\n"
            "  play-qqpr 1044 --fps 12 --loop 3\n"
            "  play-qqpr --random\n"
            "  play-qqpr --info 1044"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("id", nargs="?", help="Numeric animation id (e.g. 1044)")
    parser.add_argument(
        "--fps",
        type=float,
        default=None,
        help="Frames per second (default: 10)",
    )
    parser.add_argument(
        "--loop",
        type=int,
        default=None,
        help="Loop N times then exit (default: 0 = infinite)",
    )
    parser.add_argument("--cache-dir", default=None, help="Cache directory")
    parser.add_argument(
        "--no-download",
        action="store_true",
        help="Only play if already cached",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Play a random animation from cache",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Show info about a cached animation",
    )

    maintenance = parser.add_mutually_exclusive_group()
    maintenance.add_argument("--list", action="store_true", help="List cached animation IDs")
    maintenance.add_argument(
        "--clear-cache",
        action="store_true",
        help="Delete all cached animations",
    )

    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--log-level", default=None, help="Log level (e.g. DEBUG, INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# =============================================================================
# Commands
# =============================================================================

def cmd_list(cache: AnimationCache) -> int:
    ids = cache.list_ids()
    if not ids:
        print("(cache empty)")
    else:
        print("\n".join(ids))
    return 0


def cmd_clear(cache: AnimationCache) -> int:
    removed = cache.clear()
    logger.debug(f"Removed {removed} files")
    print(f"Cleared cache: {cache.root}")
    return 0


def cmd_info(cache: AnimationCache, extractor: FrameExtractor, animation_id: str, fps: float) -> int:
    text = cache.read(animation_id)
    frames = extractor.extract(text)
    info = AnimationInfo(
        animation_id=animation_id,
        frame_count=len(frames),
        fps=fps,
        loop_duration_seconds=round(frames.duration(fps), 1),
        cache_file=str(cache.path_for(animation_id)),
    )
    print("\n".join(info.to_lines()))
    return 0


def cmd_play(frames: FrameSequence, fps: float, loop_limit: int) -> int:
    result = run_playback(frames, fps=fps, loop_limit=loop_limit)
    logger.info(
        f"Playback ended: {result.outcome.value} after "
        f"{result.loops_completed} loops, {result.frames_rendered} frames"
    )
    return 0


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _build_extractor(settings: Settings) -> FrameExtractor:
    return FrameExtractor(
        FrameHeuristic(
            min_length=settings.extraction.min_length,
            require_line_break=settings.extraction.require_line_break,
        )
    )


def _build_fetcher(settings: Settings) -> AnimationFetcher:
    return AnimationFetcher(
        url_template=settings.source.url_template,
        timeout=settings.source.timeout_seconds,
        max_redirects=settings.source.max_redirects,
        user_agent=settings.source.user_agent,
    )


# =============================================================================
# Main Entry Point
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_config(args.config)
    except (FileNotFoundError, ValidationError, yaml.YAMLError, ValueError) as e:
        return _fail(f"Invalid configuration: {e}")

    if args.log_level:
        settings.logging.level = args.log_level
    setup_logging(settings)

    fps = args.fps if args.fps is not None else settings.player.fps
    loop_limit = args.loop if args.loop is not None else settings.player.loop
    try:
        validate_parameters(fps, loop_limit)
    except InvalidParameterError as e:
        return _fail(f"Invalid --fps/--loop value: {e}")

    cache = AnimationCache(resolve_cache_dir(settings, args.cache_dir))

    if args.list:
        return cmd_list(cache)
    if args.clear_cache:
        return cmd_clear(cache)

    extractor = _build_extractor(settings)
    allow_download = not args.no_download
    animation_id = args.id

    try:
        if args.random:
            animation_id = cache.random_id()
            allow_download = False

        if animation_id is None:
            if args.info:
                return _fail("--info requires an animation ID")
            parser.print_usage(sys.stderr)
            return 1

        animation_id = normalize_id(animation_id)

        if args.info:
            return cmd_info(cache, extractor, animation_id, fps)

        if not cache.contains(animation_id) and allow_download:
            print(f"Downloading {animation_id}...")

        fetcher = _build_fetcher(settings)
        try:
            text = AnimationSource(cache, fetcher).load(animation_id, allow_download=allow_download)
        finally:
            fetcher.close()

        frames = extractor.extract(text)

    except InvalidAnimationId as e:
        return _fail(str(e))
    except CacheMissError as e:
        logger.debug(f"Cache miss: {e}")
        if args.random:
            return _fail("No cached animations. Download some first with: play-qqpr <id>")
        return _fail(str(e))
    except FetchError as e:
        logger.error(f"Download failed: url={e.url}, status={e.status_code}")
        return _fail(f"Error: {e}")
    except ExtractionError as e:
        logger.debug(f"Extraction failed: {e}")
        return _fail("Could not extract frames from this animation.")
    except OSError as e:
        return _fail(f"Error: {e}")

    return cmd_play(frames, fps, loop_limit)


if __name__ == "__main__":
    sys.exit(main())
