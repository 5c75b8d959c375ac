"""
play-qqpr
=========

Fetch, cache, parse and play QQPR animated ASCII art in a terminal.

Components:
    - extract: Script text -> FrameSequence (two-stage matcher + heuristic)
    - playback: Timed, cancellable, loop-bounded terminal rendering
    - gateway: Per-id script cache and HTTP fetcher
    - cli: The `play-qqpr` command

Example:
    from qqpr_player.extract import extract_frames
    from qqpr_player.playback import run_playback

    frames = extract_frames(script_text)
    run_playback(frames, fps=12, loop_limit=3)
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
