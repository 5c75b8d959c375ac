"""
Test Configuration
==================

Pytest fixtures and test configuration for play-qqpr.
"""

import pytest


ENV_VARS = (
    "QQPR_FPS",
    "QQPR_LOOP",
    "QQPR_CACHE_DIR",
    "QQPR_SOURCE_URL",
    "QQPR_TIMEOUT",
    "QQPR_LOG_LEVEL",
)


def frame_payload(fill: str, lines: int = 3, width: int = 60) -> str:
    """Build a frame-sized payload in the upstream <br> markup."""
    return "<br>".join(fill * width for _ in range(lines))


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from real config files, env vars and ~/.cache."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_script():
    """A four-frame animation script in the upstream format."""
    body = "\n".join(
        f'a[{i}] = "{frame_payload(ch)}";'
        for i, ch in enumerate("ABCD")
    )
    return (
        "var a = new Array();\n"
        'var title = "Walking man";\n'
        f"{body}\n"
        "function play() { setTimeout(play, 100); }\n"
    )


@pytest.fixture
def sample_frames():
    """A four-frame sequence with distinct, easy to spot contents."""
    from qqpr_player.models import Frame, FrameSequence

    return FrameSequence(Frame(index=i, content=f"frame-{i}\n") for i in range(4))


@pytest.fixture
def cache_dir(tmp_path):
    """Empty cache root."""
    path = tmp_path / "cache"
    path.mkdir()
    return path
