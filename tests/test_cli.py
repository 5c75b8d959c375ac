"""
CLI Tests
=========

End-to-end behaviour of the play-qqpr command with a temporary cache.
"""

import pytest

from qqpr_player.playback.terminal import HIDE_CURSOR, SHOW_CURSOR


def _run(*argv):
    from qqpr_player.cli import main

    return main(list(argv))


class TestMaintenanceCommands:
    """Tests for --list and --clear-cache."""

    def test_list_empty(self, cache_dir, capsys):
        """An empty cache says so."""
        assert _run("--list", "--cache-dir", str(cache_dir)) == 0
        assert capsys.readouterr().out.strip() == "(cache empty)"

    def test_list_sorted(self, cache_dir, capsys):
        """Cached ids print in numeric order."""
        for name in ("20.js", "3.js"):
            (cache_dir / name).write_text("x")

        assert _run("--list", "--cache-dir", str(cache_dir)) == 0
        assert capsys.readouterr().out.split() == ["3", "20"]

    def test_clear_cache(self, cache_dir, capsys):
        """--clear-cache removes scripts and reports the directory."""
        (cache_dir / "3.js").write_text("x")

        assert _run("--clear-cache", "--cache-dir", str(cache_dir)) == 0
        assert not (cache_dir / "3.js").exists()
        assert f"Cleared cache: {cache_dir}" in capsys.readouterr().out

    def test_list_and_clear_are_exclusive(self, cache_dir):
        """--list and --clear-cache cannot be combined."""
        with pytest.raises(SystemExit) as exc_info:
            _run("--list", "--clear-cache")
        assert exc_info.value.code == 2


class TestInfo:
    """Tests for --info."""

    def test_info(self, cache_dir, sample_script, capsys):
        """--info reports frame count and loop duration."""
        (cache_dir / "1044.js").write_text(sample_script)

        assert _run("--info", "1044", "--cache-dir", str(cache_dir)) == 0
        out = capsys.readouterr().out
        assert "Animation ID: 1044" in out
        assert "Frames: 4" in out
        assert "Duration at 10 fps: 0.4s per loop" in out

    def test_info_requires_id(self, cache_dir, capsys):
        """--info without an id fails."""
        assert _run("--info", "--cache-dir", str(cache_dir)) == 1
        assert "requires an animation ID" in capsys.readouterr().err

    def test_info_not_cached(self, cache_dir, capsys):
        """--info never downloads."""
        assert _run("--info", "55", "--cache-dir", str(cache_dir)) == 1
        assert "not in cache" in capsys.readouterr().err


class TestPlay:
    """Tests for playing an animation."""

    def test_play_cached(self, cache_dir, sample_script, capsys):
        """A cached animation plays to completion and restores the cursor."""
        (cache_dir / "7.js").write_text(sample_script)

        code = _run("7", "--fps", "500", "--loop", "1", "--no-download", "--cache-dir", str(cache_dir))

        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith(HIDE_CURSOR)
        assert out.endswith(SHOW_CURSOR)
        assert "A" * 60 in out and "D" * 60 in out

    def test_play_downloads_on_miss(self, cache_dir, sample_script, monkeypatch, capsys):
        """An uncached id is downloaded, cached and played."""
        from qqpr_player.gateway import AnimationFetcher

        monkeypatch.setattr(AnimationFetcher, "fetch", lambda self, animation_id: sample_script)

        code = _run("9", "--fps", "500", "--loop", "1", "--cache-dir", str(cache_dir))

        assert code == 0
        assert (cache_dir / "9.js").read_text() == sample_script
        assert "Downloading 9..." in capsys.readouterr().out

    def test_random_plays_cached(self, cache_dir, sample_script, capsys):
        """--random plays something from the cache."""
        (cache_dir / "4.js").write_text(sample_script)

        assert _run("--random", "--fps", "500", "--loop", "1", "--cache-dir", str(cache_dir)) == 0
        assert capsys.readouterr().out.endswith(SHOW_CURSOR)

    def test_random_empty_cache(self, cache_dir, capsys):
        """--random with nothing cached fails with a hint."""
        assert _run("--random", "--cache-dir", str(cache_dir)) == 1
        assert "No cached animations" in capsys.readouterr().err


class TestErrors:
    """Tests for error exits."""

    @pytest.mark.parametrize("args", [("--fps", "0"), ("--fps", "-2"), ("--loop", "-1")])
    def test_invalid_parameters(self, cache_dir, args, capsys):
        """Bad --fps / --loop values exit 1 before anything else."""
        assert _run("7", *args, "--cache-dir", str(cache_dir)) == 1
        assert "Invalid --fps/--loop" in capsys.readouterr().err

    def test_non_numeric_id(self, cache_dir, capsys):
        """Ids must be numeric."""
        assert _run("abc", "--cache-dir", str(cache_dir)) == 1
        assert "ID must be numeric" in capsys.readouterr().err

    def test_no_download_miss(self, cache_dir, capsys):
        """--no-download with an uncached id fails."""
        assert _run("7", "--no-download", "--cache-dir", str(cache_dir)) == 1
        assert "downloads disabled" in capsys.readouterr().err

    def test_extraction_failure(self, cache_dir, capsys):
        """A script without frames fails without playing."""
        (cache_dir / "7.js").write_text('a[0]="short";')

        assert _run("7", "--no-download", "--cache-dir", str(cache_dir)) == 1
        captured = capsys.readouterr()
        assert "Could not extract frames" in captured.err
        assert HIDE_CURSOR not in captured.out

    def test_fetch_failure(self, cache_dir, monkeypatch, capsys):
        """Download errors exit 1 and leave the cache untouched."""
        from qqpr_player.gateway import AnimationFetcher, FetchError

        def fail(self, animation_id):
            raise FetchError("HTTP 404 for https://example.test/7.js", "https://example.test/7.js", 404)

        monkeypatch.setattr(AnimationFetcher, "fetch", fail)

        assert _run("7", "--cache-dir", str(cache_dir)) == 1
        assert "HTTP 404" in capsys.readouterr().err
        assert not (cache_dir / "7.js").exists()

    def test_missing_id(self, cache_dir, capsys):
        """No id and no command prints usage."""
        assert _run("--cache-dir", str(cache_dir)) == 1
        assert "usage:" in capsys.readouterr().err

    def test_bad_config_file(self, tmp_path, capsys):
        """A missing --config file is reported."""
        assert _run("--list", "--config", str(tmp_path / "nope.yaml")) == 1
        assert "Invalid configuration" in capsys.readouterr().err
