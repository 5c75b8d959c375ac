"""
Configuration Tests
===================

Defaults, YAML loading, environment overrides and cache dir resolution.
"""

from pathlib import Path

import pytest


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Without file or env, defaults apply."""
        from qqpr_player.config import load_config

        settings = load_config()

        assert settings.player.fps == 10
        assert settings.player.loop == 0
        assert settings.cache.directory is None
        assert settings.source.url_template == "https://www.qqpr.com/ascii/js/{id}.js"
        assert settings.source.max_redirects == 5
        assert settings.extraction.min_length == 50
        assert settings.extraction.require_line_break is True
        assert settings.logging.level == "WARNING"

    def test_yaml_file(self, tmp_path):
        """Values from an explicit YAML file are used."""
        from qqpr_player.config import load_config

        path = tmp_path / "custom.yaml"
        path.write_text(
            "player:\n  fps: 24\n  loop: 2\nextraction:\n  min_length: 30\n"
        )
        settings = load_config(str(path))

        assert settings.player.fps == 24
        assert settings.player.loop == 2
        assert settings.extraction.min_length == 30

    def test_discovers_file_in_cwd(self, tmp_path):
        """qqpr.yaml in the working directory is picked up."""
        from qqpr_player.config import load_config

        (tmp_path / "qqpr.yaml").write_text("player:\n  fps: 5\n")
        assert load_config().player.fps == 5

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Environment variables beat file values."""
        from qqpr_player.config import load_config

        path = tmp_path / "custom.yaml"
        path.write_text("player:\n  fps: 24\n")
        monkeypatch.setenv("QQPR_FPS", "30")
        monkeypatch.setenv("QQPR_CACHE_DIR", "/tmp/qqpr")
        monkeypatch.setenv("QQPR_LOG_LEVEL", "DEBUG")

        settings = load_config(str(path))

        assert settings.player.fps == 30
        assert settings.cache.directory == "/tmp/qqpr"
        assert settings.logging.level == "DEBUG"

    def test_missing_explicit_file(self, tmp_path):
        """An explicit path that does not exist is an error."""
        from qqpr_player.config import load_config

        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.yaml"))

    def test_invalid_values_rejected(self, tmp_path):
        """Out-of-range values fail validation."""
        from pydantic import ValidationError

        from qqpr_player.config import load_config

        path = tmp_path / "bad.yaml"
        path.write_text("player:\n  fps: 0\n")
        with pytest.raises(ValidationError):
            load_config(str(path))


class TestCacheDir:
    """Tests for cache root resolution."""

    def test_xdg_default(self, tmp_path):
        """Without overrides the cache lives under XDG_CACHE_HOME."""
        from qqpr_player.config import Settings, resolve_cache_dir

        assert resolve_cache_dir(Settings()) == tmp_path / "xdg-cache" / "play-qqpr"

    def test_home_fallback(self, monkeypatch):
        """Without XDG_CACHE_HOME the cache lives under ~/.cache."""
        from qqpr_player.config import default_cache_dir

        monkeypatch.delenv("XDG_CACHE_HOME")
        assert default_cache_dir() == Path.home() / ".cache" / "play-qqpr"

    def test_precedence(self, tmp_path):
        """Explicit override beats config, which beats the default."""
        from qqpr_player.config import Settings, resolve_cache_dir

        settings = Settings.model_validate({"cache": {"directory": str(tmp_path / "cfg")}})

        assert resolve_cache_dir(settings) == tmp_path / "cfg"
        assert resolve_cache_dir(settings, str(tmp_path / "cli")) == tmp_path / "cli"
