"""Tests for rendering and cycle-check configuration."""
import pytest

from chainlist import ChainConfig, ConfigError, RenderConfig, describe, get_config, set_config


class TestDefaults:
    def test_defaults(self):
        cfg = get_config()
        assert cfg.render.separator == " -> "
        assert cfg.render.trim_trailing is False
        assert cfg.check_cycles is False

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_env_trim(self, monkeypatch, one_two_three):
        monkeypatch.setenv("CHAINLIST_TRIM_TRAILING", "true")
        set_config(None)
        assert describe(one_two_three) == "1 -> 2 -> 3"


class TestOverrides:
    def test_explicit_config(self, one_two_three):
        cfg = ChainConfig(render=RenderConfig(separator=", ", trim_trailing=True))
        assert describe(one_two_three, config=cfg) == "1, 2, 3"

    def test_trim_keeps_single_node(self):
        from chainlist import construct
        cfg = ChainConfig(render=RenderConfig(trim_trailing=True))
        assert describe(construct(5), config=cfg) == "5"

    def test_empty_separator_rejected(self):
        with pytest.raises(ConfigError):
            RenderConfig(separator="")
