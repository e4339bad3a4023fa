"""Tests for TOML configuration loading."""
import pytest

from shared.config import PlaygroundConfig


class TestPlaygroundConfig:

    def test_defaults(self):
        config = PlaygroundConfig()
        assert config.password.gpu_guesses_per_second == 1e11
        assert config.scoring.length_tiers == ((8, 10), (12, 15), (16, 15))
        assert config.generator.default_length == 16
        assert config.token.max_lifetime_seconds == 86_400

    def test_load_from_toml(self, tmp_path):
        path = tmp_path / "playground.toml"
        path.write_text(
            "[global]\n"
            'log_level = "DEBUG"\n'
            "[password]\n"
            "cpu_guesses_per_second = 1e6\n"
            'common_passwords = ["hunter2"]\n'
            "unknown_key = 1\n"
            "[scoring]\n"
            "length_tiers = [[4, 5]]\n"
            "[generator]\n"
            "default_length = 24\n",
            encoding="utf-8",
        )
        config = PlaygroundConfig.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.password.cpu_guesses_per_second == 1e6
        assert config.password.common_passwords == ("hunter2",)
        assert config.scoring.length_tiers == ((4, 5),)
        assert config.scoring.symbol_bonus == 15
        assert config.generator.default_length == 24
        assert config.token.max_lifetime_seconds == 86_400

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PlaygroundConfig.load(tmp_path / "absent.toml")

    def test_sections_are_read_only(self):
        config = PlaygroundConfig()
        with pytest.raises(Exception):
            config.scoring.symbol_bonus = 0

    def test_to_dict(self):
        data = PlaygroundConfig().to_dict()
        assert data["generator"]["ambiguous"] == "lIO0"
