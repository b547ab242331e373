"""Test configuration loading and the command-line entry point."""

import pytest
from pydantic import ValidationError

from unscramble.main import build_parser, load_config, main
from unscramble.engine import GameConfig


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_load_values(self, tmp_path):
        """Values in the YAML file override the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("dictionary: words.txt\nmax_hints: 3\nseed: 42\n")
        config = load_config(str(path))
        assert config.dictionary == "words.txt"
        assert config.max_hints == 3
        assert config.seed == 42
        assert config.max_attempts == 3

    def test_empty_file_uses_defaults(self, tmp_path):
        """An empty config file gives the default config."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_missing_file(self, tmp_path):
        """A missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_unknown_key_rejected(self, tmp_path):
        """Typos in config keys are reported."""
        path = tmp_path / "config.yaml"
        path.write_text("max_atempts: 4\n")
        with pytest.raises(ValidationError):
            load_config(str(path))

    def test_invalid_value_rejected(self, tmp_path):
        """Out-of-range values are reported."""
        path = tmp_path / "config.yaml"
        path.write_text("max_attempts: 0\n")
        with pytest.raises(ValidationError):
            load_config(str(path))


class TestParser:
    """Test command-line arguments."""

    def test_defaults(self):
        """No arguments means no config file and no overrides."""
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.dictionary is None
        assert args.seed is None
        assert args.verbose is False

    def test_overrides(self):
        """Dictionary and seed flags are parsed."""
        args = build_parser().parse_args(["cfg.yaml", "-d", "w.txt", "--seed", "7", "-v"])
        assert args.config == "cfg.yaml"
        assert args.dictionary == "w.txt"
        assert args.seed == 7
        assert args.verbose is True


class TestMain:
    """Test the entry point end to end."""

    def test_missing_config_fails(self, tmp_path, capsys):
        """A missing config file exits with status 1."""
        assert main([str(tmp_path / "missing.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_plays_until_exit(self, tmp_path, monkeypatch, capsys):
        """The game runs on stdin and exits with status 0."""
        words = tmp_path / "words.txt"
        words.write_text("cat")
        lines = iter(["", "1", "1", "cat", "", "3"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

        assert main(["--dictionary", str(words), "--seed", "1"]) == 0

        out = capsys.readouterr().out
        assert "Correct! You earned 3 points" in out
        assert "Final score: 3" in out
