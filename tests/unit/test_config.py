"""Unit tests for configuration loading and validation.

Each test has a single assertion and focuses on behavior.
"""

import json

import pytest

from heterogrampy.cli import create_parser
from heterogrampy.core import Config, load_config


def _load(argv: list[str]) -> Config:
    parser = create_parser()
    args = parser.parse_args(argv)
    return load_config(args.config, args, parser)


class TestConfigDefaults:
    """Test default configuration values."""

    def test_default_shape_is_five_by_five(self) -> None:
        """Defaults search five words of five letters."""
        config = Config()
        assert (config.word_length, config.group_size) == (5, 5)

    def test_runs_to_fixpoint_by_default(self) -> None:
        """Early exit is opt-in."""
        assert Config().stop_at_target is False

    def test_has_no_word_source_by_default(self) -> None:
        """A source must be chosen explicitly."""
        assert not Config().has_word_source


class TestConfigValidation:
    """Test Config validators."""

    def test_alphabet_is_lowercased(self) -> None:
        """Alphabet letters are normalized to lowercase."""
        assert Config(alphabet="ABC", word_length=2).alphabet == "abc"

    def test_rejects_repeated_alphabet_letters(self) -> None:
        """An alphabet repeating a letter is invalid."""
        with pytest.raises(ValueError):
            Config(alphabet="abca", word_length=2)

    def test_rejects_words_longer_than_alphabet(self) -> None:
        """Words of distinct letters cannot outgrow the alphabet."""
        with pytest.raises(ValueError):
            Config(alphabet="abc", word_length=4)

    def test_rejects_zero_group_size(self) -> None:
        """Groups hold at least one word."""
        with pytest.raises(ValueError):
            Config(group_size=0)


class TestLoadConfig:
    """Test load_config precedence."""

    def test_positional_words_file_is_a_source(self) -> None:
        """A words file on the command line is used."""
        assert _load(["words.txt"]).words == "words.txt"

    def test_json_values_apply(self, tmp_path) -> None:
        """JSON values fill in unspecified options."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"group_size": 4, "words": "w.txt"}))
        assert _load(["--config", str(config_file)]).group_size == 4

    def test_cli_overrides_json(self, tmp_path) -> None:
        """Explicit CLI values beat JSON values."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"group_size": 4}))
        assert _load(["--config", str(config_file), "-k", "3"]).group_size == 3

    def test_json_flags_apply(self, tmp_path) -> None:
        """Boolean flags can come from JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"expand_anagrams": True}))
        assert _load(["--config", str(config_file)]).expand_anagrams is True

    def test_invalid_json_raises_value_error(self, tmp_path) -> None:
        """Malformed JSON is reported as ValueError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            _load(["--config", str(config_file)])

    def test_missing_config_file_raises(self, tmp_path) -> None:
        """A missing config file propagates FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            _load(["--config", str(tmp_path / "missing.json")])

    def test_invalid_values_raise_value_error(self) -> None:
        """Validation failures are reported as ValueError."""
        with pytest.raises(ValueError, match="Invalid configuration"):
            _load(["--alphabet", "abc", "--word-length", "4"])
