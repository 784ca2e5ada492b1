"""Configuration management for HeterogramPy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from multiprocessing import cpu_count

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from heterogrampy.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for the heterogrammic group search."""

    # Word sources
    words: str | None = Field(None, description="Whitespace-separated word list file")
    top_n: int | None = Field(None, ge=1, description="Top N most common wordfreq words")
    english_words: bool = Field(False, description="Use the english-words dictionary")

    # Search shape
    word_length: int = Field(Constants.DEFAULT_WORD_LENGTH, ge=1, description="Letters per word")
    group_size: int = Field(Constants.DEFAULT_GROUP_SIZE, ge=1, description="Words per group")
    alphabet: str = Field(Constants.DEFAULT_ALPHABET, description="Letters words may use")
    stop_at_target: bool = Field(False, description="Stop once groups of group_size exist")

    # Execution
    jobs: int = Field(default_factory=cpu_count, ge=1)
    chunk_size: int = Field(Constants.DEFAULT_CHUNK_SIZE, ge=1)

    # Output
    output: str | None = None
    reports: str | None = None
    expand_anagrams: bool = False
    sample_size: int = Field(Constants.DEFAULT_SAMPLE_SIZE, ge=0)
    seed: int | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("alphabet", mode="before")
    @classmethod
    def normalize_alphabet(cls, v):
        """Lowercase the alphabet and reject empty or repeating ones."""
        if v is None:
            return Constants.DEFAULT_ALPHABET
        v = str(v).strip().lower()
        if not v:
            raise ValueError("alphabet must not be empty")
        if len(set(v)) != len(v):
            raise ValueError(f"alphabet repeats letters: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.word_length > len(self.alphabet):
            raise ValueError(
                f"word_length ({self.word_length}) cannot exceed the alphabet size "
                f"({len(self.alphabet)}) for words without repeated letters"
            )
        return self

    @property
    def has_word_source(self) -> bool:
        return bool(self.words or self.top_n or self.english_words)


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    # CLI args take precedence over JSON; pydantic validates and coerces
    config_dict = {
        "words": get_value("words", None),
        "top_n": get_value("top_n", None),
        "english_words": cli_args.english_words or json_config.get("english_words", False),
        "word_length": get_value("word_length", Constants.DEFAULT_WORD_LENGTH),
        "group_size": get_value("group_size", Constants.DEFAULT_GROUP_SIZE),
        "alphabet": get_value("alphabet", Constants.DEFAULT_ALPHABET),
        "stop_at_target": cli_args.stop_at_target or json_config.get("stop_at_target", False),
        "jobs": get_value("jobs", cpu_count()),
        "chunk_size": get_value("chunk_size", Constants.DEFAULT_CHUNK_SIZE),
        "output": get_value("output", None),
        "reports": get_value("reports", None),
        "expand_anagrams": cli_args.expand_anagrams or json_config.get("expand_anagrams", False),
        "sample_size": get_value("sample_size", Constants.DEFAULT_SAMPLE_SIZE),
        "seed": get_value("seed", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
