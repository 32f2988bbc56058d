"""
Configuration models for puzzle generation and dictionary loading.

Example config.yaml:

    generator:
      max_attempts: 50
      seed: 12345
    dictionary:
      words_path: data/words.txt
      curated_path: data/common-words.txt
      base_words_path: data/six-letter-words.json
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator


class GeneratorConfig(BaseModel):
    """Bounds and limits for level generation and validation."""
    base_word_length: int = Field(default=6, ge=3)
    min_word_length: int = Field(default=3, ge=2)
    max_word_length: int = Field(default=6, ge=2)
    min_words: int = Field(default=6, ge=1)
    max_words: int = Field(default=10, ge=1)
    min_wheel: int = Field(default=5, ge=1, le=26)
    max_wheel: int = Field(default=6, ge=1)
    max_grid_dimension: int = Field(default=10, ge=1)
    max_attempts: int = Field(default=50, ge=1)
    max_sweeps: int = Field(default=5, ge=0)
    anchor_row: int = 2
    seed: Optional[int] = None

    @model_validator(mode="after")
    def check_bounds(self) -> "GeneratorConfig":
        if self.min_word_length > self.max_word_length:
            raise ValueError("min_word_length must not exceed max_word_length")
        if self.min_words > self.max_words:
            raise ValueError("min_words must not exceed max_words")
        if self.min_wheel > self.max_wheel:
            raise ValueError("min_wheel must not exceed max_wheel")
        return self

    @property
    def word_lengths(self) -> range:
        return range(self.min_word_length, self.max_word_length + 1)


class DictionaryConfig(BaseModel):
    """Optional word-list locations; packaged data is used for any left unset."""
    words_path: Optional[Path] = None
    curated_path: Optional[Path] = None
    base_words_path: Optional[Path] = None


class WordwheelConfig(BaseModel):
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)


def load_config(config_path: str | Path) -> WordwheelConfig:
    """Load configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return WordwheelConfig(**(data or {}))
