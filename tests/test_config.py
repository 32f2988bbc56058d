import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from wordwheel import main as preview
from wordwheel.config import GeneratorConfig, WordwheelConfig, load_config


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.base_word_length == 6
        assert (config.min_words, config.max_words) == (6, 10)
        assert (config.min_wheel, config.max_wheel) == (5, 6)
        assert list(config.word_lengths) == [3, 4, 5, 6]
        assert config.max_grid_dimension == 10
        assert config.max_attempts == 50
        assert config.seed is None

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(min_words=8, max_words=6)
        with pytest.raises(ValidationError):
            GeneratorConfig(min_word_length=5, max_word_length=4)
        with pytest.raises(ValidationError):
            GeneratorConfig(min_wheel=6, max_wheel=5)

    def test_wheel_cannot_exceed_alphabet(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(min_wheel=27, max_wheel=30)


class TestLoadConfig:
    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "generator:\n"
            "  max_attempts: 10\n"
            "  seed: 12345\n"
            "dictionary:\n"
            "  words_path: /tmp/words.txt\n"
        )
        config = load_config(path)
        assert config.generator.max_attempts == 10
        assert config.generator.seed == 12345
        assert config.generator.min_words == 6
        assert config.dictionary.words_path == Path("/tmp/words.txt")
        assert config.dictionary.curated_path is None

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == WordwheelConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("generator:\n  min_words: 9\n  max_words: 7\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestPreview:
    """The developer preview prints generated levels."""

    def test_prints_level(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["wordwheel-preview", "--level", "1"])
        assert preview.main() == 0
        out = capsys.readouterr().out
        assert "Level 1: base word" in out
        assert "Valid: True" in out

    def test_bad_config(self, monkeypatch, capsys, tmp_path):
        monkeypatch.setattr(sys, "argv", ["wordwheel-preview", str(tmp_path / "missing.yaml")])
        assert preview.main() == 1
        assert "Error loading config" in capsys.readouterr().err
