"""
Word-list loading with ordered fallback.

Each source is tried in turn: an explicit path, the packaged data file, and
finally a compiled-in table. A source that fails to read or yields no usable
words is logged and skipped; the embedded table always yields words.
"""

import json
import logging
import re
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

WORDS_FILE = "words.txt"
CURATED_FILE = "common-words.txt"
BASE_WORDS_FILE = "six-letter-words.json"

_ALPHA = re.compile(r'^[A-Z]+$')

WordSource = Callable[[], List[str]]
Strategy = Tuple[str, WordSource]


def text_lines(path: Path) -> WordSource:
    """Newline-delimited word list."""
    def load() -> List[str]:
        return Path(path).read_text(encoding="utf-8").splitlines()
    return load


def json_array(path: Path) -> WordSource:
    """JSON array of strings."""
    def load() -> List[str]:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError(f"{path} is not a JSON array of strings")
        return data
    return load


def embedded(table: Iterable[str]) -> WordSource:
    words = list(table)

    def load() -> List[str]:
        return list(words)
    return load


def normalize_words(
    words: Iterable[str],
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> List[str]:
    """Uppercase and trim, keeping purely alphabetic words within the length bounds."""
    result: List[str] = []
    for raw in words:
        word = raw.strip().upper()
        if not _ALPHA.match(word):
            continue
        if len(word) < min_length:
            continue
        if max_length is not None and len(word) > max_length:
            continue
        result.append(word)
    return result


def strategies_for(
    filename: str,
    explicit_path: Optional[Path],
    table: Iterable[str],
) -> List[Strategy]:
    """Build the standard chain: explicit path, packaged file, embedded table."""
    reader = json_array if filename.endswith(".json") else text_lines
    chain: List[Strategy] = []
    if explicit_path is not None:
        chain.append((str(explicit_path), reader(explicit_path)))
    chain.append((f"packaged {filename}", reader(DATA_DIR / filename)))
    chain.append((f"embedded {filename}", embedded(table)))
    return chain


def load_first(
    strategies: Sequence[Strategy],
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> List[str]:
    """Return the normalized words of the first strategy that yields any."""
    for name, source in strategies:
        try:
            words = normalize_words(source(), min_length, max_length)
        except (OSError, ValueError) as e:
            logger.warning("Word source %s unavailable: %s", name, e)
            continue

        if words:
            logger.debug("Loaded %d words from %s", len(words), name)
            return words
        logger.warning("Word source %s has no usable words", name)

    return []
