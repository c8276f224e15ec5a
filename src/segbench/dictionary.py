from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

LOGGER = logging.getLogger(__name__)


class DictionaryError(OSError):
    """Raised when a dictionary file cannot be read or the cleaned copy cannot be written."""


def iter_dictionary_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield every whitespace-separated entry found in ``lines``."""
    for line in lines:
        yield from line.split()


def read_dictionary(source_path: str | Path) -> set[str]:
    """Load the unique words of a raw dictionary file."""
    path = Path(source_path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            words = set(iter_dictionary_words(handle))
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(f"Unable to read dictionary {path}: {exc}") from exc
    return words


def write_dictionary(words: Iterable[str], target_path: str | Path) -> None:
    """Write one word per line, each newline-terminated."""
    path = Path(target_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            for word in words:
                handle.write(word)
                handle.write("\n")
    except OSError as exc:
        raise DictionaryError(f"Unable to write dictionary {path}: {exc}") from exc


def normalize_dictionary(source_path: str | Path, target_path: str | Path) -> set[str]:
    """
    Split multi-word entries, drop duplicates and persist the cleaned word list.

    The returned set is the dictionary used by the benchmark; the file written to
    ``target_path`` is a by-product and is not read back during the same run.
    """
    words = read_dictionary(source_path)
    write_dictionary(words, target_path)
    LOGGER.info(
        "Normalized %s into %d unique words at %s", source_path, len(words), target_path
    )
    return words
