from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from segbench.engines.base import SegmentationEngine


def write_dictionary_file(path: Path, lines: Sequence[str]) -> Path:
    """Write raw dictionary lines exactly as given."""
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


class ScriptedEngine(SegmentationEngine):
    """Returns canned tokens per input text, falling back to the whole text."""

    def __init__(self, script: dict[str, List[str]] | None = None) -> None:
        self.script = script or {}

    def tokenize(self, text: str) -> List[str]:
        return list(self.script.get(text, [text]))


class CharacterEngine(SegmentationEngine):
    """Splits every character into its own token."""

    def __init__(self, vocabulary: Sequence[str] = ()) -> None:
        self.vocabulary = list(vocabulary)

    def tokenize(self, text: str) -> List[str]:
        return list(text)


class LossyEngine(SegmentationEngine):
    """Drops the last character, breaking the round-trip contract."""

    def __init__(self, vocabulary: Sequence[str] = ()) -> None:
        self.vocabulary = list(vocabulary)

    def tokenize(self, text: str) -> List[str]:
        return [text[:-1]] if len(text) > 1 else []


class BrokenEngine(SegmentationEngine):
    def __init__(self, vocabulary: Sequence[str] = ()) -> None:
        self.vocabulary = list(vocabulary)

    def tokenize(self, text: str) -> List[str]:
        raise RuntimeError("engine crashed")


class BytesEngine(SegmentationEngine):
    """Returns encoded tokens instead of text."""

    def __init__(self, vocabulary: Sequence[str] = ()) -> None:
        self.vocabulary = list(vocabulary)

    def tokenize(self, text: str) -> List[str]:
        return [text.encode("utf-8")]  # type: ignore[list-item]


class NoneTokenEngine(SegmentationEngine):
    def __init__(self, vocabulary: Sequence[str] = ()) -> None:
        self.vocabulary = list(vocabulary)

    def tokenize(self, text: str) -> List[str]:
        return [text, None]  # type: ignore[list-item]
