from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .base import SegmentationEngine

_END = object()


class LongestMatchEngine(SegmentationEngine):
    """
    Dictionary maximal-matching segmenter backed by a character trie.

    At each position the longest vocabulary word starting there becomes a token.
    Characters no vocabulary word starts with are grouped into a single unknown
    token that ends where the next known word begins, so the output always
    reconstructs the input.
    """

    def __init__(self, vocabulary: Iterable[str]) -> None:
        self._root: Dict[Any, Any] = {}
        for word in vocabulary:
            self.add(word)

    def add(self, word: str) -> None:
        if not word:
            return
        node = self._root
        for char in word:
            node = node.setdefault(char, {})
        node[_END] = True

    def longest_match(self, text: str, start: int) -> int:
        """Return the length of the longest vocabulary word at ``text[start:]`` (0 if none)."""
        node = self._root
        best = 0
        for offset in range(start, len(text)):
            node = node.get(text[offset])
            if node is None:
                break
            if _END in node:
                best = offset - start + 1
        return best

    def tokenize(self, text: str) -> List[str]:
        tokens: List[str] = []
        unknown_start: int | None = None
        pos = 0
        while pos < len(text):
            length = self.longest_match(text, pos)
            if length == 0:
                if unknown_start is None:
                    unknown_start = pos
                pos += 1
                continue
            if unknown_start is not None:
                tokens.append(text[unknown_start:pos])
                unknown_start = None
            tokens.append(text[pos : pos + length])
            pos += length
        if unknown_start is not None:
            tokens.append(text[unknown_start:])
        return tokens
