from __future__ import annotations

from typing import Sequence

from .models import AlignmentResult


class EngineContractError(RuntimeError):
    """Raised when engine output is not a lossless partition of its input."""


def check_round_trip(text: str, tokens: Sequence[str]) -> None:
    """Ensure the tokens concatenate back to ``text`` exactly."""
    rebuilt = "".join(tokens)
    if rebuilt != text:
        raise EngineContractError(
            f"Tokens {list(tokens)!r} rebuild {rebuilt!r} instead of {text!r}."
        )


def align_boundaries(words: Sequence[str], tokens: Sequence[str]) -> AlignmentResult:
    """
    Count the expected word boundaries reproduced by ``tokens``.

    Tokens and words are walked left to right with independent cursors. For each
    word the token cursor advances until the tokens consumed so far cover the end
    of that word; the boundary is credited only when the last token consumed ends
    exactly there and its text equals the word. A token ending at the right offset
    with different text does not count.

    When the tokens run out before a word's end is reached, the remaining words
    score nothing and ``exhausted`` is set.
    """
    true_positive = 0
    token_idx = 0
    token_end = 0
    word_end = 0

    for word in words:
        word_end += len(word)
        while token_idx < len(tokens) and token_end < word_end:
            token_end += len(tokens[token_idx])
            token_idx += 1
        if token_end < word_end:
            return AlignmentResult(true_positive=true_positive, exhausted=True)
        if token_idx > 0 and token_end == word_end and tokens[token_idx - 1] == word:
            true_positive += 1

    return AlignmentResult(true_positive=true_positive)


def score_alignment(words: Sequence[str], tokens: Sequence[str]) -> int:
    """Return only the true-positive count of :func:`align_boundaries`."""
    return align_boundaries(words, tokens).true_positive
