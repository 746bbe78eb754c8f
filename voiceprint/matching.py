"""Comparing speaker embeddings and storing them as text."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import NamedTuple

VALUES_PER_LINE = 8

_SEPARATORS = re.compile(r"[ \r\n,]+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


class Match(NamedTuple):
    """A ranked comparison: 1-based feature index, cosine similarity, distance."""

    index: int
    cosine: float
    distance: float


def _check_lengths(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError("vectors differ in length")


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors."""
    _check_lengths(a, b)
    dot = sum(x * y for x, y in zip(a, b))
    norms = sum(x * x for x in a) * sum(y * y for y in b)
    if norms == 0:
        raise ValueError("cosine similarity of a zero vector is undefined")
    return dot / math.sqrt(norms)


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two vectors."""
    _check_lengths(a, b)
    return math.sqrt(sum((x - y) * (x - y) for x, y in zip(a, b)))


def format_feature(vector: Sequence[float]) -> str:
    """Write a vector as ``"%f, "`` items, eight to a line; NaN is written as zero."""
    parts = []
    for i, value in enumerate(vector):
        if i and i % VALUES_PER_LINE == 0:
            parts.append("\r\n")
        parts.append(f"{0.0 if math.isnan(value) else value:f}, ")
    return "".join(parts)


def _parse_number(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    return float(match.group()) if match else 0.0


def parse_feature(text: str, dimension: int) -> list[float]:
    """Read up to ``dimension`` numbers written by :func:`format_feature`.

    Spaces, commas and line breaks separate numbers; a token that does not
    start with a number reads as zero. Text after a NUL character is ignored.
    """
    if dimension <= 0:
        raise ValueError("dimension must be positive")
    text = text.split("\0", 1)[0]
    tokens = [token for token in _SEPARATORS.split(text) if token]
    return [_parse_number(token) for token in tokens[:dimension]]


def _last_index_of(entries: Sequence[tuple[float, float]], cosine: float) -> int | None:
    found = None
    for i, (value, _) in enumerate(entries):
        if value == cosine:
            found = i
    return found


def rank_matches(distances: Sequence[tuple[float, float]], count: int) -> list[Match]:
    """Pick the best and worst matches by cosine similarity.

    ``distances`` holds ``(cosine, distance)`` per stored feature. The list is
    padded with zero entries to at least ``count``; the first half of the
    result holds the highest similarities in descending order, the second
    half the lowest, ending with the very lowest. Slots that cannot be
    matched stay as zero entries.
    """
    if count <= 0:
        raise ValueError("count must be positive")
    size = max(len(distances), count)
    entries = [(float(c), float(d)) for c, d in distances]
    entries += [(0.0, 0.0)] * (size - len(entries))
    ordered = sorted((c for c, _ in entries), reverse=True)

    result = [Match(0, 0.0, 0.0)] * count
    half = count // 2
    for slot in range(count):
        position = slot if slot < half else size - count + slot
        cosine = ordered[position]
        index = _last_index_of(entries, cosine)
        if index is not None:
            result[slot] = Match(index + 1, cosine, entries[index][1])
    return result