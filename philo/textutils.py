"""Small string helpers: searching, measuring and splitting."""

from typing import Iterator, List, Optional


def find_str(text: Optional[str], pattern: Optional[str]) -> int:
    """Return the first position of ``pattern`` in ``text``, or -1.

    An empty ``text`` never matches, not even an empty pattern.
    """
    if text is None or pattern is None or not text:
        return -1
    return text.find(pattern)


def same_str(text: Optional[str], pattern: Optional[str]) -> bool:
    """Return True when both strings are equal and non-empty."""
    return bool(text) and text == pattern


def index_in(char: str, chars: Optional[str]) -> int:
    """Return the position of ``char`` in ``chars``.

    Returns -1 when absent and -2 when ``chars`` is None.
    """
    if chars is None:
        return -2
    if len(char) > 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if not char:
        return -1
    return chars.find(char)


def span_until(text: Optional[str], stop_chars: Optional[str]) -> int:
    """Return how many leading characters of ``text`` are not in ``stop_chars``."""
    if not text:
        return 0
    stops = set(stop_chars or "")
    for pos, char in enumerate(text):
        if char in stops:
            return pos
    return len(text)


def _words(text: str, separators: str) -> Iterator[str]:
    seps = set(separators)
    word: List[str] = []
    for char in text:
        if char in seps:
            if word:
                yield "".join(word)
                word = []
        else:
            word.append(char)
    if word:
        yield "".join(word)


def split_any(text: str, separators: Optional[str]) -> List[str]:
    """Split ``text`` on any character of ``separators``, dropping empty words."""
    return list(_words(text, separators or ""))