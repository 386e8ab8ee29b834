"""Split command-line text into words on a single separator character.

Two splitters are provided: :func:`split`, which cuts on every separator,
and :func:`split_command`, which keeps quoted runs (single or double
quotes) together inside one word. Empty words are never produced.

A word can only end on a character whose code point lies in 1..126. A word
whose last character falls outside that range therefore runs on into the
next word. This matches how words have always been cut here, so callers
see the same words for the same input.
"""

from __future__ import annotations

_QUOTES = "\"'"


def _check_separator(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def _can_end_word(ch: str, sep: str) -> bool:
    return ch != sep and 1 <= ord(ch) <= 126


def find_quote_end(text: str, i: int, x: int) -> int:
    """Return the index of the quote that closes the one at ``text[x]``.

    The search starts at index ``i + 2``. If ``text[x]`` is not a quote, or
    no matching quote follows, ``x`` itself is returned.
    """
    quote = text[x]
    if quote not in _QUOTES:
        return x
    closing = text.find(quote, max(i + 2, 0))
    return x if closing == -1 else closing


def _word_end(text: str, sep: str, start: int, quote_aware: bool) -> int:
    """Return the index of the last character of the word starting at ``start``."""
    length = len(text)
    i = start
    while i < length:
        if quote_aware and text[i] in _QUOTES:
            i = find_quote_end(text, i - 1, i)
        if _can_end_word(text[i], sep) and (i + 1 == length or text[i + 1] == sep):
            return i
        i += 1
    return length - 1


def _split(text: str, sep: str, quote_aware: bool) -> list[str]:
    _check_separator(sep)
    words: list[str] = []
    length = len(text)
    start = 0
    while start < length:
        while start < length and text[start] == sep:
            start += 1
        if start >= length:
            break
        end = _word_end(text, sep, start, quote_aware)
        words.append(text[start:end + 1])
        start = end + 1
    return words


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    return _split(text, sep, quote_aware=False)


def split_command(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, keeping quoted runs inside one word.

    Quote characters are kept in the words; an unmatched quote is treated
    as an ordinary character.
    """
    return _split(text, sep, quote_aware=True)