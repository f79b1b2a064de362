"""Slug generation for arbitrary Unicode text.

Pure functions with no shared state — safe to call from any thread.

The transformation runs in a fixed order:

1. transliterate to ASCII (``Unidecode``)
2. lowercase and trim whitespace, then the separator's first character
3. substitute the full separator for every space
4. substitute the full separator for every stop word (plain substring match)
5. keep ``[a-z0-9]``, collapse every other run into one separator character
6. drop a trailing separator
7. truncate to ``max_length`` and drop separators exposed by the cut
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from unidecode import unidecode

from unislug.errors import ActionableError
from unislug.logging import logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from unislug.config import SlugOptions

DEFAULT_SEPARATOR = "-"

# Trim character used when the separator is empty
_TRIM_SENTINEL = " "

_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")


def transliterate(text: str) -> str:
    """Return a best-effort ASCII approximation of *text*.

    >>> transliterate("影師嗎")
    'Ying Shi Ma '
    """
    return unidecode(text)


# ---------------------------------------------------------------------------
# Argument validation
# ---------------------------------------------------------------------------


def validate_separator(separator: str) -> str:
    """Reject separators that could never act as a word boundary.

    A separator starting with ``[a-z0-9]`` would be copied through as
    ordinary slug content, so runs would never collapse.
    """
    if separator[:1] in _ALPHABET:
        raise ActionableError.validation(
            field_name="separator",
            reason=f"{separator!r} starts with a lowercase ASCII letter or digit",
            suggestion="Use punctuation or whitespace such as '-', '_', '.' or ' '",
        )
    return separator


def validate_max_length(max_length: int | None) -> int | None:
    """Reject anything but ``None`` or a non-negative integer."""
    if max_length is None:
        return None
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        raise ActionableError.validation(
            field_name="max_length",
            reason=f"is {max_length!r} — must be a non-negative integer or None",
        )
    if max_length < 0:
        raise ActionableError.validation(
            field_name="max_length",
            reason=f"is {max_length} — must be >= 0",
            suggestion="Pass max_length=None to disable truncation",
        )
    return max_length


# ---------------------------------------------------------------------------
# Slug engine
# ---------------------------------------------------------------------------


def slugify(
    text: str,
    stop_words: str = "",
    separator: str = DEFAULT_SEPARATOR,
    max_length: int | None = None,
    *,
    transliterator: Callable[[str], str] = transliterate,
) -> str:
    """Convert *text* to a lowercase ASCII slug.

    Args:
        text: Any Unicode text, including the empty string.
        stop_words: Comma-separated literal substrings to remove.  Matching
            happens after lowercasing and is not word-bounded, so ``"the"``
            also strips the middle out of ``"feather"``.
        separator: Joins alphanumeric runs.  Only its first character is
            used for trimming and collapsing; the whole string is what
            replaces spaces and stop words.  An empty separator joins runs
            directly.
        max_length: Upper bound on the result length, or ``None``.
        transliterator: Maps Unicode text to ASCII.  Defaults to
            :func:`transliterate`.

    Raises:
        ActionableError: VALIDATION if the separator starts with a character
            from ``[a-z0-9]``, or if ``max_length`` is negative.

    >>> slugify("hello world")
    'hello-world'
    >>> slugify("the quick brown fox", stop_words="the,fox")
    'quick-brown'
    >>> slugify("Æúű--cool?")
    'aeuu-cool'
    """
    validate_separator(separator)
    validate_max_length(max_length)

    sep_char = separator[:1]

    string = transliterator(text).lower().strip().strip(sep_char or _TRIM_SENTINEL)
    string = string.replace(" ", separator)

    for word in stop_words.split(","):
        if word:
            string = string.replace(word, separator)

    slug: list[str] = []
    is_sep = True
    for char in string:
        if char in _ALPHABET:
            is_sep = False
            slug.append(char)
        elif not is_sep:
            is_sep = True
            if sep_char:
                slug.append(sep_char)

    if sep_char and slug and slug[-1] == sep_char:
        slug.pop()

    result = "".join(slug)

    if max_length is not None and len(result) > max_length:
        logger.debug("Truncating slug %r to %d characters", result, max_length)
        result = result[:max_length]
        if sep_char:
            result = result.rstrip(sep_char)

    return result


def slugify_with(text: str, options: SlugOptions) -> str:
    """Slugify *text* using a bundled :class:`~unislug.config.SlugOptions`."""
    return slugify(
        text,
        options.stop_words,
        options.separator,
        options.max_length,
    )
