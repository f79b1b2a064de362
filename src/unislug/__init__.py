"""URL-safe slugs from arbitrary Unicode text."""

from unislug.config import SlugOptions, load_options
from unislug.errors import ActionableError, ErrorType
from unislug.text import DEFAULT_SEPARATOR, slugify, slugify_with, transliterate

__all__ = [
    "DEFAULT_SEPARATOR",
    "ActionableError",
    "ErrorType",
    "SlugOptions",
    "load_options",
    "slugify",
    "slugify_with",
    "transliterate",
]
