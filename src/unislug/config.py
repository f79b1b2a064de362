"""Slug option bundles and their TOML loader.

:class:`SlugOptions` carries the three recognised options with the same
defaults as :func:`unislug.text.slugify`, so a caller can build them once
and reuse them through :func:`unislug.text.slugify_with`.

Options can also live in a ``[slugify]`` table of a TOML file::

    [slugify]
    stop_words = ["the", "a", "an"]
    separator = "_"
    max_length = 60

They are validated at load time so that a bad separator surfaces when
the application starts rather than on the first title it slugifies.
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from unislug.errors import ActionableError
from unislug.logging import logger
from unislug.text import DEFAULT_SEPARATOR, validate_max_length, validate_separator

OPTIONS_TABLE = "slugify"


# ---------------------------------------------------------------------------
# Option bundle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SlugOptions:
    """Named options for :func:`~unislug.text.slugify`."""

    stop_words: str = ""
    separator: str = DEFAULT_SEPARATOR
    max_length: int | None = None

    def __post_init__(self) -> None:
        validate_separator(self.separator)
        validate_max_length(self.max_length)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_options(path: str | Path) -> SlugOptions:
    """Load slug options from the ``[slugify]`` table of a TOML file.

    A file without a ``[slugify]`` table yields the defaults.  A
    ``stop_words`` list is joined with commas, so its entries may not
    contain a comma themselves.

    Raises :class:`~unislug.errors.ActionableError`:
      - CONFIG if the file is missing or a field has the wrong type
      - PARSE if the TOML is malformed
      - VALIDATION if a value is out of range
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="options_path",
            reason=f"Options file not found: {filepath}",
            suggestion=f"Create {filepath} with a [{OPTIONS_TABLE}] table",
        )

    raw_text = filepath.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            location="TOML syntax",
            raw_error=str(exc),
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    options = _validate(data, filepath)
    logger.info("Loaded slug options from %s: %s", filepath, options.to_dict())
    return options


def _validate(data: dict[str, object], filepath: Path) -> SlugOptions:
    """Validate raw TOML data and return a SlugOptions instance."""
    section = data.get(OPTIONS_TABLE, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=OPTIONS_TABLE,
            reason=f"[{OPTIONS_TABLE}] must be a table, not {type(section).__name__}",
            suggestion=f"Define [{OPTIONS_TABLE}] as a TOML table in {filepath}",
        )

    # -- stop_words ----------------------------------------------------------
    stop_words = section.get("stop_words", "")
    if isinstance(stop_words, list):
        if not all(isinstance(word, str) for word in stop_words):
            raise ActionableError.config(
                field_name=f"{OPTIONS_TABLE}.stop_words",
                reason="every entry of the stop_words list must be a string",
            )
        if any("," in word for word in stop_words):
            raise ActionableError.config(
                field_name=f"{OPTIONS_TABLE}.stop_words",
                reason="list entries must not contain ',' (the stop word delimiter)",
                suggestion='Split the entry into separate items, e.g. ["a", "b"]',
            )
        stop_words = ",".join(stop_words)
    elif not isinstance(stop_words, str):
        raise ActionableError.config(
            field_name=f"{OPTIONS_TABLE}.stop_words",
            reason=f"must be a string or a list of strings, not {type(stop_words).__name__}",
            suggestion='Use stop_words = "the,a" or stop_words = ["the", "a"]',
        )

    # -- separator -----------------------------------------------------------
    separator = section.get("separator", DEFAULT_SEPARATOR)
    if not isinstance(separator, str):
        raise ActionableError.config(
            field_name=f"{OPTIONS_TABLE}.separator",
            reason=f"must be a string, not {type(separator).__name__}",
            suggestion='Quote the separator, e.g. separator = "_"',
        )

    # -- max_length ----------------------------------------------------------
    max_length = section.get("max_length")
    if max_length is not None and (
        isinstance(max_length, bool) or not isinstance(max_length, int)
    ):
        raise ActionableError.config(
            field_name=f"{OPTIONS_TABLE}.max_length",
            reason=f"must be an integer, not {type(max_length).__name__}",
            suggestion="Omit max_length to disable truncation",
        )

    return SlugOptions(
        stop_words=stop_words,
        separator=separator,
        max_length=max_length,
    )
