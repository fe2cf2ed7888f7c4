from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_ID_SUFFIX = re.compile(r"_id$")


def conform_name(text: str) -> str:
    """Turn a "CamelCased-String" into its canonical "camel_cased_string" form.

    Every name is conformed on registration and on lookup, so "FourFiveSix",
    "four_five_six" and "Four_Five_six" all address the same member. The
    result is a fixed point: conforming it again changes nothing.
    """

    if not isinstance(text, str):
        raise TypeError(f"name must be a string, got {type(text).__name__}")
    if not text:
        raise ValueError("name cannot be empty")
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", text)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def humanize_name(name: str) -> str:
    """Readable label for a canonical name: "what_an_id" -> "What an"."""

    label = _ID_SUFFIX.sub("", name).replace("_", " ")
    return label.capitalize()
