from __future__ import annotations

from dataclasses import dataclass
import re

from aristeides.domain.errors import InvalidName

# lower/digit followed by upper: "doThing" -> "do Thing"
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
# acronym followed by a capitalized word: "HTTPServer" -> "HTTP Server"
_ACRONYM_RE = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")


def constant_case(value: str) -> str:
    """Canonical CONSTANT_CASE form of ``value``: upper-case words joined by ``_``."""
    spaced = _LOWER_UPPER_RE.sub(r"\1 \2", value)
    spaced = _ACRONYM_RE.sub(r"\1 \2", spaced)
    words = [word for word in _SEPARATOR_RE.split(spaced) if word]
    return "_".join(word.upper() for word in words)


def is_constant_case(value: object) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return constant_case(value) == value


@dataclass(frozen=True)
class CommandName:
    """Value object for a command name; only CONSTANT_CASE names are valid."""

    value: str

    def __post_init__(self) -> None:
        if not is_constant_case(self.value):
            raise InvalidName(f"Invalid command name: {self.value}", command=str(self.value))

    def __str__(self) -> str:
        return self.value
