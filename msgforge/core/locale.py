"""
Locale conventions used when rendering values as text.

Only the pieces a positional or delimited message needs are modelled: the
decimal separator, the grouping separator and the timestamp pattern.
"""

from dataclasses import dataclass
from typing import Dict

from .errors import require, require_text, InvalidArgumentError


@dataclass(frozen=True)
class Locale:
    """Number and timestamp conventions for one locale."""
    name: str
    decimal: str = "."
    group: str = ","
    timestamp_format: str = "%m/%d/%Y %H:%M:%S"


INVARIANT = Locale(name="invariant")

# Keyed by lowercase tag with "_" as the region separator
_LOCALES: Dict[str, Locale] = {
    "invariant": INVARIANT,
    "en": Locale("en"),
    "en_us": Locale("en_US", timestamp_format="%m/%d/%Y %I:%M:%S %p"),
    "en_gb": Locale("en_GB", timestamp_format="%d/%m/%Y %H:%M:%S"),
    "de": Locale("de", decimal=",", group=".", timestamp_format="%d.%m.%Y %H:%M:%S"),
    "de_de": Locale("de_DE", decimal=",", group=".", timestamp_format="%d.%m.%Y %H:%M:%S"),
    "de_ch": Locale("de_CH", decimal=".", group="'", timestamp_format="%d.%m.%Y %H:%M:%S"),
    "fr": Locale("fr", decimal=",", group=" ", timestamp_format="%d/%m/%Y %H:%M:%S"),
    "fr_fr": Locale("fr_FR", decimal=",", group=" ", timestamp_format="%d/%m/%Y %H:%M:%S"),
    "nl": Locale("nl", decimal=",", group=".", timestamp_format="%d-%m-%Y %H:%M:%S"),
    "es": Locale("es", decimal=",", group=".", timestamp_format="%d/%m/%Y %H:%M:%S"),
    "it": Locale("it", decimal=",", group=".", timestamp_format="%d/%m/%Y %H:%M:%S"),
}


def get_locale(name: str) -> Locale:
    """
    Resolve a locale by tag.

    Accepts "de-DE", "de_DE" or "de". Falls back from the full tag to the
    language; an empty string selects the invariant locale.

    Raises:
        InvalidArgumentError: If neither the tag nor its language is known
    """
    require(name, "name")
    if name == "":
        return INVARIANT
    require_text(name, "name", "Locale name")

    key = name.strip().replace("-", "_").lower()
    if key in _LOCALES:
        return _LOCALES[key]

    language = key.split("_", 1)[0]
    if language in _LOCALES:
        return _LOCALES[language]

    raise InvalidArgumentError(f"Unknown locale: {name}", param="name")


def available_locales() -> list:
    """List the tags of all built-in locales."""
    return sorted(locale.name for locale in _LOCALES.values())
