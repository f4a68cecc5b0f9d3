"""Locale classification for inbound requests."""

from enum import Enum


class Locale(str, Enum):
    """Locales a skill can be published in."""

    ITALIAN = "it-IT"
    GERMAN = "de-DE"
    AUSTRALIAN_ENGLISH = "en-AU"
    CANADIAN_ENGLISH = "en-CA"
    BRITISH_ENGLISH = "en-GB"
    INDIAN_ENGLISH = "en-IN"
    AMERICAN_ENGLISH = "en-US"
    JAPANESE = "ja-JP"
    UNKNOWN = "unknown"

    @property
    def is_english(self) -> bool:
        """Return True for the English-speaking marketplaces."""
        return self in _ENGLISH


_ENGLISH = frozenset(
    {
        Locale.AMERICAN_ENGLISH,
        Locale.AUSTRALIAN_ENGLISH,
        Locale.CANADIAN_ENGLISH,
        Locale.BRITISH_ENGLISH,
        Locale.INDIAN_ENGLISH,
    }
)

_LOCALE_TAGS: dict[str, Locale] = {
    locale.value: locale for locale in Locale if locale is not Locale.UNKNOWN
}


def classify_locale(raw: str) -> Locale:
    """Map a raw locale tag like ``en-US`` to a Locale, UNKNOWN if unsupported."""
    return _LOCALE_TAGS.get(raw, Locale.UNKNOWN)


def is_english(locale: Locale) -> bool:
    return locale.is_english
