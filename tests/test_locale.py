"""Tests for locale classification."""

import pytest

from alexa_envelope.models.locale import Locale, classify_locale, is_english


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("it-IT", Locale.ITALIAN),
        ("de-DE", Locale.GERMAN),
        ("en-AU", Locale.AUSTRALIAN_ENGLISH),
        ("en-CA", Locale.CANADIAN_ENGLISH),
        ("en-GB", Locale.BRITISH_ENGLISH),
        ("en-IN", Locale.INDIAN_ENGLISH),
        ("en-US", Locale.AMERICAN_ENGLISH),
        ("ja-JP", Locale.JAPANESE),
    ],
)
def test_supported_tags(tag: str, expected: Locale) -> None:
    """Test that each supported tag maps to its locale."""
    assert classify_locale(tag) is expected


@pytest.mark.parametrize("tag", ["fr-FR", "en-us", "EN-US", " en-US", "", "unknown", "en"])
def test_unsupported_tags_are_unknown(tag: str) -> None:
    """Test that anything outside the table is Unknown."""
    assert classify_locale(tag) is Locale.UNKNOWN


def test_english_locales() -> None:
    """Test that exactly the five English variants are English."""
    english = {locale for locale in Locale if is_english(locale)}
    assert english == {
        Locale.AMERICAN_ENGLISH,
        Locale.AUSTRALIAN_ENGLISH,
        Locale.CANADIAN_ENGLISH,
        Locale.BRITISH_ENGLISH,
        Locale.INDIAN_ENGLISH,
    }
    assert not Locale.UNKNOWN.is_english
    assert not Locale.JAPANESE.is_english
