"""Tests for phone number and currency helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from toolbelt.config import settings
from toolbelt.text import as_phone_number, digits_only, phone_number, rub


class TestDigitsOnly:
    """Tests for digits_only."""

    def test_strips_punctuation(self) -> None:
        """Test formatting characters are removed."""
        assert digits_only("+7 (916) 123-45-67") == "79161234567"

    def test_no_digits(self) -> None:
        """Test a string without digits becomes empty."""
        assert digits_only("abc") == ""

    @given(st.text())
    def test_result_is_ascii_digits(self, text: str) -> None:
        """Test only ASCII digits survive."""
        assert all(c in "0123456789" for c in digits_only(text))


class TestAsPhoneNumber:
    """Tests for as_phone_number."""

    def test_ten_digits(self) -> None:
        """Test a bare ten-digit number is grouped."""
        assert as_phone_number("9161234567") == "+7 916 123 45 67"

    def test_uses_last_ten_characters(self) -> None:
        """Test a leading country code is dropped."""
        assert as_phone_number("79161234567") == "+7 916 123 45 67"

    def test_short_input_unchanged(self) -> None:
        """Test inputs shorter than ten characters are returned as is."""
        assert as_phone_number("123") == "123"
        assert as_phone_number("12-34") == "12-34"

    def test_custom_prefix(self) -> None:
        """Test an explicit prefix overrides the configured one."""
        assert as_phone_number("9161234567", prefix="8") == "8 916 123 45 67"

    def test_configured_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default prefix comes from settings."""
        monkeypatch.setattr(settings, "PHONE_COUNTRY_PREFIX", "+375")
        assert as_phone_number("2912345678") == "+375 291 234 56 78"


class TestPhoneNumber:
    """Tests for phone_number."""

    def test_extracts_last_ten_digits(self) -> None:
        """Test punctuation and the country code are dropped."""
        assert phone_number("+7 (916) 123-45-67") == "9161234567"

    def test_short_input(self) -> None:
        """Test fewer than ten digits are returned whole."""
        assert phone_number("1-2-3") == "123"

    def test_formats_cleanly(self) -> None:
        """Test the extracted number formats as expected."""
        assert as_phone_number(phone_number("8 (916) 123 45 67")) == "+7 916 123 45 67"


def test_rub() -> None:
    """Test the rouble sign is appended."""
    assert rub("100") == "100₽"
