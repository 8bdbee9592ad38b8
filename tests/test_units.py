"""Tests for CSS value parsing."""

import pytest

from imgsizes.errors import SizesError, SizesParseError, UnsupportedUnitError
from imgsizes.units import css_value, px_value


class TestCssValue:
    """Tests for css_value."""

    def test_px_value(self):
        assert css_value("400px") == (400.0, "px")

    def test_vw_value(self):
        assert css_value("100vw") == (100.0, "vw")

    def test_fractional_value(self):
        assert css_value("718.5px") == (718.5, "px")
        assert css_value("71.5%") == (71.5, "%")

    def test_unitless_value(self):
        """Test a bare number has an empty unit."""
        assert css_value("400") == (400.0, "")

    def test_value_without_number_fails(self):
        with pytest.raises(SizesParseError):
            css_value("auto")

    def test_malformed_number_fails(self):
        with pytest.raises(SizesParseError):
            css_value("1.2.3px")


class TestPxValue:
    """Tests for px_value."""

    def test_px_accepted(self):
        assert px_value("680px") == 680.0

    def test_em_rejected(self):
        """Test non-px units raise with the offending unit in the message."""
        with pytest.raises(UnsupportedUnitError) as exc_info:
            px_value("40em")

        assert exc_info.value.unit == "em"
        assert exc_info.value.value == "40em"
        assert "'em'" in str(exc_info.value)
        assert "only px is supported" in str(exc_info.value)

    def test_unitless_rejected(self):
        with pytest.raises(UnsupportedUnitError):
            px_value("680")

    def test_error_hierarchy(self):
        """Test unit errors are SizesErrors and ValueErrors."""
        with pytest.raises(SizesError):
            px_value("10rem")
        with pytest.raises(ValueError):
            px_value("10%")
