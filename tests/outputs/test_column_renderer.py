"""
Tests for fixed-width column rendering.
"""

import pytest
from decimal import Decimal

from msgforge.core.errors import InvalidArgumentError, NullInputError
from msgforge.core.locale import get_locale
from msgforge.core.numeric import NumericFormatter, RoundingMode
from msgforge.outputs.columns import (
    BLANK_FIELD,
    CONTAINER_STATUS_LAYOUT,
    ColumnLayout,
    ColumnLayoutRenderer,
    DefaultWidths,
    fit_column,
)
from msgforge.records.dynamic import DynamicRecord
from msgforge.records.models import ContainerStatusRecord


EXPECTED_CONTAINER_LINE = (
    "      0.08"
    "   131.31"
    "   317164239"
    "         "
    "      2.90"
    "      2.80"
    "     16.40"
)


class TestColumnLayout:
    """Test suite for ColumnLayout."""

    def test_container_status_layout(self):
        """Test the default container layout."""
        assert CONTAINER_STATUS_LAYOUT.field_order == (
            "Weight", "Volume", "Barcode", BLANK_FIELD, "Length", "Width", "Height"
        )
        assert CONTAINER_STATUS_LAYOUT.widths["Barcode"] == DefaultWidths.BARCODE
        assert CONTAINER_STATUS_LAYOUT.total_width == 70

    def test_for_record_type(self):
        """Test layouts that follow a record's declared order."""
        layout = ColumnLayout.for_record_type(
            ContainerStatusRecord,
            {"Weight": 5, "Barcode": 12, "Length": 6}
        )

        assert layout.field_order == ("Barcode", "Length", "Weight")

    def test_total_width_ignores_unmapped(self):
        """Test fields without a width do not count toward the line length."""
        layout = ColumnLayout(["A", "B"], {"A": 3})
        assert layout.total_width == 3

    def test_hashable(self):
        """Test layouts can be hashed and compared."""
        first = ColumnLayout(["A"], {"A": 3})
        second = ColumnLayout(["A"], {"A": 3})

        assert first == second
        assert hash(first) == hash(second)

    @pytest.mark.parametrize("order,widths,message", [
        ([], {"A": 1}, "Field order cannot be empty"),
        (["A"], {}, "Width map cannot be empty"),
        (["A"], {"A": 0}, "positive integer"),
        (["A"], {"A": -3}, "positive integer"),
        (["A"], {"A": 2.5}, "positive integer"),
    ])
    def test_invalid_layout(self, order, widths, message):
        """Test invalid layouts are rejected."""
        with pytest.raises(InvalidArgumentError, match=message):
            ColumnLayout(order, widths)


class TestColumnLayoutRenderer:
    """Test suite for ColumnLayoutRenderer."""

    @pytest.fixture
    def renderer(self):
        """Renderer with the default layout and two-place truncation."""
        return ColumnLayoutRenderer()

    def test_container_line(self, renderer, measured_container):
        """Test the container status line."""
        result = renderer.build_message(measured_container)

        assert result == EXPECTED_CONTAINER_LINE
        assert len(result) == 70

    def test_dynamic_record(self, renderer, measured_container):
        """Test dynamic records with the same fields render identically."""
        result = renderer.build_message(measured_container.to_dynamic())
        assert result == EXPECTED_CONTAINER_LINE

    def test_right_justified(self, renderer):
        """Test values are padded on the left."""
        record = DynamicRecord({"Code": "AB"})
        assert renderer.render(record, ["Code"], {"Code": 5}) == "   AB"

    def test_overflow_keeps_leftmost(self, renderer):
        """Test overflowing values keep their leftmost characters."""
        record = DynamicRecord({"Barcode": "1234567890ABCDEF"})
        assert renderer.render(record, ["Barcode"], {"Barcode": 12}) == "1234567890AB"

    def test_exact_width(self, renderer):
        """Test values of exactly the column width are unchanged."""
        record = DynamicRecord({"Code": "ABCDE"})
        assert renderer.render(record, ["Code"], {"Code": 5}) == "ABCDE"

    def test_field_without_width_is_skipped(self, renderer):
        """Test fields missing from the width map produce no column."""
        record = DynamicRecord({"A": "x", "B": "y"})
        assert renderer.render(record, ["A", "B"], {"A": 3}) == "  x"

    def test_missing_value_is_blank_column(self, renderer):
        """Test an absent field fills its column with spaces."""
        record = DynamicRecord({"A": "x"})
        assert renderer.render(record, ["A", "B"], {"A": 2, "B": 4}) == " x    "

    def test_blank_ignores_record_value(self, renderer):
        """Test the Blank column stays blank even if the record has a value."""
        record = DynamicRecord({BLANK_FIELD: "not shown", "A": "x"})
        assert renderer.render(record, [BLANK_FIELD, "A"], {BLANK_FIELD: 3, "A": 1}) == "   x"

    def test_integer_not_scaled(self, renderer):
        """Test integer fields are not padded with decimals."""
        record = DynamicRecord({"Count": 7})
        assert renderer.render(record, ["Count"], {"Count": 4}) == "   7"

    def test_custom_formatter_and_locale(self):
        """Test the formatter and locale apply to decimal columns."""
        renderer = ColumnLayoutRenderer(
            numeric_formatter=NumericFormatter(1, RoundingMode.ROUND_UP),
            locale=get_locale("de")
        )
        record = DynamicRecord({"Weight": Decimal("0.01")})

        assert renderer.render(record, ["Weight"], {"Weight": 6}) == "   0,1"

    def test_render_layout(self, renderer):
        """Test rendering with an explicit layout."""
        layout = ColumnLayout(["A", BLANK_FIELD, "B"], {"A": 2, BLANK_FIELD: 2, "B": 2})
        record = DynamicRecord({"A": "1", "B": "2"})

        assert renderer.render_layout(record, layout) == " 1   2"

    def test_none_arguments_raise(self, renderer):
        """Test None record, order or widths are rejected."""
        record = DynamicRecord({"A": "x"})

        with pytest.raises(NullInputError):
            renderer.render(None, ["A"], {"A": 1})
        with pytest.raises(NullInputError):
            renderer.render(record, None, {"A": 1})
        with pytest.raises(NullInputError):
            renderer.render(record, ["A"], None)

    def test_empty_arguments_raise(self, renderer):
        """Test empty order or widths are rejected."""
        record = DynamicRecord({"A": "x"})

        with pytest.raises(InvalidArgumentError):
            renderer.render(record, [], {"A": 1})
        with pytest.raises(InvalidArgumentError):
            renderer.render(record, ["A"], {})


class TestFitColumn:
    """Test suite for fit_column."""

    @pytest.mark.parametrize("text,width,expected", [
        ("", 3, "   "),
        ("a", 3, "  a"),
        ("abc", 3, "abc"),
        ("abcd", 3, "abc"),
    ])
    def test_fit_column(self, text, width, expected):
        """Test padding and truncation."""
        assert fit_column(text, width) == expected
