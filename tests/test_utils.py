"""Test value formatting utilities."""

from datetime import date, datetime, timedelta, timezone

from dismax_dsl.core.utils import escape, format_boost, solr_value


class TestEscape:
    """Test Lucene escaping."""

    def test_word_characters_untouched(self):
        """Letters, digits and underscores are kept as is."""
        assert escape("blog_post42") == "blog_post42"

    def test_special_characters(self):
        """Query syntax characters are escaped."""
        assert escape("a:b") == r"a\:b"
        assert escape("(x)") == r"\(x\)"

    def test_whitespace(self):
        """Whitespace is escaped so values stay a single term."""
        assert escape("new york") == r"new\ york"


class TestFormatBoost:
    """Test boost rendering."""

    def test_float(self):
        """Floats render with repr."""
        assert format_boost(2.0) == "2.0"
        assert format_boost(1.5) == "1.5"

    def test_integer(self):
        """Integers render as floats."""
        assert format_boost(3) == "3.0"

    def test_precision(self):
        """Explicit precision rounds the value."""
        assert format_boost(1.23456, precision=2) == "1.23"


class TestSolrValue:
    """Test attribute value rendering."""

    def test_booleans(self):
        """Booleans render lowercase."""
        assert solr_value(True) == "true"
        assert solr_value(False) == "false"

    def test_numbers(self):
        """Numbers render as written."""
        assert solr_value(42) == "42"
        assert solr_value(2.5) == "2.5"

    def test_negative_number(self):
        """A leading minus is escaped."""
        assert solr_value(-3) == r"\-3"

    def test_string(self):
        """Strings are escaped."""
        assert solr_value("C++") == r"C\+\+"

    def test_naive_datetime_is_utc(self):
        """Naive datetimes are treated as UTC."""
        assert solr_value(datetime(2024, 1, 2, 3, 4, 5)) == r"2024\-01\-02T03\:04\:05Z"

    def test_aware_datetime_converted(self):
        """Aware datetimes are converted to UTC."""
        tz = timezone(timedelta(hours=9))
        value = datetime(2024, 1, 2, 9, 0, 0, tzinfo=tz)
        assert solr_value(value) == r"2024\-01\-02T00\:00\:00Z"

    def test_date(self):
        """Dates render as midnight UTC."""
        assert solr_value(date(2024, 1, 2)) == r"2024\-01\-02T00\:00\:00Z"


class TestFormatBoostEdges:
    """Test boost rendering at the edges of the float range."""

    def test_tiny_boost_warns(self, caplog):
        """A non-zero boost rounding to zero is logged."""
        with caplog.at_level("WARNING", logger="dismax_dsl.core.utils"):
            assert format_boost(0.00001) == "0.0"
        assert "rounds to zero" in caplog.text

    def test_large_boost_fixed_point(self):
        """Large boosts never use exponent notation."""
        assert format_boost(1e20) == "100000000000000000000.0"

    def test_small_boost_fixed_point(self):
        """Small boosts never use exponent notation at high precision."""
        assert format_boost(0.00005, precision=6) == "0.00005"

    def test_zero_precision(self):
        """Precision zero keeps a trailing .0."""
        assert format_boost(10, precision=0) == "10.0"

    def test_negative(self):
        """Negative boosts keep their sign."""
        assert format_boost(-1.0) == "-1.0"
