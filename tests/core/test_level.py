"""
Test module for loghaven.core.level
"""

import pytest

from loghaven.core.level import Level


class TestLevel:
    """Test cases for Level ordering and lookup."""

    def test_standard_levels_are_ordered(self):
        ordered = [
            Level.ALL, Level.VERBOSE, Level.TRACE, Level.DEBUG, Level.INFO,
            Level.NOTICE, Level.WARN, Level.ERROR, Level.SEVERE, Level.CRITICAL,
            Level.ALERT, Level.FATAL, Level.EMERGENCY, Level.OFF,
        ]
        assert sorted(reversed(ordered)) == ordered

    def test_comparison_uses_value(self):
        custom = Level(Level.INFO.value + 1, "CUSTOM")

        assert custom > Level.INFO
        assert custom < Level.WARN
        assert custom != Level.INFO

    def test_same_value_different_name_orders_as_equal(self):
        """Ordering ignores the name; equality does not."""
        custom_warn = Level(Level.WARN.value, "CUSTOM_WARN")

        assert not custom_warn > Level.WARN
        assert not custom_warn < Level.WARN
        assert custom_warn >= Level.WARN
        assert custom_warn <= Level.WARN
        assert Level.WARN >= custom_warn
        assert custom_warn != Level.WARN

    def test_equal_levels_hash_equal(self):
        assert Level(40000, "INFO") == Level.INFO
        assert hash(Level(40000, "INFO")) == hash(Level.INFO)

    @pytest.mark.parametrize("name,expected", [
        ("debug", Level.DEBUG),
        (" Error ", Level.ERROR),
        ("WARNING", Level.WARN),
        ("off", Level.OFF),
    ])
    def test_from_name(self, name, expected):
        assert Level.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown level"):
            Level.from_name("LOUD")

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            Level(1, "")

    def test_display_name_defaults_to_name(self):
        assert Level.ERROR.display_name == "ERROR"
        assert Level(5, "LOW", "low").display_name == "low"
        assert str(Level.DEBUG) == "DEBUG"
