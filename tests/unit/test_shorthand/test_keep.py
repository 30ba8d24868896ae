"""Tests for the keep_shorthands strategy."""

from atomic_css.shorthand import KeepShorthands, get_strategy
from atomic_css.config import ShorthandStrategyName


class TestKeepShorthands:
    """Test cases for KeepShorthands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.strategy = KeepShorthands()

    def test_default_strategy(self):
        """Test keep_shorthands is the default."""
        assert isinstance(get_strategy(), KeepShorthands)
        assert self.strategy.name == ShorthandStrategyName.KEEP_SHORTHANDS

    def test_margin_resets_longhands(self):
        """Test margin keeps its value and unsets the longhands it covers."""
        result = self.strategy.expand_declaration("margin", "10px")

        assert result[0] == ("margin", "10px")
        reset = dict(result[1:])
        assert set(reset.values()) == {None}
        assert "margin-top" in reset
        assert "margin-inline-start" in reset
        assert "margin-left" in reset

    def test_alias(self):
        """Test logical aliases rewrite the property."""
        assert self.strategy.expand_declaration("margin-block-start", 4) == [("margin-top", 4)]

    def test_unregistered_property(self):
        """Test unknown properties pass through."""
        assert self.strategy.expand_declaration("color", "red") == [("color", "red")]

    def test_split_pair(self):
        """Test two-part values are split between longhands."""
        assert self.strategy.expand_declaration("contain-intrinsic-size", "10px 20px") == [
            ("contain-intrinsic-width", "10px"),
            ("contain-intrinsic-height", "20px"),
        ]

    def test_split_pair_single_value(self):
        """Test one part fills both longhands."""
        assert self.strategy.expand_declaration("overscroll-behavior", "contain") == [
            ("overscroll-behavior-x", "contain"),
            ("overscroll-behavior-y", "contain"),
        ]

    def test_split_pair_auto_keyword(self):
        """Test auto prefixes stay with their length."""
        assert self.strategy.expand_declaration("contain-intrinsic-size", "auto 10px 20px") == [
            ("contain-intrinsic-width", "auto 10px"),
            ("contain-intrinsic-height", "20px"),
        ]

    def test_split_pair_important(self):
        """Test !important is carried to both parts."""
        assert self.strategy.expand_declaration("overscroll-behavior", "auto contain !important") == [
            ("overscroll-behavior-x", "auto !important"),
            ("overscroll-behavior-y", "contain !important"),
        ]

    def test_conditions_regrouped(self):
        """Test conditional values keep their branches under the shorthand."""
        result = self.strategy.expand_shorthand_conditions(
            "margin", {"default": "1px", ":hover": "2px"}
        )

        assert result == [("margin", {"default": "1px", ":hover": "2px"})]
