"""Tests for the expand_to_longhands strategy."""

import pytest

from atomic_css.shorthand import ExpandToLonghands, get_strategy, split_css_value, split_important


class TestHelpers:
    """Test value splitting helpers."""

    def test_split_respects_parentheses(self):
        """Test parenthesized groups stay whole."""
        assert split_css_value("calc(1px + 2px) 4px") == ["calc(1px + 2px)", "4px"]

    def test_split_important(self):
        """Test the !important flag is detected."""
        assert split_important("1px 2px !important") == ("1px 2px", True)
        assert split_important("1px") == ("1px", False)


class TestExpandToLonghands:
    """Test cases for ExpandToLonghands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.strategy = get_strategy("expand_to_longhands")

    def test_strategy_type(self):
        """Test the strategy is selected by name."""
        assert isinstance(self.strategy, ExpandToLonghands)

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("10px", ["10px", "10px", "10px", "10px"]),
            ("10px 20px", ["10px", "20px", "10px", "20px"]),
            ("1px 2px 3px", ["1px", "2px", "3px", "2px"]),
            ("1px 2px 3px 4px", ["1px", "2px", "3px", "4px"]),
        ],
    )
    def test_margin_distribution(self, value, expected):
        """Test the box model distribution."""
        result = self.strategy.expand_declaration("margin", value)

        assert [prop for prop, _ in result] == [
            "margin-top",
            "margin-right",
            "margin-bottom",
            "margin-left",
        ]
        assert [v for _, v in result] == expected

    def test_important_preserved(self):
        """Test !important is kept on every longhand."""
        result = self.strategy.expand_declaration("padding", "1px 2px !important")
        assert [v for _, v in result] == [
            "1px !important",
            "2px !important",
            "1px !important",
            "2px !important",
        ]

    def test_parentheses(self):
        """Test functions are not split."""
        result = self.strategy.expand_declaration("margin", "calc(1px + 2px) 0")
        assert dict(result)["margin-top"] == "calc(1px + 2px)"
        assert dict(result)["margin-right"] == "0"

    def test_pair(self):
        """Test two-value shorthands."""
        assert self.strategy.expand_declaration("gap", "1px 2px") == [
            ("row-gap", "1px"),
            ("column-gap", "2px"),
        ]
        assert self.strategy.expand_declaration("overflow", "hidden") == [
            ("overflow-x", "hidden"),
            ("overflow-y", "hidden"),
        ]

    def test_border_radius_slash(self):
        """Test horizontal and vertical radii are paired."""
        result = dict(self.strategy.expand_declaration("border-radius", "10px 20px / 5px"))
        assert result == {
            "border-top-left-radius": "10px 5px",
            "border-top-right-radius": "20px 5px",
            "border-bottom-right-radius": "10px 5px",
            "border-bottom-left-radius": "20px 5px",
        }

    def test_border_radius_equal_radii(self):
        """Test equal radii collapse to one value."""
        result = dict(self.strategy.expand_declaration("border-radius", "4px / 4px"))
        assert result["border-top-left-radius"] == "4px"

    def test_list_style(self):
        """Test list-style keyword classification."""
        result = dict(self.strategy.expand_declaration("list-style", "square inside"))
        assert result == {"list-style-type": "square", "list-style-position": "inside"}

    def test_list_style_image(self):
        """Test url() values go to list-style-image."""
        result = dict(self.strategy.expand_declaration("list-style", "url(a.png) outside"))
        assert result == {"list-style-position": "outside", "list-style-image": "url(a.png)"}

    def test_numbers_copied(self):
        """Test numeric values fill every longhand."""
        result = self.strategy.expand_declaration("margin", 4)
        assert [v for _, v in result] == [4, 4, 4, 4]

    def test_unparseable_value_passes_through(self):
        """Test too many parts keep the shorthand."""
        assert self.strategy.expand_declaration("margin", "1px 2px 3px 4px 5px") == [
            ("margin", "1px 2px 3px 4px 5px")
        ]

    def test_unregistered(self):
        """Test properties without an expansion pass through."""
        assert self.strategy.expand_declaration("color", "red") == [("color", "red")]

    def test_conditions_regrouped(self):
        """Test each longhand gets its own condition map."""
        result = self.strategy.expand_shorthand_conditions(
            "margin", {"default": "1px", ":hover": "1px 2px"}
        )

        assert result == [
            ("margin-top", {"default": "1px", ":hover": "1px"}),
            ("margin-right", {"default": "1px", ":hover": "2px"}),
            ("margin-bottom", {"default": "1px", ":hover": "1px"}),
            ("margin-left", {"default": "1px", ":hover": "2px"}),
        ]
