"""Tests for combined condition parsing."""

import pytest

from atomic_css.selectors.condition import parse_combined, split_at_rules


class TestParseCombined:
    """Test splitting conditions into pseudo and at-rule parts."""

    @pytest.mark.parametrize(
        "selector,expected",
        [
            (":hover", (":hover", None)),
            ("@media (min-width: 800px)", (None, "@media (min-width: 800px)")),
            ("@media (min-width: 800px):hover", (":hover", "@media (min-width: 800px)")),
            (":hover@media (min-width: 800px)", (":hover", "@media (min-width: 800px)")),
            (
                "@supports (display: grid)@media (min-width: 800px)",
                (None, "@supports (display: grid)@media (min-width: 800px)"),
            ),
            (
                "@media (min-width: 800px):focus:hover",
                (":focus:hover", "@media (min-width: 800px)"),
            ),
            (
                ":not([data-theme])@media (prefers-color-scheme: dark)",
                (":not([data-theme])", "@media (prefers-color-scheme: dark)"),
            ),
            (
                "@media (hover: hover):not(:disabled)",
                (":not(:disabled)", "@media (hover: hover)"),
            ),
            (
                "@supports (display: grid)@media (min-width: 800px):hover",
                (":hover", "@supports (display: grid)@media (min-width: 800px)"),
            ),
        ],
    )
    def test_parse(self, selector, expected):
        """Test representative condition strings."""
        assert parse_combined(selector) == expected

    def test_empty(self):
        """Test empty input yields no parts."""
        assert parse_combined(None) == (None, None)
        assert parse_combined("") == (None, None)

    def test_at_rule_without_parentheses(self):
        """Test an at-rule without parentheses is kept whole."""
        assert parse_combined("@media print") == (None, "@media print")


class TestSplitAtRules:
    """Test splitting at-rule chains."""

    def test_chain(self):
        """Test each at-rule becomes its own part."""
        assert split_at_rules("@media (a)@supports (b)") == ["@media (a)", "@supports (b)"]

    def test_single(self):
        """Test a single at-rule."""
        assert split_at_rules("@media print") == ["@media print"]

    def test_empty(self):
        """Test missing at-rules."""
        assert split_at_rules(None) == []
