"""Tests for vendor-prefixed selector expansion."""

from atomic_css.selectors.prefixer import SelectorPrefixer


class TestSelectorPrefixer:
    """Test cases for SelectorPrefixer."""

    def setup_method(self):
        """Set up test fixtures."""
        self.prefixer = SelectorPrefixer()

    def test_placeholder(self):
        """Test ::placeholder expands to every browser variant."""
        assert self.prefixer.prefix(".x1::placeholder") == (
            ".x1::-webkit-input-placeholder, .x1::-moz-placeholder, "
            ".x1:-ms-input-placeholder, .x1::placeholder"
        )

    def test_suffix_is_kept(self):
        """Test text after the match is carried into each variant."""
        assert self.prefixer.prefix(".x1:fullscreen:hover") == (
            ".x1:-webkit-full-screen:hover, .x1:-moz-full-screen:hover, .x1:fullscreen:hover"
        )

    def test_placeholder_shown_is_not_placeholder(self):
        """Test the pseudo-class is not confused with the pseudo-element."""
        assert self.prefixer.prefix(".x1:placeholder-shown") == (
            ".x1:-moz-placeholder-shown, .x1:placeholder-shown"
        )

    def test_no_match(self):
        """Test selectors without prefixed pseudos are unchanged."""
        assert not self.prefixer.needs_prefix(".x1:hover")
        assert self.prefixer.prefix(".x1:hover") == ".x1:hover"

    def test_needs_prefix(self):
        """Test detection of prefixed pseudos."""
        assert self.prefixer.needs_prefix(".x1::thumb")

    def test_custom_table(self):
        """Test a custom prefix table."""
        prefixer = SelectorPrefixer({"::marker": ("::-moz-marker", "::marker")})
        assert prefixer.prefix(".a::marker") == ".a::-moz-marker, .a::marker"

    def test_empty_table(self):
        """Test an empty table never prefixes."""
        prefixer = SelectorPrefixer({})
        assert prefixer.prefix(".a::placeholder") == ".a::placeholder"
        assert not prefixer.needs_prefix(".a::placeholder")
