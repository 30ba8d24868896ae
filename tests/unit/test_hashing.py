"""Tests for class-name hashing."""

from atomic_css.hashing import (
    atomic_class_name,
    class_name,
    create_hash,
    murmurhash2_32,
    to_base36,
)


class TestMurmurHash:
    """Test the raw hash function."""

    def test_empty_string_with_zero_seed(self):
        """Test that hashing nothing with seed 0 yields 0."""
        assert murmurhash2_32("", 0) == 0

    def test_hash_is_32_bit(self):
        """Test that results stay within 32 bits."""
        for text in ["a", "ab", "abc", "abcd", "abcde", "héllo wörld"]:
            value = murmurhash2_32(text, 1)
            assert 0 <= value <= 0xFFFFFFFF

    def test_hash_depends_on_seed(self):
        """Test that the seed changes the result."""
        assert murmurhash2_32("color", 0) != murmurhash2_32("color", 1)


class TestBase36:
    """Test base36 encoding."""

    def test_small_numbers(self):
        """Test single-digit encodings."""
        assert to_base36(0) == "0"
        assert to_base36(9) == "9"
        assert to_base36(10) == "a"
        assert to_base36(35) == "z"

    def test_multi_digit(self):
        """Test carries into the next digit."""
        assert to_base36(36) == "10"
        assert to_base36(36 * 36) == "100"


class TestClassNames:
    """Test class names against known compiler output."""

    def test_float_inline_start(self):
        """Test the class of float: inline-start."""
        assert atomic_class_name("float", "inline-start") == "x1kmio9f"

    def test_float_inline_end(self):
        """Test the class of float: inline-end."""
        assert atomic_class_name("float", "inline-end") == "x1h0q493"

    def test_fallback_list_hash(self):
        """Test that fallback lists hash their comma-joined values."""
        assert atomic_class_name("position", "sticky, fixed") == "x1ruww2u"
        assert atomic_class_name("color", "var(--color), red") == "x1nv2f59"

    def test_hash_is_deterministic(self):
        """Test that the same input always yields the same digest."""
        assert create_hash("<>colorrednull") == create_hash("<>colorrednull")

    def test_pseudo_order_does_not_matter(self):
        """Test that pseudo-classes are sorted before hashing."""
        first = atomic_class_name("color", "red", selector_suffix=":hover:active")
        second = atomic_class_name("color", "red", selector_suffix=":active:hover")
        assert first == second

    def test_conditions_change_the_class(self):
        """Test that each selector context gets its own class."""
        base = atomic_class_name("color", "red")
        hover = atomic_class_name("color", "red", selector_suffix=":hover")
        media = atomic_class_name("color", "red", at_rule="@media (min-width: 800px)")
        element = atomic_class_name("color", "red", pseudo_element="::before")

        assert len({base, hover, media, element}) == 4

    def test_prefix(self):
        """Test a custom class name prefix."""
        name = atomic_class_name("float", "inline-start", prefix="s")
        assert name == "s1kmio9f"

    def test_debug_class_names(self):
        """Test readable class names in debug mode."""
        name = class_name("float", "inline-start", [], [], debug=True)
        assert name == "float-x1kmio9f"
