"""Tests for the manifest and usage record."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from atomic_css.manifest import SECTIONS, AtomicClassEntry, Manifest, StyleClass, UsageRecord
from atomic_css.utils.errors import AtomicCSSError, ManifestConflictError


def make_class(key: str, value: str = "red") -> StyleClass:
    entry = AtomicClassEntry(property="color", class_name=f"x-{value}", value=value, priority=3000)
    return StyleClass(
        key=key,
        declarations={"color": value},
        atomic={"color": (entry,)},
        class_string=entry.class_name,
    )


class TestManifest:
    """Test cases for Manifest."""

    def setup_method(self):
        """Set up test fixtures."""
        self.manifest = Manifest()

    def test_sections(self):
        """Test every section starts empty."""
        for section in SECTIONS:
            assert self.manifest.items(section) == []
        assert len(self.manifest) == 0

    def test_put_and_get(self):
        """Test storing and fetching a class."""
        style_class = make_class("button.base")
        self.manifest.put_class(style_class)

        assert self.manifest.get_class("button.base") is style_class
        assert "button.base" in self.manifest
        assert len(self.manifest) == 1

    def test_identical_upsert_is_noop(self):
        """Test writing the same value twice is allowed."""
        self.manifest.put_class(make_class("button.base"))
        self.manifest.put_class(make_class("button.base"))

        assert len(self.manifest.classes()) == 1

    def test_conflict(self):
        """Test a different value under an existing key raises."""
        self.manifest.put_class(make_class("button.base", "red"))

        with pytest.raises(ManifestConflictError) as exc_info:
            self.manifest.put_class(make_class("button.base", "blue"))

        assert exc_info.value.section == "classes"
        assert exc_info.value.key == "button.base"

    def test_other_sections(self):
        """Test generic sections."""
        self.manifest.put("vars", "theme.color", "--x1")

        assert self.manifest.get("vars", "theme.color") == "--x1"
        assert self.manifest.items("vars") == [("theme.color", "--x1")]

    def test_unknown_section(self):
        """Test unknown sections are rejected."""
        with pytest.raises(AtomicCSSError, match="Unknown manifest section"):
            self.manifest.put("mixins", "a.b", 1)

    def test_insertion_order(self):
        """Test classes are returned in insertion order."""
        self.manifest.put_class(make_class("b.b"))
        self.manifest.put_class(make_class("a.a"))

        assert [c.key for c in self.manifest.classes()] == ["b.b", "a.a"]

    def test_clear(self):
        """Test clearing every section."""
        self.manifest.put_class(make_class("a.a"))
        self.manifest.clear()

        assert len(self.manifest) == 0

    def test_concurrent_writes(self):
        """Test independent keys can be written from several threads."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(lambda i: self.manifest.put_class(make_class(f"m.r{i}")), range(100)))

        assert len(self.manifest.classes()) == 100

    def test_style_class_entries(self):
        """Test entries are flattened in key order."""
        style_class = make_class("a.a")
        assert [e.value for e in style_class.entries()] == ["red"]


class TestUsageRecord:
    """Test cases for UsageRecord."""

    def test_mark_used(self):
        """Test marking keys."""
        usage = UsageRecord()
        usage.mark_used("a.b")
        usage.mark_all_used(["c.d", "e.f"])

        assert usage.is_used("a.b")
        assert "c.d" in usage
        assert not usage.is_used("x.y")
        assert len(usage) == 3
        assert list(usage) == ["a.b", "c.d", "e.f"]
        assert usage.keys() == {"a.b", "c.d", "e.f"}


class TestUnsetEntry:
    """Test unset entries."""

    def test_unset_entry(self):
        """Test unset entries carry no class or value."""
        entry = AtomicClassEntry.unset_entry("color", 3000)

        assert entry.unset
        assert entry.class_name is None
        assert entry.value is None
        assert entry.priority == 3000
