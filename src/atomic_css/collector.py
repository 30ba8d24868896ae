"""Gathers atomic entries from the manifest in cascade order."""

from typing import List, Optional

from .manifest import AtomicClassEntry, Manifest, UsageRecord
from .utils.logging_config import LoggerMixin


def sort_key(entry: AtomicClassEntry):
    return (entry.priority, entry.property, entry.class_name or "")


class Collector(LoggerMixin):
    """Reads compiled classes and returns deduplicated, sorted entries."""

    def collect(
        self, manifest: Manifest, usage: Optional[UsageRecord] = None
    ) -> List[AtomicClassEntry]:
        """Collect every set entry of every (used) class.

        Args:
            manifest: Manifest holding compiled classes
            usage: When given, only classes whose keys are recorded as used
                are collected

        Returns:
            Entries sorted by priority, property and class name, with one
            entry per class name
        """
        candidates: List[AtomicClassEntry] = []
        skipped = 0
        for style_class in manifest.classes():
            if usage is not None and not usage.is_used(style_class.key):
                skipped += 1
                continue
            candidates.extend(
                entry for entry in style_class.entries() if not entry.unset and entry.class_name
            )

        seen = set()
        entries = []
        for entry in sorted(candidates, key=sort_key):
            if entry.class_name in seen:
                continue
            seen.add(entry.class_name)
            entries.append(entry)

        self.logger.debug(
            "Collected atomic entries",
            extra={"entries": len(entries), "unused_classes": skipped},
        )
        return entries
