"""Parse cursor entity — per-call scan state."""

from __future__ import annotations

from dataclasses import dataclass

from ini_binder.l1_entities.schema import SectionBinding


@dataclass
class ParseCursor:
    """Mutable state for one pass over a file.

    ``section`` is the active binding. ``seen_header`` distinguishes
    "before any header" from "inside a header that did not resolve".
    """

    section: SectionBinding | None = None
    seen_header: bool = False
    line: int = 0

    def enter(self, section: SectionBinding | None) -> None:
        self.seen_header = True
        self.section = section
