"""CodeDirectory — one directory accepted by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from codeman.models.language import Language


@dataclass(frozen=True)
class CodeDirectory:
    """A directory classified as holding source code."""

    path: Path
    language: Language | None = None
    has_git: bool = False
    """True when a version-control marker directory sits directly inside ``path``."""

    def render(self, display_path: str | None = None) -> str:
        """Return the listing line: ``<path>: <language> <Git>``.

        Absent parts render as empty strings, so the separating spaces stay.
        ``display_path`` replaces ``path`` in the line when given.
        """
        shown = display_path if display_path is not None else str(self.path)
        lang = str(self.language) if self.language is not None else ""
        git = "Git" if self.has_git else ""
        return f"{shown}: {lang} {git}"

    def __str__(self) -> str:
        return self.render()
