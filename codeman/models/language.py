"""Language taxonomy — supported languages and their file extensions.

A single table drives everything: each row gives the CLI name, the display
name and the extensions (lowercase, no leading dot). The name and extension
lookups are built from the same rows so they always agree.
"""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """A supported programming language."""

    RUST = ("rust", "Rust", ("rs",))
    PYTHON = ("python", "Python", ("py",))
    C = ("c", "C", ("c",))
    CPP = ("cpp", "C++", ("cpp", "cc", "cxx"))
    JAVA = ("java", "Java", ("java",))
    JAVASCRIPT = ("javascript", "JavaScript", ("js",))
    TYPESCRIPT = ("typescript", "TypeScript", ("ts",))
    GO = ("go", "Go", ("go",))
    SHELL = ("shell", "Shell", ("sh",))

    def __init__(self, cli_name: str, display_name: str, extensions: tuple[str, ...]):
        self.cli_name = cli_name
        self.display_name = display_name
        self.extensions = extensions

    def __str__(self) -> str:
        return self.display_name


def _build_extension_map() -> dict[str, Language]:
    mapping: dict[str, Language] = {}
    for lang in Language:
        for ext in lang.extensions:
            # First variant in table order owns a shared extension
            mapping.setdefault(ext, lang)
    return mapping


_BY_NAME: dict[str, Language] = {lang.cli_name: lang for lang in Language}
_BY_EXTENSION: dict[str, Language] = _build_extension_map()


def extensions_of(language: Language) -> tuple[str, ...]:
    """Return the extensions associated with ``language``."""
    return language.extensions


def all_extensions() -> tuple[str, ...]:
    """Return every known extension, in table order."""
    return tuple(_BY_EXTENSION)


def language_from_extension(ext: str) -> Language | None:
    """Return the language owning ``ext``, or None if unknown.

    Matching is exact and case-sensitive; callers strip the dot and
    normalize case themselves if they want to.
    """
    return _BY_EXTENSION.get(ext)


def language_from_name(name: str) -> Language | None:
    """Return the language whose CLI name is ``name``, or None."""
    return _BY_NAME.get(name)


def language_names() -> list[str]:
    """Return the CLI names of all languages, in table order."""
    return list(_BY_NAME)
