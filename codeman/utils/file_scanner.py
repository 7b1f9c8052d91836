"""File scanner — find code directories in a directory tree.

The walk is depth-first over sorted listings. A subdirectory that qualifies
as a code directory is reported and not entered; any other subdirectory is
searched recursively. The root itself is only searched, never reported.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from pathlib import Path

from codeman.config import DEFAULT_MARKER, ScanConfig
from codeman.models.code_dir import CodeDirectory
from codeman.models.language import language_from_extension

logger = logging.getLogger(__name__)


def find_code_directories(
    root: Path,
    extensions: Collection[str],
    require_git: bool = False,
    config: ScanConfig | None = None,
) -> list[CodeDirectory]:
    """Recursively collect the code directories below ``root``.

    Args:
        root: Directory to search.
        extensions: Extensions (no leading dot) that mark a source file.
        require_git: Only accept directories holding the marker directory.
        config: Marker name and exclusions; defaults to ``ScanConfig()``.

    Returns:
        Accepted directories in pre-order. No entry is a descendant of another.

    Raises:
        OSError: If any directory on the way cannot be listed. The scan
            stops; nothing found so far is returned.
    """
    config = config or ScanConfig()
    code_dirs: list[CodeDirectory] = []
    _search_dir(Path(root), set(extensions), require_git, config, code_dirs)
    return code_dirs


def _search_dir(
    directory: Path,
    extensions: set[str],
    require_git: bool,
    config: ScanConfig,
    code_dirs: list[CodeDirectory],
) -> None:
    for child in _list_dir(directory):
        if not child.is_dir() or _is_excluded(child, config):
            continue

        code_dir = is_code_directory(child, extensions, require_git, config.marker)
        if code_dir is not None:
            logger.debug("Accepted %s (%s)", child, code_dir.language)
            code_dirs.append(code_dir)
        else:
            logger.debug("Descending into %s", child)
            _search_dir(child, extensions, require_git, config, code_dirs)


def is_code_directory(
    directory: Path,
    extensions: Collection[str],
    require_git: bool = False,
    marker: str = DEFAULT_MARKER,
) -> CodeDirectory | None:
    """Classify a single directory by looking at its direct children.

    The first matching file in name order decides the language.
    Returns None when nothing matches, or when ``require_git`` is set and
    the marker directory is missing.
    """
    has_git = False
    match: str | None = None

    for child in _list_dir(directory):
        if child.name == marker and child.is_dir():
            has_git = True
        elif match is None and child.is_file():
            ext = child.suffix[1:]
            if ext and ext in extensions:
                match = ext

    if require_git and not has_git:
        return None
    if match is None:
        return None
    return CodeDirectory(
        path=directory,
        language=language_from_extension(match),
        has_git=has_git,
    )


def _list_dir(directory: Path) -> list[Path]:
    """List direct children sorted by name so results are reproducible."""
    return sorted(directory.iterdir(), key=lambda p: p.name)


def _is_excluded(path: Path, config: ScanConfig) -> bool:
    if path.name in config.ignore_dirs:
        return True
    return path.name == config.marker and not config.descend_into_marker
