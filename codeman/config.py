"""Scan configuration — optional YAML file controlling the directory walk."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

DEFAULT_MARKER = ".git"


@dataclass
class ScanConfig:
    """Knobs for the scanner and the listing output."""

    marker: str = DEFAULT_MARKER
    """Name of the version-control marker directory."""

    ignore_dirs: list[str] = field(default_factory=list)
    """Directory names that are neither classified nor descended into."""

    descend_into_marker: bool = False
    """Walk into the marker directory itself when its parent was not accepted."""

    show_status: bool = True
    """Append branch/dirty status to version-controlled results under ``--git``."""


def load_config(path: str | Path) -> ScanConfig:
    """Load a scan configuration from a YAML file.

    An empty file yields the defaults.

    Raises:
        ValueError: If the document is not a mapping, has unknown keys,
            or a value has the wrong type.
        yaml.YAMLError: If the file is not valid YAML.
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return ScanConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(ScanConfig)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    marker = data.get("marker", DEFAULT_MARKER)
    if not isinstance(marker, str) or not marker:
        raise ValueError(f"'marker' must be a non-empty string, got {marker!r}")

    ignore_dirs = data.get("ignore_dirs", [])
    if not isinstance(ignore_dirs, list) or not all(isinstance(d, str) for d in ignore_dirs):
        raise ValueError(f"'ignore_dirs' must be a list of strings, got {ignore_dirs!r}")

    return ScanConfig(
        marker=marker,
        ignore_dirs=ignore_dirs,
        descend_into_marker=_flag(data, "descend_into_marker", False),
        show_status=_flag(data, "show_status", True),
    )


def _flag(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value
