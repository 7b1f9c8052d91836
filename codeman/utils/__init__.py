"""Filesystem and git helpers."""
