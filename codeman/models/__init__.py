"""Data models for languages and discovered code directories."""
