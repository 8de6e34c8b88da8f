"""Concrete repository implementations."""

from .file_grow_snapshot_repository import FileGrowSnapshotRepository

__all__ = [
    "FileGrowSnapshotRepository",
]
