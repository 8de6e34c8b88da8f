"""Repository interfaces."""

from .grow_snapshot_repository import GrowSnapshotRepository

__all__ = [
    "GrowSnapshotRepository",
]
