"""File-based grow snapshot repository implementation."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd

from ...domain.entities.batch import ACTIVE_STATUS, Batch
from ...domain.entities.day_range import DayRange
from ...domain.entities.grow_stage import GrowStage
from ...domain.entities.strain import Strain
from ...domain.repositories.grow_snapshot_repository import GrowSnapshotRepository

logger = logging.getLogger(__name__)

BATCH_COLUMNS = ["id", "name", "current_stage", "spawned_at", "substrate_weight"]
STRAIN_COLUMNS = ["id", "name"]


def _to_datetime(value: Any) -> Optional[datetime]:
    """Parse a timestamp cell; aware values are converted to naive UTC."""
    if value is None or pd.isna(value):
        return None
    ts = pd.Timestamp(value)
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts.to_pydatetime()


def _optional(value: Any) -> Optional[Any]:
    if value is None or pd.isna(value):
        return None
    return value


def _record_id(value: Any) -> Optional[str]:
    """Normalize an id cell to text; Excel hands back whole numbers as numbers."""
    value = _optional(value)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _day_range(row: pd.Series, prefix: str) -> Optional[DayRange]:
    return DayRange.from_dict(
        {"min": _optional(row.get(f"{prefix}_min")), "max": _optional(row.get(f"{prefix}_max"))}
    )


class FileGrowSnapshotRepository(GrowSnapshotRepository):
    """Repository for batch and strain snapshots exported to CSV or Excel files."""

    def __init__(self, batches_file: str, strains_file: Optional[str] = None):
        """
        Initialize repository.

        Args:
            batches_file: Path to CSV/XLSX file with one row per batch
            strains_file: Path to CSV/XLSX file with one row per strain (optional)
        """
        self.batches_file = Path(batches_file)
        self.strains_file = Path(strains_file) if strains_file else None

        if not self.batches_file.exists():
            raise FileNotFoundError(f"Batch snapshot file not found: {batches_file}")
        if self.strains_file and not self.strains_file.exists():
            raise FileNotFoundError(f"Strain snapshot file not found: {strains_file}")

    def _read_table(self, path: Path, required: List[str]) -> pd.DataFrame:
        logger.info(f"Loading snapshot table from {path}")
        try:
            if path.suffix == ".xlsx":
                df = pd.read_excel(path, engine="openpyxl", dtype=object)
            else:
                df = pd.read_csv(path, dtype=object)
        except Exception as e:
            logger.error(f"Error reading snapshot file {path}: {e}")
            raise

        missing = [c for c in required if c not in df.columns]
        if missing:
            raise ValueError(f"{path} is missing required columns: {', '.join(missing)}")
        return df

    def get_batches(self) -> List[Batch]:
        """Load batches from the snapshot file."""
        df = self._read_table(self.batches_file, BATCH_COLUMNS)

        result = []
        for _, row in df.iterrows():
            try:
                stage = GrowStage(str(row["current_stage"]).strip().lower())
            except ValueError:
                raise ValueError(
                    f"Unknown stage '{row['current_stage']}' for batch {row['id']}"
                ) from None

            weight = _optional(row["substrate_weight"])
            if weight is None:
                raise ValueError(f"Batch {row['id']} has no substrate_weight")

            batch = Batch(
                id=_record_id(row["id"]),
                name=str(row["name"]),
                current_stage=stage,
                spawned_at=_to_datetime(row["spawned_at"]),
                substrate_weight=float(weight),
                strain_id=_record_id(row.get("strain_id")),
                status=_optional(row.get("status")) or ACTIVE_STATUS,
                colonization_started_at=_to_datetime(row.get("colonization_started_at")),
                fruiting_started_at=_to_datetime(row.get("fruiting_started_at")),
                first_harvest_at=_to_datetime(row.get("first_harvest_at")),
            )
            if batch.spawned_at is None:
                raise ValueError(f"Batch {batch.id} has no spawned_at date")
            result.append(batch)

        logger.info(f"Loaded {len(result)} batches")
        return result

    def get_strains(self) -> List[Strain]:
        """Load strains from the snapshot file."""
        if self.strains_file is None:
            return []

        df = self._read_table(self.strains_file, STRAIN_COLUMNS)

        result = []
        for _, row in df.iterrows():
            result.append(
                Strain(
                    id=_record_id(row["id"]),
                    name=str(row["name"]),
                    species=_optional(row.get("species")),
                    colonization_days=_day_range(row, "colonization_days"),
                    fruiting_days=_day_range(row, "fruiting_days"),
                )
            )

        logger.info(f"Loaded {len(result)} strains")
        return result
