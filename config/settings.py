"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Snapshot paths
DATA_DIR = BASE_DIR / "data"
BATCHES_FILE = Path(os.getenv("HARVEST_BATCHES_FILE", str(DATA_DIR / "batches.csv")))
STRAINS_FILE = Path(os.getenv("HARVEST_STRAINS_FILE", str(DATA_DIR / "strains.csv")))

# Export directory
EXPORT_DIR = Path(os.getenv("HARVEST_EXPORT_DIR", str(DATA_DIR / "exports")))

# Stage definitions (default durations in days)
STAGE_DEFINITIONS = {
    "spawning": {
        "label": "Spawning",
        "next_stage": "colonization",
        "typical_days_min": 1,
        "typical_days_max": 3,
    },
    "colonization": {
        "label": "Colonization",
        "next_stage": "fruiting",
        "typical_days_min": 14,
        "typical_days_max": 28,
    },
    "fruiting": {
        "label": "Fruiting",
        "next_stage": "harvesting",
        "typical_days_min": 5,
        "typical_days_max": 10,
    },
    "harvesting": {
        "label": "Harvesting",
        "next_stage": "completed",
        "typical_days_min": 3,
        "typical_days_max": 7,
    },
    "completed": {"label": "Completed", "next_stage": None},
    "contaminated": {"label": "Contaminated", "next_stage": None},
    "aborted": {"label": "Aborted", "next_stage": None},
}

# Daily yield as a fraction of substrate weight
YIELD_HEURISTICS = {
    "harvesting": 0.15,
    "fruiting_near": 0.50,
    "fruiting_early": 0.30,
    "fruiting_ready_day": 5,
}

# Forecast settings
FORECAST_SETTINGS = {
    "horizon_days": 14,
    "summary_window_days": 7,
    "upcoming_transition_days": 7,
    "confidence_decay_after_day": 7,
    "timeline_max_dates": 10,
    "days_per_week": 7,
}

# API settings
API_SETTINGS = {
    "title": "Harvest Forecast API",
    "description": "Stage transition and harvest yield forecasts for mushroom grows",
    "version": "1.0.0",
}
