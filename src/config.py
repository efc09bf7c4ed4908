"""Environment-driven settings."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

RANKDIRS = ("TB", "BT", "LR", "RL")


@dataclass
class Settings:
    log_level: str = "WARNING"
    data_path: Path = Path("family_tree.json")
    plot_path: Path = Path("family_tree.png")
    rankdir: str = "TB"


def get_settings() -> Settings:
    """Load configuration from environment (and a local .env, if any)."""
    load_dotenv()

    log_level = os.getenv("KINSHIP_LOG_LEVEL", "WARNING").upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        log_level = "WARNING"

    rankdir = os.getenv("KINSHIP_RANKDIR", "TB").upper()
    if rankdir not in RANKDIRS:
        rankdir = "TB"

    return Settings(
        log_level=log_level,
        data_path=Path(os.getenv("KINSHIP_DATA_PATH", "family_tree.json")),
        plot_path=Path(os.getenv("KINSHIP_PLOT_PATH", "family_tree.png")),
        rankdir=rankdir,
    )
