"""
Configuration for the description updater.
Defaults match the repository layout; an optional JSON file can override them.
"""

import json
import logging
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional


DEFAULT_SCOPES = ["https://www.googleapis.com/auth/youtube"]
TOKEN_DIR = "google-credentials"


@dataclass
class UpdaterConfig:
    client_secrets_file: str = f"{TOKEN_DIR}/client_secret.json"
    credentials_file: str = f"{TOKEN_DIR}/credentials.json"
    descriptions_dir: str = "_descriptions"
    metadata_file: Optional[str] = None
    scopes: list[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))

    def __post_init__(self):
        if not self.metadata_file:
            self.metadata_file = str(Path(self.descriptions_dir) / "metadata.json")

    @classmethod
    def from_file(cls, config_path: str, **overrides) -> "UpdaterConfig":
        """
        Load configuration from a JSON file.

        Unknown keys are ignored. Keyword overrides that are not None win over
        values from the file.
        """
        with open(config_path) as f:
            data = json.load(f)

        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Configure console (and optional file) logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter('%(asctime)s | %(levelname)s | %(message)s')

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    # Discovery client logs every request at INFO
    logging.getLogger("googleapiclient").setLevel(logging.WARNING)
