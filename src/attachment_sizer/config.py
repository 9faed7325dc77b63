"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

FIRST_METADATA_FILENAME = "attachments_000001.json"
METADATA_PATTERN = "attachments_*.json"
ATTACHMENTS_DIRNAME = "attachments"
ASSET_URL_PREFIX = "tarball://root/"


@dataclass(slots=True)
class AppConfig:
    working_dir: Path = field(default_factory=lambda: Path("."))
    metadata_pattern: str = METADATA_PATTERN
    first_metadata_filename: str = FIRST_METADATA_FILENAME
    attachments_dirname: str = ATTACHMENTS_DIRNAME
    asset_url_prefix: str = ASSET_URL_PREFIX

    def __post_init__(self) -> None:
        self.working_dir = Path(self.working_dir)

    def first_metadata_path(self) -> Path:
        return self.working_dir / self.first_metadata_filename

    def attachments_dir_path(self) -> Path:
        return self.working_dir / self.attachments_dirname
