"""Discovery and parsing of attachments metadata files."""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import Iterator, List

from pydantic import TypeAdapter, ValidationError

from attachment_sizer.config import METADATA_PATTERN, AppConfig
from attachment_sizer.errors import ArchiveNotFoundError, MetadataFormatError
from attachment_sizer.models import AttachmentRecord

LOGGER = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[AttachmentRecord])


def check_archive_layout(config: AppConfig) -> None:
    """Raise if the first metadata file or the attachments directory is missing."""
    metadata_path = config.first_metadata_path()
    attachments_path = config.attachments_dir_path()
    if not metadata_path.exists() or not attachments_path.exists():
        raise ArchiveNotFoundError(
            f"Could not find `{metadata_path}` file and/or `{attachments_path}/` directory. "
            "This suggests that either (a) your archive contains no attachments or "
            "(b) you're not in a directory created when you extract a GitHub archive."
        )


def iter_metadata_paths(working_dir: Path, pattern: str = METADATA_PATTERN) -> Iterator[Path]:
    """Yield metadata files in ``working_dir`` matching ``pattern``, sorted by name."""
    candidates = sorted(
        (child for child in working_dir.iterdir() if fnmatch.fnmatchcase(child.name, pattern)),
        key=lambda child: child.name,
    )
    for path in candidates:
        if path.is_file():
            yield path


def read_metadata_file(path: Path) -> list[AttachmentRecord]:
    """Parse one metadata file into attachment records."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise MetadataFormatError(f"Could not read attachments metadata file `{path}`: {exc}") from exc

    try:
        return _RECORDS.validate_json(raw)
    except ValidationError as exc:
        raise MetadataFormatError(
            f"Could not parse attachments metadata file `{path}`: {exc}"
        ) from exc


def load_attachments(working_dir: Path, pattern: str = METADATA_PATTERN) -> list[AttachmentRecord]:
    """Merge the records of every metadata file, in file name order."""
    records: list[AttachmentRecord] = []
    for path in iter_metadata_paths(working_dir, pattern):
        file_records = read_metadata_file(path)
        LOGGER.debug("Read %d attachment(s) from %s", len(file_records), path.name)
        records.extend(file_records)
    return records
