"""Attachment ranking and report labels."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from attachment_sizer.config import AppConfig
from attachment_sizer.ingestion.metadata_loader import check_archive_layout, load_attachments
from attachment_sizer.models import AttachmentRecord, SizedAttachment
from attachment_sizer.utils.files import file_size, require_file, resolve_asset_path
from attachment_sizer.utils.text import format_size

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class LabelStats:
    labels: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def measure_attachments(records: Sequence[AttachmentRecord], config: AppConfig) -> list[SizedAttachment]:
    """Pair every record with the size of the file it points at."""
    total = len(records)
    sized: list[SizedAttachment] = []
    for index, record in enumerate(records, start=1):
        LOGGER.debug("Processing attachment %d/%d", index, total)
        path = resolve_asset_path(record.asset_url, config.working_dir, config.asset_url_prefix)
        sized.append(SizedAttachment(record=record, size=file_size(require_file(path))))
    return sized


def rank_by_size(sized: Iterable[SizedAttachment]) -> list[SizedAttachment]:
    """Largest first; equal sizes keep their discovery order."""
    return sorted(sized, key=lambda item: item.size, reverse=True)


def format_label(record: AttachmentRecord, size: int) -> str | None:
    parent = record.parent_ref
    if parent is None:
        return None
    return f"{record.asset_name} ({parent}) - {format_size(size)}"


def build_labels(ranked: Iterable[SizedAttachment]) -> LabelStats:
    """Label ranked attachments, skipping those without a parent context."""
    stats = LabelStats()
    for item in ranked:
        label = format_label(item.record, item.size)
        if label is None:
            LOGGER.warning(
                "Could not find issue, pull request or issue comment for attachment %s. Skipping...",
                item.record.asset_name,
            )
            stats.skipped.append(item.record.asset_name)
            continue
        stats.labels.append(label)
    return stats


def process_attachments(config: AppConfig) -> list[str]:
    """Run the whole inventory for ``config.working_dir`` and return report lines."""
    check_archive_layout(config)

    LOGGER.info("Reading attachments metadata files to find attachments...")
    records = load_attachments(config.working_dir, config.metadata_pattern)
    LOGGER.info("Found %d attachment(s)", len(records))

    sized = measure_attachments(records, config)

    LOGGER.info("Sorting attachments by size...")
    stats = build_labels(rank_by_size(sized))
    if stats.skipped:
        LOGGER.info("Skipped %d attachment(s) without a parent", len(stats.skipped))
    return stats.labels
