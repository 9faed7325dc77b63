"""Shared fixtures building extracted-archive layouts on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

PR_URL = "https://github.com/caffeinesoftware/rewardnights/pull/337"


def make_record(
    asset_name: str,
    *,
    pull_request: Optional[str] = PR_URL,
    issue: Optional[str] = None,
    issue_comment: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a metadata entry the way GitHub exports write them."""
    return {
        "type": "attachment",
        "url": f"https://user-images.githubusercontent.com/1/{asset_name}",
        "pull_request": pull_request,
        "issue": issue,
        "issue_comment": issue_comment,
        "user": "https://github.com/octocat",
        "asset_name": asset_name,
        "asset_content_type": "image/jpeg",
        "asset_url": f"tarball://root/attachments/{asset_name}",
        "created_at": "2021-04-08T10:00:00Z",
    }


@pytest.fixture
def build_archive(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing metadata files and sized attachment files.

    ``files`` is a list of metadata files, each a list of ``(record, size)`` pairs.
    """

    def _build(files: List[List[tuple]], root: Optional[Path] = None) -> Path:
        root = root or tmp_path / "archive"
        attachments = root / "attachments"
        attachments.mkdir(parents=True, exist_ok=True)
        for number, entries in enumerate(files, start=1):
            records = []
            for record, size in entries:
                if size is not None:
                    (attachments / record["asset_name"]).write_bytes(b"\0" * size)
                records.append(record)
            (root / f"attachments_{number:06d}.json").write_text(json.dumps(records))
        return root

    return _build
