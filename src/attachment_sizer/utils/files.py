"""Utility helpers for locating and measuring attachment files."""

from __future__ import annotations

from pathlib import Path, PurePath

from attachment_sizer.config import ASSET_URL_PREFIX
from attachment_sizer.errors import ArchiveIntegrityError


def resolve_asset_path(asset_url: str, working_dir: Path, prefix: str = ASSET_URL_PREFIX) -> Path:
    """Map an archive-relative asset URL onto a path under ``working_dir``.

    Absolute remainders and ``..`` segments would point outside the archive and
    are rejected rather than joined.
    """
    relative = PurePath(asset_url.removeprefix(prefix))
    if relative.is_absolute() or relative.anchor or ".." in relative.parts:
        raise ArchiveIntegrityError(
            f"Listed attachment `{asset_url}` points outside the archive directory `{working_dir}`."
        )
    return Path(working_dir) / relative


def require_file(path: Path) -> Path:
    """Return ``path`` if it exists, otherwise flag the archive as incomplete."""
    if not path.exists():
        raise ArchiveIntegrityError(
            f"Could not find listed attachment file `{path}`. Please make sure you're running "
            "this tool in the directory created when you extract a GitHub archive."
        )
    return path


def file_size(path: Path) -> int:
    """Return the size of ``path`` in bytes."""
    try:
        return path.stat().st_size
    except OSError as exc:
        raise ArchiveIntegrityError(f"Could not read size of attachment file `{path}`: {exc}") from exc
