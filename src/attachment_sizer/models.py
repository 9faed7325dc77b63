"""Core attachment data models."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator

LOGGER = logging.getLogger(__name__)


class AttachmentRecord(BaseModel):
    """One entry of an ``attachments_*.json`` metadata file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str = Field(alias="type")
    source_url: str = Field(alias="url")
    pull_request: str | None = None
    issue: str | None = None
    issue_comment: str | None = None
    user: str
    asset_name: str
    asset_content_type: str
    asset_url: str
    created_at: str

    @model_validator(mode="after")
    def check_single_parent(self) -> "AttachmentRecord":
        parents = [ref for ref in (self.pull_request, self.issue, self.issue_comment) if ref is not None]
        if len(parents) > 1:
            LOGGER.warning(
                "Attachment %s references more than one of pull request, issue and issue comment. "
                "Using %s",
                self.asset_name,
                parents[0],
            )
        return self

    @property
    def parent_ref(self) -> str | None:
        """Pull request, issue or issue comment the attachment belongs to.

        Checked in that order; the first populated reference wins.
        """
        for ref in (self.pull_request, self.issue, self.issue_comment):
            if ref is not None:
                return ref
        return None


@dataclass(slots=True, frozen=True)
class SizedAttachment:
    """Attachment record paired with the size of its file on disk."""

    record: AttachmentRecord
    size: int
