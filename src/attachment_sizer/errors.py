"""Exception types raised while inspecting an archive."""

from __future__ import annotations


class AttachmentSizerError(Exception):
    """Base class for errors reported to the user with a data error status."""


class ArchiveNotFoundError(AttachmentSizerError):
    """The working directory does not look like an extracted archive."""


class MetadataFormatError(AttachmentSizerError):
    """An attachments metadata file could not be parsed."""


class ArchiveIntegrityError(RuntimeError):
    """The archive references an attachment that cannot be read from disk.

    Not a subclass of :class:`AttachmentSizerError`: an archive that lists files
    it does not contain is corrupt, and callers should let this propagate.
    """
