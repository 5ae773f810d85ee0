"""Parser for delimited ``git reflog`` output."""

from __future__ import annotations

import re

from gitcore.constants import FIELD_SEPARATOR, RECORD_SEPARATOR
from gitcore.models.results import ReflogEntry

__all__ = ["REFLOG_FORMAT", "parse_reflog"]

#: ``--format`` value for :func:`parse_reflog`.
REFLOG_FORMAT = "%H%x1f%gd%x1f%gs%x1f%ct%x1e"

_SELECTOR_INDEX_RE = re.compile(r"@\{(\d+)\}")


def parse_reflog(raw: str) -> list[ReflogEntry]:
    """Parse :data:`REFLOG_FORMAT` output into reflog entries.

    ``action`` is the number inside the selector braces (``HEAD@{3}`` ->
    ``"3"``), which need not match the record's position in the output
    when a starting offset or a date-based selector was used.
    """
    entries: list[ReflogEntry] = []
    for record in raw.split(RECORD_SEPARATOR):
        record = record.strip("\n ")
        if not record:
            continue
        fields = record.split(FIELD_SEPARATOR)
        if len(fields) < 4:
            continue
        commit_hash, selector, message, timestamp = fields[:4]
        match = _SELECTOR_INDEX_RE.search(selector)
        entries.append(
            ReflogEntry(
                hash=commit_hash,
                ref_name=selector,
                action=match.group(1) if match else "",
                message=message,
                timestamp=int(timestamp) if timestamp.strip().isdigit() else 0,
            )
        )
    return entries
