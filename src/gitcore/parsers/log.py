"""Parsers for delimited ``git log`` / ``git show`` output.

Commit metadata is requested with ``%x1e`` (record separator) before each
commit and ``%x1f`` (unit separator) after each field, so free text such as
subjects and bodies can never be mistaken for structure. Anything git prints
after the last field of a record (``--stat`` or ``-p`` text) is the record's
trailing field.
"""

from __future__ import annotations

from gitcore.constants import FIELD_SEPARATOR, RECORD_SEPARATOR
from gitcore.models.results import CommitInfo, ObjectType, ShowResult

__all__ = [
    "COMMIT_METADATA_FORMAT",
    "LOG_FORMAT",
    "detect_object_type",
    "parse_commit_metadata",
    "parse_log",
    "parse_show",
]

_LOG_FIELDS = ("%H", "%h", "%an", "%ae", "%at", "%s", "%b", "%P")

#: ``--format`` value for :func:`parse_log`.
LOG_FORMAT = "%x1e" + "".join(f"{spec}%x1f" for spec in _LOG_FIELDS)

#: ``--format`` value for :func:`parse_commit_metadata`.
COMMIT_METADATA_FORMAT = "%an%x1f%at%x1e"

_DIFF_HEADER = "\ndiff --git"
# Printed by git between the message and the stat when both --stat and -p are on
_STAT_PATCH_SEPARATOR = "---"


def _to_int(value: str) -> int:
    value = value.strip()
    return int(value) if value.isdigit() else 0


def _drop_separator(stat: str) -> str:
    first, _, rest = stat.partition("\n")
    if first.strip() == _STAT_PATCH_SEPARATOR:
        return rest.strip()
    return stat


def _split_extra(
    extra: str, *, stat: bool, patch: bool
) -> tuple[str | None, str | None]:
    """Split trailing text into ``(stat, patch)`` according to the request."""
    extra = extra.strip("\n")
    if not extra.strip():
        return None, None
    if stat and patch:
        # --stat output comes first; the patch starts at the first diff header
        diff_start = extra.find(_DIFF_HEADER)
        if diff_start == -1:
            if extra.startswith("diff --git"):
                return None, extra
            return _drop_separator(extra.strip()) or None, None
        stat_text = _drop_separator(extra[:diff_start].strip())
        return stat_text or None, extra[diff_start + 1 :].strip()
    if patch:
        return None, extra
    if stat:
        return extra.strip(), None
    return None, None


def parse_log(raw: str, *, stat: bool = False, patch: bool = False) -> list[CommitInfo]:
    """Parse :data:`LOG_FORMAT` output into commits, newest first.

    Args:
        raw: Raw stdout of ``git log --format=<LOG_FORMAT>``.
        stat: ``--stat`` was requested.
        patch: ``-p`` was requested.

    Returns:
        Parsed commits. Empty output yields an empty list.
    """
    commits: list[CommitInfo] = []
    for record in raw.split(RECORD_SEPARATOR):
        if not record.strip("\n "):
            continue
        fields = record.lstrip("\n").split(FIELD_SEPARATOR, len(_LOG_FIELDS))
        if len(fields) < 6:
            continue
        fields += [""] * (len(_LOG_FIELDS) + 1 - len(fields))

        body = fields[6].strip("\n")
        stat_text, patch_text = _split_extra(fields[8], stat=stat, patch=patch)
        commits.append(
            CommitInfo(
                hash=fields[0],
                short_hash=fields[1],
                author=fields[2],
                author_email=fields[3],
                timestamp=_to_int(fields[4]),
                subject=fields[5],
                body=body or None,
                parents=tuple(p for p in fields[7].split(" ") if p),
                stat=stat_text,
                patch=patch_text,
            )
        )
    return commits


def parse_commit_metadata(raw: str) -> tuple[str, int, list[str]]:
    """Parse :data:`COMMIT_METADATA_FORMAT` output with ``--name-only``.

    Returns:
        ``(author, timestamp, files_changed)``.
    """
    header, _, files_part = raw.partition(RECORD_SEPARATOR)
    author, _, timestamp = header.partition(FIELD_SEPARATOR)
    files = [line.strip() for line in files_part.splitlines() if line.strip()]
    return author.strip("\n"), _to_int(timestamp), files


def detect_object_type(raw: str) -> ObjectType:
    """Infer the object type from ``git show --format=raw`` output."""
    if raw.startswith("commit "):
        return "commit"
    if raw.startswith("tree "):
        return "tree"
    if raw.startswith("tag "):
        return "tag"
    return "blob"


_RAW_HEADER_KEYS = frozenset(
    {
        "commit",
        "tree",
        "parent",
        "author",
        "committer",
        "object",
        "type",
        "tag",
        "tagger",
    }
)


def parse_show(raw: str, object_name: str) -> ShowResult:
    """Build a :class:`ShowResult` from ``git show --format=raw`` output.

    Header lines before the first blank line (``tree``, ``author``, ...)
    become ``metadata``; repeated keys such as ``parent`` are joined with a
    space. The content itself is kept verbatim.
    """
    object_type = detect_object_type(raw)
    metadata: dict[str, str] = {}
    if object_type in ("commit", "tag"):
        for line in raw.splitlines():
            if not line.strip():
                break
            key, _, value = line.partition(" ")
            if key in _RAW_HEADER_KEYS:
                metadata[key] = f"{metadata[key]} {value}" if key in metadata else value
    return ShowResult(
        object_name=object_name,
        object_type=object_type,
        content=raw,
        metadata=metadata,
    )
