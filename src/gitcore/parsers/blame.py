"""Parser for ``git blame --porcelain`` output.

Each line of the file is reported as a block::

    <sha> <orig-line> <final-line> [<group-size>]
    author <name>
    author-time <unix>
    summary <text>
    filename <path>
    <TAB><line content>

Metadata lines appear only the first time a commit is seen in a run, so
the parser remembers metadata per commit hash and reuses it for later
blocks attributed to the same commit.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from gitcore.models.results import BlameLine

__all__ = ["parse_blame"]

_HEADER_RE = re.compile(r"^([0-9a-f]{4,64}) (\d+) (\d+)(?: (\d+))?$")


@dataclass(slots=True)
class _CommitMeta:
    author: str = ""
    timestamp: int = 0
    summary: str = ""
    filename: str = ""


def parse_blame(raw: str) -> list[BlameLine]:
    """Parse porcelain blame output into one :class:`BlameLine` per line."""
    lines: list[BlameLine] = []
    known: dict[str, _CommitMeta] = {}
    current_hash: str | None = None
    current_line = 0

    for line in raw.split("\n"):
        if current_hash is None:
            match = _HEADER_RE.match(line)
            if match:
                current_hash = match.group(1)
                current_line = int(match.group(3))
                known.setdefault(current_hash, _CommitMeta())
            continue

        meta = known[current_hash]
        if line.startswith("\t"):
            lines.append(
                BlameLine(
                    commit_hash=current_hash,
                    line_number=current_line,
                    author=meta.author,
                    timestamp=meta.timestamp,
                    summary=meta.summary,
                    content=line[1:],
                )
            )
            current_hash = None
            continue

        key, _, value = line.partition(" ")
        if key == "author":
            meta.author = value
        elif key == "author-time":
            meta.timestamp = int(value) if value.isdigit() else 0
        elif key == "summary":
            meta.summary = value
        elif key == "filename":
            meta.filename = value

    return lines
