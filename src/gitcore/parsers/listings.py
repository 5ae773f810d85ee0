"""Parsers for line-oriented listings: tags, stashes, remotes, branches."""

from __future__ import annotations

import re

from gitcore.constants import FIELD_SEPARATOR
from gitcore.models.results import BranchInfo, RemoteInfo, StashEntry, TagInfo

__all__ = [
    "BRANCH_FORMAT",
    "parse_branches",
    "parse_remotes",
    "parse_stashes",
    "parse_tags",
]

#: ``for-each-ref --format`` value for :func:`parse_branches`. Unlike pretty
#: formats, ref formats spell a hex byte as ``%1f`` (no ``x``).
BRANCH_FORMAT = "%1f".join(
    (
        "%(refname)",
        "%(objectname)",
        "%(upstream:short)",
        "%(upstream:track)",
        "%(HEAD)",
    )
)

_STASH_RE = re.compile(r"^(stash@\{(\d+)\}):\s?(.*)$")
_REMOTE_RE = re.compile(r"^(\S+)\s+(.+?)\s+\((fetch|push)\)$")
_AHEAD_RE = re.compile(r"ahead (\d+)")
_BEHIND_RE = re.compile(r"behind (\d+)")

_REF_PREFIXES = ("refs/heads/", "refs/remotes/")


def parse_tags(raw: str) -> list[TagInfo]:
    """Parse ``git tag -l`` output, one tag name per line."""
    return [TagInfo(name=line.strip()) for line in raw.splitlines() if line.strip()]


def parse_stashes(raw: str) -> list[StashEntry]:
    """Parse ``git stash list`` lines such as ``stash@{0}: WIP on main: abc fix``."""
    stashes: list[StashEntry] = []
    for line in raw.splitlines():
        match = _STASH_RE.match(line.strip())
        if match:
            stashes.append(
                StashEntry(
                    index=int(match.group(2)),
                    ref=match.group(1),
                    description=match.group(3),
                )
            )
    return stashes


def parse_remotes(raw: str) -> list[RemoteInfo]:
    """Parse ``git remote -v`` output, grouping fetch and push URLs by name.

    Remotes keep the order in which git first lists them.
    """
    urls: dict[str, dict[str, str]] = {}
    for line in raw.splitlines():
        match = _REMOTE_RE.match(line.strip())
        if not match:
            continue
        name, url, direction = match.groups()
        urls.setdefault(name, {})[direction] = url
    return [
        RemoteInfo(
            name=name,
            fetch_url=entry.get("fetch", ""),
            push_url=entry.get("push", entry.get("fetch", "")),
        )
        for name, entry in urls.items()
    ]


def _short_ref(refname: str) -> str:
    for prefix in _REF_PREFIXES:
        if refname.startswith(prefix):
            return refname[len(prefix) :]
    return refname


def parse_branches(raw: str) -> list[BranchInfo]:
    """Parse ``for-each-ref`` output produced with :data:`BRANCH_FORMAT`."""
    branches: list[BranchInfo] = []
    for line in raw.splitlines():
        if not line.strip():
            continue
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) < 2:
            continue
        fields += [""] * (5 - len(fields))
        refname, commit_hash, upstream, track, head = fields[:5]
        name = _short_ref(refname)
        # refs/remotes/<remote>/HEAD is a symbolic pointer, not a branch
        if refname.startswith("refs/remotes/") and name.endswith("/HEAD"):
            continue
        ahead = _AHEAD_RE.search(track)
        behind = _BEHIND_RE.search(track)
        branches.append(
            BranchInfo(
                name=name,
                commit_hash=commit_hash,
                current=head.strip() == "*",
                upstream=upstream or None,
                ahead=int(ahead.group(1)) if ahead else 0,
                behind=int(behind.group(1)) if behind else 0,
            )
        )
    return branches
