"""Parsers for working tree commands: clean, checkout, merge and diff stats."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gitcore.parsers.conflicts import CONFLICT_MARKER

__all__ = [
    "NumstatSummary",
    "parse_checkout_files",
    "parse_clean",
    "parse_merge_stat_files",
    "parse_numstat",
    "parse_rebased_count",
]

_CLEAN_PREFIXES = ("Would remove ", "Removing ")
_CHECKOUT_NOISE = ("Switched", "Already", "Updated", "Your branch", "Reset branch")
_CHECKOUT_STATUS_RE = re.compile(r"^[A-Z]\t(.+)$")
_STAT_LINE_RE = re.compile(r"^\s*(.+?)\s+\|\s+(?:\d+|Bin)")
_REBASE_COUNT_RE = re.compile(r"Rebasing \((\d+)/(\d+)\)")


@dataclass(frozen=True, slots=True)
class NumstatSummary:
    """Totals from ``git diff --numstat``."""

    files: tuple[str, ...] = ()
    insertions: int = 0
    deletions: int = 0
    binary: bool = False


def parse_clean(raw: str) -> tuple[list[str], list[str]]:
    """Parse ``git clean`` output.

    Returns:
        ``(files, directories)``. Directories keep their trailing slash.
    """
    files: list[str] = []
    directories: list[str] = []
    for line in raw.splitlines():
        for prefix in _CLEAN_PREFIXES:
            if line.startswith(prefix):
                path = line[len(prefix) :].strip()
                if path.endswith("/"):
                    directories.append(path)
                elif path:
                    files.append(path)
                break
    return files, directories


def parse_checkout_files(raw: str) -> list[str]:
    """Return the paths ``git checkout`` reports, dropping status chatter."""
    files: list[str] = []
    for line in raw.splitlines():
        line = line.strip()
        if not line or line.startswith(_CHECKOUT_NOISE):
            continue
        match = _CHECKOUT_STATUS_RE.match(line)
        files.append(match.group(1) if match else line)
    return files


def parse_merge_stat_files(raw: str) -> list[str]:
    """Return file names from diffstat lines such as `` src/app.py | 4 ++--``."""
    files: list[str] = []
    for line in raw.splitlines():
        if CONFLICT_MARKER in line:
            continue
        match = _STAT_LINE_RE.match(line)
        if match:
            files.append(match.group(1).strip())
    return files


def parse_numstat(raw: str) -> NumstatSummary:
    """Parse ``git diff --numstat`` lines (``added<TAB>deleted<TAB>path``).

    Binary files report ``-`` for both counts; they are counted as changed
    files and set ``binary``.
    """
    files: list[str] = []
    insertions = 0
    deletions = 0
    binary = False
    for line in raw.splitlines():
        parts = line.split("\t", 2)
        if len(parts) != 3:
            continue
        added, deleted, path = parts
        files.append(path)
        if added == "-" and deleted == "-":
            binary = True
            continue
        if added.isdigit():
            insertions += int(added)
        if deleted.isdigit():
            deletions += int(deleted)
    return NumstatSummary(
        files=tuple(files),
        insertions=insertions,
        deletions=deletions,
        binary=binary,
    )


def parse_rebased_count(raw: str) -> int:
    """Count replayed commits from rebase output.

    Recognizes the ``Applying:`` lines of the apply backend and the
    ``Rebasing (n/m)`` progress of the merge backend. Returns 0 when git
    printed neither.
    """
    applied = sum(1 for line in raw.splitlines() if line.startswith("Applying: "))
    if applied:
        return applied
    totals = [int(total) for _, total in _REBASE_COUNT_RE.findall(raw)]
    return max(totals, default=0)
