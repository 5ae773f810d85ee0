"""Parser for ``git worktree list --porcelain`` output.

Blocks are separated by blank lines and start with ``worktree <path>``.
``HEAD`` and ``branch`` carry values; ``bare``, ``detached``, ``locked``
and ``prunable`` are flags whose presence alone sets them (``locked`` and
``prunable`` may be followed by a reason).
"""

from __future__ import annotations

from typing import Any

from gitcore.models.results import WorktreeInfo

__all__ = ["parse_pruned_worktrees", "parse_worktrees"]


def parse_worktrees(raw: str) -> list[WorktreeInfo]:
    """Parse porcelain worktree listing into :class:`WorktreeInfo` records."""
    worktrees: list[WorktreeInfo] = []
    current: dict[str, Any] | None = None

    for line in raw.splitlines():
        if not line.strip():
            if current is not None:
                worktrees.append(WorktreeInfo(**current))
                current = None
            continue

        key, _, value = line.partition(" ")
        if key == "worktree":
            if current is not None:
                worktrees.append(WorktreeInfo(**current))
            current = {"path": value}
        elif current is None:
            continue
        elif key == "HEAD":
            current["head"] = value
        elif key == "branch":
            current["branch"] = value
        elif key == "detached":
            current["detached"] = True
        elif key == "bare":
            current["bare"] = True
        elif key == "locked":
            current["locked"] = True
            current["lock_reason"] = value or None
        elif key == "prunable":
            current["prunable"] = True

    if current is not None:
        worktrees.append(WorktreeInfo(**current))
    return worktrees


def parse_pruned_worktrees(raw: str) -> list[str]:
    """Parse ``git worktree prune --verbose`` output.

    Lines look like ``Removing worktrees/name: gitdir file points to
    non-existent location``; the administrative name is returned.
    """
    pruned: list[str] = []
    for line in raw.splitlines():
        line = line.strip()
        if not line.startswith("Removing "):
            continue
        name = line[len("Removing ") :].split(":", 1)[0].strip()
        if name:
            pruned.append(name)
    return pruned
