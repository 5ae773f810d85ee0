"""Parsers for fetch, push and pull output.

Fetch reports ref updates on stderr in git's summary format::

     * [new branch]      feature-a  -> origin/feature-a
     + 1a2b3c4...5d6e7f8 rewrite    -> origin/rewrite  (forced update)
       1a2b3c4..5d6e7f8  main       -> origin/main
     - [deleted]         (none)     -> origin/old

Push is run with ``--porcelain`` and reports one tab-separated line per ref
on stdout::

    *\trefs/heads/feature:refs/heads/feature\t[new branch]
    !\trefs/heads/main:refs/heads/main\t[rejected] (non-fast-forward)
"""

from __future__ import annotations

import re

from gitcore.models.results import PullStrategy

__all__ = [
    "detect_pull_strategy",
    "has_push_rejections",
    "parse_fetch_refs",
    "parse_push_refs",
]

_FETCH_REF_RE = re.compile(
    r"^\s*(?P<flag>[+\-t*!=])?\s*"
    r"(?P<summary>\[[^\]]+\]|[0-9a-f]+\.\.\.?[0-9a-f]+)\s+"
    r"(?P<src>\S+)\s+->\s+(?P<dst>\S+)"
)
_PUSH_PORCELAIN_RE = re.compile(
    r"^(?P<flag>[ +\-*!=])\t(?P<refs>[^\t]+)\t(?P<summary>.*)$"
)

_HEADS_PREFIX = "refs/heads/"
_TAGS_PREFIX = "refs/tags/"


def _short(ref: str) -> str:
    for prefix in (_HEADS_PREFIX, _TAGS_PREFIX):
        if ref.startswith(prefix):
            return ref[len(prefix) :]
    return ref


def parse_fetch_refs(stderr: str) -> tuple[list[str], list[str]]:
    """Parse fetch ref-update lines.

    Returns:
        ``(fetched_refs, pruned_refs)``. Fetched refs are source names
        (``feature-a``); pruned refs are the deleted tracking refs
        (``origin/old``). Up-to-date and rejected lines are ignored.
    """
    fetched: list[str] = []
    pruned: list[str] = []
    for line in stderr.splitlines():
        match = _FETCH_REF_RE.match(line)
        if not match:
            continue
        flag = match.group("flag") or " "
        if flag == "-":
            pruned.append(match.group("dst"))
        elif flag in (" ", "+", "*", "t"):
            fetched.append(match.group("src"))
    return fetched, pruned


def parse_push_refs(stdout: str) -> tuple[list[str], list[str]]:
    """Parse ``git push --porcelain`` ref lines.

    Returns:
        ``(pushed_refs, rejected_refs)`` as short source ref names.
        Up-to-date refs appear in neither list.
    """
    pushed: list[str] = []
    rejected: list[str] = []
    for line in stdout.splitlines():
        match = _PUSH_PORCELAIN_RE.match(line)
        if not match:
            continue
        src, _, dst = match.group("refs").partition(":")
        name = _short(src or dst)
        flag = match.group("flag")
        if flag == "!":
            rejected.append(name)
        elif flag in (" ", "+", "*", "-"):
            pushed.append(name)
    return pushed, rejected


def has_push_rejections(stdout: str) -> bool:
    """True if ``git push --porcelain`` output reports at least one rejected ref."""
    return any(
        match is not None and match.group("flag") == "!"
        for match in map(_PUSH_PORCELAIN_RE.match, stdout.splitlines())
    )


def detect_pull_strategy(output: str, *, rebase: bool) -> PullStrategy:
    """Name the integration git used for a pull."""
    if rebase:
        return "rebase"
    if "Fast-forward" in output or "Already up to date" in output:
        return "fast-forward"
    return "merge"
