"""Typed result models returned by :class:`~gitcore.client.GitClient`.

All models are frozen dataclasses with ``to_dict()``. Collections are
tuples and are empty, never ``None``, when git reports nothing.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Literal

# =============================================================================
# Shared value types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RenamePair:
    """An old and new name (branch, remote, worktree path or file path)."""

    old: str
    new: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MergeConflict:
    """One ``CONFLICT (reason): ...`` line reported by git.

    Attributes:
        reason: Text inside the parentheses (e.g. ``"content"``).
        path: Conflicted path.
        message: The full conflict line.
    """

    reason: str
    path: str
    message: str = ""

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


# =============================================================================
# Repository setup
# =============================================================================


@dataclass(frozen=True, slots=True)
class InitResult:
    """Result of ``git init``."""

    path: str
    initial_branch: str | None
    bare: bool = False
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CloneResult:
    """Result of ``git clone``."""

    remote_url: str
    local_path: str
    branch: str
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


# =============================================================================
# Working tree and index
# =============================================================================


@dataclass(frozen=True, slots=True)
class StagedChanges:
    """Index changes relative to HEAD."""

    added: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()
    deleted: tuple[str, ...] = ()
    renamed: tuple[RenamePair, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class UnstagedChanges:
    """Working tree changes relative to the index."""

    modified: tuple[str, ...] = ()
    deleted: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class StatusResult:
    """Result of ``git status --porcelain=v2 -b``.

    Attributes:
        current_branch: Checked-out branch, or None when HEAD is detached.
        is_clean: True when there are no changes of any kind.
        staged_changes: Index changes.
        unstaged_changes: Working tree changes.
        untracked_files: Untracked paths.
        conflicted_files: Unmerged paths.
        commit: HEAD commit, or None in an empty repository.
        upstream: Upstream branch, if configured.
        ahead: Commits ahead of upstream.
        behind: Commits behind upstream.
    """

    current_branch: str | None
    is_clean: bool
    staged_changes: StagedChanges = field(default_factory=StagedChanges)
    unstaged_changes: UnstagedChanges = field(default_factory=UnstagedChanges)
    untracked_files: tuple[str, ...] = ()
    conflicted_files: tuple[str, ...] = ()
    commit: str | None = None
    upstream: str | None = None
    ahead: int = 0
    behind: int = 0

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class AddResult:
    """Result of ``git add``."""

    staged_files: tuple[str, ...] = ()
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ResetResult:
    """Result of ``git reset``."""

    mode: str
    commit: str
    files_reset: tuple[str, ...] = ()
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CleanResult:
    """Result of ``git clean``. Directories keep their trailing slash."""

    files_removed: tuple[str, ...] = ()
    directories_removed: tuple[str, ...] = ()
    dry_run: bool = False
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CheckoutResult:
    """Result of ``git checkout``."""

    target: str
    branch_created: bool = False
    files_modified: tuple[str, ...] = ()
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


# =============================================================================
# History
# =============================================================================


@dataclass(frozen=True, slots=True)
class CommitInfo:
    """A single commit from ``git log``.

    Attributes:
        hash: Full commit hash.
        short_hash: Abbreviated hash.
        author: Author name.
        author_email: Author email.
        timestamp: Author time as a Unix timestamp.
        subject: First line of the message.
        body: Remainder of the message, or None when empty.
        parents: Parent hashes.
        stat: ``--stat`` text for this commit, when requested.
        patch: ``-p`` text for this commit, when requested.
    """

    hash: str
    short_hash: str
    author: str
    author_email: str
    timestamp: int
    subject: str
    body: str | None = None
    parents: tuple[str, ...] = ()
    stat: str | None = None
    patch: str | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class LogResult:
    """Result of ``git log``."""

    commits: tuple[CommitInfo, ...] = ()
    total_count: int = 0

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Result of ``git commit``."""

    commit_hash: str
    message: str
    author: str
    timestamp: int
    files_changed: tuple[str, ...] = ()
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


ObjectType = Literal["commit", "tree", "blob", "tag"]


@dataclass(frozen=True, slots=True)
class ShowResult:
    """Result of ``git show``. Content is passed through verbatim."""

    object_name: str
    object_type: ObjectType
    content: str
    metadata: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Result of ``git diff``.

    Binary files are counted in ``files_changed`` and flagged by ``binary``;
    their content in ``diff`` is git's opaque ``Binary files ... differ``.
    """

    diff: str
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0
    binary: bool = False
    untracked_files: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BlameLine:
    """Attribution of one line of a file."""

    commit_hash: str
    line_number: int
    author: str
    timestamp: int
    summary: str
    content: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BlameResult:
    """Result of ``git blame --porcelain``."""

    file: str
    lines: tuple[BlameLine, ...] = ()
    total_lines: int = 0
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ReflogEntry:
    """A reflog record.

    Attributes:
        hash: Commit the ref pointed to.
        ref_name: Selector such as ``HEAD@{3}``.
        action: Index extracted from inside the selector braces.
        message: Reflog subject (e.g. ``"commit: fix typo"``).
        timestamp: Committer time as a Unix timestamp.
    """

    hash: str
    ref_name: str
    action: str
    message: str
    timestamp: int

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ReflogResult:
    """Result of ``git reflog``."""

    ref: str
    entries: tuple[ReflogEntry, ...] = ()
    total_entries: int = 0
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


# =============================================================================
# Branching and integration
# =============================================================================


@dataclass(frozen=True, slots=True)
class BranchInfo:
    """A local or remote-tracking branch."""

    name: str
    commit_hash: str
    current: bool = False
    upstream: str | None = None
    ahead: int = 0
    behind: int = 0

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BranchResult:
    """Result of a branch operation; only the field for ``mode`` is set."""

    mode: str
    branches: tuple[BranchInfo, ...] = ()
    created: str | None = None
    deleted: str | None = None
    renamed: RenamePair | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Result of ``git merge``.

    A merge that stops on conflicts is still a result: ``success`` is False
    and ``conflicted_files`` lists the paths in the order git reported them.
    """

    success: bool
    strategy: str
    fast_forward: bool = False
    conflicts: bool = False
    conflicted_files: tuple[str, ...] = ()
    conflict_details: tuple[MergeConflict, ...] = ()
    merged_files: tuple[str, ...] = ()
    message: str = ""

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CherryPickResult:
    """Result of ``git cherry-pick``."""

    success: bool
    picked_commits: tuple[str, ...] = ()
    conflicts: bool = False
    conflicted_files: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RebaseResult:
    """Result of ``git rebase``."""

    success: bool
    rebased_commits: int = 0
    conflicts: bool = False
    conflicted_files: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


# =============================================================================
# Remotes
# =============================================================================


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Result of ``git fetch``."""

    remote: str
    fetched_refs: tuple[str, ...] = ()
    pruned_refs: tuple[str, ...] = ()
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


PullStrategy = Literal["fast-forward", "rebase", "merge"]


@dataclass(frozen=True, slots=True)
class PullResult:
    """Result of ``git pull``."""

    remote: str
    branch: str | None
    strategy: PullStrategy
    success: bool = True
    conflicts: bool = False
    conflicted_files: tuple[str, ...] = ()
    files_changed: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PushResult:
    """Result of ``git push``."""

    remote: str
    branch: str | None
    pushed_refs: tuple[str, ...] = ()
    rejected_refs: tuple[str, ...] = ()
    upstream_set: bool = False
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RemoteInfo:
    """A configured remote with its fetch and push URLs."""

    name: str
    fetch_url: str = ""
    push_url: str = ""

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RemoteResult:
    """Result of a remote operation; only the field for ``mode`` is set."""

    mode: str
    remotes: tuple[RemoteInfo, ...] = ()
    added: RemoteInfo | None = None
    removed: str | None = None
    renamed: RenamePair | None = None
    url: str | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


# =============================================================================
# Stash, tags, worktrees
# =============================================================================


@dataclass(frozen=True, slots=True)
class StashEntry:
    """A stash entry from ``git stash list``."""

    index: int
    ref: str
    description: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class StashResult:
    """Result of a stash operation; only the fields for ``mode`` are set."""

    mode: str
    stashes: tuple[StashEntry, ...] = ()
    created: str | None = None
    applied: str | None = None
    dropped: str | None = None
    cleared: bool = False
    conflicts: bool = False
    conflicted_files: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class TagInfo:
    """A tag from ``git tag -l``."""

    name: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class TagResult:
    """Result of a tag operation; only the fields for ``mode`` are set."""

    mode: str
    tags: tuple[TagInfo, ...] = ()
    created: str | None = None
    deleted: str | None = None
    signed: bool = False

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class WorktreeInfo:
    """A worktree block from ``git worktree list --porcelain``.

    Attributes:
        path: Worktree path.
        head: Checked-out commit, empty for a bare repository.
        branch: Full branch ref (``refs/heads/x``), None when detached.
        detached: HEAD is detached.
        bare: Bare repository entry.
        locked: Worktree is locked.
        lock_reason: Reason given when locking, if any.
        prunable: Worktree is stale and eligible for pruning.
    """

    path: str
    head: str = ""
    branch: str | None = None
    detached: bool = False
    bare: bool = False
    locked: bool = False
    lock_reason: str | None = None
    prunable: bool = False

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class WorktreeResult:
    """Result of a worktree operation; only the fields for ``mode`` are set."""

    mode: str
    worktrees: tuple[WorktreeInfo, ...] = ()
    added: str | None = None
    removed: str | None = None
    moved: RenamePair | None = None
    pruned: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
