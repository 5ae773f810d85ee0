"""Option records, one per git operation.

Options are plain frozen dataclasses. They carry already-validated caller
input; the per-operation encoders in :mod:`gitcore.operations` turn them
into argument tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from gitcore.constants import DEFAULT_BRANCH, DEFAULT_REMOTE

BranchMode = Literal["list", "create", "delete", "rename"]
RebaseMode = Literal["start", "continue", "abort", "skip"]
ResetMode = Literal["soft", "mixed", "hard", "merge", "keep"]
StashMode = Literal["list", "push", "pop", "apply", "drop", "clear"]
TagMode = Literal["list", "create", "delete"]
RemoteMode = Literal["list", "add", "remove", "rename", "get-url", "set-url"]
WorktreeMode = Literal["list", "add", "remove", "move", "prune"]

# =============================================================================
# Repository setup
# =============================================================================


@dataclass(frozen=True, slots=True)
class InitOptions:
    """Options for ``git init``."""

    path: str | None = None
    initial_branch: str | None = DEFAULT_BRANCH
    bare: bool = False


@dataclass(frozen=True, slots=True)
class CloneOptions:
    """Options for ``git clone``.

    Attributes:
        remote_url: URL or path to clone from.
        local_path: Destination directory.
        branch: Branch to check out (default: remote HEAD).
        depth: Create a shallow clone with this many commits.
        bare: Create a bare repository.
        mirror: Create a mirror clone (implies bare).
        recurse_submodules: Initialize submodules after cloning.
    """

    remote_url: str
    local_path: str
    branch: str | None = None
    depth: int | None = None
    bare: bool = False
    mirror: bool = False
    recurse_submodules: bool = False


# =============================================================================
# Working tree and index
# =============================================================================


@dataclass(frozen=True, slots=True)
class StatusOptions:
    """Options for ``git status``."""

    include_untracked: bool = True
    ignore_submodules: bool = False


@dataclass(frozen=True, slots=True)
class AddOptions:
    """Options for ``git add``.

    ``all_changes`` wins over both ``paths`` and ``update``.
    """

    paths: tuple[str, ...] = ()
    all_changes: bool = False
    update: bool = False
    force: bool = False


@dataclass(frozen=True, slots=True)
class ResetOptions:
    """Options for ``git reset``."""

    mode: ResetMode = "mixed"
    commit: str | None = None
    paths: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CleanOptions:
    """Options for ``git clean``.

    Either ``force`` or ``dry_run`` is required; ``dry_run`` wins when both
    are set.
    """

    force: bool = False
    dry_run: bool = False
    directories: bool = False
    ignored: bool = False


@dataclass(frozen=True, slots=True)
class CheckoutOptions:
    """Options for ``git checkout``."""

    target: str
    create_branch: bool = False
    track: bool = False
    force: bool = False
    paths: tuple[str, ...] = ()


# =============================================================================
# History
# =============================================================================


@dataclass(frozen=True, slots=True)
class CommitAuthor:
    """Author override for ``git commit --author``."""

    name: str
    email: str

    def render(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True, slots=True)
class CommitOptions:
    """Options for ``git commit``.

    ``files`` restricts the commit to those paths (``git commit -- files``).
    """

    message: str
    files: tuple[str, ...] = ()
    amend: bool = False
    allow_empty: bool = False
    no_verify: bool = False
    sign: bool = False
    author: CommitAuthor | None = None


@dataclass(frozen=True, slots=True)
class LogOptions:
    """Options for ``git log``."""

    max_count: int | None = None
    skip: int | None = None
    since: str | None = None
    until: str | None = None
    author: str | None = None
    grep: str | None = None
    branch: str | None = None
    path: str | None = None
    stat: bool = False
    patch: bool = False


@dataclass(frozen=True, slots=True)
class ShowOptions:
    """Options for ``git show``."""

    object_name: str = "HEAD"
    stat: bool = False
    path: str | None = None


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Options for ``git diff``.

    Attributes:
        source: First revision (e.g. ``"main"``).
        target: Second revision (e.g. ``"HEAD~1"``).
        paths: Restrict the diff to these paths.
        staged: Diff the index against HEAD (``--cached``).
        include_untracked: Also report untracked files.
        name_only: Emit only changed file names.
        stat: Emit a diffstat instead of a patch.
        context_lines: Lines of context around each hunk.
    """

    source: str | None = None
    target: str | None = None
    paths: tuple[str, ...] = ()
    staged: bool = False
    include_untracked: bool = False
    name_only: bool = False
    stat: bool = False
    context_lines: int = 3


@dataclass(frozen=True, slots=True)
class BlameOptions:
    """Options for ``git blame``."""

    file: str
    start_line: int | None = None
    end_line: int | None = None
    ignore_whitespace: bool = False


@dataclass(frozen=True, slots=True)
class ReflogOptions:
    """Options for ``git reflog``."""

    ref: str = "HEAD"
    max_count: int | None = None


# =============================================================================
# Branching and integration
# =============================================================================


@dataclass(frozen=True, slots=True)
class BranchOptions:
    """Options for branch listing and management.

    Attributes:
        mode: Which branch action to perform.
        name: Branch to create, delete or rename.
        new_name: New name when renaming.
        start_point: Start point when creating.
        force: Force create / delete / rename.
        remote: List remote-tracking branches instead of local ones.
        merged: Only list branches merged into this ref (True means HEAD).
        no_merged: Only list branches not merged into this ref.
    """

    mode: BranchMode = "list"
    name: str | None = None
    new_name: str | None = None
    start_point: str | None = None
    force: bool = False
    remote: bool = False
    merged: bool | str | None = None
    no_merged: str | None = None


@dataclass(frozen=True, slots=True)
class MergeOptions:
    """Options for ``git merge``."""

    branch: str = ""
    no_fast_forward: bool = False
    squash: bool = False
    strategy: str | None = None
    message: str | None = None
    abort: bool = False


@dataclass(frozen=True, slots=True)
class CherryPickOptions:
    """Options for ``git cherry-pick``. ``abort`` wins over ``continue_``."""

    commits: tuple[str, ...] = ()
    no_commit: bool = False
    continue_: bool = False
    abort: bool = False


@dataclass(frozen=True, slots=True)
class RebaseOptions:
    """Options for ``git rebase``."""

    mode: RebaseMode = "start"
    upstream: str | None = None
    branch: str | None = None
    onto: str | None = None
    interactive: bool = False


# =============================================================================
# Remotes
# =============================================================================


@dataclass(frozen=True, slots=True)
class FetchOptions:
    """Options for ``git fetch``."""

    remote: str = DEFAULT_REMOTE
    refspec: str | None = None
    prune: bool = False
    tags: bool = False
    depth: int | None = None


@dataclass(frozen=True, slots=True)
class PullOptions:
    """Options for ``git pull``."""

    remote: str = DEFAULT_REMOTE
    branch: str | None = None
    rebase: bool = False
    fast_forward_only: bool = False


@dataclass(frozen=True, slots=True)
class PushOptions:
    """Options for ``git push``. ``force`` wins over ``force_with_lease``."""

    remote: str = DEFAULT_REMOTE
    branch: str | None = None
    force: bool = False
    force_with_lease: bool = False
    set_upstream: bool = False
    tags: bool = False
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class RemoteOptions:
    """Options for ``git remote``."""

    mode: RemoteMode = "list"
    name: str | None = None
    url: str | None = None
    new_name: str | None = None
    push: bool = False


# =============================================================================
# Stash, tags, worktrees
# =============================================================================


@dataclass(frozen=True, slots=True)
class StashOptions:
    """Options for ``git stash``."""

    mode: StashMode = "list"
    message: str | None = None
    stash_ref: str | None = None
    include_untracked: bool = False
    keep_index: bool = False


@dataclass(frozen=True, slots=True)
class TagOptions:
    """Options for ``git tag``.

    ``annotated`` with a message creates an annotated tag, ``sign`` a signed
    one. A signed tag falls back to an unsigned one when signing fails and
    ``force_unsigned_on_failure`` is set.
    """

    mode: TagMode = "list"
    tag_name: str | None = None
    commit: str | None = None
    message: str | None = None
    annotated: bool = False
    sign: bool = False
    force: bool = False
    force_unsigned_on_failure: bool = False


@dataclass(frozen=True, slots=True)
class WorktreeOptions:
    """Options for ``git worktree``."""

    mode: WorktreeMode = "list"
    path: str | None = None
    new_path: str | None = None
    branch: str | None = None
    commitish: str | None = None
    detach: bool = False
    force: bool = False
